"""
The generics every session starts with.

`length` and `print` look like primitives, but they dispatch like anything
else: through the same registry, with no shortcut for the built-in cases.
"""
from .console import Console
from .registry import Registry
from .stats import SUMMARY_CLASS, summary_default, format_table, r_length

BUILT_IN_GENERICS = ("print", "length", "summary", "plot")

def standard_registry(console:Console) -> Registry:
	registry = Registry()
	for name in BUILT_IN_GENERICS:
		registry.declare_generic(name)
	
	@registry.default("print")
	def print_default(x, *_):
		console.show(x)
		return x
	
	@registry.method("print", SUMMARY_CLASS)
	def print_summary(x, *_):
		console.write(format_table(x))
		return x
	
	registry.register_default("length", lambda x, *_: r_length(x))
	registry.register_default("summary", lambda x, *_: summary_default(x))
	# No plotting device, hence no default for plot.
	return registry
