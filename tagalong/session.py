"""
The S3 tutorial, replayed as a console session.

Each step is what somebody typed at the prompt, paired with a Python
callable doing the same thing against the registry. Results of visible
steps get printed the way the console would: by dispatching `print`.
"""
from typing import Any, Callable, NamedTuple
from . import dna
from .base import BUILT_IN_GENERICS, standard_registry
from .console import Console
from .diagnostics import Report
from .errors import DispatchError
from .tagged import class_of, set_class

class Step(NamedTuple):
	source: str
	action: Callable[["Session"], Any]
	visible: bool = True

class Session:
	def __init__(self, report:Report, console:Console):
		self.report = report
		self.console = console
		self.registry = standard_registry(console)
		self.env = {}
		for name in BUILT_IN_GENERICS:
			setattr(self, name, self.registry.generic(name))
	
	def assign(self, name:str, value):
		self.env[name] = value
	
	def define(self, generic_name:str, type_tag:str, impl):
		self.report.info("Registering %s.%s" % (generic_name, type_tag))
		self.registry.register_method(generic_name, type_tag, impl)
	
	def run(self, steps, strict=False) -> int:
		failed = False
		for row, step in enumerate(steps, 1):
			self.console.write("> " + step.source)
			try:
				result = step.action(self)
				if step.visible and result is not None:
					self.print(result)
			except DispatchError as ex:
				self._error(step, ex)
				self.report.dispatch_failed(row, step.source, ex)
			except Exception as ex:
				self._error(step, ex)
				self.report.method_failed(row, step.source, ex)
			else:
				continue
			failed = True
			if strict: break
		return 1 if failed else 0
	
	def _error(self, step:Step, ex:Exception):
		self.report.info("Step failed:", step.source)
		self.console.write("Error in %s : %s" % (step.source, ex))


def _define_print(s:Session):
	s.define("print", dna.DNA_CLASS, lambda x, *_: dna.dna_print(x, s.console))

WALKTHROUGH = [
	Step('x <- c(1, 2, 3, 4, 100)', lambda s: s.assign("x", [1.0, 2.0, 3.0, 4.0, 100.0]), False),
	Step('summary(x)', lambda s: s.summary(s.env["x"])),
	Step('class(x)', lambda s: class_of(s.env["x"])),
	Step('myseq <- list(name = "seq1", sequence = "ATGCGTAGCTAGC")',
		lambda s: s.assign("myseq", {"name": "seq1", "sequence": "ATGCGTAGCTAGC"}), False),
	Step('class(myseq) <- "MyDNASeq"', lambda s: s.assign("myseq", set_class(s.env["myseq"], dna.DNA_CLASS)), False),
	Step('myseq', lambda s: s.env["myseq"]),
	Step('length(myseq)', lambda s: s.length(s.env["myseq"])),
	Step('length.MyDNASeq <- function(x) nchar(x$sequence)',
		lambda s: s.define("length", dna.DNA_CLASS, dna.dna_length), False),
	Step('length(myseq)', lambda s: s.length(s.env["myseq"])),
	Step('methods(length)', lambda s: ["length." + tag for tag in s.registry.methods("length")]),
	Step('print.MyDNASeq <- function(x, ...) cat("MyDNASeq object:", x$name, "\\nSequence:", x$sequence, "\\n")',
		_define_print, False),
	Step('myseq', lambda s: s.env["myseq"]),
	Step('summary.MyDNASeq <- function(object, ...) table(strsplit(object$sequence, "")[[1]])',
		lambda s: s.define("summary", dna.DNA_CLASS, dna.dna_summary), False),
	Step('summary(myseq)', lambda s: s.summary(s.env["myseq"])),
	Step('plot(myseq)', lambda s: s.plot(s.env["myseq"])),
	Step('class(x) <- "MyDNASeq"', lambda s: s.assign("x", set_class(s.env["x"], dna.DNA_CLASS)), False),
	Step('length(x)', lambda s: s.length(s.env["x"])),
]
