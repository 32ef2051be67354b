"""
The display side: turning values into the text the R console would show.

Printer is a visitor over plain Python values, with one visit-method
per kind of thing. Each returns a list of lines; the caller joins them.
"""
import sys
from boozetools.support.foundation import Visitor
from .tagged import Tagged

def format_atom(x) -> str:
	if x is None: return "NA"
	if isinstance(x, bool): return "TRUE" if x else "FALSE"
	if isinstance(x, float): return "%.7g" % x
	if isinstance(x, complex): return "%.7g%+.7gi" % (x.real, x.imag)
	if isinstance(x, str): return '"%s"' % x.replace('\\', '\\\\').replace('"', '\\"')
	return str(x)

def _is_atom(x) -> bool:
	return x is None or isinstance(x, (bool, int, float, complex, str))

def _vector(items) -> list[str]:
	cells = [format_atom(x) for x in items]
	width = max(map(len, cells))
	if all(isinstance(x, str) for x in items):
		cells = [c.ljust(width) for c in cells]
	else:
		cells = [c.rjust(width) for c in cells]
	return [("[1] " + " ".join(cells)).rstrip()]

class Printer(Visitor):
	
	def render(self, value) -> str:
		return "\n".join(self.visit(value, ""))
	
	def visit_NoneType(self, it, prefix:str):
		return ["NULL"]
	
	def visit_bool(self, it, prefix:str):
		return _vector([it])
	
	visit_int = visit_float = visit_complex = visit_str = visit_bool
	
	def visit_list(self, it, prefix:str):
		if not it: return ["list()"]
		if all(map(_is_atom, it)): return _vector(it)
		lines = []
		for i, item in enumerate(it, 1):
			label = "%s[[%d]]" % (prefix, i)
			lines.append(label)
			lines.extend(self.visit(item, label))
			lines.append("")
		return lines
	
	visit_tuple = visit_list
	
	def visit_dict(self, it, prefix:str):
		if not it: return ["named list()"]
		lines = []
		for key, item in it.items():
			label = "%s$%s" % (prefix, key)
			lines.append(label)
			lines.extend(self.visit(item, label))
			lines.append("")
		return lines
	
	def visit_Tagged(self, it:Tagged, prefix:str):
		lines = self.visit(it.payload, prefix)
		lines.append('attr(,"class")')
		lines.extend(_vector([it.tag]))
		return lines
	
	def visit_object(self, it, prefix:str):
		return [repr(it)]

class Console:
	""" Where printed things end up. Tests hand it a StringIO. """
	def __init__(self, out=None):
		self.out = sys.stdout if out is None else out
		self._printer = Printer()
	
	def write(self, text:str):
		print(text, file=self.out)
	
	def show(self, value):
		self.write(self._printer.render(value))
	
	def cat(self, *parts):
		self.write(" ".join(map(str, parts)))
