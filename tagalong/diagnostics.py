"""
Where complaints go.

The registry never talks; it raises. Whoever drives it (the console
session, mostly) files what went wrong here, and the report decides
when and how to show it.
"""
import sys, random
from traceback import TracebackException
from boozetools.support.failureprone import illustration

from .errors import DispatchError, UnknownGenericError, NoApplicableMethodError

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]
	
	exclamations = [
		'Blast', 'Bother', 'Crumbs', 'Drat', 'Fiddlesticks',
		'Good Grief', 'Great Scott', 'Nuts', 'Rats', 'Zounds',
	]
	
	resignations = [
		'Somebody told a fib about their class.',
		'The label said one thing and the value said another.',
		'Nobody checked, and now here we are.',
		'I dispatched as best I could.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

class Annotation:
	""" One line of console input, with a caption pointing at it. """
	def __init__(self, row:int, source:str, caption:str=""):
		self.row, self.source, self.caption = row, source, caption
	
	def illustrate(self):
		return illustration(self.source, 0, len(self.source), prefix='% 6d |' % self.row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	
	@property
	def intro(self): return self._intro
	
	def as_text(self):
		lines = [self._intro, ""]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

class Report:
	_issues : list[Pic]
	
	def __init__(self, *, verbose:int, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self) -> list[Pic]: return list(self._issues)
	
	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
		
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message=""):
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the console session calls:
	
	def dispatch_failed(self, row:int, source:str, ex:DispatchError):
		if isinstance(ex, UnknownGenericError):
			intro = "Nothing by the name of '%s' has been declared generic." % ex.generic_name
			footer = ["Declare it before you hang methods on it."]
		elif isinstance(ex, NoApplicableMethodError):
			intro = "Generic '%s' has no method for class \"%s\", and no default either." % (ex.generic_name, ex.type_tag)
			footer = ["Register a method for that class, or a default for the generic."]
		else:
			intro, footer = str(ex), ()
		self.issue(Pic(intro, [Annotation(row, source, str(ex))], footer))
	
	def method_failed(self, row:int, source:str, ex:Exception):
		intro = "A method blew up. Perhaps the object is not shaped the way its class claims."
		tbx = TracebackException.from_exception(ex, limit=-3)
		footer = ["", *map(str.rstrip, tbx.format())]
		self.issue(Pic(intro, [Annotation(row, source, "%s: %s" % (type(ex).__name__, ex))], footer))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
