import io
import unittest
from unittest import mock

from tagalong import cmdline, dna
from tagalong.base import standard_registry, BUILT_IN_GENERICS
from tagalong.console import Console
from tagalong.diagnostics import Report, TooManyIssues
from tagalong.errors import NoApplicableMethodError
from tagalong.session import Session, Step, WALKTHROUGH

class Silence(Report):
	def __init__(self, max_issues=30):
		super().__init__(verbose=False, max_issues=max_issues)
		self.complain_to_console = mock.Mock()

def _session(report=None):
	out = io.StringIO()
	return Session(report or Silence(), Console(out)), out

class StandardRegistryTests(unittest.TestCase):
	
	def setUp(self) -> None:
		self.out = io.StringIO()
		self.registry = standard_registry(Console(self.out))
	
	def test_built_ins_are_ordinary_generics(self):
		self.assertEqual(sorted(BUILT_IN_GENERICS), self.registry.generics())
		self.assertEqual(2, self.registry.call("length", [1, 2]))
		self.assertEqual(1, self.registry.call("length", "abc"))
	
	def test_print_default_writes_and_returns(self):
		self.assertEqual(13, self.registry.call("print", 13))
		self.assertEqual("[1] 13\n", self.out.getvalue())
	
	def test_plot_has_nothing(self):
		self.assertFalse(self.registry.has_default("plot"))
		with self.assertRaises(NoApplicableMethodError):
			self.registry.call("plot", [1, 2, 3])
	
	def test_dna_class(self):
		dna.install(self.registry, Console(self.out))
		seq = dna.new_dna_seq("seq1", "ATGCGTAGCTAGC")
		self.assertEqual(13, self.registry.call("length", seq))
		self.registry.call("print", seq)
		self.registry.call("print", self.registry.call("summary", seq))
		self.assertEqual(
			"MyDNASeq object: seq1\n"
			"Sequence: ATGCGTAGCTAGC\n"
			"A C G T \n"
			"3 3 4 3 \n",
			self.out.getvalue(),
		)

	def test_dna_summary_counts_every_character(self):
		dna.install(self.registry, Console(self.out))
		for sequence, expect in [
			("", "< table of extent 0 >\n"),
			("NNNN", "N \n4 \n"),
			("ACGTNa", "A C G N T a \n1 1 1 1 1 1 \n"),
		]:
			with self.subTest(sequence):
				self.out.seek(0)
				self.out.truncate()
				seq = dna.new_dna_seq("s", sequence)
				self.registry.call("print", self.registry.call("summary", seq))
				self.assertEqual(expect, self.out.getvalue())


class WalkthroughTests(unittest.TestCase):
	
	def test_whole_session(self):
		session, out = _session()
		self.assertEqual(1, session.run(WALKTHROUGH))
		lines = out.getvalue().splitlines()
		for expect in [
			"> summary(x)",
			"      1       2       3      22       4     100 ",
			'[1] "numeric"',
			'attr(,"class")',
			"[1] 2",
			"[1] 13",
			'[1] "length.MyDNASeq"',
			"MyDNASeq object: seq1",
			"Sequence: ATGCGTAGCTAGC",
			"3 3 4 3 ",
			"Error in plot(myseq) : no applicable method for 'plot' applied to an object of class \"MyDNASeq\"",
		]:
			with self.subTest(expect):
				self.assertIn(expect, lines)
		self.assertTrue(lines[-1].startswith("Error in length(x) : "), lines[-1])
		self.assertEqual(2, len(session.report.issues))
	
	def test_strict_stops_at_first_error(self):
		session, out = _session()
		self.assertEqual(1, session.run(WALKTHROUGH, strict=True))
		self.assertNotIn("> length(x)", out.getvalue())
		self.assertEqual(1, len(session.report.issues))
	
	def test_clean_steps(self):
		session, out = _session()
		steps = [
			Step("y <- 7", lambda s: s.assign("y", 7), False),
			Step("y", lambda s: s.env["y"]),
			Step("invisible(y)", lambda s: s.env["y"], False),
		]
		self.assertEqual(0, session.run(steps))
		self.assertEqual("> y <- 7\n> y\n[1] 7\n> invisible(y)\n", out.getvalue())
		self.assertTrue(session.report.ok())
		session.report.assert_no_issues("A clean session filed an issue.")
	
	def test_issues_render(self):
		session, out = _session()
		session.run(WALKTHROUGH)
		plot_issue, length_issue = session.report.issues
		self.assertIn("'plot'", plot_issue.intro)
		self.assertIn("plot(myseq)", plot_issue.as_text())
		self.assertIn("TypeError", length_issue.as_text())
	
	def test_too_many_issues(self):
		session, out = _session(Silence(max_issues=2))
		with self.assertRaises(TooManyIssues):
			session.run(WALKTHROUGH)


class CommandLineTests(unittest.TestCase):
	
	def _main(self, *argv):
		with mock.patch("sys.stdout", new_callable=io.StringIO) as out:
			with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
				status = cmdline.main(list(argv))
		self.err = err.getvalue()
		return status, out.getvalue()
	
	def test_plays_through(self):
		status, out = self._main()
		self.assertEqual(0, status)
		self.assertIn("> length(x)", out)
	
	def test_strict(self):
		status, out = self._main("--strict")
		self.assertEqual(1, status)
		self.assertNotIn("> length(x)", out)
	
	def test_verbose_narrates_on_stderr(self):
		status, out = self._main("-v")
		self.assertEqual(0, status)
		self.assertIn("Registering length.MyDNASeq", self.err)
		self.assertIn("Step failed: plot(myseq)", self.err)
		self.assertNotIn("Registering", out)
	
	def test_quiet_by_default(self):
		self._main()
		self.assertNotIn("Registering", self.err)
	
	def test_gives_up(self):
		status, out = self._main("--max-issues", "2")
		self.assertEqual(1, status)


if __name__ == '__main__':
	unittest.main()
