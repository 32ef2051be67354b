"""
Replays the S3 tutorial session: generic functions, methods picked by a
class label, and what happens when that label lies.

For example:

    tagalong

will play the whole session, errors included, and

    tagalong --strict

will stop at the first error.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="tagalong",
	description=__doc__.strip(),
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument('-v', "--verbose", action="count", help="Narrate registrations and failures on stderr.")
parser.add_argument("--strict", action="store_true", help="Stop at the first error and exit non-zero.")
parser.add_argument("--max-issues", type=int, default=10, help="Give up after this many issues.")

def run(args):
	from .console import Console
	from .diagnostics import Report, TooManyIssues
	from .session import Session, WALKTHROUGH
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	session = Session(report, Console())
	try:
		status = session.run(WALKTHROUGH, strict=args.strict)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if args.strict and report.sick():
		report.complain_to_console()
		return status
	report.info("Walkthrough finished with %d expected error(s)." % len(report.issues))
	return 0

def main(argv=None):
	return run(parser.parse_args(argv))
