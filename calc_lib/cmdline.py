"""
A command-line calculator.

For example:

    calc "1 + 2 * 3"

prints 7, while

    calc -D x=16 "log(2, x)"

prints 4.0. With no expression at all, it reads one expression per line
from standard input until end-of-file (or until you type quit).

    calc -h

will explain all the arguments.
"""
import sys, argparse

parser = argparse.ArgumentParser(
	prog="calc",
	description="Evaluate algebraic expressions.",
)
parser.add_argument("expression", nargs="?", help="try \"(1 + 2) * 3\" for example. Omit to read from standard input.")
parser.add_argument('-D', "--define", action="append", default=[], metavar="NAME=VALUE", help="Define a variable. May be repeated.")
parser.add_argument('-f', "--float", action="store_true", help="Always answer in floating point.")
parser.add_argument('-p', "--places", type=int, metavar="N", help="Round floating-point answers to N decimal places.")
parser.add_argument('-v', "--verbose", action="count", help="Narrate each phase of evaluation on standard error.")

QUIT = frozenset(["quit", "exit"])

def _definitions(pairs):
	from . import Definitions, CalcError, evaluate
	definitions = Definitions()
	for pair in pairs:
		name, eq, text = pair.partition("=")
		if not (eq and name.isidentifier()):
			parser.error("expected NAME=VALUE, not %r"%pair)
		try: definitions.register(name, evaluate(text))
		except CalcError as ex:
			parser.error("cannot define %s: %s"%(name, ex))
	return definitions

def _render(result, args) -> str:
	if args.float or not result.is_integer():
		value = result.as_float()
		if args.places is not None:
			from .number import round_to
			value = round_to(value, args.places)
		return str(value)
	return str(result.value)

def run(args, stdin=None, stdout=None) -> int:
	stdin, stdout = stdin or sys.stdin, stdout or sys.stdout
	from . import Functions, Report, CalcError, evaluate_with_defined
	report = Report(verbose=args.verbose)
	definitions = _definitions(args.define)
	functions = Functions.default()

	def attempt(text) -> bool:
		try: result = evaluate_with_defined(text, definitions, functions, report=report)
		except CalcError:
			report.complain_to_console()
			report.reset()
			return False
		print(_render(result, args), file=stdout)
		return True

	if args.expression is not None:
		return 0 if attempt(args.expression) else 1

	interactive = stdin.isatty()
	while True:
		if interactive: print("> ", end="", file=stdout, flush=True)
		line = stdin.readline()
		if not line: break
		text = line.strip()
		if text in QUIT: break
		if text: attempt(text)
	return 0

def main():
	sys.exit(run(parser.parse_args()))
