import unittest
from unittest import mock

from calc_lib import evaluate, evaluate_with_defined, Functions
from calc_lib.diagnostics import (
	Report, CalcError, ParseError, EvaluationError,
	UnexpectedCharacter, MalformedNumber, UnexpectedToken, UnmatchedParen, UnexpectedEnd,
	UndefinedVariable, UndefinedFunction, ArgCount, DivisionByZero, DomainError, TypeMismatch,
)

EVERY_KIND = [
	UnexpectedCharacter("$", 2),
	MalformedNumber("1.2.3", 0),
	UnexpectedToken(")", 1),
	UnmatchedParen(4),
	UnexpectedEnd(3),
	UndefinedVariable("x"),
	UndefinedFunction("f"),
	ArgCount("log", 2, 1),
	DivisionByZero("/", 2),
	DomainError("sqrt", "square root of a negative number"),
	TypeMismatch("Integer", "Float"),
]

class TaxonomyTests(unittest.TestCase):

	def test_kinds(self):
		self.assertEqual(len(EVERY_KIND), len({e.kind for e in EVERY_KIND}))
		for error in EVERY_KIND:
			with self.subTest(error.kind):
				self.assertIsInstance(error, CalcError)
				self.assertEqual(type(error).__name__, error.kind)
				self.assertTrue(str(error))

	def test_families(self):
		for error in EVERY_KIND[:5]: self.assertIsInstance(error, ParseError)
		for error in EVERY_KIND[5:10]: self.assertIsInstance(error, EvaluationError)

	def test_structured_fields(self):
		error = ArgCount("log", 2, 1)
		self.assertEqual(("log", 2, 1), (error.name, error.expected, error.actual))
		self.assertEqual(error, CalcError.arg_count("log", 2, 1))
		self.assertNotEqual(error, ArgCount("log", 2, 3))
		self.assertEqual(DomainError("f", "why"), CalcError.domain("f", "why"))

	def test_messages(self):
		self.assertEqual("Unexpected character '$' at position 2", str(UnexpectedCharacter("$", 2)))
		self.assertEqual("Function 'log' takes 2 arguments, but got 1", str(ArgCount("log", 2, 1)))
		self.assertEqual("Function 'sin' takes 1 argument, but got 2", str(ArgCount("sin", 1, 2)))
		self.assertEqual("Undefined variable 'x'", str(UndefinedVariable("x")))

	def test_illustrate_positional(self):
		picture = UnexpectedCharacter("$", 2).illustrate("1 $ 2")
		self.assertTrue(picture.startswith("Unexpected character '$'"))
		self.assertIn("1 $ 2", picture)

	def test_illustrate_second_line(self):
		with self.assertRaises(CalcError) as cm:
			evaluate("1 +\n (2 * 3")
		picture = cm.exception.illustrate("1 +\n (2 * 3")
		self.assertIn("(2 * 3", picture)

	def test_illustrate_without_position(self):
		self.assertEqual(str(UndefinedVariable("x")), UndefinedVariable("x").illustrate("x + 1"))

class ReportTests(unittest.TestCase):

	def test_complain_to_console(self):
		report = Report()
		for text in ["1 $ 2", "sqrt(-1)"]:
			try: evaluate_with_defined(text, None, Functions.default(), report=report)
			except CalcError: pass
		self.assertEqual(2, len(report.issues))
		with mock.patch("builtins.print") as fake_print:
			report.complain_to_console()
		self.assertEqual(2, fake_print.call_count)
		first = fake_print.call_args_list[0].args[0]
		self.assertIn("1 $ 2", first)

if __name__ == '__main__':
	unittest.main()
