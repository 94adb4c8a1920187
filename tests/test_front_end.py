import unittest

from calc_lib import syntax
from calc_lib.front_end import parse, parse_text, MAX_DEPTH
from calc_lib.diagnostics import UnexpectedToken, UnmatchedParen, UnexpectedEnd, ParseError

class ShapeTests(unittest.TestCase):
	""" The parenthesized rendering of a tree shows how the parser grouped things. """

	def expect(self, cases):
		for text, shape in cases:
			with self.subTest(text=text):
				self.assertEqual(shape, str(parse_text(text)))

	def test_precedence(self):
		self.expect([
			("1 + 2 * 3", "(1 + (2 * 3))"),
			("(1 + 2) * 3", "((1 + 2) * 3)"),
			("1 * 2 + 3 % 4", "((1 * 2) + (3 % 4))"),
			("2 * 3 ^ 2", "(2 * (3 ^ 2))"),
		])

	def test_associativity(self):
		self.expect([
			("1 - 2 - 3", "((1 - 2) - 3)"),
			("8 / 4 / 2", "((8 / 4) / 2)"),
			("2 ^ 3 ^ 2", "(2 ^ (3 ^ 2))"),
		])

	def test_unary(self):
		self.expect([
			("-x", "(-x)"),
			("--1", "(-(-1))"),
			("-2 ^ 2", "((-2) ^ 2)"),
			("2 ^ -1", "(2 ^ (-1))"),
			("1 - -1", "(1 - (-1))"),
		])

	def test_calls(self):
		self.expect([
			("log(2, x)", "log(2, x)"),
			("f()", "f()"),
			("sqrt(4) ^ 2", "(sqrt(4) ^ 2)"),
			("f(1 + 2, g(3) * 4)", "f((1 + 2), (g(3) * 4))"),
			("2 * sin (x)", "(2 * sin(x))"),
		])

	def test_node_types(self):
		tree = parse_text("f(x, 1) + 2")
		self.assertIsInstance(tree, syntax.BinaryOp)
		self.assertIsInstance(tree.lhs, syntax.Call)
		self.assertEqual((syntax.Variable("x", 2), syntax.Literal(tree.lhs.args[1].value, 5)), tree.lhs.args)
		self.assertEqual(8, tree.spot)

	def test_immutable(self):
		tree = parse_text("1 + 2")
		with self.assertRaises(AttributeError):
			tree.op = "-"

class FailureTests(unittest.TestCase):

	def expect(self, cases):
		for text, error in cases:
			with self.subTest(text=text):
				with self.assertRaises(ParseError) as cm:
					parse_text(text)
				self.assertEqual(error, cm.exception)

	def test_unmatched_paren(self):
		self.expect([
			("1 + (2 * 3", UnmatchedParen(4)),
			("((1)", UnmatchedParen(0)),
			("log(2, x", UnmatchedParen(3)),
		])

	def test_unexpected_end(self):
		self.expect([
			("", UnexpectedEnd(0)),
			("1 +", UnexpectedEnd(3)),
			("-", UnexpectedEnd(1)),
			("f(1,", UnexpectedEnd(4)),
		])

	def test_unexpected_token(self):
		self.expect([
			("1 2", UnexpectedToken("2", 2)),
			("1)", UnexpectedToken(")", 1)),
			("* 3", UnexpectedToken("*", 0)),
			("()", UnexpectedToken(")", 1)),
			("f(1,)", UnexpectedToken(")", 4)),
			("f(1 2)", UnexpectedToken("2", 4)),
			("(1 2)", UnexpectedToken("2", 3)),
			("2x", UnexpectedToken("x", 1)),
			("f(,)", UnexpectedToken(",", 2)),
		])

	def test_nesting_limit(self):
		nested = "(" * MAX_DEPTH + "1" + ")" * MAX_DEPTH
		self.assertIsInstance(parse_text(nested), syntax.Literal)
		self.assertIsInstance(parse_text(nested + " + " + nested), syntax.BinaryOp)
		self.expect([
			("(" + nested + ")", UnexpectedToken("(", MAX_DEPTH)),
			("-" * (MAX_DEPTH + 1) + "1", UnexpectedToken("-", MAX_DEPTH)),
			("f(" * (MAX_DEPTH + 1) + "1" + ")" * (MAX_DEPTH + 1), UnexpectedToken("(", 2 * MAX_DEPTH + 1)),
		])

	def test_parse_accepts_tokens(self):
		with self.assertRaises(UnexpectedEnd):
			parse([])

if __name__ == '__main__':
	unittest.main()
