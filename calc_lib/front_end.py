"""
Recursive-descent parser for expressions.

Precedence, loosest first:
	+ -      left-associative
	* / %    left-associative
	^        right-associative, so 2^3^2 means 2^(3^2)
	unary -
	numbers, names, calls, and parenthesized sub-expressions

A call is a primary, so its arguments are whole expressions in their own
right and the call binds tighter than any operator around it.
"""
from typing import Optional, Sequence
from . import syntax
from .scanner import Token, tokenize, NUMBER, IDENTIFIER, OPERATOR, LEFT_PAREN, RIGHT_PAREN, COMMA
from .diagnostics import UnexpectedToken, UnmatchedParen, UnexpectedEnd

ADDITIVE = frozenset("+-")
MULTIPLICATIVE = frozenset("*/%")

# Deeper nesting of parentheses, calls, unary minus or ^ is refused at the token that goes too deep.
MAX_DEPTH = 100

class Parser:
	def __init__(self, tokens:Sequence[Token]):
		self._tokens = tokens
		self._index = 0
		self._depth = 0
		self._end = tokens[-1].end() if tokens else 0

	def _peek(self) -> Optional[Token]:
		if self._index < len(self._tokens): return self._tokens[self._index]

	def _advance(self) -> Token:
		token = self._tokens[self._index]
		self._index += 1
		return token

	def _at_operator(self, glyphs) -> bool:
		token = self._peek()
		return token is not None and token.kind == OPERATOR and token.value in glyphs

	def _at(self, kind:str) -> bool:
		token = self._peek()
		return token is not None and token.kind == kind

	def _descend(self, token:Token):
		self._depth += 1
		if self._depth > MAX_DEPTH: raise UnexpectedToken(token.text, token.spot)

	def _ascend(self): self._depth -= 1

	def parse(self):
		tree = self.expression()
		token = self._peek()
		if token is not None: raise UnexpectedToken(token.text, token.spot)
		return tree

	def expression(self):
		lhs = self.term()
		while self._at_operator(ADDITIVE):
			op = self._advance()
			lhs = syntax.BinaryOp(op.value, lhs, self.term(), op.spot)
		return lhs

	def term(self):
		lhs = self.factor()
		while self._at_operator(MULTIPLICATIVE):
			op = self._advance()
			lhs = syntax.BinaryOp(op.value, lhs, self.factor(), op.spot)
		return lhs

	def factor(self):
		base = self.unary()
		if self._at_operator("^"):
			op = self._advance()
			self._descend(op)
			power = self.factor()
			self._ascend()
			return syntax.BinaryOp(op.value, base, power, op.spot)
		return base

	def unary(self):
		if self._at_operator("-"):
			op = self._advance()
			self._descend(op)
			operand = self.unary()
			self._ascend()
			return syntax.UnaryOp(op.value, operand, op.spot)
		return self.primary()

	def primary(self):
		token = self._peek()
		if token is None: raise UnexpectedEnd(self._end)
		if token.kind == NUMBER:
			self._advance()
			return syntax.Literal(token.value, token.spot)
		if token.kind == IDENTIFIER:
			self._advance()
			if self._at(LEFT_PAREN):
				return syntax.Call(token.value, self.arguments(), token.spot)
			return syntax.Variable(token.value, token.spot)
		if token.kind == LEFT_PAREN:
			self._advance()
			self._descend(token)
			inner = self.expression()
			self._close(token)
			self._ascend()
			return inner
		raise UnexpectedToken(token.text, token.spot)

	def arguments(self) -> tuple:
		opening = self._advance()
		if self._at(RIGHT_PAREN):
			self._advance()
			return ()
		self._descend(opening)
		args = [self.expression()]
		while self._at(COMMA):
			self._advance()
			args.append(self.expression())
		self._close(opening)
		self._ascend()
		return tuple(args)

	def _close(self, opening:Token):
		token = self._peek()
		if token is None: raise UnmatchedParen(opening.spot)
		if token.kind != RIGHT_PAREN: raise UnexpectedToken(token.text, token.spot)
		self._advance()

def parse(tokens:Sequence[Token]):
	""" Build the expression tree for a whole token sequence, or raise a ParseError. """
	return Parser(tokens).parse()

def parse_text(text:str):
	return parse(tokenize(text))
