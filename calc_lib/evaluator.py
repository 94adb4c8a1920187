"""
Fold an expression tree into a single Number.

The walk is depth-first and left-to-right, and the first failure ends it.
Names are resolved only now, against whatever registries the caller supplies.
"""
from typing import Mapping, Optional
from boozetools.support.foundation import Visitor
from . import syntax
from .number import Number, BINARY, UNARY
from .diagnostics import UndefinedVariable, UndefinedFunction, DivisionByZero, DomainError
from .front_end import ADDITIVE, MULTIPLICATIVE

LEFT_ASSOCIATIVE = ADDITIVE | MULTIPLICATIVE

class Evaluator(Visitor):
	def __init__(self, definitions:Optional[Mapping]=None, functions:Optional[Mapping]=None):
		self._definitions = definitions
		self._functions = functions

	@staticmethod
	def visit_Literal(expr:syntax.Literal) -> Number:
		return expr.value

	def visit_Variable(self, expr:syntax.Variable) -> Number:
		if self._definitions is None or expr.name not in self._definitions:
			raise UndefinedVariable(expr.name)
		return Number.of(self._definitions[expr.name])

	def visit_UnaryOp(self, expr:syntax.UnaryOp) -> Number:
		return UNARY[expr.op](self.visit(expr.operand))

	def visit_BinaryOp(self, expr:syntax.BinaryOp) -> Number:
		if expr.op not in LEFT_ASSOCIATIVE:
			return self._apply(expr, self.visit(expr.lhs), self.visit(expr.rhs))
		# Long chains like 1+2+3+... lean left; walk the spine in a loop, not by recursion.
		chain = []
		while isinstance(expr, syntax.BinaryOp) and expr.op in LEFT_ASSOCIATIVE:
			chain.append(expr)
			expr = expr.lhs
		value = self.visit(expr)
		for link in reversed(chain):
			value = self._apply(link, value, self.visit(link.rhs))
		return value

	@staticmethod
	def _apply(expr:syntax.BinaryOp, lhs:Number, rhs:Number) -> Number:
		try: return BINARY[expr.op](lhs, rhs)
		except ZeroDivisionError: raise DivisionByZero(expr.op, expr.spot) from None
		except (ValueError, OverflowError) as ex: raise DomainError(expr.op, str(ex)) from None

	def visit_Call(self, expr:syntax.Call) -> Number:
		if self._functions is None or expr.name not in self._functions:
			raise UndefinedFunction(expr.name)
		fn = self._functions[expr.name]
		args = [self.visit(a) for a in expr.args]
		return Number.of(fn(args))

def evaluate(tree, definitions:Optional[Mapping]=None, functions:Optional[Mapping]=None) -> Number:
	assert isinstance(tree, syntax.Expression), type(tree)
	return Evaluator(definitions, functions).visit(tree)
