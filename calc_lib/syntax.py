"""
The expression tree.
The parser builds these top-down; nothing refers back up the tree,
and nothing changes a node once made. Each node remembers the spot
(character offset) of the token that introduced it.
"""
from typing import NamedTuple
from .number import Number

class Literal(NamedTuple):
	value: Number
	spot: int
	def __str__(self): return str(self.value)

class Variable(NamedTuple):
	name: str
	spot: int
	def __str__(self): return self.name

class UnaryOp(NamedTuple):
	op: str
	operand: "Expression"
	spot: int
	def __str__(self): return "(%s%s)"%(self.op, self.operand)

class BinaryOp(NamedTuple):
	op: str
	lhs: "Expression"
	rhs: "Expression"
	spot: int  # Of the operator itself
	def __str__(self): return "(%s %s %s)"%(self.lhs, self.op, self.rhs)

class Call(NamedTuple):
	name: str
	args: tuple["Expression", ...]
	spot: int
	def __str__(self): return "%s(%s)"%(self.name, ', '.join(map(str, self.args)))

Expression = (Literal, Variable, UnaryOp, BinaryOp, Call)
