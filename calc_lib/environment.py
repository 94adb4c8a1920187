"""
The two registries an evaluation may consult: variables and functions.

Both are ordinary dictionaries underneath, owned by the caller.
The evaluator only ever reads them; keep them still while it does.
"""
from typing import Callable, Sequence, Union
from .number import Number
from .primitive import DEFAULTS

PlainNumber = Union[Number, int, float]
Primitive = Callable[[Sequence[Number]], PlainNumber]

class Definitions(dict):
	""" Variable name -> Number. Names are case-sensitive; the last registration wins. """

	def register(self, name:str, value:PlainNumber) -> "Definitions":
		assert isinstance(name, str), name
		self[name] = Number.of(value)
		return self

	insert = register

class Functions(dict):
	"""
	Function name -> callable. A callable takes the list of evaluated
	argument Numbers in order and returns a Number, or else raises
	some CalcError (ArgCount, DomainError, ...) to say why not.
	"""

	@classmethod
	def default(cls) -> "Functions":
		return cls(DEFAULTS)

	def register(self, name:str, fn:Primitive) -> "Functions":
		assert isinstance(name, str), name
		if not callable(fn): raise TypeError("%r is not callable"%(fn,))
		self[name] = fn
		return self
