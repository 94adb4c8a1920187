"""
Everything that can go wrong, and the means to explain it to a person.

Each kind of failure is its own exception class carrying structured fields,
so a host can catch exactly the kinds it cares about and still get at the
details. `str(error)` gives a one-line message; `error.illustrate(text)`
also points at the guilty spot in the source text.
"""
import sys, random
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

class CalcError(Exception):
	""" Root of the closed family of calculator failures. """
	position: Optional[int] = None

	@property
	def kind(self) -> str: return type(self).__name__

	def describe(self) -> str: raise NotImplementedError(type(self))
	def __str__(self): return self.describe()
	def __repr__(self): return "%s%r"%(self.kind, self.args)

	def __eq__(self, other):
		if isinstance(other, CalcError):
			return type(self) is type(other) and self.args == other.args
		return NotImplemented
	def __hash__(self): return hash((type(self), self.args))

	@staticmethod
	def arg_count(name:str, expected:int, actual:int) -> "ArgCount":
		return ArgCount(name, expected, actual)

	@staticmethod
	def domain(name:str, reason:str) -> "DomainError":
		return DomainError(name, reason)

	def illustrate(self, text:str) -> str:
		if self.position is None: return self.describe()
		source = SourceText(text)
		row, col = source.find_row_col(self.position)
		single_line = source.line_of_text(row)
		picture = illustration(single_line, col, self._width(), prefix='% 4d |' % row, caption=self._caption())
		return self.describe() + "\n" + picture

	def _width(self) -> int: return 1
	def _caption(self) -> str: return ""

class ParseError(CalcError):
	""" The text is not a well-formed expression. Registries play no part. """

class UnexpectedCharacter(ParseError):
	def __init__(self, char:str, position:int):
		super().__init__(char, position)
		self.char, self.position = char, position
	def describe(self): return "Unexpected character %r at position %d"%(self.char, self.position)
	def _caption(self): return "not part of any expression"

class MalformedNumber(ParseError):
	def __init__(self, lexeme:str, position:int):
		super().__init__(lexeme, position)
		self.lexeme, self.position = lexeme, position
	def describe(self): return "Malformed number %r at position %d"%(self.lexeme, self.position)
	def _width(self): return len(self.lexeme)
	def _caption(self): return "too many decimal points"

class UnexpectedToken(ParseError):
	def __init__(self, token:str, position:int):
		super().__init__(token, position)
		self.token, self.position = token, position
	def describe(self): return "Unexpected %r at position %d"%(self.token, self.position)
	def _width(self): return len(self.token)

class UnmatchedParen(ParseError):
	def __init__(self, position:int):
		super().__init__(position)
		self.position = position
	def describe(self): return "The parenthesis at position %d is never closed"%self.position
	def _caption(self): return "needs a matching ')'"

class UnexpectedEnd(ParseError):
	def __init__(self, position:int):
		super().__init__(position)
		self.position = position
	def describe(self): return "The expression ends too soon, at position %d"%self.position
	def _caption(self): return "expected more here"

class EvaluationError(CalcError):
	""" The expression parsed, but has no value with the registries given. """

class UndefinedVariable(EvaluationError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "Undefined variable %r"%self.name

class UndefinedFunction(EvaluationError):
	def __init__(self, name:str):
		super().__init__(name)
		self.name = name
	def describe(self): return "Undefined function %r"%self.name

class ArgCount(EvaluationError):
	def __init__(self, name:str, expected:int, actual:int):
		super().__init__(name, expected, actual)
		self.name, self.expected, self.actual = name, expected, actual
	def describe(self):
		plural = '' if self.expected == 1 else 's'
		pattern = "Function %r takes %d argument%s, but got %d"
		return pattern%(self.name, self.expected, plural, self.actual)

class DivisionByZero(EvaluationError):
	def __init__(self, op:str, position:Optional[int]):
		super().__init__(op, position)
		self.op, self.position = op, position
	def describe(self):
		if self.position is None: return "Division by zero in '%s'"%self.op
		return "Division by zero in '%s' at position %d"%(self.op, self.position)
	def _caption(self): return "right-hand side is zero"

class DomainError(EvaluationError):
	def __init__(self, name:str, reason:str):
		super().__init__(name, reason)
		self.name, self.reason = name, reason
	def describe(self): return "Math domain error in %r: %s"%(self.name, self.reason)

class TypeMismatch(CalcError):
	def __init__(self, expected:str, actual:str):
		super().__init__(expected, actual)
		self.expected, self.actual = expected, actual
	def describe(self): return "Expected an %s result but got a %s"%(self.expected, self.actual)

###############################################################################

def _outburst():
	particle = ["Oh, ", "Hmm, ", "Well, ", ""]
	grumble = ['Drat', 'Fiddlesticks', 'Rats', 'Bother', 'Nuts', 'Good Grief']
	resignation = [
		'That does not compute.',
		'The numbers will not cooperate.',
		'I cannot make sense of that.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, grumble, resignation)))

class Report:
	""" Collects what went wrong, and optionally narrates what went right. """
	_issues : list[tuple[CalcError, str]]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	def reset(self): self._issues.clear()

	@property
	def issues(self) -> list[CalcError]: return [error for error, _ in self._issues]

	def issue(self, error:CalcError, text:str):
		self._issues.append((error, text))

	def info(self, *args:Any):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		if self._issues and self._verbose:
			print(_outburst(), file=sys.stderr)
		for error, text in self._issues:
			print(error.illustrate(text), file=sys.stderr)
		sys.stderr.flush()
