"""
The numeric model: every value in a calculation is either an exact Integer or a Float.

Arithmetic between Integers stays Integer as long as the answer stays exact.
Anything that involves a Float, or cannot stay exact, comes out Float.
The rules live in the functions of the BINARY table, one per operator glyph.
"""
import math
from typing import Union

INTEGER = "Integer"
FLOAT = "Float"

class Number:
	""" Immutable tagged value. Compare with == ; the tag matters. """
	__slots__ = ("tag", "value")
	tag: str
	value: Union[int, float]

	def __init__(self, tag:str, value:Union[int, float]):
		assert tag in (INTEGER, FLOAT), tag
		object.__setattr__(self, "tag", tag)
		object.__setattr__(self, "value", value)

	def __setattr__(self, key, value):
		raise AttributeError("Number is immutable")

	@staticmethod
	def integer(n:int) -> "Number":
		assert isinstance(n, int) and not isinstance(n, bool), n
		return Number(INTEGER, n)

	@staticmethod
	def real(x:float) -> "Number":
		return Number(FLOAT, float(x))

	@staticmethod
	def of(x) -> "Number":
		""" Tag a plain Python number. Numbers pass through unchanged. """
		if isinstance(x, Number): return x
		if isinstance(x, bool): raise TypeError("a flag is not a number: %r"%x)
		if isinstance(x, int): return Number.integer(x)
		if isinstance(x, float): return Number.real(x)
		raise TypeError("not a number: %r"%(x,))

	def is_integer(self) -> bool: return self.tag == INTEGER
	def as_float(self) -> float: return float(self.value)

	def log(self, base:"Number") -> "Number":
		return Number.real(math.log(self.as_float(), base.as_float()))

	def __int__(self): return int(self.value)
	def __float__(self): return float(self.value)
	def __str__(self): return str(self.value)
	def __repr__(self): return "%s(%r)"%(self.tag, self.value)
	def __eq__(self, other):
		if isinstance(other, Number):
			return self.tag == other.tag and self.value == other.value
		return NotImplemented
	def __hash__(self): return hash((self.tag, self.value))

	def __reduce__(self): return Number, (self.tag, self.value)

def _both_integer(a:Number, b:Number): return a.tag == INTEGER and b.tag == INTEGER

# Integer powers beyond this many bits are refused rather than computed.
BIT_LIMIT = 100000

def _real(x:float) -> Number:
	""" Float results must be finite; infinities and NaN are refused. """
	if not math.isfinite(x): raise OverflowError("result is not a finite number")
	return Number.real(x)

def add(a:Number, b:Number) -> Number:
	if _both_integer(a, b): return Number.integer(a.value + b.value)
	return _real(a.as_float() + b.as_float())

def subtract(a:Number, b:Number) -> Number:
	if _both_integer(a, b): return Number.integer(a.value - b.value)
	return _real(a.as_float() - b.as_float())

def multiply(a:Number, b:Number) -> Number:
	if _both_integer(a, b): return Number.integer(a.value * b.value)
	return _real(a.as_float() * b.as_float())

def divide(a:Number, b:Number) -> Number:
	if _both_integer(a, b):
		quotient, remainder = divmod(a.value, b.value)
		if not remainder: return Number.integer(quotient)
		return _real(a.value / b.value)
	return _real(a.as_float() / b.as_float())

def remainder(a:Number, b:Number) -> Number:
	"""
	Truncated remainder: the sign follows the dividend, so -7 % 3 is -1.
	(Python's own % floors instead, which would make it 2.)
	"""
	if not b.value: raise ZeroDivisionError("remainder by zero")
	if _both_integer(a, b):
		r = abs(a.value) % abs(b.value)
		return Number.integer(-r if a.value < 0 else r)
	return _real(math.fmod(a.as_float(), b.as_float()))

def power(a:Number, b:Number) -> Number:
	if _both_integer(a, b) and b.value >= 0:
		if abs(a.value) > 1 and b.value * a.value.bit_length() > BIT_LIMIT:
			raise OverflowError("integer result would be too large")
		return Number.integer(a.value ** b.value)
	try: return _real(math.pow(a.as_float(), b.as_float()))
	except ValueError:
		if a.value == 0: raise ValueError("zero cannot be raised to a negative power") from None
		raise ValueError("result would not be a real number") from None

def negate(a:Number) -> Number:
	return Number(a.tag, -a.value)

BINARY = {
	"+" : add,
	"-" : subtract,
	"*" : multiply,
	"/" : divide,
	"%" : remainder,
	"^" : power,
}

UNARY = {
	"-" : negate,
}

def round_to(value:float, places:int) -> float:
	"""
	Round a float to some number of decimal places, with halves going away from zero.
	round_to(1.2345, 2) == 1.23
	Infinities and NaN come back unchanged.
	"""
	if not math.isfinite(value) or places > 308: return value
	scale = 10.0 ** places
	if not scale: return math.copysign(0.0, value)
	scaled = abs(value) * scale
	if scaled >= 2.0 ** 52: return value  # already whole at this scale
	whole = math.floor(scaled)
	if scaled - whole >= 0.5: whole += 1
	return math.copysign(whole, value) / scale
