"""
Build the standard function set.
Every one of these answers in Float, insists on its exact arity,
and turns a math-library complaint into a DomainError naming the function.
"""
import math
from typing import Sequence
from .number import Number
from .diagnostics import ArgCount, DomainError

DEFAULTS = {}

def _primitive(name:str, arity:int):
	def decorate(fn):
		def apply(args:Sequence[Number]) -> Number:
			if len(args) != arity: raise ArgCount(name, arity, len(args))
			try: result = fn(*args)
			except (ValueError, ZeroDivisionError, OverflowError) as ex:
				raise DomainError(name, str(ex)) from None
			if not math.isfinite(result): raise DomainError(name, "result is not a finite number")
			return Number.real(result)
		apply.__name__ = apply.__qualname__ = name
		apply.__doc__ = fn.__doc__
		DEFAULTS[name] = apply
		return apply
	return decorate

@_primitive("log", 2)
def log(base:Number, value:Number):
	""" Logarithm of value in the given base. """
	if value.as_float() <= 0: raise ValueError("logarithm of a non-positive number")
	if base.as_float() <= 0 or base.as_float() == 1: raise ValueError("base must be positive and not 1")
	return value.log(base).value

@_primitive("sqrt", 1)
def sqrt(value:Number):
	if value.as_float() < 0: raise ValueError("square root of a negative number")
	return math.sqrt(value.as_float())

@_primitive("sin", 1)
def sin(value:Number): return math.sin(value.as_float())

@_primitive("cos", 1)
def cos(value:Number): return math.cos(value.as_float())

@_primitive("tan", 1)
def tan(value:Number): return math.tan(value.as_float())

@_primitive("atan", 1)
def atan(value:Number): return math.atan(value.as_float())

@_primitive("atan2", 2)
def atan2(y:Number, x:Number):
	""" Angle of the point (x, y), in radians. Note the argument order. """
	return math.atan2(y.as_float(), x.as_float())
