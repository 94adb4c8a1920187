"""
Evaluate algebraic expressions given as text.

	>>> evaluate("1 + 2 * 3")
	Integer(7)
	>>> evaluate_with_defined("log(2, x)", Definitions().register("x", 16), Functions.default())
	Float(4.0)

Failures raise some subclass of CalcError; catch that, or a particular kind.
"""
from typing import Mapping, Optional
from .number import Number, INTEGER, FLOAT, round_to
from .environment import Definitions, Functions
from .scanner import Token, tokenize
from .front_end import parse, parse_text
from .evaluator import Evaluator
from .evaluator import evaluate as evaluate_tree
from .diagnostics import (
	CalcError, ParseError, EvaluationError, Report,
	UnexpectedCharacter, MalformedNumber, UnexpectedToken, UnmatchedParen, UnexpectedEnd,
	UndefinedVariable, UndefinedFunction, ArgCount, DivisionByZero, DomainError, TypeMismatch,
)

def evaluate(text:str, *, report:Optional[Report]=None) -> Number:
	""" Evaluate with no variables and no functions. """
	return evaluate_with_defined(text, None, None, report=report)

def evaluate_with_defined(text:str, definitions:Optional[Mapping]=None, functions:Optional[Mapping]=None, *, report:Optional[Report]=None) -> Number:
	"""
	Tokenize, parse, and evaluate, consulting the registries if given.
	If a report is given, it hears about each phase and about any failure.
	"""
	try:
		tokens = tokenize(text)
		if report: report.info("Tokens:", ' '.join(t.text for t in tokens))
		tree = parse(tokens)
		if report: report.info("Tree:", tree)
		result = evaluate_tree(tree, definitions, functions)
		if report: report.info("Result:", repr(result))
		return result
	except CalcError as ex:
		if report: report.issue(ex, text)
		raise

def _as_integer(result:Number) -> int:
	if not result.is_integer(): raise TypeMismatch(INTEGER, result.tag)
	return result.value

def solve(text:str) -> int:
	""" Evaluate, insisting on an Integer answer. """
	return _as_integer(evaluate(text))

def solve_decimals(text:str) -> float:
	""" Evaluate, widening the answer to float if need be. """
	return evaluate(text).as_float()

def solve_with_definitions(text:str, definitions:Mapping) -> int:
	return _as_integer(evaluate_with_defined(text, definitions))

def solve_with_definitions_f64(text:str, definitions:Mapping) -> float:
	return evaluate_with_defined(text, definitions).as_float()
