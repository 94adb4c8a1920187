"""
Break expression text into tokens.

Each token keeps its exact source text and where it started,
so an error can point at it and the original text (less whitespace)
is always the concatenation of the token texts.
"""
import math
from typing import Any, NamedTuple
from .number import Number
from .diagnostics import UnexpectedCharacter, MalformedNumber

NUMBER = "number"
IDENTIFIER = "identifier"
OPERATOR = "operator"
LEFT_PAREN = "("
RIGHT_PAREN = ")"
COMMA = ","

class Token(NamedTuple):
	kind: str
	text: str
	spot: int  # Zero-based character offset
	value: Any = None  # Number, name, or operator glyph, as kind dictates

	def end(self) -> int: return self.spot + len(self.text)

PUNCTUATION = {
	"+": (OPERATOR, "+"),
	"-": (OPERATOR, "-"),
	"*": (OPERATOR, "*"),
	"/": (OPERATOR, "/"),
	"÷": (OPERATOR, "/"),
	"%": (OPERATOR, "%"),
	"^": (OPERATOR, "^"),
	"(": (LEFT_PAREN, None),
	")": (RIGHT_PAREN, None),
	",": (COMMA, None),
}

def _is_word_start(c:str): return c.isalpha() or c == "_"
def _is_word_part(c:str): return c.isalnum() or c == "_"
def _is_number_part(c:str): return c.isdecimal() or c == "."

def tokenize(text:str) -> list[Token]:
	tokens = []
	index, end = 0, len(text)
	while index < end:
		c = text[index]
		if c.isspace():
			index += 1
		elif c.isdecimal():
			stop = _run(text, index, _is_number_part)
			tokens.append(_scan_number(text[index:stop], index))
			index = stop
		elif _is_word_start(c):
			stop = _run(text, index, _is_word_part)
			word = text[index:stop]
			tokens.append(Token(IDENTIFIER, word, index, word))
			index = stop
		elif c in PUNCTUATION:
			kind, glyph = PUNCTUATION[c]
			tokens.append(Token(kind, c, index, glyph))
			index += 1
		else:
			raise UnexpectedCharacter(c, index)
	return tokens

def _run(text:str, start:int, predicate) -> int:
	stop = start + 1
	while stop < len(text) and predicate(text[stop]): stop += 1
	return stop

def _scan_number(lexeme:str, spot:int) -> Token:
	dots = lexeme.count(".")
	if dots > 1: raise MalformedNumber(lexeme, spot)
	try: value = Number.real(float(lexeme)) if dots else Number.integer(int(lexeme))
	except ValueError:  # e.g. more digits than int() will convert
		raise MalformedNumber(lexeme, spot) from None
	if dots and not math.isfinite(value.value): raise MalformedNumber(lexeme, spot)
	return Token(NUMBER, lexeme, spot, value)
