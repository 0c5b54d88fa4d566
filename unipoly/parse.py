"""Parser for polynomial expressions.

The important function is:
 - parse: str -> Polynomial

Accepted syntax (whitespace is allowed between any two tokens):

    polynomial  ::= sign? term (sign term)*
    term        ::= coefficient? "*"? X ("^"? EXPONENT)?
                  | coefficient
    coefficient ::= NUMBER | "{" literal "}"

X is the indeterminate (default `x`, see the `indeterminate` option).  A
missing coefficient means one and a missing exponent means one.  The caret is
optional only when the exponent directly follows X (`2x3` is `2x^3`).  Terms
with the same exponent are added together.  Bracketed coefficients are handed
to the ring, so `{3/4}x` works over the rationals and `{1+2i}x` over the
complex numbers.

Without an explicit ring the result is over the integers, or the narrowest
wider ring that holds every coefficient that was written (`1.5x` gives a
polynomial over the rationals).
"""

from enum import Enum
from fractions import Fraction

from unipoly import polynomials
from unipoly.coefficients import ring_of
from unipoly.errors import (EmptyInput, UnexpectedCharacter, InvalidExponent,
    MismatchedBraces, UnknownIndeterminate, UnterminatedTerm, InvalidCoefficient)
from unipoly.literals import parse_literal
from unipoly.logging import task, event
from unipoly.polynomials import Polynomial, Term

_DIGITS = "0123456789"
_SIGNS = "+-"

class State(Enum):
    EXPECT_TERM           = "expect_term"
    IN_COEFFICIENT        = "in_coefficient"
    IN_BRACED_COEFFICIENT = "in_braced_coefficient"
    IN_INDETERMINATE      = "in_indeterminate"
    IN_EXPONENT           = "in_exponent"

def check_symbol(symbol):
    if not isinstance(symbol, str) or not symbol or not symbol.isalpha():
        raise ValueError("indeterminate must be a non-empty alphabetic string, not {!r}".format(symbol))
    return symbol

def _narrow(value):
    if isinstance(value, Fraction) and value.denominator == 1:
        return int(value)
    return value

def parse_scalar(text):
    """Parse a single coefficient literal into the narrowest Python number."""
    return _narrow(parse_literal(text))

class _ScalarSyntax(object):
    """Coefficient operations used while scanning when no ring was given.

    Values stay as plain Python numbers until the ring is chosen at the end.
    """
    one = 1
    def neg(self, a):
        return -a
    def parse(self, text):
        return parse_scalar(text)

class _Scanner(object):
    """Left-to-right scan producing Terms.  Each state has one handler."""

    def __init__(self, text, symbol, ring):
        self.text = text
        self.symbol = symbol
        self.ring = ring
        self.pos = 0
        self.state = State.EXPECT_TERM
        self.terms = []
        self.sign = None      # (negative, position) of a sign waiting for its term
        self.complete = False # a full term was just read, so a sign must come next
        self._reset_term()
        self.handlers = {
            State.EXPECT_TERM:           self.expect_term,
            State.IN_COEFFICIENT:        self.in_coefficient,
            State.IN_BRACED_COEFFICIENT: self.in_braced_coefficient,
            State.IN_INDETERMINATE:      self.in_indeterminate,
            State.IN_EXPONENT:           self.in_exponent }

    def _reset_term(self):
        self.coefficient = None
        self.coefficient_start = None
        self.coefficient_text = ""
        self.coefficient_closed = False
        self.star = False
        self.brace_depth = 0
        self.spaced = False
        self.exponent_text = ""
        self.exponent_closed = False

    def run(self):
        while self.pos < len(self.text):
            self.handlers[self.state](self.text[self.pos])
        self.finish()
        return self.terms

    # helpers

    def at_symbol(self):
        return self.text.startswith(self.symbol, self.pos)

    def unexpected(self, ch):
        if ch == "}":
            raise MismatchedBraces(self.pos, "'}' without '{'")
        if ch.isalpha() and not self.at_symbol():
            raise UnknownIndeterminate(self.pos, "{!r} is not {!r}".format(ch, self.symbol))
        raise UnexpectedCharacter(self.pos, repr(ch))

    def read_coefficient(self, text, position):
        try:
            return self.ring.parse(text)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidCoefficient(position, str(e))

    def begin_indeterminate(self):
        if self.coefficient is None and self.coefficient_text:
            self.coefficient = self.read_coefficient(self.coefficient_text, self.coefficient_start)
        self.pos += len(self.symbol)
        self.state = State.IN_INDETERMINATE

    def end_term(self, exponent):
        if self.coefficient is None and self.coefficient_text:
            self.coefficient = self.read_coefficient(self.coefficient_text, self.coefficient_start)
        coefficient = self.ring.one if self.coefficient is None else self.coefficient
        if self.sign is not None and self.sign[0]:
            coefficient = self.ring.neg(coefficient)
        term = Term(coefficient, exponent)
        event("term {!r}".format(term))
        self.terms.append(term)
        self._reset_term()
        self.sign = None
        self.complete = True
        self.state = State.EXPECT_TERM

    # states

    def expect_term(self, ch):
        if ch.isspace():
            self.pos += 1
        elif ch in _SIGNS:
            if self.sign is not None or (self.terms and not self.complete):
                raise UnexpectedCharacter(self.pos, "sign without a term")
            self.sign = (ch == "-", self.pos)
            self.complete = False
            self.pos += 1
        elif self.complete:
            self.unexpected(ch)
        elif ch in _DIGITS or ch == ".":
            self.coefficient_start = self.pos
            self.state = State.IN_COEFFICIENT
        elif ch == "{":
            self.coefficient_start = self.pos
            self.brace_depth = 1
            self.pos += 1
            self.state = State.IN_BRACED_COEFFICIENT
        elif self.at_symbol():
            self.begin_indeterminate()
        else:
            self.unexpected(ch)

    def in_coefficient(self, ch):
        if ch in _DIGITS or ch == ".":
            if self.coefficient_closed or (ch == "." and "." in self.coefficient_text):
                self.unexpected(ch)
            self.coefficient_text += ch
            self.pos += 1
        elif ch.isspace():
            self.coefficient_closed = True
            self.pos += 1
        elif ch == "*":
            if self.star:
                self.unexpected(ch)
            self.star = True
            self.coefficient_closed = True
            self.pos += 1
        elif self.at_symbol():
            self.begin_indeterminate()
        elif ch in _SIGNS and not self.star:
            self.end_term(0)
        else:
            self.unexpected(ch)

    def in_braced_coefficient(self, ch):
        if ch == "{":
            self.brace_depth += 1
        elif ch == "}":
            self.brace_depth -= 1
            if self.brace_depth == 0:
                inner = self.text[self.coefficient_start + 1:self.pos]
                self.coefficient = self.read_coefficient(inner, self.coefficient_start)
                self.coefficient_closed = True
                self.state = State.IN_COEFFICIENT
        self.pos += 1

    def in_indeterminate(self, ch):
        if ch == "^":
            self.pos += 1
            self.state = State.IN_EXPONENT
        elif ch in _DIGITS and not self.spaced:
            self.state = State.IN_EXPONENT
        elif ch.isspace():
            self.spaced = True
            self.pos += 1
        elif ch in _SIGNS:
            self.end_term(1)
        else:
            self.unexpected(ch)

    def in_exponent(self, ch):
        if ch in _DIGITS:
            if self.exponent_closed:
                self.unexpected(ch)
            self.exponent_text += ch
            self.pos += 1
        elif ch.isspace():
            self.exponent_closed = bool(self.exponent_text)
            self.pos += 1
        elif not self.exponent_text:
            if ch == "-":
                raise InvalidExponent(self.pos, "negative exponent")
            raise InvalidExponent(self.pos, "expected digits, found {!r}".format(ch))
        elif ch == ".":
            raise InvalidExponent(self.pos, "exponent must be an integer")
        elif ch in _SIGNS:
            self.end_term(int(self.exponent_text))
        else:
            self.unexpected(ch)

    def finish(self):
        end = len(self.text)
        if self.state == State.EXPECT_TERM:
            if self.sign is not None:
                raise UnterminatedTerm(end, "sign at position {} has no term".format(self.sign[1]))
        elif self.state == State.IN_COEFFICIENT:
            if self.star:
                raise UnterminatedTerm(end, "'*' must be followed by {!r}".format(self.symbol))
            self.end_term(0)
        elif self.state == State.IN_BRACED_COEFFICIENT:
            raise MismatchedBraces(self.coefficient_start, "'{' is never closed")
        elif self.state == State.IN_INDETERMINATE:
            self.end_term(1)
        elif self.state == State.IN_EXPONENT:
            if not self.exponent_text:
                raise InvalidExponent(end, "missing exponent")
            self.end_term(int(self.exponent_text))

def parse_terms(text, symbol, ring=None):
    """Scan `text` into a list of Terms without combining them."""
    if not isinstance(text, str):
        raise TypeError("expected a string, not {}".format(type(text).__name__))
    if not text.strip():
        raise EmptyInput(len(text))
    return _Scanner(text, check_symbol(symbol), ring if ring is not None else _ScalarSyntax()).run()

def parse(text, ring=None, indeterminate=None):
    """Parse `text` as a polynomial in `indeterminate` over `ring`.

    Raises a ParseError subclass (EmptyInput, UnexpectedCharacter,
    InvalidExponent, MismatchedBraces, UnknownIndeterminate, UnterminatedTerm
    or InvalidCoefficient) with the offending character offset.
    """
    symbol = indeterminate if indeterminate is not None else polynomials.indeterminate.value
    with task("parse", text=text):
        terms = parse_terms(text, symbol, ring)
        if ring is None:
            ring = ring_of(t.coefficient for t in terms)
            event("inferred ring {}".format(ring))
        return Polynomial.from_terms(terms, ring)
