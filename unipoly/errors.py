"""Exceptions raised by unipoly.

Parse errors carry the character offset at which the problem was detected.
Arithmetic errors are raised by polynomial division.  Formatting never
raises.
"""

class PolynomialError(Exception):
    """Base class for every error raised by this package."""
    pass

class ParseError(PolynomialError, ValueError):
    """The input text is not a polynomial in the expected indeterminate."""
    message = "invalid polynomial"

    def __init__(self, position, detail=None):
        self.position = position
        self.detail = detail
        super().__init__(str(self))

    def __str__(self):
        s = "{} at position {}".format(self.message, self.position)
        if self.detail:
            s += ": {}".format(self.detail)
        return s

    def __repr__(self):
        return "{}({!r}, {!r})".format(type(self).__name__, self.position, self.detail)

class EmptyInput(ParseError):
    message = "empty input"

class UnexpectedCharacter(ParseError):
    message = "unexpected character"

class InvalidExponent(ParseError):
    message = "invalid exponent"

class MismatchedBraces(ParseError):
    message = "mismatched braces"

class UnknownIndeterminate(ParseError):
    message = "unknown indeterminate"

class UnterminatedTerm(ParseError):
    message = "unterminated term"

class InvalidCoefficient(ParseError):
    message = "invalid coefficient"

class PolynomialArithmeticError(PolynomialError, ArithmeticError):
    pass

class DivisionByZero(PolynomialArithmeticError, ZeroDivisionError):
    def __init__(self, msg="division by the zero polynomial"):
        super().__init__(msg)

class CoefficientDivisionFailed(PolynomialArithmeticError):
    """The coefficient ring could not divide one coefficient by another."""
    def __init__(self, numerator, denominator, ring=None):
        self.numerator = numerator
        self.denominator = denominator
        self.ring = ring
        super().__init__("cannot divide {!r} by {!r}{}".format(
            numerator, denominator,
            " in {}".format(ring) if ring is not None else ""))
