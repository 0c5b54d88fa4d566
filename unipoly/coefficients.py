"""Coefficient rings.

A polynomial never does arithmetic on its coefficients directly.  It asks its
Ring, which is the complete list of things unipoly needs from a coefficient
type: identities, the ring operations, an equality test, a (possibly failing)
division, a parser for coefficient text and a renderer for the formatter.

Built-in rings:
 - INTEGERS   (int; division is exact-only)
 - RATIONALS  (fractions.Fraction)
 - REALS      (float)
 - COMPLEX    (complex)
 - IntegersModulo(n)

Subclass Ring to plug in any other coefficient type.
"""

from fractions import Fraction
import numbers

from unipoly.common import FrozenDict, find_one
from unipoly.errors import CoefficientDivisionFailed
from unipoly.literals import parse_literal

class Ring(object):
    """The capability set a coefficient type must provide.

    The default implementations use Python's operators, so a subclass for a
    well-behaved numeric type usually only needs `zero`, `one`, `convert` and
    `div`.

    `rank` orders the built-in rings so that mixing them promotes to the wider
    one; rings without a rank never promote.
    """

    name = "ring"
    zero = None
    one = None
    rank = None

    def convert(self, value):
        """Return `value` as an element of this ring, or raise TypeError/ValueError."""
        raise NotImplementedError()

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def div(self, a, b):
        """Return a/b or raise CoefficientDivisionFailed."""
        raise CoefficientDivisionFailed(a, b, self)

    def eq(self, a, b):
        return a == b

    def is_zero(self, a):
        return self.eq(a, self.zero)

    def is_one(self, a):
        return self.eq(a, self.one)

    def sort_key(self, value):
        """Key used to order polynomials over this ring."""
        return value

    def parse(self, text):
        """Parse coefficient text: a bare number, or the inside of `{...}`."""
        return self.convert(parse_literal(text))

    def render(self, value):
        """Return (negative, text, compound) for `value`.

        `text` is the magnitude; the formatter supplies the sign.  Compound
        text is wrapped in braces so the parser can read it back.
        """
        return (False, str(value), False)

    def render_latex(self, value):
        negative, text, compound = self.render(value)
        return (negative, "({})".format(text) if compound else text, False)

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.name.upper()

class Integers(Ring):
    name = "integers"
    zero = 0
    one = 1
    rank = 0

    def convert(self, value):
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real) and value == int(value):
            return int(value)
        if isinstance(value, numbers.Complex) and value.imag == 0 and value.real == int(value.real):
            return int(value.real)
        raise ValueError("{!r} is not an integer".format(value))

    def div(self, a, b):
        if b == 0 or a % b != 0:
            raise CoefficientDivisionFailed(a, b, self)
        return a // b

    def render(self, value):
        return (value < 0, str(abs(value)), False)

class Rationals(Ring):
    name = "rationals"
    zero = Fraction(0)
    one = Fraction(1)
    rank = 1

    def convert(self, value):
        if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
            if value.imag != 0:
                raise ValueError("{!r} is not a rational number".format(value))
            value = value.real
        return Fraction(value)

    def div(self, a, b):
        if b == 0:
            raise CoefficientDivisionFailed(a, b, self)
        return a / b

    def render(self, value):
        value_abs = abs(value)
        if value_abs.denominator == 1:
            return (value < 0, str(value_abs.numerator), False)
        return (value < 0, "{}/{}".format(value_abs.numerator, value_abs.denominator), True)

    def render_latex(self, value):
        value_abs = abs(value)
        if value_abs.denominator == 1:
            return (value < 0, str(value_abs.numerator), False)
        return (value < 0, r"\frac{{{}}}{{{}}}".format(value_abs.numerator, value_abs.denominator), False)

def _float_text(x):
    s = repr(float(x))
    if s.endswith(".0"):
        s = s[:-2]
    return s

def _needs_braces(text):
    return any(c in text for c in "eE+-na")

class Reals(Ring):
    name = "reals"
    zero = 0.0
    one = 1.0
    rank = 2

    def convert(self, value):
        if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
            if value.imag != 0:
                raise ValueError("{!r} is not a real number".format(value))
            value = value.real
        return float(value)

    def div(self, a, b):
        if b == 0:
            raise CoefficientDivisionFailed(a, b, self)
        return a / b

    def render(self, value):
        text = _float_text(abs(value))
        return (value < 0, text, _needs_braces(text))

class ComplexNumbers(Ring):
    name = "complex"
    zero = complex(0)
    one = complex(1)
    rank = 3

    def convert(self, value):
        if isinstance(value, numbers.Complex) and not isinstance(value, numbers.Real):
            return complex(value)
        return complex(float(value))

    def div(self, a, b):
        if b == 0:
            raise CoefficientDivisionFailed(a, b, self)
        return a / b

    def sort_key(self, value):
        return (value.real, value.imag)

    def render(self, value):
        # The sign belongs to the first non-zero component.
        negative = value.real < 0 or (value.real == 0 and value.imag < 0)
        if negative:
            value = -value
        if value.imag == 0:
            text = _float_text(value.real)
            return (negative, text, _needs_braces(text))
        imag = _float_text(abs(value.imag))
        imag = "i" if imag == "1" else imag + "i"
        if value.real == 0:
            return (negative, imag, True)
        return (negative, "{}{}{}".format(_float_text(value.real), "-" if value.imag < 0 else "+", imag), True)

class IntegersModulo(Ring):
    """The integers modulo n, stored as ints in range(n)."""

    def __init__(self, modulus):
        if modulus < 2:
            raise ValueError("modulus must be at least 2, not {}".format(modulus))
        self.modulus = modulus
        self.name = "mod{}".format(modulus)
        self.zero = 0
        self.one = 1

    def convert(self, value):
        return INTEGERS.convert(value) % self.modulus

    def add(self, a, b):
        return (a + b) % self.modulus

    def sub(self, a, b):
        return (a - b) % self.modulus

    def mul(self, a, b):
        return (a * b) % self.modulus

    def neg(self, a):
        return (-a) % self.modulus

    def div(self, a, b):
        try:
            inverse = pow(b, -1, self.modulus)
        except ValueError:
            raise CoefficientDivisionFailed(a, b, self)
        return (a * inverse) % self.modulus

    def __eq__(self, other):
        return isinstance(other, IntegersModulo) and self.modulus == other.modulus

    def __hash__(self):
        return hash((IntegersModulo, self.modulus))

    def __repr__(self):
        return "IntegersModulo({})".format(self.modulus)

INTEGERS  = Integers()
RATIONALS = Rationals()
REALS     = Reals()
COMPLEX   = ComplexNumbers()

# Checked in order, so each abstract type must come before its supertypes.
_RINGS_BY_TYPE = FrozenDict([
    (numbers.Integral, INTEGERS),
    (numbers.Rational, RATIONALS),
    (numbers.Real,     REALS),
    (numbers.Complex,  COMPLEX)])

_RINGS_BY_NAME = FrozenDict((r.name, r) for r in (INTEGERS, RATIONALS, REALS, COMPLEX))

def ring_of_value(value):
    """The narrowest built-in ring containing `value`; TypeError if none does."""
    t = find_one(_RINGS_BY_TYPE.keys(), lambda t: isinstance(value, t))
    if t is None:
        raise TypeError("no coefficient ring for {}".format(type(value).__name__))
    return _RINGS_BY_TYPE[t]

def ring_of(values):
    """The narrowest built-in ring containing every value (INTEGERS if empty)."""
    ring = INTEGERS
    for v in values:
        ring = unify(ring, ring_of_value(v))
    return ring

def unify(a, b):
    """The ring two operands should be combined in.

    The integers embed in every ring; otherwise only ranked rings mix.
    """
    if a == b:
        return a
    if a.rank is not None and b.rank is not None:
        return a if a.rank > b.rank else b
    if a is INTEGERS:
        return b
    if b is INTEGERS:
        return a
    raise TypeError("cannot combine coefficients from {} and {}".format(a, b))

def ring_named(name):
    """Look up a ring by name: integers, rationals, reals, complex or mod<N>."""
    if name in _RINGS_BY_NAME:
        return _RINGS_BY_NAME[name]
    if name.startswith("mod") and name[3:].isdigit():
        return IntegersModulo(int(name[3:]))
    raise ValueError("unknown coefficient ring {!r}".format(name))
