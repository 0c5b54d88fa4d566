"""Class for representing polynomials of one variable.

A Polynomial is an immutable tuple of coefficients, lowest power first, plus
the Ring those coefficients live in.  Every constructor goes through
`normalize`, so the last coefficient is never zero and the zero polynomial is
the empty tuple.

    >>> p = Polynomial.parse("3x^2 + 2x - 1")
    >>> p.coefficients
    (-1, 2, 3)
    >>> str(p * (p - 1))
    '9x^4 + 12x^3 - 5x^2 - 6x + 2'
"""

import functools
import numbers
import operator

from unipoly import arithmetic
from unipoly.coefficients import INTEGERS, ring_of, ring_of_value, unify
from unipoly.opts import Option

indeterminate = Option("indeterminate", str, "x", metavar="SYMBOL",
    description="Symbol used for the indeterminate when parsing and formatting")

# Degree of the zero polynomial; compares below every real degree.
NEG_INF = float("-inf")

def normalize(coefficients, ring):
    """Strip trailing zero coefficients."""
    terms = list(coefficients)
    while terms and ring.is_zero(terms[-1]):
        terms.pop()
    return tuple(terms)

class Term(object):
    """A coefficient times the indeterminate raised to a non-negative power."""
    __slots__ = ("coefficient", "exponent")
    def __init__(self, coefficient, exponent):
        if not isinstance(exponent, numbers.Integral):
            raise TypeError("exponent must be an integer, not {!r}".format(exponent))
        if exponent < 0:
            raise ValueError("negative exponent {}".format(exponent))
        self.coefficient = coefficient
        self.exponent = exponent
    def __eq__(self, other):
        return isinstance(other, Term) and self.coefficient == other.coefficient and self.exponent == other.exponent
    def __hash__(self):
        return hash((self.coefficient, self.exponent))
    def __iter__(self):
        return iter((self.coefficient, self.exponent))
    def __repr__(self):
        return "Term({!r}, {!r})".format(self.coefficient, self.exponent)

@functools.total_ordering
class Polynomial(object):
    __slots__ = ("coefficients", "ring")

    def __init__(self, coefficients=(), ring=None):
        coefficients = list(coefficients)
        if ring is None:
            ring = ring_of(coefficients)
        self.ring = ring
        self.coefficients = normalize((ring.convert(c) for c in coefficients), ring)

    @classmethod
    def _raw(cls, coefficients, ring):
        # Trusted constructor for coefficients already in `ring`.
        self = cls.__new__(cls)
        self.ring = ring
        self.coefficients = normalize(coefficients, ring)
        return self

    @classmethod
    def zero(cls, ring=INTEGERS):
        return cls._raw((), ring)

    @classmethod
    def one(cls, ring=INTEGERS):
        return cls._raw((ring.one,), ring)

    @classmethod
    def monomial(cls, coefficient, power, ring=None):
        """coefficient * x^power"""
        if ring is None:
            ring = ring_of_value(coefficient)
        return cls.from_terms([Term(ring.convert(coefficient), power)], ring)

    @classmethod
    def from_terms(cls, terms, ring=INTEGERS):
        """Sum a collection of Terms (or (coefficient, exponent) pairs).

        Terms with the same exponent are added together.
        """
        coefficients = []
        for coefficient, exponent in terms:
            if exponent < 0:
                raise ValueError("negative exponent {}".format(exponent))
            if exponent >= len(coefficients):
                coefficients.extend([ring.zero] * (exponent + 1 - len(coefficients)))
            coefficients[exponent] = ring.add(coefficients[exponent], ring.convert(coefficient))
        return cls._raw(coefficients, ring)

    @classmethod
    def from_descending(cls, coefficients, ring=None):
        """Build a polynomial from coefficients listed highest power first."""
        return cls(reversed(list(coefficients)), ring)

    @classmethod
    def parse(cls, text, ring=None, indeterminate=None):
        from unipoly.parse import parse
        return parse(text, ring=ring, indeterminate=indeterminate)

    # Inspection ###############################################################

    @property
    def degree(self):
        """Highest power with a non-zero coefficient, or NEG_INF for zero."""
        return len(self.coefficients) - 1 if self.coefficients else NEG_INF

    @property
    def is_zero(self):
        return not self.coefficients

    @property
    def leading(self):
        """The highest-power coefficient (the ring's zero for the zero polynomial)."""
        return self.coefficients[-1] if self.coefficients else self.ring.zero

    def coefficient(self, power):
        if power < 0:
            raise ValueError("negative power {}".format(power))
        if power >= len(self.coefficients):
            return self.ring.zero
        return self.coefficients[power]

    def descending(self):
        """Coefficients from the highest power down to the constant term."""
        return tuple(reversed(self.coefficients))

    def terms(self):
        """Yield the non-zero Terms, lowest power first."""
        for power, c in enumerate(self.coefficients):
            if not self.ring.is_zero(c):
                yield Term(c, power)

    def with_coefficient(self, power, value):
        """A copy of this polynomial with one coefficient replaced."""
        if power < 0:
            raise ValueError("negative power {}".format(power))
        coefficients = list(self.coefficients)
        if power >= len(coefficients):
            coefficients.extend([self.ring.zero] * (power + 1 - len(coefficients)))
        coefficients[power] = self.ring.convert(value)
        return Polynomial._raw(coefficients, self.ring)

    def derivative(self):
        return Polynomial._raw(arithmetic.derivative(self.coefficients, self.ring), self.ring)

    def evaluate(self, x):
        """Value at x, by Horner's method."""
        try:
            ring = unify(self.ring, ring_of_value(x))
        except TypeError:
            ring = self.ring
        return arithmetic.evaluate(
            [ring.convert(c) for c in self.coefficients],
            ring.convert(x),
            ring)

    __call__ = evaluate

    def format(self, style=None, **kwargs):
        from unipoly.display import format
        return format(self, style, **kwargs)

    # Comparison ###############################################################

    def __hash__(self):
        # Constant polynomials compare equal to their scalar.
        if len(self.coefficients) <= 1:
            return hash(self.coefficients[0] if self.coefficients else self.ring.zero)
        return hash(self.coefficients)

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            other_ring, b = other.ring, other.coefficients
        else:
            try:
                other_ring = ring_of_value(other)
            except TypeError:
                return NotImplemented
            b = normalize([other], other_ring)
        if self.ring == other_ring:
            eq = self.ring.eq
        elif self.ring.rank is not None and other_ring.rank is not None:
            # Python compares int, Fraction, float and complex exactly, and
            # hashes them consistently with that comparison.
            eq = operator.eq
        else:
            # Unranked rings (IntegersModulo, user rings) only equal themselves.
            return False
        a = self.coefficients
        return len(a) == len(b) and all(eq(x, y) for x, y in zip(a, b))

    def __lt__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        a, b, ring = operands
        if len(a) != len(b):
            return len(a) < len(b)
        for i in reversed(range(len(a))):
            self_term = ring.sort_key(a[i])
            other_term = ring.sort_key(b[i])
            if self_term < other_term:
                return True
            if other_term < self_term:
                return False
        return False

    def __bool__(self):
        return bool(self.coefficients)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return "Polynomial({!r}, {!r})".format(self.coefficients, self.ring)

    # Arithmetic ###############################################################
    #
    # Every operator funnels through _operands, which brings both sides into
    # one ring, and then calls the matching function in unipoly.arithmetic.

    def _operands(self, other):
        """(self coefficients, other coefficients, ring), or None if `other` does not mix."""
        if isinstance(other, Polynomial):
            try:
                ring = unify(self.ring, other.ring)
            except TypeError:
                return None
            b = other.coefficients if ring is other.ring else normalize([ring.convert(c) for c in other.coefficients], ring)
        elif isinstance(other, (str, bytes)):
            return None
        else:
            try:
                ring = unify(self.ring, ring_of_value(other))
            except TypeError:
                ring = self.ring
            try:
                b = normalize([ring.convert(other)], ring)
            except (TypeError, ValueError):
                return None
        a = self.coefficients if ring is self.ring else normalize([ring.convert(c) for c in self.coefficients], ring)
        return a, b, ring

    def _apply(self, other, op, swap=False):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        a, b, ring = operands
        if swap:
            a, b = b, a
        return Polynomial._raw(op(a, b, ring), ring)

    def __add__(self, other):
        return self._apply(other, arithmetic.add)

    def __radd__(self, other):
        return self._apply(other, arithmetic.add, swap=True)

    def __sub__(self, other):
        return self._apply(other, arithmetic.sub)

    def __rsub__(self, other):
        return self._apply(other, arithmetic.sub, swap=True)

    def __mul__(self, other):
        return self._apply(other, arithmetic.mul)

    def __rmul__(self, other):
        return self._apply(other, arithmetic.mul, swap=True)

    def __neg__(self):
        return Polynomial._raw(arithmetic.neg(self.coefficients, self.ring), self.ring)

    def __pos__(self):
        return self

    def __divmod__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        a, b, ring = operands
        q, r = arithmetic.divmod_(a, b, ring)
        return Polynomial._raw(q, ring), Polynomial._raw(r, ring)

    def __rdivmod__(self, other):
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        a, b, ring = operands
        q, r = arithmetic.divmod_(b, a, ring)
        return Polynomial._raw(q, ring), Polynomial._raw(r, ring)

    def __floordiv__(self, other):
        result = self.__divmod__(other)
        return result if result is NotImplemented else result[0]

    def __rfloordiv__(self, other):
        result = self.__rdivmod__(other)
        return result if result is NotImplemented else result[0]

    def __mod__(self, other):
        result = self.__divmod__(other)
        return result if result is NotImplemented else result[1]

    def __rmod__(self, other):
        result = self.__rdivmod__(other)
        return result if result is NotImplemented else result[1]

    def __truediv__(self, other):
        """Divide every coefficient by a scalar."""
        if isinstance(other, Polynomial):
            return NotImplemented
        operands = self._operands(other)
        if operands is None:
            return NotImplemented
        a, b, ring = operands
        return Polynomial._raw(arithmetic.divide_scalar(a, b[0] if b else ring.zero, ring), ring)

    def __pow__(self, n):
        if not isinstance(n, numbers.Integral):
            return NotImplemented
        if n < 0:
            raise ValueError("negative power {}".format(n))
        return Polynomial._raw(arithmetic.power(self.coefficients, int(n), self.ring), self.ring)
