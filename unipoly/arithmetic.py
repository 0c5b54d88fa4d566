"""Polynomial arithmetic on raw coefficient sequences.

Each function takes coefficient sequences (lowest power first, already in
`ring`) and returns a new list; nothing is modified in place.  Results are
not normalized here; `Polynomial._raw` does that.  The operators on
Polynomial are thin wrappers around these functions.
"""

from unipoly.errors import DivisionByZero
from unipoly.logging import task, event

def _get(a, i, ring):
    return a[i] if i < len(a) else ring.zero

def _trim(a, ring):
    while a and ring.is_zero(a[-1]):
        a.pop()
    return a

def add(a, b, ring):
    return [ring.add(_get(a, i, ring), _get(b, i, ring)) for i in range(max(len(a), len(b)))]

def sub(a, b, ring):
    return [ring.sub(_get(a, i, ring), _get(b, i, ring)) for i in range(max(len(a), len(b)))]

def neg(a, ring):
    return [ring.neg(c) for c in a]

def mul(a, b, ring):
    """Convolution c[k] = sum(a[i] * b[k-i])."""
    if not a or not b:
        return []
    res = [ring.zero] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if ring.is_zero(x):
            continue
        for j, y in enumerate(b):
            res[i + j] = ring.add(res[i + j], ring.mul(x, y))
    return res

def scale(a, s, ring):
    return [ring.mul(c, s) for c in a]

def divide_scalar(a, s, ring):
    if ring.is_zero(s):
        raise DivisionByZero("division by zero")
    return [ring.div(c, s) for c in a]

def power(a, n, ring):
    """a**n by repeated squaring."""
    res = [ring.one]
    base = list(a)
    while n:
        if n & 1:
            res = _trim(mul(res, base, ring), ring)
        n >>= 1
        if n:
            base = _trim(mul(base, base, ring), ring)
    return res

def divmod_(a, b, ring):
    """Long division: returns (quotient, remainder) with a = b*quotient + remainder.

    The remainder is zero or has lower degree than b.  Raises DivisionByZero
    if b is zero and CoefficientDivisionFailed if the ring cannot divide a
    coefficient by the leading coefficient of b.
    """
    b = _trim(list(b), ring)
    if not b:
        raise DivisionByZero()
    remainder = _trim(list(a), ring)
    d = len(b) - 1
    lead = b[-1]
    quotient = [ring.zero] * max(len(remainder) - d, 0)
    with task("long division", dividend_degree=len(remainder) - 1, divisor_degree=d):
        while remainder and len(remainder) - 1 >= d:
            shift = len(remainder) - 1 - d
            factor = ring.div(remainder[-1], lead)
            event("quotient term {!r} at power {}".format(factor, shift))
            quotient[shift] = factor
            # The leading coefficient cancels by construction; drop it rather
            # than trusting inexact rings to produce an exact zero.
            remainder.pop()
            for i in range(d):
                remainder[shift + i] = ring.sub(remainder[shift + i], ring.mul(factor, b[i]))
            _trim(remainder, ring)
    return quotient, remainder

def evaluate(a, x, ring):
    """Horner's method."""
    res = ring.zero
    for c in reversed(a):
        res = ring.add(ring.mul(res, x), c)
    return res

def derivative(a, ring):
    return [ring.mul(ring.convert(k), a[k]) for k in range(1, len(a))]
