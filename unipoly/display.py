"""Render polynomials as text.

The important function is:
 - format: Polynomial -> str

Output under the Standard and Concise notations is accepted by
`unipoly.parse.parse`, so `parse(format(p), ring=p.ring) == p`.  Latex output
is for typesetting only.
"""

from enum import Enum

from unipoly import polynomials
from unipoly.opts import Option

class TermOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

class Spacing(Enum):
    COMPACT = "compact"
    SPACED = "spaced"

class Notation(Enum):
    STANDARD = "standard"   # 2x^3
    CONCISE = "concise"     # 2x3
    LATEX = "latex"         # 2x^{3}

default_term_order = Option("term-order", str, TermOrder.DESCENDING.value,
    choices=[o.value for o in TermOrder], description="Order in which terms are printed")
default_spacing = Option("spacing", str, Spacing.SPACED.value,
    choices=[s.value for s in Spacing], description="Whether to put spaces around signs")
default_notation = Option("notation", str, Notation.STANDARD.value,
    choices=[n.value for n in Notation], description="How exponents are written")

class Style(object):
    """Formatting configuration.

    Unset fields take their value from the corresponding option at
    construction time.  Enum fields also accept their string values.
    """
    __slots__ = ("indeterminate", "term_order", "spacing", "notation")

    def __init__(self, indeterminate=None, term_order=None, spacing=None, notation=None):
        self.indeterminate = indeterminate if indeterminate is not None else polynomials.indeterminate.value
        self.term_order = TermOrder(term_order if term_order is not None else default_term_order.value)
        self.spacing = Spacing(spacing if spacing is not None else default_spacing.value)
        self.notation = Notation(notation if notation is not None else default_notation.value)

    def replace(self, **kwargs):
        fields = {name: getattr(self, name) for name in Style.__slots__}
        fields.update(kwargs)
        return Style(**fields)

    def __eq__(self, other):
        return isinstance(other, Style) and all(getattr(self, a) == getattr(other, a) for a in Style.__slots__)

    def __hash__(self):
        return hash(tuple(getattr(self, a) for a in Style.__slots__))

    def __repr__(self):
        return "Style({})".format(", ".join("{}={!r}".format(a, getattr(self, a)) for a in Style.__slots__))

def _power(symbol, exponent, notation):
    if exponent == 0:
        return ""
    if exponent == 1:
        return symbol
    if notation == Notation.CONCISE:
        return "{}{}".format(symbol, exponent)
    if notation == Notation.LATEX:
        return "{}^{{{}}}".format(symbol, exponent)
    return "{}^{}".format(symbol, exponent)

def format_term(coefficient, exponent, ring, style):
    """Return (negative, text) for a single non-zero term."""
    if style.notation == Notation.LATEX:
        negative, text, compound = ring.render_latex(coefficient)
    else:
        negative, text, compound = ring.render(coefficient)
    if compound:
        text = "{" + text + "}"
    if exponent > 0 and not compound and text == ring.render(ring.one)[1]:
        text = ""
    return negative, text + _power(style.indeterminate, exponent, style.notation)

def format(polynomial, style=None, **kwargs):
    """Render `polynomial`; never fails.

    Keyword arguments override individual Style fields.
    """
    if style is None:
        style = Style(**kwargs)
    elif kwargs:
        style = style.replace(**kwargs)
    if polynomial.is_zero:
        return "0"

    ring = polynomial.ring
    exponents = range(len(polynomial.coefficients))
    if style.term_order == TermOrder.DESCENDING:
        exponents = reversed(exponents)
    plus, minus = (" + ", " - ") if style.spacing == Spacing.SPACED else ("+", "-")

    out = []
    for e in exponents:
        c = polynomial.coefficients[e]
        if ring.is_zero(c):
            continue
        negative, text = format_term(c, e, ring, style)
        if out:
            out.append(minus if negative else plus)
        elif negative:
            out.append("-")
        out.append(text)
    return "".join(out)
