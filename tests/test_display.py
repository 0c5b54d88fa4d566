import random
import unittest
from fractions import Fraction

from unipoly import opts
from unipoly.coefficients import INTEGERS, RATIONALS, REALS, COMPLEX, IntegersModulo
from unipoly.display import Style, TermOrder, Spacing, Notation, format
from unipoly.parse import parse
from unipoly.polynomials import Polynomial

class TestFormat(unittest.TestCase):

    def test_default_style(self):
        assert format(Polynomial([-1, 2, 3])) == "3x^2 + 2x - 1"
        assert str(Polynomial.from_descending([1, 0, -4, 0])) == "x^3 - 4x"

    def test_zero(self):
        assert format(Polynomial.zero()) == "0"
        assert format(Polynomial.zero(RATIONALS), notation="latex") == "0"

    def test_constant(self):
        assert format(parse("5")) == "5"
        assert format(parse("-5")) == "-5"
        assert format(Polynomial([1])) == "1"

    def test_negative_terms(self):
        assert format(Polynomial.from_descending([-3, 0, 1])) == "-3x^2 + 1"
        assert format(Polynomial.from_descending([1, -1])) == "x - 1"
        assert format(Polynomial.from_descending([-1, -1])) == "-x - 1"
        assert "+ -" not in format(Polynomial([-1, -2, -3]))

    def test_elision(self):
        assert format(Polynomial([0, 1])) == "x"
        assert format(Polynomial([0, -1])) == "-x"
        assert format(Polynomial([1, 1, 1])) == "x^2 + x + 1"
        assert format(Polynomial([0, 1], RATIONALS)) == "x"
        assert format(Polynomial([0, 1], REALS)) == "x"

    def test_ascending(self):
        p = Polynomial([-1, 2, 3])
        assert format(p, term_order=TermOrder.ASCENDING) == "-1 + 2x + 3x^2"
        assert format(p, term_order="ascending") == "-1 + 2x + 3x^2"

    def test_compact(self):
        p = Polynomial([-1, 2, 3])
        assert format(p, spacing=Spacing.COMPACT) == "3x^2+2x-1"
        assert format(p, spacing=Spacing.COMPACT, term_order=TermOrder.ASCENDING) == "-1+2x+3x^2"

    def test_concise(self):
        p = Polynomial.from_descending([1, -2, 5, -1, 0])
        assert format(p, notation=Notation.CONCISE) == "x4 - 2x3 + 5x2 - x"

    def test_latex(self):
        p = Polynomial([Fraction(1, 2), 0, Fraction(-3, 4)])
        assert format(p, notation=Notation.LATEX) == r"-\frac{3}{4}x^{2} + \frac{1}{2}"
        assert format(Polynomial([0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2]), notation="latex") == "2x^{10}"

    def test_other_indeterminate(self):
        assert format(Polynomial([1, 0, 1]), indeterminate="t") == "t^2 + 1"
        assert Polynomial([1, 0, 1]).format(indeterminate="z") == "z^2 + 1"

    def test_compound_coefficients_are_braced(self):
        assert format(Polynomial([Fraction(1, 2), Fraction(3, 2)])) == "{3/2}x + {1/2}"
        assert format(Polynomial([Fraction(-1, 2), 0, 1])) == "x^2 - {1/2}"
        assert format(Polynomial([0, 0, complex(1, 2)])) == "{1+2i}x^2"
        assert format(Polynomial([complex(0, -1), 1j])) == "{i}x - {i}"
        assert format(Polynomial([1e-09, 2.5])) == "2.5x + {1e-09}"

    def test_complex_with_real_values(self):
        assert format(Polynomial([1, 2], COMPLEX)) == "2x + 1"
        assert format(Polynomial([complex(-1, 3)])) == "-{1-3i}"

    def test_modular(self):
        assert format(Polynomial([-1, 1], IntegersModulo(5))) == "x + 4"

    def test_style(self):
        s = Style(term_order="ascending", spacing="compact")
        assert s.term_order is TermOrder.ASCENDING
        assert s.spacing is Spacing.COMPACT
        assert s.notation is Notation.STANDARD
        assert s.indeterminate == "x"
        assert s.replace(indeterminate="y") == Style("y", "ascending", "compact", "standard")
        assert s.replace(indeterminate="y") != s
        assert hash(s) == hash(Style(term_order="ascending", spacing="compact"))
        assert format(Polynomial([-1, 2]), s) == "-1+2x"
        assert format(Polynomial([-1, 2]), s, spacing="spaced") == "-1 + 2x"
        with self.assertRaises(ValueError):
            Style(notation="fancy")

    def test_options_supply_defaults(self):
        snap = opts.snapshot()
        try:
            opts.restore({"term-order": "ascending", "spacing": "compact", "notation": "concise", "indeterminate": "y"})
            assert format(Polynomial([-1, 0, 3])) == "-1+3y2"
            opts.reset()
            assert format(Polynomial([-1, 0, 3])) == "3x^2 - 1"
        finally:
            opts.restore(snap)

class TestRoundTrip(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(1234)

    def random_coefficients(self, ring):
        n = self.rng.randint(0, 6)
        if ring is RATIONALS:
            return [Fraction(self.rng.randint(-20, 20), self.rng.randint(1, 6)) for _ in range(n)]
        if ring is REALS:
            return [self.rng.randint(-400, 400) / 8 for _ in range(n)]
        if ring is COMPLEX:
            return [complex(self.rng.randint(-5, 5), self.rng.randint(-5, 5)) for _ in range(n)]
        return [self.rng.randint(-20, 20) for _ in range(n)]

    def check(self, p, style=None):
        text = format(p, style)
        q = parse(text, ring=p.ring, indeterminate=(style or Style()).indeterminate)
        assert q == p, "{!r} printed as {!r} and parsed as {!r}".format(p, text, q)

    def test_round_trip(self):
        styles = [None] + [
            Style("t", order, spacing, notation)
            for order in TermOrder
            for spacing in Spacing
            for notation in (Notation.STANDARD, Notation.CONCISE)]
        for ring in (INTEGERS, RATIONALS, REALS, COMPLEX, IntegersModulo(7)):
            for _ in range(30):
                p = Polynomial(self.random_coefficients(ring), ring)
                for style in styles:
                    self.check(p, style)

    def test_round_trip_without_ring(self):
        for text in ["3x^2 + 2x - 1", "x", "-x^4 - 2x^3 + 10x^2 - x + 5", "{1/2}x + 3"]:
            p = parse(text)
            assert parse(format(p)) == p
            assert format(parse(format(p))) == format(p)
