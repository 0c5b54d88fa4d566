import random
import unittest
from fractions import Fraction

from unipoly import arithmetic
from unipoly.coefficients import INTEGERS, RATIONALS, REALS, IntegersModulo
from unipoly.errors import DivisionByZero, CoefficientDivisionFailed, PolynomialArithmeticError
from unipoly.polynomials import Polynomial

def random_polynomial(rng, ring=INTEGERS, max_degree=6, lo=-9, hi=9):
    return Polynomial([rng.randint(lo, hi) for _ in range(rng.randint(0, max_degree + 1))], ring)

def random_divisor(rng, ring=RATIONALS, max_degree=4):
    p = random_polynomial(rng, ring, max_degree)
    if p.is_zero:
        return Polynomial([rng.randint(1, 9)], ring)
    return p

class TestAddition(unittest.TestCase):

    def test_add(self):
        a = Polynomial.from_descending([2, -2, 0, -1])
        b = Polynomial.from_descending([1, 1, -2])
        assert a + b == Polynomial.from_descending([2, -1, 1, -3])

    def test_add_scalar(self):
        x = Polynomial([0, 1])
        assert x + 5 == Polynomial([5, 1])
        assert 5 + x == Polynomial([5, 1])

    def test_cancellation_lowers_degree(self):
        a = Polynomial([1, 2, 3])
        b = Polynomial([0, 0, -3])
        assert (a + b).degree == 1
        assert (a - a).is_zero

    def test_subtract(self):
        a = Polynomial.from_descending([1, 1, -2])
        b = Polynomial.from_descending([2, -2, 0, -1])
        assert a - b == Polynomial.from_descending([-2, 3, 1, -1])
        assert Polynomial([0, 1]) - 5 == Polynomial([-5, 1])
        assert 5 - Polynomial([0, 1]) == Polynomial([5, -1])

    def test_negation(self):
        p = Polynomial.from_descending([1, 2, -3])
        assert -p == Polynomial.from_descending([-1, -2, 3])
        assert -(-p) == p
        assert +p is p

    def test_promotion(self):
        p = Polynomial([1, 1]) + Polynomial([Fraction(1, 2)])
        assert p.ring is RATIONALS
        assert p.coefficients == (Fraction(3, 2), 1)
        assert (Polynomial([1]) + 0.5).ring is REALS

    def test_incompatible_rings(self):
        with self.assertRaises(TypeError):
            Polynomial([1], IntegersModulo(5)) + Polynomial([1], IntegersModulo(7))
        with self.assertRaises(TypeError):
            Polynomial([1], IntegersModulo(5)) + Fraction(1, 2)
        with self.assertRaises(TypeError):
            Polynomial([1]) + "x"

class TestMultiplication(unittest.TestCase):

    def test_mul(self):
        a = Polynomial.from_descending([1, -1])
        b = Polynomial.from_descending([1, 2])
        assert a * b == Polynomial.from_descending([1, 1, -2])

    def test_mul_scalar(self):
        p = Polynomial.from_descending([1, -2])
        assert p * 5 == Polynomial.from_descending([5, -10])
        assert 5 * p == Polynomial.from_descending([5, -10])
        assert (p * 0).is_zero

    def test_mul_zero(self):
        assert (Polynomial([1, 2, 3]) * Polynomial.zero()).is_zero
        assert (Polynomial.zero() * Polynomial([1, 2, 3])).is_zero

    def test_zero_divisors(self):
        # (3x + 1)(2x + 1) = 6x^2 + 5x + 1 = 5x + 1 over Z/6
        z6 = IntegersModulo(6)
        a = Polynomial([1, 3], z6)
        b = Polynomial([1, 2], z6)
        product = a * b
        assert product.coefficients == (1, 5)
        assert product.degree == 1
        assert product.degree < a.degree + b.degree

    def test_power(self):
        p = Polynomial([1, 1])
        assert p ** 0 == Polynomial.one()
        assert p ** 1 == p
        assert p ** 3 == Polynomial([1, 3, 3, 1])
        assert Polynomial.zero() ** 2 == Polynomial.zero()
        with self.assertRaises(ValueError):
            p ** -1

    def test_scalar_division(self):
        p = Polynomial.from_descending([2, 0, -4], RATIONALS)
        assert p / 2 == Polynomial.from_descending([1, 0, -2])
        assert Polynomial([2, 6]) / 2 == Polynomial([1, 3])
        assert Polynomial([1, 3]) / Fraction(2) == Polynomial([Fraction(1, 2), Fraction(3, 2)])
        with self.assertRaises(DivisionByZero):
            p / 0
        with self.assertRaises(CoefficientDivisionFailed):
            Polynomial([1, 3]) / 2
        with self.assertRaises(CoefficientDivisionFailed):
            Polynomial([1, 3], IntegersModulo(4)) / 2

class TestDivision(unittest.TestCase):

    def test_divmod(self):
        numerator = Polynomial.from_descending([-4, 12, -21, 19, 0], RATIONALS)
        denominator = Polynomial.from_descending([2, -3, 5], RATIONALS)
        q, r = divmod(numerator, denominator)
        assert q == Polynomial.from_descending([-2, 3, -1])
        assert r == Polynomial.from_descending([1, 5])
        assert numerator // denominator == q
        assert numerator % denominator == r

    def test_exact_integer_division(self):
        p = Polynomial.from_descending([1, 0, -1])
        q, r = divmod(p, Polynomial.from_descending([1, -1]))
        assert q == Polynomial.from_descending([1, 1])
        assert r.is_zero
        assert q.ring is INTEGERS

    def test_inexact_integer_division_fails(self):
        p = Polynomial.from_descending([1, 0, -1])
        with self.assertRaises(CoefficientDivisionFailed):
            divmod(p, Polynomial.from_descending([2, 1]))

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            divmod(Polynomial([1, 2]), Polynomial.zero())
        with self.assertRaises(ZeroDivisionError):
            Polynomial([1, 2]) // 0
        assert issubclass(DivisionByZero, PolynomialArithmeticError)

    def test_low_degree_dividend(self):
        q, r = divmod(Polynomial([1, 2]), Polynomial([0, 0, 1]))
        assert q.is_zero
        assert r == Polynomial([1, 2])
        q, r = divmod(Polynomial.zero(), Polynomial([0, 1]))
        assert q.is_zero and r.is_zero

    def test_modular_division(self):
        z7 = IntegersModulo(7)
        a = Polynomial([3, 0, 5, 1], z7)
        b = Polynomial([1, 3], z7)
        q, r = divmod(a, b)
        assert b * q + r == a
        assert r.degree < b.degree

    def test_modular_division_needs_unit(self):
        z6 = IntegersModulo(6)
        with self.assertRaises(CoefficientDivisionFailed):
            divmod(Polynomial([1, 0, 1], z6), Polynomial([1, 2], z6))

    def test_float_division_terminates(self):
        p = Polynomial([0.1, 0.7, 0.3, 0.9])
        d = Polynomial([0.3, 0.7])
        q, r = divmod(p, d)
        assert q.degree == 2
        assert r.degree <= 0

    def test_raw_divmod(self):
        q, r = arithmetic.divmod_([-1, 0, 1], [1, 1], INTEGERS)
        assert q == [-1, 1]
        assert r == []

class TestLaws(unittest.TestCase):

    def setUp(self):
        self.rng = random.Random(20240613)

    def test_additive_identity(self):
        for _ in range(50):
            p = random_polynomial(self.rng)
            assert p + Polynomial.zero() == p
            assert Polynomial.zero() + p == p

    def test_commutative_and_associative(self):
        for _ in range(50):
            p, q, r = (random_polynomial(self.rng) for _ in range(3))
            assert p + q == q + p
            assert (p + q) + r == p + (q + r)
            assert p * q == q * p
            assert (p * q) * r == p * (q * r)

    def test_distributive(self):
        for _ in range(50):
            p, q, r = (random_polynomial(self.rng) for _ in range(3))
            assert p * (q + r) == p * q + p * r

    def test_degree_law(self):
        for _ in range(50):
            p, q = random_polynomial(self.rng), random_polynomial(self.rng)
            if p.is_zero or q.is_zero:
                continue
            assert (p * q).degree == p.degree + q.degree

    def test_division_law(self):
        for _ in range(50):
            p = random_polynomial(self.rng, RATIONALS, max_degree=8)
            d = random_divisor(self.rng)
            q, r = divmod(p, d)
            assert d * q + r == p
            assert r.is_zero or r.degree < d.degree

    def test_operator_forms_agree(self):
        for _ in range(20):
            p, q = random_polynomial(self.rng), random_polynomial(self.rng)
            c = self.rng.randint(-9, 9)
            assert p + c == c + p == p + Polynomial([c])
            assert p - c == -(c - p) == p - Polynomial([c])
            assert p * c == c * p == p * Polynomial([c])
            s = p
            s += q
            assert s == p + q
            assert s is not p

class TestRawArithmetic(unittest.TestCase):

    def test_scale(self):
        assert arithmetic.scale([1, -2, 3], 2, INTEGERS) == [2, -4, 6]
        assert arithmetic.scale([1, 2], 3, IntegersModulo(6)) == [3, 0]

    def test_evaluate(self):
        assert arithmetic.evaluate([-1, 2, 3], 2, INTEGERS) == 15
        assert arithmetic.evaluate([], 5, INTEGERS) == 0
