from unipoly.coefficients import (Ring, INTEGERS, RATIONALS, REALS, COMPLEX,
    IntegersModulo, ring_named)
from unipoly.display import Style, TermOrder, Spacing, Notation, format
from unipoly.errors import *
from unipoly.parse import parse
from unipoly.polynomials import Polynomial, Term, NEG_INF, normalize
