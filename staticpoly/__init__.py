"""Dense univariate polynomials with fixed coefficient capacity."""

from staticpoly.config import DEFAULT_TOLERANCE, Tolerance
from staticpoly.cyclotomic import cyclotomic, cyclotomic_from_roots, euler_totient
from staticpoly.division import quotient_remainder
from staticpoly.errors import (
    ConfigurationError,
    LossyResizeError,
    NegativeExponentError,
    PolynomialError,
    ZeroDivisorError,
)
from staticpoly.evaluate import evaluate_polynomial
from staticpoly.field import FieldElement
from staticpoly.multiply import mul_inplace_capacity
from staticpoly.polynomial import Poly
from staticpoly.power import power
from staticpoly.printer import format_poly, latex_poly
from staticpoly.traits import is_integer_like, is_negative, is_one, is_zero, negate

__all__ = [
    'DEFAULT_TOLERANCE',
    'ConfigurationError',
    'FieldElement',
    'LossyResizeError',
    'NegativeExponentError',
    'Poly',
    'PolynomialError',
    'Tolerance',
    'ZeroDivisorError',
    'cyclotomic',
    'cyclotomic_from_roots',
    'euler_totient',
    'evaluate_polynomial',
    'format_poly',
    'is_integer_like',
    'is_negative',
    'is_one',
    'is_zero',
    'latex_poly',
    'mul_inplace_capacity',
    'negate',
    'power',
    'quotient_remainder',
]
