"""Tests for text and LaTeX formatting."""

from fractions import Fraction

import numpy as np
import pytest

from staticpoly import FieldElement, Poly, Tolerance, format_poly, latex_poly
from staticpoly.printer import format_coefficient

from .quaternion import Quaternion


class TestFormatPoly:

    @pytest.mark.parametrize("coefficients, expected", [
        ([], "0"),
        ([0, 0], "0"),
        ([7], "7"),
        ([-3], "-3"),
        ([0, 1], "x"),
        ([0, -1], "-x"),
        ([0, 2], "2x"),
        ([-1, 1], "x - 1"),
        ([1, 0, 3], "3x^2 + 1"),
        ([-1, 1, -1, 1], "x^3 - x^2 + x - 1"),
        ([1, -2, 0, -1], "-x^3 - 2x + 1"),
        ([-1, 0, 0, 0, 0, 0, 1], "x^6 - 1"),
    ])
    def test_integers(self, coefficients, expected):
        assert str(Poly(coefficients)) == expected

    def test_headroom_is_not_printed(self):
        assert str(Poly([1, 1], size=6)) == "x + 1"

    def test_floats_use_tolerance(self):
        assert str(Poly([1e-13, 1.0, 0.5])) == "0.5x^2 + x"
        assert str(Poly([2.0, 1.0 + 1e-14])) == "x + 2.0"

    def test_fractions(self):
        assert str(Poly([Fraction(-1, 2), Fraction(3, 4)])) == "3/4x - 1/2"

    def test_numpy_integers(self):
        assert str(Poly([1, -2, 1], dtype=np.int64)) == "x^2 - 2x + 1"

    def test_variable_and_tolerance(self):
        p = Poly([1e-9, 1])
        assert format_poly(p, var="t") == "t + 1e-09"
        assert format_poly(p, var="t", tolerance=Tolerance(absolute_epsilon=1e-6)) == "t"

    def test_prime_field(self):
        assert str(Poly([FieldElement(-1), FieldElement(1)])) == "x - 1"

    def test_complex(self):
        assert str(Poly([complex(0, -1), complex(1, 0)])) == "x - j"

    def test_hypercomplex(self):
        p = Poly([Quaternion(-1, 2, -3, 0), Quaternion(1, 0, 0, 0)])
        assert str(p) == "x - q(1, -2, 3, 0)"


class TestFormatCoefficient:

    @pytest.mark.parametrize("value, expected", [
        (complex(2, -3), "(2.0 - 3.0j)"),
        (complex(2, 3), "(2.0 + 3.0j)"),
        (complex(0, -1), "-j"),
        (complex(1e-15, 2), "2.0j"),
        (complex(1e-15, 1e-15), "0"),
        (complex(4, 1e-15), "4.0"),
    ])
    def test_complex(self, value, expected):
        assert format_coefficient(value) == expected

    def test_default(self):
        assert format_coefficient(12) == "12"


class TestLatex:

    def test_latex_poly(self):
        assert latex_poly(Poly([-1, 0, 0, 1])) == "$x^{3} - 1$"
        assert latex_poly(Poly([0, 2, 1]), var="z") == "$z^{2} + 2z$"

    def test_repr_latex(self):
        assert Poly([1, 1])._repr_latex_() == "$x + 1$"
