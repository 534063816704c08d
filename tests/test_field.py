"""Tests for prime field elements."""

import pytest

from staticpoly import FieldElement, Poly
from staticpoly.field import DEFAULT_MODULUS


class TestFieldElement:

    def test_reduction(self):
        assert FieldElement(DEFAULT_MODULUS + 3).val == 3
        assert FieldElement(-1).val == DEFAULT_MODULUS - 1

    def test_arithmetic(self):
        a, b = FieldElement(5, 7), FieldElement(4, 7)
        assert a + b == 2
        assert a - b == 1
        assert b - a == -1
        assert a * b == 6
        assert 3 - a == 5
        assert 2 * a == 3

    def test_division_and_inverse(self):
        a = FieldElement(3, 7)
        assert a.inverse() == 5
        assert a / a == 1
        assert 1 / a == 5
        assert a ** -1 == 5
        assert a ** 6 == 1

    def test_zero_has_no_inverse(self):
        with pytest.raises(ZeroDivisionError):
            FieldElement(0).inverse()

    def test_modulus_mismatch(self):
        with pytest.raises(ValueError):
            FieldElement(1, 7) + FieldElement(1, 11)

    def test_different_moduli_are_unequal(self):
        assert FieldElement(1, 7) != FieldElement(1, 11)
        assert not FieldElement(3, 7) == FieldElement(3, 11)
        assert Poly([FieldElement(1, 7)]) != Poly([FieldElement(1, 11)])

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            FieldElement(1) + 0.5

    def test_signed_and_str(self):
        assert FieldElement(-2).signed() == -2
        assert str(FieldElement(-2)) == "-2"
        assert repr(FieldElement(3, 7)) == "FieldElement(3, 7)"

    def test_hashable(self):
        assert len({FieldElement(1), FieldElement(1 + DEFAULT_MODULUS)}) == 1

    def test_zero_and_one(self):
        assert FieldElement.zero() == 0
        assert FieldElement.one(7) == FieldElement(8, 7)
