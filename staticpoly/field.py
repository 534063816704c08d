"""
Prime field coefficients.

``FieldElement`` is a field-like coefficient type: polynomials over it are
divided with exact division rather than pseudo-division. Elements print as
their centered representative, so p - 1 shows up as -1.
"""

import numbers

from staticpoly.traits import is_negative

DEFAULT_MODULUS = 3 * 2**30 + 1


class FieldElement:
    """
    Represents an element of F_p, by default p = 3 * 2**30 + 1.
    """
    __slots__ = ('val', 'modulus')
    is_integer_like = False

    def __init__(self, val, modulus=DEFAULT_MODULUS):
        self.modulus = modulus
        self.val = int(val) % modulus

    @classmethod
    def zero(cls, modulus=DEFAULT_MODULUS):
        return cls(0, modulus)

    @classmethod
    def one(cls, modulus=DEFAULT_MODULUS):
        return cls(1, modulus)

    def signed(self):
        return (self.val + self.modulus // 2) % self.modulus - self.modulus // 2

    def __repr__(self):
        return f'FieldElement({self.val}, {self.modulus})'

    def __str__(self):
        return str(self.signed())

    def typecast(self, other):
        if isinstance(other, numbers.Integral):
            return FieldElement(other, self.modulus)
        if isinstance(other, FieldElement):
            if other.modulus != self.modulus:
                raise ValueError(f'Modulus mismatch: {self.modulus} and {other.modulus}.')
            return other
        return None

    def __eq__(self, other):
        if isinstance(other, FieldElement) and other.modulus != self.modulus:
            return False
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return self.val == other.val

    def __hash__(self):
        return hash((self.val, self.modulus))

    def __neg__(self):
        return FieldElement(-self.val, self.modulus)

    def __add__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.val + other.val, self.modulus)

    __radd__ = __add__

    def __sub__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.val - other.val, self.modulus)

    def __rsub__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return FieldElement(self.val * other.val, self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self.typecast(other)
        if other is None:
            return NotImplemented
        return other * self.inverse()

    def __pow__(self, n):
        if n < 0:
            return self.inverse() ** -n
        return FieldElement(pow(self.val, n, self.modulus), self.modulus)

    def inverse(self):
        if self.val == 0:
            raise ZeroDivisionError('Cannot invert zero.')
        t, new_t = 0, 1
        r, new_r = self.modulus, self.val
        while new_r != 0:
            quotient = r // new_r
            t, new_t = new_t, t - quotient * new_t
            r, new_r = new_r, r - quotient * new_r
        if r != 1:
            raise ValueError(f'{self.val} has no inverse modulo {self.modulus}.')
        return FieldElement(t, self.modulus)


@is_negative.register(FieldElement)
def _(value, tolerance=None):
    return value.signed() < 0
