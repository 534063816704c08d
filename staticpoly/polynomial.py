"""
Fixed-capacity dense univariate polynomials.

A ``Poly`` stores exactly ``size`` coefficients, low order first, in a numpy
array. The capacity never changes after construction and every operator
allocates its result at a capacity computed from the operand capacities
alone:

    p + q, p - q    max(N1, N2)
    p * q           N1 + N2 - 1
    p / q           max(N1 - N2 + 1, 1)
    p % q           min(N1, N2)
    p ** e          N * e
    p + c, p - c    max(N, 1)
    p * c, p / c    N
"""

import functools
import logging
import operator
from collections.abc import Iterable
from itertools import islice

import numpy as np

from staticpoly import storage
from staticpoly.division import quotient_remainder
from staticpoly.errors import LossyResizeError
from staticpoly.evaluate import evaluate_polynomial
from staticpoly.multiply import multiply
from staticpoly.power import power
from staticpoly.printer import format_poly, latex_poly
from staticpoly.traits import is_integer_like

logger = logging.getLogger(__name__)


def _check_size(size):
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"capacity must be non-negative, got {size}")
    return size


def _is_scalar(value):
    return not isinstance(value, (Poly, Iterable))


@functools.total_ordering
class Poly:
    """
    Univariate polynomial with a fixed number of coefficient slots.

    ``Poly(coefficients=(), size=None, dtype=None)`` accepts a scalar (a
    constant polynomial), any iterable of coefficients (truncated or zero
    padded to ``size``), or another ``Poly``. Converting from another
    ``Poly`` never loses terms: narrowing raises LossyResizeError unless it
    goes through ``truncate_to``.

    Coefficients default to ``dtype=object`` storage. Slots above the degree
    are zero and form the headroom that capacity-bounded products may fill.
    """

    __slots__ = ('_coeffs',)
    __array_ufunc__ = None

    def __init__(self, coefficients=(), size=None, dtype=None):
        if size is not None:
            size = _check_size(size)
        if isinstance(coefficients, Poly):
            source = coefficients.try_resize_to(coefficients.size if size is None else size)
            self._coeffs = source._coeffs if dtype is None else source._coeffs.astype(dtype)
            return
        if dtype is None:
            dtype = coefficients.dtype if isinstance(coefficients, np.ndarray) else object
        if _is_scalar(coefficients) or isinstance(coefficients, (str, bytes)):
            coefficients = (coefficients,)
        items = list(islice(coefficients, size))
        self._coeffs = storage.from_items(items, len(items) if size is None else size, dtype)

    @classmethod
    def _from_array(cls, coeffs):
        poly = cls.__new__(cls)
        poly._coeffs = coeffs
        return poly

    @classmethod
    def zero(cls, size=0, dtype=object):
        return cls._from_array(storage.zeros(_check_size(size), dtype))

    @classmethod
    def one(cls, size=1, dtype=object):
        size = _check_size(size)
        if size < 1:
            raise ValueError("the one polynomial needs a capacity of at least 1")
        coeffs = storage.zeros(size, dtype)
        coeffs[0] = 1
        return cls._from_array(coeffs)

    @classmethod
    def X(cls):
        return cls([0, 1])

    @classmethod
    def monomial(cls, degree, coefficient=1):
        """``coefficient * x**degree`` at capacity ``degree + 1``."""
        coeffs = storage.zeros(_check_size(degree) + 1)
        coeffs[degree] = coefficient
        return cls._from_array(coeffs)

    # access

    @property
    def size(self):
        return len(self._coeffs)

    @property
    def dtype(self):
        return self._coeffs.dtype

    @property
    def coeffs(self):
        """Read-only view of the coefficient array."""
        view = self._coeffs.view()
        view.flags.writeable = False
        return view

    @property
    def is_integer_like(self):
        if self.dtype.kind != 'O':
            return is_integer_like(self.dtype)
        return all(is_integer_like(type(c)) for c in self._coeffs)

    def degree(self):
        """Largest index of a non-zero coefficient, or -1 for the zero polynomial."""
        for i in range(self.size - 1, -1, -1):
            if self._coeffs[i] != 0:
                return i
        return -1

    def at(self, i):
        i = operator.index(i)
        if not 0 <= i < self.size:
            raise IndexError(f"coefficient index {i} out of range for capacity {self.size}")
        return self._coeffs[i]

    __getitem__ = at

    def __len__(self):
        return self.size

    def __iter__(self):
        return iter(self.coeffs)

    def __bool__(self):
        return self.degree() >= 0

    __hash__ = None

    # resizing

    def truncate_to(self, size):
        """Copy at capacity ``size``; terms that do not fit are dropped silently."""
        size = _check_size(size)
        if self.degree() >= size:
            logger.debug("truncating degree %d polynomial to capacity %d", self.degree(), size)
        return self._from_array(storage.resized(self._coeffs, size))

    def try_resize_to(self, size):
        """Copy at capacity ``size``; raises LossyResizeError if a non-zero term would be dropped."""
        size = _check_size(size)
        degree = self.degree()
        if degree >= size:
            raise LossyResizeError(
                f"a degree {degree} polynomial does not fit in capacity {size}")
        return self._from_array(storage.resized(self._coeffs, size))

    def trim(self):
        return self._from_array(storage.resized(self._coeffs, max(self.degree() + 1, 1)))

    # evaluation

    def evaluate(self, z):
        if not self.size:
            return z * 0
        return evaluate_polynomial(self._coeffs, z)

    def compose(self, other):
        """``self(other(x))`` with capacity ``(N - 1)(M - 1) + 1``."""
        if not self.size:
            return self.zero(1, self.dtype)
        total = self._from_array(self._coeffs[-1:].copy())
        for c in self._coeffs[-2::-1]:
            total = total * other + c
        return total

    def __call__(self, z):
        if isinstance(z, Poly):
            return self.compose(z)
        return self.evaluate(z)

    # scalar helpers

    def _widened(self, size):
        return self._from_array(storage.resized(self._coeffs, size))

    def _scaled(self, ufunc, scalar, reflected=False):
        out = storage.zeros(self.size, self.dtype)
        if reflected:
            out[...] = ufunc(scalar, self._coeffs)
        else:
            out[...] = ufunc(self._coeffs, scalar)
        return self._from_array(out)

    def _combine(self, other, ufunc):
        out = storage.zeros(max(self.size, other.size),
                            storage.result_dtype(self.dtype, other.dtype))
        out[:self.size] = self._coeffs
        out[:other.size] = ufunc(out[:other.size], other._coeffs)
        return self._from_array(out)

    def _divide(self):
        return storage.truncating_divide if self.is_integer_like else np.true_divide

    @staticmethod
    def _remainder(coeffs, scalar):
        # keeps coeffs == scalar * (coeffs / scalar) + remainder, with the sign of coeffs
        return np.subtract(coeffs, np.multiply(scalar, storage.truncating_divide(coeffs, scalar)))

    # arithmetic

    def __add__(self, other):
        if isinstance(other, Poly):
            return self._combine(other, np.add)
        if _is_scalar(other):
            result = self._widened(max(self.size, 1))
            result._coeffs[0] = result._coeffs[0] + other
            return result
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Poly):
            return self._combine(other, np.subtract)
        if _is_scalar(other):
            result = self._widened(max(self.size, 1))
            result._coeffs[0] = result._coeffs[0] - other
            return result
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return -self + other
        return NotImplemented

    def __neg__(self):
        return self._from_array(np.negative(self._coeffs))

    def __pos__(self):
        return self._widened(self.size)

    def __mul__(self, other):
        if isinstance(other, Poly):
            return multiply(self, other)
        if _is_scalar(other):
            return self._scaled(np.multiply, other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._scaled(np.multiply, other, reflected=True)
        return NotImplemented

    def __truediv__(self, other):
        """
        Quotient by a polynomial, or coefficient-wise division by a scalar.

        Scalar division rounds toward zero for integer-like coefficients and is exact
        otherwise.
        """
        if isinstance(other, Poly):
            return quotient_remainder(self, other)[0]
        if _is_scalar(other):
            return self._scaled(self._divide(), other)
        return NotImplemented

    __floordiv__ = __truediv__

    def __mod__(self, other):
        if isinstance(other, Poly):
            return quotient_remainder(self, other)[1]
        if _is_scalar(other):
            if not self.is_integer_like:
                return self.zero(self.size, self.dtype)
            return self._scaled(self._remainder, other)
        return NotImplemented

    def __divmod__(self, other):
        if isinstance(other, Poly):
            return quotient_remainder(self, other)
        if _is_scalar(other):
            return self / other, self % other
        return NotImplemented

    def __pow__(self, exponent):
        return power(self, exponent)

    # in-place forms mutate only when the result keeps this capacity

    def __iadd__(self, other):
        if isinstance(other, Poly):
            if other.size > self.size:
                return NotImplemented
            self._coeffs[:other.size] = np.add(self._coeffs[:other.size], other._coeffs)
            return self
        if _is_scalar(other) and self.size:
            self._coeffs[0] = self._coeffs[0] + other
            return self
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, Poly):
            if other.size > self.size:
                return NotImplemented
            self._coeffs[:other.size] = np.subtract(self._coeffs[:other.size], other._coeffs)
            return self
        if _is_scalar(other) and self.size:
            self._coeffs[0] = self._coeffs[0] - other
            return self
        return NotImplemented

    def __imul__(self, other):
        if _is_scalar(other):
            self._coeffs[...] = np.multiply(self._coeffs, other)
            return self
        return NotImplemented

    def __itruediv__(self, other):
        if _is_scalar(other):
            self._coeffs[...] = self._divide()(self._coeffs, other)
            return self
        return NotImplemented

    __ifloordiv__ = __itruediv__

    def __imod__(self, other):
        if _is_scalar(other):
            if self.is_integer_like:
                self._coeffs[...] = self._remainder(self._coeffs, other)
            else:
                self._coeffs[...] = 0
            return self
        return NotImplemented

    # comparison

    def __eq__(self, other):
        other = _as_poly(other)
        if other is NotImplemented:
            return NotImplemented
        n = self.degree()
        if other.degree() != n:
            return False
        return all(self._coeffs[i] == other._coeffs[i] for i in range(n + 1))

    def __lt__(self, other):
        other = _as_poly(other)
        if other is NotImplemented:
            return NotImplemented
        n, m = self.degree(), other.degree()
        if n != m:
            return n < m
        for i in range(n, -1, -1):
            a, b = self._coeffs[i], other._coeffs[i]
            if a < b:
                return True
            if b < a:
                return False
        return False

    # output

    def __str__(self):
        return format_poly(self)

    def __repr__(self):
        if self.dtype.kind == 'O':
            return f'Poly({self._coeffs.tolist()!r}, size={self.size})'
        return f'Poly({self._coeffs.tolist()!r}, size={self.size}, dtype={self.dtype.name!r})'

    def _repr_latex_(self):
        return latex_poly(self)


def _as_poly(value):
    if isinstance(value, Poly):
        return value
    if _is_scalar(value):
        return Poly(value)
    return NotImplemented
