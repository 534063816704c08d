"""
Polynomial division with remainder.

Knuth, The Art of Computer Programming, Volume 2 (3rd ed.), section 4.6.1:

- Algorithm D divides over a field: every quotient coefficient is an exact
  division by the divisor's leading coefficient, and a == q*b + r.
- Algorithm R (pseudo-division) never divides, so integer coefficients stay
  integers. It computes q and r with lc(b)**(m - n + 1) * a == q*b + r,
  where m and n are the degrees of a and b.

The strategy is chosen from the coefficient domain: pseudo-division when both
operands are integer-like, exact division otherwise.
"""

import logging

import numpy as np

from staticpoly import storage
from staticpoly.errors import ZeroDivisorError

logger = logging.getLogger(__name__)


def integer_power(t, n):
    """``t ** n`` for a non-negative integer ``n`` by repeated squaring."""
    if n == 0:
        return type(t)(1)
    if n == 1:
        return t
    if n == 2:
        return t * t
    if n == 3:
        return t * t * t
    result = integer_power(t, n // 2)
    result = result * result
    if n & 1:
        result = result * t
    return result


def _divide_field(q, u, v, m, n):
    # Algorithm D, working in place on the dividend copy u
    lead = v[n]
    for k in range(m - n, -1, -1):
        q[k] = u[n + k] / lead
        u[k:n + k] -= np.multiply(q[k], v[:n])


def _pseudo_divide(q, u, v, m, n):
    # Algorithm R: scale the whole working dividend instead of dividing
    lead = v[n]
    for k in range(m - n, -1, -1):
        top = u[n + k]
        q[k] = top * integer_power(lead, k)
        u[:n + k] = np.multiply(lead, u[:n + k])
        u[k:n + k] -= np.multiply(top, v[:n])


def quotient_remainder(a, b):
    """
    Return ``(quotient, remainder)`` of ``a`` divided by ``b``.

    The quotient has capacity ``max(N1 - N2 + 1, 1)`` and the remainder
    ``min(N1, N2)``. A divisor stored with headroom (degree below
    ``N2 - 1``) can have a quotient longer than that; the quotient capacity
    then grows to ``deg(a) - deg(b) + 1`` so the result matches division by
    the trimmed divisor.

    Raises ZeroDivisorError if ``b`` is the zero polynomial.
    """
    n = b.degree()
    if n < 0:
        raise ZeroDivisorError("division by the zero polynomial")
    m = a.degree()
    q_size = max(a.size - b.size + 1, 1)
    r_size = min(a.size, b.size)
    dtype = storage.result_dtype(a.dtype, b.dtype)
    cls = type(a)

    if m < n:
        return cls._from_array(storage.zeros(q_size, dtype)), a.try_resize_to(r_size)

    if m - n + 1 > q_size:
        logger.debug("divisor of capacity %d has degree %d; widening quotient from %d to %d",
                     b.size, n, q_size, m - n + 1)
        q_size = m - n + 1

    q = storage.zeros(q_size, dtype)
    u = np.array(a.coeffs, dtype=dtype)
    if a.is_integer_like and b.is_integer_like:
        logger.debug("pseudo-division of degree %d by degree %d", m, n)
        _pseudo_divide(q, u, b.coeffs, m, n)
    else:
        logger.debug("field division of degree %d by degree %d", m, n)
        _divide_field(q, u, b.coeffs, m, n)

    r = storage.zeros(r_size, dtype)
    r[:n] = u[:n]
    return cls._from_array(q), cls._from_array(r)
