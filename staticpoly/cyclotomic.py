"""
Cyclotomic polynomials.

phi_n is the monic integer polynomial whose roots are the primitive n-th
roots of unity. Since x^n - 1 is the product of phi_d over all divisors d of
n, phi_n can be peeled off by exact division; its degree is Euler's totient
of n.
"""

import cmath
import math

from staticpoly.multiply import mul_inplace_capacity
from staticpoly.polynomial import Poly


def _check_order(n):
    if n < 1:
        raise ValueError(f"cyclotomic order must be positive, got {n}")
    return n


def divisors(n):
    """Positive divisors of ``n`` in increasing order."""
    _check_order(n)
    small = [d for d in range(1, math.isqrt(n) + 1) if n % d == 0]
    large = [n // d for d in reversed(small) if d * d != n]
    return small + large


def prod(values):
    """
    Product of a list of polynomials, split in halves so the operands stay
    balanced. The empty product is 1.
    """
    if not values:
        return Poly.one()
    if len(values) == 1:
        return values[0]
    middle = len(values) // 2
    return prod(values[:middle]) * prod(values[middle:])


def cyclotomic(n):
    """
    phi_n with integer coefficients.

    Each phi_d for d dividing n is ``(x^d - 1) / prod(phi_e for e | d, e < d)``.
    The divisors are monic, so pseudo-division is exact, and every quotient
    comes out at capacity ``phi(d) + 1``.
    """
    table = {}
    for d in divisors(n):
        denominator = prod([table[e] for e in divisors(d)[:-1]])
        table[d] = (Poly.monomial(d) - 1) / denominator
    return table[n]


def cyclotomic_from_roots(n):
    """
    phi_n with complex coefficients, as the product of (x - w) over the
    primitive n-th roots of unity w.

    The product is accumulated at capacity n + 1 with the capacity-bounded
    multiplication, so the coefficients carry rounding noise; print them with
    the tolerant printer.
    """
    _check_order(n)
    result = Poly.one(n + 1, dtype=complex)
    for k in range(1, n + 1):
        if math.gcd(k, n) == 1:
            root = cmath.rect(1.0, 2 * math.pi * k / n)
            result = mul_inplace_capacity(result, Poly([-root, 1], dtype=complex))
    return result


def euler_totient(n):
    return cyclotomic(n).degree()
