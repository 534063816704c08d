"""Integer powers of polynomials."""

import operator

from staticpoly.errors import NegativeExponentError
from staticpoly.multiply import mul_inplace_capacity


def power(a, exponent):
    """
    ``a ** exponent`` by exponentiation by squaring.

    The result has capacity ``max(N * exponent, 1)``. Every partial product
    has degree at most ``exponent * deg(a)``, which is below that capacity,
    so all the squarings and multiplications use the capacity-bounded
    product.
    """
    exponent = operator.index(exponent)
    if exponent < 0:
        raise NegativeExponentError(f"negative exponent {exponent} is not supported")
    size = max(a.size * exponent, 1)
    result = type(a).one(size, dtype=a.dtype)
    if exponent == 0:
        return result
    base = a.try_resize_to(size)
    while exponent:
        if exponent & 1:
            result = mul_inplace_capacity(result, base)
        exponent >>= 1
        if exponent:
            base = mul_inplace_capacity(base, base)
    return result
