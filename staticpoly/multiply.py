"""Polynomial products.

Both functions take ``Poly`` operands and build the result with
``type(a)._from_array``.
"""

import numpy as np

from staticpoly import storage


def multiply(a, b):
    """Full product; capacity ``N1 + N2 - 1``."""
    size = max(a.size + b.size - 1, 0)
    prod = storage.zeros(size, storage.result_dtype(a.dtype, b.dtype))
    if not a or not b:
        return type(a)._from_array(prod)
    x, y = a.coeffs, b.coeffs
    for i in range(a.size):
        # a[i] stays on the left for non-commutative coefficients
        prod[i:i + b.size] += np.multiply(x[i], y)
    return type(a)._from_array(prod)


def mul_inplace_capacity(a, b):
    """
    Product truncated to the capacity of ``a``.

    The caller guarantees that ``a`` has enough headroom for the true
    product; terms that would land beyond the capacity are never computed.
    """
    size = a.size
    prod = storage.zeros(size, storage.result_dtype(a.dtype, b.dtype))
    if not a or not b:
        return type(a)._from_array(prod)
    x, y = a.coeffs, b.coeffs
    for i in range(size):
        width = min(size - i, b.size)
        if width > 0:
            prod[i:i + width] += np.multiply(x[i], y[:width])
    return type(a)._from_array(prod)
