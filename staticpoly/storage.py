"""Fixed-length coefficient arrays.

Coefficients live in one-dimensional numpy arrays. The default dtype is
``object`` so Python integers keep arbitrary precision and any coefficient
type with the ring operators can be stored; unfilled slots hold integer 0.
"""

import numpy as np


def zeros(size, dtype=object):
    return np.zeros(size, dtype=np.dtype(dtype))


def from_items(items, size, dtype=object):
    # element-wise assignment keeps composite coefficients from being
    # unpacked into a second array dimension
    out = zeros(size, dtype)
    for i, c in enumerate(items[:size]):
        out[i] = c
    return out


def resized(coeffs, size):
    out = zeros(size, coeffs.dtype)
    n = min(size, len(coeffs))
    out[:n] = coeffs[:n]
    return out


def result_dtype(*dtypes):
    if any(np.dtype(d).kind == 'O' for d in dtypes):
        return np.dtype(object)
    return np.result_type(*dtypes)


def truncating_divide(coeffs, scalar):
    """Element-wise integer quotient rounded toward zero."""
    quotient = np.floor_divide(coeffs, scalar)
    remainder = np.subtract(coeffs, np.multiply(scalar, quotient))
    # floor and truncation differ only for inexact quotients of mixed sign
    adjust = (remainder != 0) & (np.less(coeffs, 0) != (scalar < 0))
    return np.where(adjust, quotient + 1, quotient).astype(quotient.dtype)
