"""
Human-readable polynomial formatting.

Terms are written from the highest degree down::

    x^3 - x^2 + x - 1

A unit coefficient on a non-constant term is omitted (``-`` for minus one),
zero terms are skipped, and negative coefficients are written as ``" - "``
followed by their magnitude. The sign and unit decisions go through the
tolerant predicates in ``staticpoly.traits``, so real, complex and
hyper-complex coefficients all print sensibly.
"""

from functools import singledispatch

import numpy as np

from staticpoly.config import DEFAULT_TOLERANCE
from staticpoly.traits import is_negative, is_one, is_zero, negate


def xpow(i, var='x'):
    if i == 0:
        return ''
    if i == 1:
        return var
    return f'{var}^{i}'


def latex_xpow(i, var='x'):
    if i == 0:
        return ''
    if i == 1:
        return var
    return f'{var}^{{{i}}}'


@singledispatch
def format_coefficient(value, tolerance=DEFAULT_TOLERANCE):
    return str(value)


@format_coefficient.register(complex)
@format_coefficient.register(np.complexfloating)
def _(value, tolerance=DEFAULT_TOLERANCE):
    real, imag = value.real, value.imag
    if is_zero(real, tolerance):
        if is_zero(imag, tolerance):
            return '0'
        return unit_prefix(imag, tolerance) + 'j'
    if is_zero(imag, tolerance):
        return format_coefficient(real, tolerance)
    if imag < 0:
        return f'({format_coefficient(real, tolerance)} - {unit_prefix(-imag, tolerance)}j)'
    return f'({format_coefficient(real, tolerance)} + {unit_prefix(imag, tolerance)}j)'


def unit_prefix(value, tolerance=DEFAULT_TOLERANCE):
    """Coefficient text in front of a power of x: '' for one, '-' for minus one."""
    if is_one(negate(value), tolerance):
        return '-'
    if is_one(value, tolerance):
        return ''
    return format_coefficient(value, tolerance)


def _render(poly, var, tolerance, power):
    coeffs = poly.coeffs
    i = poly.degree()
    if i == -1:
        return '0'
    if i == 0:
        return format_coefficient(coeffs[0], tolerance)

    parts = [unit_prefix(coeffs[i], tolerance) + power(i, var)]
    for k in range(i - 1, 0, -1):
        c = coeffs[k]
        if is_negative(c, tolerance):
            parts.append(' - ' + unit_prefix(negate(c), tolerance) + power(k, var))
        elif not is_zero(c, tolerance):
            parts.append(' + ' + unit_prefix(c, tolerance) + power(k, var))

    c = coeffs[0]
    if is_negative(c, tolerance):
        parts.append(' - ' + format_coefficient(negate(c), tolerance))
    elif not is_zero(c, tolerance):
        parts.append(' + ' + format_coefficient(c, tolerance))
    return ''.join(parts)


def format_poly(poly, var='x', tolerance=DEFAULT_TOLERANCE):
    return _render(poly, var, tolerance, xpow)


def latex_poly(poly, var='x', tolerance=DEFAULT_TOLERANCE):
    return f'${_render(poly, var, tolerance, latex_xpow)}$'
