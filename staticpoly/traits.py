"""
Coefficient capability predicates.

The algorithms never inspect coefficient types directly. They ask these
functions instead:

- ``is_integer_like`` picks pseudo-division over exact division;
- ``is_zero`` / ``is_one`` / ``is_negative`` drive the printer;
- ``negate`` is the additive inverse.

All but ``is_integer_like`` are ``functools.singledispatch`` functions, so a
new coefficient domain plugs in by registering its own implementation.
Exact types (integers, rationals) compare exactly, real types use the
absolute/relative thresholds of a ``Tolerance``, complex values are checked
component-wise, and any value exposing a ``components`` sequence is treated
as hyper-complex (quaternions, octonions).
"""

import math
import numbers
from functools import singledispatch

import numpy as np

from staticpoly.config import DEFAULT_TOLERANCE


def is_integer_like(ctype):
    """
    True if coefficients of ``ctype`` only admit truncating division.

    ``ctype`` is a Python type or a numpy dtype. A class attribute
    ``is_integer_like`` overrides the default, which is "subclass of
    numbers.Integral". Object dtypes cannot be judged without looking at the
    values and report False.
    """
    if isinstance(ctype, np.dtype):
        return ctype.kind in 'iu'
    flag = getattr(ctype, 'is_integer_like', None)
    if isinstance(flag, bool):
        return flag
    return isinstance(ctype, type) and issubclass(ctype, numbers.Integral)


def relative_difference(a, b):
    a, b = float(a), float(b)
    if not (math.isfinite(a) and math.isfinite(b)):
        return math.inf
    smaller = min(abs(a), abs(b))
    if smaller == 0:
        return 0.0 if a == b else math.inf
    return abs(a - b) / smaller


def _components(value):
    components = getattr(value, 'components', None)
    if components is None or callable(components):
        return None
    return list(components)


@singledispatch
def is_zero(value, tolerance=DEFAULT_TOLERANCE):
    components = _components(value)
    if components is not None:
        return all(is_zero(c, tolerance) for c in components)
    return value == 0


@is_zero.register(numbers.Rational)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return value == 0


@is_zero.register(numbers.Real)
def _(value, tolerance=DEFAULT_TOLERANCE):
    value = float(value)
    # zero, subnormal, NaN and infinity all print as zero
    if not math.isfinite(value):
        return True
    return abs(value) < tolerance.absolute_epsilon


@is_zero.register(numbers.Complex)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return is_zero(value.real, tolerance) and is_zero(value.imag, tolerance)


@singledispatch
def is_one(value, tolerance=DEFAULT_TOLERANCE):
    components = _components(value)
    if components is not None:
        if not components:
            return False
        first, *rest = components
        return is_one(first, tolerance) and all(is_zero(c, tolerance) for c in rest)
    return value == 1


@is_one.register(numbers.Rational)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return value == 1


@is_one.register(numbers.Real)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return relative_difference(1.0, value) < tolerance.relative_epsilon


@is_one.register(numbers.Complex)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return is_one(value.real, tolerance) and is_zero(value.imag, tolerance)


def _is_negative_components(components, tolerance):
    # the first non-zero component is negative and negatives are the majority
    nonzero = [c for c in components if not is_zero(c, tolerance)]
    if not nonzero:
        return False
    negatives = sum(1 for c in nonzero if c < 0)
    positives = sum(1 for c in nonzero if c > 0)
    return nonzero[0] < 0 and negatives >= positives


@singledispatch
def is_negative(value, tolerance=DEFAULT_TOLERANCE):
    """Sign test used by the printer to choose between " + " and " - "."""
    components = _components(value)
    if components is not None:
        return _is_negative_components(components, tolerance)
    try:
        return bool(value < 0) and not is_zero(value, tolerance)
    except TypeError:
        # unordered domain: every coefficient is printed with " + "
        return False


@is_negative.register(numbers.Real)
def _(value, tolerance=DEFAULT_TOLERANCE):
    return value < 0 and not is_zero(value, tolerance)


@is_negative.register(numbers.Complex)
def _(value, tolerance=DEFAULT_TOLERANCE):
    real, imag = value.real, value.imag
    if not is_zero(real, tolerance):
        return real < 0
    return imag < 0 and not is_zero(imag, tolerance)


@singledispatch
def negate(value):
    return -value
