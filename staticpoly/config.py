"""
Numerical tolerances for the coefficient predicates.

Floating point coefficients pick up rounding noise (the cyclotomic
polynomials built from complex roots of unity are a typical example), so
``is_zero`` and ``is_one`` treat values within a small tolerance as exact.
The thresholds live in an immutable ``Tolerance`` that is passed explicitly
to the predicates and the printer; the library keeps no global settings.
"""

import math
import numbers
from dataclasses import dataclass, fields, replace

from staticpoly.errors import ConfigurationError


@dataclass(frozen=True)
class Tolerance:
    """
    Thresholds for tolerant comparisons of real components.

    Exact coefficient types (integers, rationals, prime field elements)
    ignore these values.
    """

    absolute_epsilon: float = 1e-11
    """Magnitude below which a real component counts as zero."""

    relative_epsilon: float = 1e-11
    """Relative difference from 1 below which a real component counts as one."""

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if (not isinstance(value, numbers.Real) or isinstance(value, bool)
                    or not math.isfinite(value) or value < 0):
                raise ConfigurationError(
                    f"{f.name} must be a finite non-negative number, got {value!r}")

    @classmethod
    def from_options(cls, options):
        """Build a tolerance from a mapping of recognized option names."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(
                f"unknown tolerance option(s) {', '.join(unknown)}; "
                f"expected one of {', '.join(sorted(known))}")
        return cls(**options)

    def replace(self, **changes):
        return replace(self, **changes)


DEFAULT_TOLERANCE = Tolerance()
