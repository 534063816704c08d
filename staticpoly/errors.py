"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base class for errors raised by staticpoly."""


class ZeroDivisorError(PolynomialError, ZeroDivisionError):
    """Division by the zero polynomial.

    Raised before any coefficient arithmetic takes place.
    """


class NegativeExponentError(PolynomialError, ValueError):
    """A polynomial was raised to a negative power."""


class LossyResizeError(PolynomialError, ValueError):
    """A non-lossy resize would drop non-zero high-order terms.

    Use ``Poly.truncate_to`` when dropping those terms is intended.
    """


class ConfigurationError(PolynomialError, ValueError):
    """Invalid tolerance options."""
