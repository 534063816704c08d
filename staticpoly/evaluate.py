"""Horner evaluation of coefficient arrays."""


def evaluate_polynomial(coeffs, z):
    """
    Evaluate ``sum(coeffs[i] * z**i)`` by Horner's rule.

    Coefficients are promoted to the type of the point by the arithmetic
    itself, so integer coefficients evaluated at a float give a float, and a
    numpy array of points is evaluated element-wise.
    """
    n = len(coeffs)
    if n == 0:
        raise ValueError("cannot evaluate an empty coefficient sequence")
    total = z * 0 + coeffs[n - 1]
    for i in range(n - 2, -1, -1):
        total = total * z + coeffs[i]
    return total
