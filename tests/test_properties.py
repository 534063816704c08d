"""Algebraic laws checked on random polynomials."""

from hypothesis import given
from hypothesis import strategies as st

from staticpoly import Poly, power

integers = st.integers(min_value=-20, max_value=20)
integer_polys = st.lists(integers, max_size=6).map(Poly)
nonzero_integer_polys = integer_polys.filter(bool)
rational_polys = st.lists(
    st.fractions(min_value=-10, max_value=10, max_denominator=10), max_size=5
).map(Poly)
nonzero_rational_polys = rational_polys.filter(bool)


@given(integer_polys, integer_polys)
def test_addition_commutes(a, b):
    assert a + b == b + a


@given(integer_polys, integer_polys, integer_polys)
def test_multiplication_associates(a, b, c):
    assert (a * b) * c == a * (b * c)


@given(integer_polys, integer_polys, integer_polys)
def test_distributive(a, b, c):
    assert a * (b + c) == a * b + a * c


@given(integer_polys)
def test_additive_inverse(a):
    assert not a - a
    assert -(-a) == a


@given(integer_polys, integer_polys)
def test_degree_of_product(a, b):
    if a and b:
        assert (a * b).degree() == a.degree() + b.degree()
    else:
        assert not a * b


@given(integer_polys, integer_polys)
def test_degree_of_sum(a, b):
    assert (a + b).degree() <= max(a.degree(), b.degree())


@given(integer_polys, nonzero_integer_polys)
def test_pseudo_division_identity(a, b):
    q, r = divmod(a, b)
    m, n = a.degree(), b.degree()
    scale = b[n] ** max(m - n + 1, 0)
    assert a * scale == q * b + r
    assert r.degree() < n or not r


@given(rational_polys, nonzero_rational_polys)
def test_field_division_identity(a, b):
    q, r = divmod(a, b)
    assert a == q * b + r
    assert r.degree() < b.degree() or not r


@given(rational_polys, nonzero_rational_polys)
def test_exact_quotient(a, b):
    assert (a * b) / b == a


@given(integer_polys, integer_polys, integers)
def test_evaluation_is_a_homomorphism(a, b, z):
    assert (a + b)(z) == a(z) + b(z)
    assert (a * b)(z) == a(z) * b(z)


@given(integer_polys, integer_polys)
def test_composition_agrees_with_evaluation(a, b):
    assert a(b)(3) == a(b(3))


@given(integer_polys, st.integers(min_value=1, max_value=4))
def test_power_is_repeated_product(a, k):
    assert power(a, 0) == 1
    assert a ** k == a * a ** (k - 1)


@given(integer_polys, integer_polys, st.integers(min_value=0, max_value=3))
def test_headroom_does_not_change_values(a, b, extra):
    widened = Poly(a, size=a.size + extra)
    assert widened == a
    assert widened + b == a + b
    assert widened * b == a * b
    if b:
        assert divmod(widened, b) == divmod(a, b)
        assert divmod(b, Poly(b, size=b.size + extra)) == divmod(b, b)


@given(integer_polys, integer_polys)
def test_ordering_trichotomy(a, b):
    assert [a < b, a == b, b < a].count(True) == 1


@given(integer_polys, integer_polys, integer_polys)
def test_ordering_transitive(a, b, c):
    if a < b and b < c:
        assert a < c
