import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dualdiff.derivatives import derivative
from dualdiff.dual import Dual
from dualdiff.explog import (
    abs,
    abs2,
    conj,
    erf,
    exp,
    imag,
    log,
    log10,
    max,
    min,
    pow,
    real,
    sqrt,
)

LN10 = 2.302585092994046
PI = 3.14159265359


def leaves(x):
    if isinstance(x, Dual):
        return leaves(x.val) + leaves(x.grad)
    return [x]


def assert_close(a, b):
    la, lb = leaves(a), leaves(b)
    assert len(la) == len(lb)
    for p, q in zip(la, lb):
        assert p == pytest.approx(q, rel=1e-10, abs=1e-12)


def second_order():
    return Dual(Dual(0.5, 3.0), Dual(-5.0, 11.0))


def third_order():
    return Dual(second_order(), Dual(Dual(0.7, -1.0), Dual(2.0, 0.3)))


@pytest.fixture(params=[second_order, third_order])
def x(request):
    return request.param()


def test_exp_first_order_rule():
    x = Dual(0.5, 3.0)
    y = exp(x)
    assert y.val == pytest.approx(math.exp(0.5))
    assert y.grad == pytest.approx(3.0 * y.val)


def test_log_first_order_rule():
    x = Dual(0.5, 3.0)
    y = log(x)
    assert y.val == pytest.approx(math.log(0.5))
    assert y.grad == pytest.approx(3.0 / 0.5)


def test_exp_log_round_trip(x):
    assert_close(exp(log(x)), x)


def test_log10_matches_scaled_log(x):
    assert_close(log10(x), log(x) / LN10)


def test_sqrt_matches_exp_half_log(x):
    assert_close(sqrt(x), exp(0.5 * log(x)))


def test_pow_dual_dual(x):
    assert_close(pow(x, x), exp(x * log(x)))


def test_pow_dual_number(x):
    assert_close(pow(x, PI), exp(PI * log(x)))


def test_pow_number_dual(x):
    assert_close(pow(PI, x), exp(x * log(PI)))


def test_second_derivative_of_exp():
    x = Dual(Dual(1.3, 1.0), Dual(1.0, 0.0))
    assert derivative(exp(x), 2) == pytest.approx(math.exp(1.3))


def test_pow_plain_numbers():
    assert pow(2.0, 3.0) == 8.0
    assert pow(4, 0.5) == 2.0


def test_pow_mismatched_orders_raises():
    with pytest.raises(TypeError):
        pow(Dual(1.0, 1.0), second_order())


def test_abs_negative_flips_derivative():
    y = abs(Dual(-2.0, 3.0))
    assert y.val == 2.0
    assert y.grad == -3.0


def test_abs_positive_keeps_derivative():
    y = abs(Dual(0.5, 3.0))
    assert y.val == 0.5
    assert y.grad == 3.0


def test_abs_at_zero_has_zero_derivative():
    assert abs(Dual(0.0, 3.0)).grad == 0.0


def test_abs_of_negated_equals_abs(x):
    assert_close(abs(-x), abs(x))


def test_abs2_is_square(x):
    assert_close(abs2(x), x * x)


def test_conj_real_imag_of_dual():
    d = Dual(1.5, 2.0)
    assert conj(d) is d
    assert real(d) is d
    assert imag(d) == 0.0


def test_conj_real_imag_of_complex():
    z = complex(1.0, 2.0)
    assert conj(z) == complex(1.0, -2.0)
    assert real(z) == 1.0
    assert imag(z) == 2.0


def test_erf_value_and_finite_difference():
    v, h = 0.4, 1e-6
    y = erf(Dual(v, 1.0))
    assert y.val == pytest.approx(math.erf(v))
    numeric = (math.erf(v + h) - math.erf(v - h)) / (2 * h)
    assert y.grad == pytest.approx(numeric, rel=1e-6)


def test_erf_complex_raises():
    with pytest.raises(TypeError):
        erf(complex(1.0, 1.0))


def test_exp_rejects_non_number():
    with pytest.raises(TypeError):
        exp("a")


def test_complex_dual_log():
    y = log(Dual(complex(2.0, 0.0), complex(1.0, 0.0)))
    assert y.grad == pytest.approx(complex(0.5, 0.0))


def test_min_max_between_duals():
    x = Dual(0.5, 3.0)
    y = Dual(4.5, 3.0)
    assert leaves(min(x, y)) == leaves(x)
    assert leaves(min(y, x)) == leaves(x)
    assert leaves(max(x, y)) == leaves(y)
    assert leaves(max(y, x)) == leaves(y)


def test_min_max_with_numbers():
    x = Dual(0.5, 3.0)
    assert leaves(min(x, 0.1)) == [0.1, 0.0]
    assert leaves(min(0.2, x)) == [0.2, 0.0]
    assert leaves(max(8.5, x)) == [8.5, 0.0]
    assert leaves(max(x, 8.5)) == [8.5, 0.0]
    assert leaves(min(x, 3.5)) == leaves(x)
    assert leaves(max(x, 0.1)) == leaves(x)
    assert min(0.5, x) == x
    assert max(x, 0.5) == x


def test_min_returns_independent_copy():
    x = Dual(0.5, 3.0)
    z = min(x, 1.0)
    z.grad = 9.0
    assert x.grad == 3.0


def test_min_mismatched_orders_raises():
    with pytest.raises(TypeError):
        min(Dual(1.0, 1.0), second_order())


@given(st.floats(min_value=0.01, max_value=50.0), st.floats(min_value=-5.0, max_value=5.0))
def test_sqrt_squared_round_trip(v, g):
    r = sqrt(Dual(v, g))
    back = r * r
    assert back.val == pytest.approx(v, rel=1e-12)
    assert back.grad == pytest.approx(g, rel=1e-9, abs=1e-12)


@given(st.floats(min_value=-10.0, max_value=10.0), st.floats(min_value=-10.0, max_value=10.0))
def test_min_never_exceeds_max(a, b):
    lo = min(Dual(a, 1.0), Dual(b, 2.0))
    hi = max(Dual(a, 1.0), Dual(b, 2.0))
    assert lo <= hi
    assert lo.val in (a, b)