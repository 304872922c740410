"""Exponential, logarithmic, power and other elementary functions for dual numbers.

Each function accepts a plain number or a :class:`~dualdiff.dual.Dual` of any
order.  For a dual number the value is transformed and the derivative is scaled
by the derivative of the function.  That derivative is evaluated recursively,
so nested dual numbers carry correct higher derivatives.
"""

from __future__ import annotations

import builtins
import cmath
import math
from numbers import Number, Real
from typing import Callable, Union

from .derivatives import higher_order_dual, order
from .dual import Dual

Operand = Union[Dual, Number]

LN10 = 2.3025850929940456840179914546843
"""The natural logarithm of 10."""

SQRT_PI = 1.7724538509055160272981674833411451872554456638435
"""The square root of pi."""


def _scalar(
    x: object,
    real_fn: Callable[[float], float],
    complex_fn: Callable[[complex], complex] | None = None,
) -> Number:
    """Apply a plain math function, choosing the complex variant for complex input."""
    if isinstance(x, Real):
        return real_fn(x)
    if isinstance(x, complex) and complex_fn is not None:
        return complex_fn(x)
    raise TypeError(f"expected a real number or a Dual, not {type(x).__name__}")


def _require_number(x: object) -> None:
    if not isinstance(x, (Dual, Number)):
        raise TypeError(f"expected a number or a Dual, not {type(x).__name__}")


def exp(x: Operand) -> Operand:
    """Return e raised to the power ``x``."""
    if isinstance(x, Dual):
        value = exp(x.val)
        return Dual(value, x.grad * value)
    return _scalar(x, math.exp, cmath.exp)


def log(x: Operand) -> Operand:
    """Return the natural logarithm of ``x``."""
    if isinstance(x, Dual):
        return Dual(log(x.val), x.grad * (1 / x.val))
    return _scalar(x, math.log, cmath.log)


def log10(x: Operand) -> Operand:
    """Return the base-10 logarithm of ``x``."""
    if isinstance(x, Dual):
        return Dual(log10(x.val), x.grad * (1 / (LN10 * x.val)))
    return _scalar(x, math.log10, cmath.log10)


def sqrt(x: Operand) -> Operand:
    """Return the square root of ``x``."""
    if isinstance(x, Dual):
        root = sqrt(x.val)
        return Dual(root, x.grad * (0.5 / root))
    return _scalar(x, math.sqrt, cmath.sqrt)


def pow(base: Operand, exponent: Operand) -> Operand:
    """Return ``base`` raised to ``exponent``; either may be a dual number."""
    _require_number(base)
    _require_number(exponent)
    if isinstance(base, Dual) or isinstance(exponent, Dual):
        return base**exponent
    if isinstance(base, Real) and isinstance(exponent, Real):
        return math.pow(base, exponent)
    return base**exponent


def abs(x: Operand) -> Operand:
    """Return the absolute value of ``x``; the derivative at zero is zero."""
    if isinstance(x, Dual):
        v = x.val
        sign = -1.0 if v < 0 else (1.0 if v > 0 else 0.0)
        return Dual(abs(v), x.grad * sign)
    _require_number(x)
    return builtins.abs(x)


def abs2(x: Operand) -> Operand:
    """Return the square of ``x``."""
    _require_number(x)
    return x * x


def conj(x: Operand) -> Operand:
    """Return the complex conjugate; a dual number is returned unchanged."""
    if isinstance(x, Dual):
        return x
    _require_number(x)
    return x.conjugate()


def real(x: Operand) -> Operand:
    """Return the real part; a dual number is returned unchanged."""
    if isinstance(x, Dual):
        return x
    _require_number(x)
    return x.real


def imag(x: Operand) -> Number:
    """Return the imaginary part; for a dual number this is always 0.0."""
    if isinstance(x, Dual):
        return 0.0
    _require_number(x)
    return x.imag


def erf(x: Operand) -> Operand:
    """Return the error function of ``x``."""
    if isinstance(x, Dual):
        v = x.val
        factor = 2.0 * exp(-v * v) / SQRT_PI
        return Dual(erf(v), x.grad * factor)
    if isinstance(x, Real):
        return math.erf(x)
    raise TypeError(f"erf requires a real number or a Dual, not {type(x).__name__}")


def _select(a: Operand, b: Operand, take_first: bool) -> Operand:
    """Return the chosen operand, raised to the common order of both operands."""
    a_order, b_order = order(a), order(b)
    if isinstance(a, Dual) and isinstance(b, Dual) and a_order != b_order:
        raise TypeError(f"cannot combine dual numbers of order {a_order} and {b_order}")
    target = a_order if a_order else b_order
    chosen = a if take_first else b
    if isinstance(chosen, Dual):
        return chosen.copy()
    return higher_order_dual(target, chosen)


def min(a: Operand, b: Operand) -> Operand:
    """Return the smaller of ``a`` and ``b`` by value; ``a`` wins ties."""
    _require_number(a)
    _require_number(b)
    return _select(a, b, a <= b)


def max(a: Operand, b: Operand) -> Operand:
    """Return the larger of ``a`` and ``b`` by value; ``a`` wins ties."""
    _require_number(a)
    _require_number(b)
    return _select(a, b, a >= b)