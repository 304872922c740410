"""Trigonometric and hyperbolic functions for plain numbers and dual numbers.

Each function accepts a plain number or a :class:`~dualdiff.dual.Dual` of any
order.  For a dual number the value is transformed and its derivative is
multiplied by the derivative of the function, evaluated recursively so that
nested dual numbers carry correct higher derivatives.
"""

from __future__ import annotations

import cmath
import math
from numbers import Number, Real
from typing import Callable, Union

from .dual import Dual

Operand = Union[Dual, Number]


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
    raise TypeError(f"expected a number or a Dual, not {type(x).__name__}")


def _require_number(x: object) -> None:
    if not isinstance(x, (Dual, Number)):
        raise TypeError(f"expected a number or a Dual, not {type(x).__name__}")


def _sqrt(x: Operand) -> Operand:
    if isinstance(x, Dual):
        root = _sqrt(x.val)
        return Dual(root, x.grad * (0.5 / root))
    return _scalar(x, math.sqrt, cmath.sqrt)


def sin(x: Operand) -> Operand:
    """Return the sine of ``x``."""
    if isinstance(x, Dual):
        return Dual(sin(x.val), x.grad * cos(x.val))
    return _scalar(x, math.sin, cmath.sin)


def cos(x: Operand) -> Operand:
    """Return the cosine of ``x``."""
    if isinstance(x, Dual):
        return Dual(cos(x.val), x.grad * -sin(x.val))
    return _scalar(x, math.cos, cmath.cos)


def tan(x: Operand) -> Operand:
    """Return the tangent of ``x``."""
    if isinstance(x, Dual):
        aux = 1 / cos(x.val)
        return Dual(tan(x.val), x.grad * (aux * aux))
    return _scalar(x, math.tan, cmath.tan)


def asin(x: Operand) -> Operand:
    """Return the arc sine of ``x``."""
    if isinstance(x, Dual):
        aux = 1 / _sqrt(1.0 - x.val * x.val)
        return Dual(asin(x.val), x.grad * aux)
    return _scalar(x, math.asin, cmath.asin)


def acos(x: Operand) -> Operand:
    """Return the arc cosine of ``x``."""
    if isinstance(x, Dual):
        aux = -1 / _sqrt(1.0 - x.val * x.val)
        return Dual(acos(x.val), x.grad * aux)
    return _scalar(x, math.acos, cmath.acos)


def atan(x: Operand) -> Operand:
    """Return the arc tangent of ``x``."""
    if isinstance(x, Dual):
        aux = 1 / (1.0 + x.val * x.val)
        return Dual(atan(x.val), x.grad * aux)
    return _scalar(x, math.atan, cmath.atan)


def atan2(y: Operand, x: Operand) -> Operand:
    """Return the angle of the point ``(x, y)``, as ``math.atan2(y, x)`` does."""
    _require_number(y)
    _require_number(x)
    y_dual, x_dual = isinstance(y, Dual), isinstance(x, Dual)
    if y_dual and x_dual:
        if y.order() != x.order():
            raise TypeError(
                f"cannot combine dual numbers of order {y.order()} and {x.order()}"
            )
        yv, xv = y.val, x.val
        grad = (xv * y.grad - yv * x.grad) / (yv * yv + xv * xv)
        return Dual(atan2(yv, xv), grad)
    if x_dual:
        xv = x.val
        grad = -y / (y * y + xv * xv) * x.grad
        return Dual(atan2(y, xv), grad)
    if y_dual:
        yv = y.val
        grad = x / (yv * yv + x * x) * y.grad
        return Dual(atan2(yv, x), grad)
    if not (isinstance(y, Real) and isinstance(x, Real)):
        raise TypeError("atan2 requires real arguments")
    return math.atan2(y, x)


def sinh(x: Operand) -> Operand:
    """Return the hyperbolic sine of ``x``."""
    if isinstance(x, Dual):
        return Dual(sinh(x.val), x.grad * cosh(x.val))
    return _scalar(x, math.sinh, cmath.sinh)


def cosh(x: Operand) -> Operand:
    """Return the hyperbolic cosine of ``x``."""
    if isinstance(x, Dual):
        return Dual(cosh(x.val), x.grad * sinh(x.val))
    return _scalar(x, math.cosh, cmath.cosh)


def tanh(x: Operand) -> Operand:
    """Return the hyperbolic tangent of ``x``."""
    if isinstance(x, Dual):
        aux = 1 / cosh(x.val)
        return Dual(tanh(x.val), x.grad * (aux * aux))
    return _scalar(x, math.tanh, cmath.tanh)


def hypot(*args: Operand) -> Operand:
    """Return the Euclidean norm of the arguments, any of which may be dual numbers."""
    if not args:
        raise TypeError("hypot requires at least one argument")
    for arg in args:
        _require_number(arg)
    duals = [arg for arg in args if isinstance(arg, Dual)]
    if not duals:
        if not all(isinstance(arg, Real) for arg in args):
            raise TypeError("hypot requires real arguments")
        return math.hypot(*args)
    orders = {d.order() for d in duals}
    if len(orders) > 1:
        raise TypeError(f"cannot combine dual numbers of orders {sorted(orders)}")
    value = hypot(*(arg.val if isinstance(arg, Dual) else arg for arg in args))
    weighted = sum(d.grad * d.val for d in duals[1:]) if len(duals) > 1 else 0.0
    weighted = duals[0].grad * duals[0].val + weighted
    return Dual(value, weighted / value)