"""Dual numbers for forward-mode automatic differentiation.

A :class:`Dual` carries a value and the derivative of that value along one
direction.  Both parts may themselves be dual numbers, which gives the nested
higher-order dual numbers used for second and higher derivatives.
"""

from __future__ import annotations

import cmath
import math
from numbers import Number, Real
from typing import Union

Operand = Union["Dual", Number]


def _order(x: Operand) -> int:
    """Return the nesting depth of ``x``: 0 for a plain number."""
    return x.order() if isinstance(x, Dual) else 0


def _value(x: Operand) -> Number:
    """Return the innermost plain value of ``x``."""
    while isinstance(x, Dual):
        x = x.val
    return x


def _lift(value: Number, order: int) -> Operand:
    """Turn a plain number into a dual number of the given order with zero derivatives."""
    if order == 0:
        return value
    return Dual(_lift(value, order - 1), _lift(0.0, order - 1))


def _scalar_pow(base: Number, exponent: Number) -> Number:
    if isinstance(base, Real) and isinstance(exponent, Real):
        return math.pow(base, exponent)
    return base**exponent


def _pow(base: Operand, exponent: Operand) -> Operand:
    if isinstance(base, Dual) or isinstance(exponent, Dual):
        return base**exponent
    return _scalar_pow(base, exponent)


def _log(x: Operand) -> Operand:
    if isinstance(x, Dual):
        return Dual(_log(x.val), x.grad * (1 / x.val))
    if isinstance(x, complex):
        return cmath.log(x)
    return math.log(x)


def _check_orders(a: "Dual", b: "Dual") -> None:
    if a.order() != b.order():
        raise TypeError(
            f"cannot combine dual numbers of order {a.order()} and {b.order()}"
        )


def _plain(other: object) -> Number | None:
    """Return the comparable plain value of ``other``, or None if it is not a number."""
    if isinstance(other, Dual):
        return _value(other)
    if isinstance(other, Number):
        return other
    return None


class Dual:
    """A number paired with its derivative: ``val + grad·ε`` with ``ε² = 0``."""

    __slots__ = ("val", "grad")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, val: Operand = 0.0, grad: Operand = 0.0) -> None:
        for name, part in (("val", val), ("grad", grad)):
            if not isinstance(part, (Dual, Number)):
                raise TypeError(
                    f"{name} must be a number or a Dual, not {type(part).__name__}"
                )
        val_order, grad_order = _order(val), _order(grad)
        if val_order != grad_order:
            if val_order == 0:
                val = _lift(val, grad_order)
            elif grad_order == 0:
                grad = _lift(grad, val_order)
            else:
                raise TypeError(
                    f"val and grad have different orders ({val_order} and {grad_order})"
                )
        self.val = val
        self.grad = grad

    # Unary operators -------------------------------------------------------------

    def __pos__(self) -> Dual:
        return self

    def __neg__(self) -> Dual:
        return Dual(-self.val, -self.grad)

    # Addition and subtraction -----------------------------------------------------

    def __add__(self, other: Operand) -> Dual:
        if isinstance(other, Dual):
            _check_orders(self, other)
            return Dual(self.val + other.val, self.grad + other.grad)
        if isinstance(other, Number):
            return Dual(self.val + other, self.grad)
        return NotImplemented

    def __radd__(self, other: Operand) -> Dual:
        if isinstance(other, Number):
            return Dual(other + self.val, self.grad)
        return NotImplemented

    def __sub__(self, other: Operand) -> Dual:
        if isinstance(other, Dual):
            _check_orders(self, other)
            return Dual(self.val - other.val, self.grad - other.grad)
        if isinstance(other, Number):
            return Dual(self.val - other, self.grad)
        return NotImplemented

    def __rsub__(self, other: Operand) -> Dual:
        if isinstance(other, Number):
            return Dual(other - self.val, -self.grad)
        return NotImplemented

    # Multiplication and division --------------------------------------------------

    def __mul__(self, other: Operand) -> Dual:
        if isinstance(other, Dual):
            _check_orders(self, other)
            return Dual(
                self.val * other.val,
                self.grad * other.val + self.val * other.grad,
            )
        if isinstance(other, Number):
            return Dual(self.val * other, self.grad * other)
        return NotImplemented

    def __rmul__(self, other: Operand) -> Dual:
        if isinstance(other, Number):
            return Dual(other * self.val, other * self.grad)
        return NotImplemented

    def __truediv__(self, other: Operand) -> Dual:
        if isinstance(other, Dual):
            _check_orders(self, other)
            aux = 1 / other.val
            val = self.val * aux
            return Dual(val, (self.grad - val * other.grad) * aux)
        if isinstance(other, Number):
            return Dual(self.val / other, self.grad / other)
        return NotImplemented

    def __rtruediv__(self, other: Operand) -> Dual:
        if isinstance(other, Number):
            inverse = 1 / self.val
            grad = self.grad * -(inverse * inverse)
            return Dual(inverse * other, grad * other)
        return NotImplemented

    # Powers -----------------------------------------------------------------------

    def __pow__(self, other: Operand) -> Dual:
        if isinstance(other, Dual):
            _check_orders(self, other)
            aux1 = _pow(self.val, other.val)
            aux2 = _log(self.val)
            grad = (self.grad * (other.val / self.val) + aux2 * other.grad) * aux1
            return Dual(aux1, grad)
        if isinstance(other, Number):
            aux = _pow(self.val, other - 1)
            return Dual(aux * self.val, self.grad * (other * aux))
        return NotImplemented

    def __rpow__(self, other: Operand) -> Dual:
        if isinstance(other, Number):
            val = _pow(other, self.val)
            return Dual(val, _log(other) * self.grad * val)
        return NotImplemented

    # Comparisons act on the innermost value only ----------------------------------

    def __eq__(self, other: object) -> bool:
        value = _plain(other)
        if value is None:
            return NotImplemented
        return _value(self) == value

    def __lt__(self, other: Operand) -> bool:
        value = _plain(other)
        if value is None:
            return NotImplemented
        return _value(self) < value

    def __le__(self, other: Operand) -> bool:
        value = _plain(other)
        if value is None:
            return NotImplemented
        return _value(self) <= value

    def __gt__(self, other: Operand) -> bool:
        value = _plain(other)
        if value is None:
            return NotImplemented
        return _value(self) > value

    def __ge__(self, other: Operand) -> bool:
        value = _plain(other)
        if value is None:
            return NotImplemented
        return _value(self) >= value

    # Conversions ------------------------------------------------------------------

    def __float__(self) -> float:
        return float(_value(self))

    def __repr__(self) -> str:
        return f"Dual({self.val!r}, {self.grad!r})"

    def __str__(self) -> str:
        return str(self.val)

    def copy(self) -> Dual:
        """Return an independent deep copy of this dual number."""
        val = self.val.copy() if isinstance(self.val, Dual) else self.val
        grad = self.grad.copy() if isinstance(self.grad, Dual) else self.grad
        return Dual(val, grad)

    def order(self) -> int:
        """Return the order of this dual number: 1 plus the order of its value."""
        return 1 + _order(self.val)