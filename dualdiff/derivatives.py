"""Reading, seeding and building derivatives stored in nested dual numbers."""

from __future__ import annotations

import operator
from collections.abc import Iterable
from numbers import Number, Real
from typing import Union

from .dual import Dual

Operand = Union[Dual, Number]


def _lift(value: Number, depth: int) -> Operand:
    """Return ``value`` as a dual number of order ``depth`` with zero derivatives."""
    if depth == 0:
        return value
    return Dual(_lift(value, depth - 1), _lift(0.0, depth - 1))


def _check_order(n: int, highest: int) -> int:
    n = operator.index(n)
    if n < 0 or n > highest:
        raise ValueError(f"derivative order {n} is outside the range 0..{highest}")
    return n


def val(x: Operand) -> Number:
    """Return the innermost plain value of a number or dual number."""
    while isinstance(x, Dual):
        x = x.val
    if not isinstance(x, Number):
        raise TypeError(f"expected a number or a Dual, not {type(x).__name__}")
    return x


def order(x: Operand) -> int:
    """Return the order of ``x``: 0 for a plain number, the nesting depth for a Dual."""
    if isinstance(x, Dual):
        return x.order()
    if isinstance(x, Number):
        return 0
    raise TypeError(f"expected a number or a Dual, not {type(x).__name__}")


def derivative(x: Operand, n: int = 1) -> Number:
    """Return the ``n``-th derivative held in ``x``, following the ``grad`` branch.

    Order 0 is the value itself.  Raises ValueError when ``n`` exceeds the order of ``x``.
    """
    n = _check_order(n, order(x))
    node = x
    for _ in range(n):
        node = node.grad
    return val(node)


def derivatives(x: Operand | Iterable[Operand]) -> list:
    """Return all derivatives of ``x`` from order 0 up to its order.

    For a sequence of dual numbers of equal order, return one list per derivative
    order, each holding that derivative of every item.
    """
    if isinstance(x, (Dual, Number)):
        return [derivative(x, k) for k in range(order(x) + 1)]
    if not isinstance(x, Iterable):
        raise TypeError(f"expected a Dual or a sequence of them, not {type(x).__name__}")
    items = list(x)
    if not items:
        return []
    orders = {order(item) for item in items}
    if len(orders) > 1:
        raise ValueError(f"items have different orders: {sorted(orders)}")
    (highest,) = orders
    return [[derivative(item, k) for item in items] for k in range(highest + 1)]


def seed(x: Dual, n: int, value: Operand) -> None:
    """Set, in place, the node of ``x`` reached at depth ``n`` along the ``val`` branch.

    Depth 0 replaces ``x.val``; depth ``n >= 1`` replaces the ``grad`` of the node
    found after descending ``n - 1`` times through ``val``.  The new node holds
    ``value`` with all its own derivatives set to zero.
    """
    if not isinstance(x, Dual):
        raise TypeError(f"only a Dual can be seeded, not {type(x).__name__}")
    highest = x.order()
    n = _check_order(n, highest)
    plain = val(value)
    if n == 0:
        x.val = _lift(plain, highest - 1)
        return
    node = x
    for _ in range(n - 1):
        node = node.val
    node.grad = _lift(plain, highest - n)


def higher_order_dual(n: int, value: Number = 0.0) -> Operand:
    """Return a dual number of order ``n`` holding ``value`` with zero derivatives."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"order must be non-negative, got {n}")
    if not isinstance(value, Number):
        raise TypeError(f"value must be a number, not {type(value).__name__}")
    return _lift(value, n)


def _repr_part(x: Operand) -> str:
    if isinstance(x, Dual):
        return f"({_repr_part(x.val)}, {_repr_part(x.grad)})"
    if isinstance(x, Real):
        return format(x, "g")
    return str(x)


def repr_dual(x: Dual) -> str:
    """Return a text form showing every value and derivative of a dual number."""
    if not isinstance(x, Dual):
        raise TypeError(f"expected a Dual, not {type(x).__name__}")
    return "dualdiff.dual" + _repr_part(x)