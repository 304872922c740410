# dualdiff

Forward-mode automatic differentiation in plain Python, built on dual numbers.

A `Dual` holds a value (`val`) and a derivative (`grad`). Both parts can be
duals themselves. Nesting them this way gives dual numbers of higher order,
which carry second and higher derivatives, cross derivatives included.
Arithmetic operators (`+`, `-`, `*`, `/`, `**`) and a set of elementary
functions pass derivatives through your calculations.

## Installation

```
pip install dualdiff
```

The package uses only the standard library. To run the tests, install the
`test` extra and run pytest:

```
pip install "dualdiff[test]"
pytest
```

## First derivatives

Give an input a gradient of 1 and evaluate your function. The gradient of the
result is then the derivative.

```python
from dualdiff.dual import Dual
from dualdiff.explog import log
from dualdiff.derivatives import val, derivative

def f(x):
    return 1 + x + x * x + 1 / x + log(x)

x = Dual(2.0, 1.0)
u = f(x)
print(val(u))            # value of f at 2
print(derivative(u, 1))  # df/dx at 2
```

With several variables, give a gradient of 1 only to the variable you
differentiate with respect to:

```python
from dualdiff.dual import Dual
from dualdiff.explog import exp
from dualdiff.derivatives import derivative

def f(x, y, z):
    return 1 + x + y + z + x * y + y * z + x * z + x * y * z + exp(x / y + y / z)

dudy = derivative(f(Dual(1.0, 0.0), Dual(2.0, 1.0), Dual(3.0, 0.0)), 1)
```

## Higher orders

- `higher_order_dual(n, value)` builds a dual of order `n` with every
  derivative set to zero.
- `seed(x, k, value)` changes `x` in place. It replaces the gradient node at
  depth `k` along the `val` branch. Depth 0 replaces the value.
- `derivative(x, k)` reads the k-th derivative by following the `grad` branch.
- `derivatives(x)` returns the value and every derivative as a list. Given a
  sequence of duals of equal order, it returns one list per order.
- `order(x)` gives the nesting depth, and is 0 for a plain number.

```python
from dualdiff.derivatives import higher_order_dual, seed, derivative, derivatives, order
from dualdiff.trig import sin

x = higher_order_dual(2, 0.5)
seed(x, 1, 1.0)
seed(x, 2, 1.0)

u = sin(x)
print(order(u))          # 2
print(derivative(u, 2))  # d²/dx² sin(x) at 0.5
print(derivatives(u))    # [value, first, second]
```

`repr_dual(x)` shows every part of a dual, for example
`dualdiff.dual((0.5, 1), (1, 0))`.

## Available functions

- `dualdiff.dual`: the `Dual` class, with `copy()` and `order()`
- `dualdiff.trig`: `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `atan2`,
  `sinh`, `cosh`, `tanh`, and `hypot` (any number of arguments)
- `dualdiff.explog`: `exp`, `log`, `log10`, `sqrt`, `pow`, `abs`, `abs2`,
  `conj`, `real`, `imag`, `erf`, `min`, `max`
- `dualdiff.derivatives`: `val`, `order`, `derivative`, `derivatives`, `seed`,
  `higher_order_dual`, `repr_dual`
- `dualdiff.binomial`: `binomial_coefficient(i, j)` for `0 <= j <= i <= 50`
  (`MAX_ORDER`). Indices outside that range raise `ValueError`.

The functions take `Dual` objects as well as plain numbers.

- Combining two duals of different orders raises `TypeError`.
- Comparisons between duals, or between a dual and a number, use only the
  innermost values.
- `float(x)` gives the innermost value of a dual.
- `min` and `max` give `a` when the two values tie. The result is raised to
  the order of the dual operand.

## What the package does not do

The package works one dual number at a time. It has none of the following:

- helpers that compute a whole gradient, Jacobian or Hessian for you
- vector or matrix types of dual numbers
- Taylor-series evaluation along a direction

To get these results, seed and evaluate one input direction at a time, as
shown above.