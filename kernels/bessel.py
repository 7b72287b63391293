"""Modified Bessel functions of the first kind and integer order.

The discrete Gaussian kernel is `exp(-t) * I_n(t)`, so besides `I_k(x)` this
module provides the exponentially scaled functions `exp(-x) * I_k(x)`, which
stay finite for every `x >= 0`.

`I_0` and `I_1` are summed from their power series for `x <= 15` and from the
large argument asymptotic expansion above. Higher orders use Miller's
backward recurrence normalized against `I_0`, which takes `O(k + sqrt(x))`
steps. The scaled functions switch to the asymptotic expansion when `x` is
large compared to `k ** 2`, so their cost stays bounded for any `x`. All
functions are accurate to better than `1e-10` relative.

The unscaled functions overflow for large arguments. Their argument is
clamped to `_MAX_UNSCALED_ARGUMENT`.
"""

import math

_SERIES_LIMIT = 15.
_MAX_UNSCALED_ARGUMENT = 700.

# Below this argument the recurrence overflows; the leading series term is
# exact to double precision there.
_TINY_ARGUMENT = 1.e-8

_RECURRENCE_ACCURACY = 40.
# `exp(-x) * I_k(x)` is summed from its asymptotic expansion once
# `x >= _ASYMPTOTIC_ORDER_RATIO * k ** 2`.
_ASYMPTOTIC_ORDER_RATIO = 1000.
_BIG_NUMBER = 1.e10
_BIG_NUMBER_INVERSE = 1.e-10
_EPSILON = 1.e-17


def _check_argument(x):
  if not x >= 0:
    raise ValueError("`x` must be non-negative, got {}.".format(x))


def _power_series(x, order):
  """Sums the power series of `I_order(x)` for `order` in `{0, 1}`."""
  quarter_square = x * x / 4.
  term = (x / 2.) ** order
  total = term
  j = 0
  while term > _EPSILON * total:
    j += 1
    term *= quarter_square / (j * (j + order))
    total += term
  return total


def _asymptotic_scaled(x, order):
  """Large argument expansion of `exp(-x) * I_order(x)`."""
  mu = 4. * order * order
  term = 1.
  total = 1.
  k = 0
  while abs(term) > _EPSILON * abs(total):
    k += 1
    next_term = -term * (mu - (2 * k - 1) ** 2) / (8. * k * x)
    # The expansion diverges past its smallest term.
    if abs(next_term) >= abs(term):
      break
    term = next_term
    total += term
  return total / math.sqrt(2. * math.pi * x)


def _recurrence_ratio(order, x):
  """Returns `I_order(x) / I_0(x)` for `order >= 1`."""
  if x == 0.:
    return 0.
  if x < _TINY_ARGUMENT:
    return math.exp(order * math.log(x / 2.) - math.lgamma(order + 1))

  two_over_x = 2. / x
  # `I_n(x) / I_order(x)` decays like `exp(-(n ** 2 - order ** 2) / (2 * x))`.
  start = 2 * (order + int(math.sqrt(_RECURRENCE_ACCURACY * (order + x))))
  ratio = 0.
  upper = 0.
  current = 1.
  for j in range(start, 0, -1):
    lower = upper + j * two_over_x * current
    upper = current
    current = lower
    if abs(current) > _BIG_NUMBER:
      ratio *= _BIG_NUMBER_INVERSE
      current *= _BIG_NUMBER_INVERSE
      upper *= _BIG_NUMBER_INVERSE
    if j == order:
      ratio = upper
  return ratio / current


def modified_bessel_i0e(x: float) -> float:
  """Returns `exp(-x) * I_0(x)` for `x >= 0`."""
  _check_argument(x)
  if x <= _SERIES_LIMIT:
    return math.exp(-x) * _power_series(x, 0)
  return _asymptotic_scaled(x, 0)


def modified_bessel_i1e(x: float) -> float:
  """Returns `exp(-x) * I_1(x)` for `x >= 0`."""
  _check_argument(x)
  if x <= _SERIES_LIMIT:
    return math.exp(-x) * _power_series(x, 1)
  return _asymptotic_scaled(x, 1)


def modified_bessel_ie(order: int, x: float) -> float:
  """Returns `exp(-x) * I_order(x)` for any integer `order` and `x >= 0`."""
  _check_argument(x)
  order = abs(order)
  if order == 0:
    return modified_bessel_i0e(x)
  if order == 1:
    return modified_bessel_i1e(x)
  if x > _SERIES_LIMIT and x >= _ASYMPTOTIC_ORDER_RATIO * order * order:
    return _asymptotic_scaled(x, order)
  return _recurrence_ratio(order, x) * modified_bessel_i0e(x)


def modified_bessel_i0(x: float) -> float:
  """Returns `I_0(x)` for `x >= 0`."""
  _check_argument(x)
  if x <= _SERIES_LIMIT:
    return _power_series(x, 0)
  x = min(x, _MAX_UNSCALED_ARGUMENT)
  return math.exp(x) * _asymptotic_scaled(x, 0)


def modified_bessel_i1(x: float) -> float:
  """Returns `I_1(x)` for `x >= 0`."""
  _check_argument(x)
  if x <= _SERIES_LIMIT:
    return _power_series(x, 1)
  x = min(x, _MAX_UNSCALED_ARGUMENT)
  return math.exp(x) * _asymptotic_scaled(x, 1)


def modified_bessel_i(order: int, x: float) -> float:
  """Returns `I_order(x)` for any integer `order` and `x >= 0`.

  `I_{-k}(x) == I_k(x)` for integer `k`. Orders of two and above are computed
  by backward recurrence, which unlike the forward recurrence stays stable as
  the order grows.
  """
  _check_argument(x)
  order = abs(order)
  if order == 0:
    return modified_bessel_i0(x)
  if order == 1:
    return modified_bessel_i1(x)
  x = min(x, _MAX_UNSCALED_ARGUMENT)
  return _recurrence_ratio(order, x) * modified_bessel_i0(x)
