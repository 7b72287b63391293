"""Raises a discrete Gaussian kernel to a derivative order."""

import numpy as np


def central_difference(spacing: float = 1.) -> np.ndarray:
  """Returns the first order central difference `[-1, 0, 1] / (2 * spacing)`."""
  if spacing <= 0:
    raise ValueError("`spacing` must be greater than 0, got {}.".format(
      spacing))
  return np.array([-.5, 0., .5]) / spacing


def derivative_operator(order: int, spacing: float = 1.) -> np.ndarray:
  """Returns the `order`-th power of the central difference.

  The result has length `2 * order + 1` and, used as a correlation kernel,
  differentiates polynomials of degree up to `order` exactly.
  """
  return differentiate(np.ones([1]), order, spacing)


def differentiate(
    coefficients: np.ndarray,
    order: int,
    spacing: float = 1.,
) -> np.ndarray:
  """Differentiates a correlation kernel `order` times.

  Each pass convolves `coefficients` with `central_difference(spacing)` and
  grows the kernel by one element on each side, so the result has length
  `len(coefficients) + 2 * order`. Since the difference operator sums to zero
  so does the result. Odd orders turn a symmetric kernel antisymmetric.

  Args:
    coefficients: 1D array of odd length centered at its midpoint.
    order: Non-negative derivative order.
    spacing: Sample distance in physical units.

  Returns:
    `np.ndarray` of shape `[len(coefficients) + 2 * order]`. `coefficients`
    itself if `order` is 0.

  Raises:
    ValueError: If `order` is negative or `coefficients` is not a 1D array of
      odd length.
  """
  if order < 0:
    raise ValueError("`order` must be non-negative, got {}.".format(order))
  coefficients = np.asarray(coefficients)
  if coefficients.ndim != 1 or coefficients.shape[0] % 2 != 1:
    raise ValueError("`coefficients` must be 1D with odd length, got shape "
                     "{}.".format(coefficients.shape))

  difference = central_difference(spacing)
  for _ in range(order):
    coefficients = np.convolve(coefficients, difference)
  return coefficients
