"""Places kernel coefficients into neighborhood buffers."""

from typing import Optional

import numpy as np

from kernels import defs
from kernels import gaussian_derivative


def check_coefficients(coefficients) -> np.ndarray:
  """Checks that `coefficients` can be centered in a neighborhood.

  Returns:
    `coefficients` as an `np.ndarray`.

  Raises:
    ValueError: If `coefficients` is not 1D, has even length or contains
      non-finite values.
  """
  coefficients = np.asarray(coefficients)
  if coefficients.ndim != 1:
    raise ValueError("`coefficients` must be 1D, got shape {}.".format(
      coefficients.shape))
  if coefficients.shape[0] % 2 != 1:
    raise ValueError("`coefficients` must have odd length, got {}.".format(
      coefficients.shape[0]))
  if not np.all(np.isfinite(coefficients)):
    raise ValueError("`coefficients` must be finite.")
  return coefficients


def fill_centered_directional(
    coefficients: np.ndarray,
    dimension: int,
    direction: int,
    radius: Optional[int] = None,
    dtype=np.float64,
) -> np.ndarray:
  """Centers `coefficients` along `direction` of an N-D neighborhood.

  The neighborhood has extent `2 * radius + 1` along `direction` and extent 1
  along every other axis. If `radius` is larger than the kernel radius the
  kernel is zero padded on both sides, if it is smaller the kernel is cropped
  symmetrically.

  Args:
    coefficients: 1D array of odd length.
    dimension: Number of axes of the neighborhood.
    direction: Axis along which the kernel is placed.
    radius: Radius of the neighborhood along `direction`. Defaults to the
      kernel radius.
    dtype: Element type of the returned buffer.

  Returns:
    `np.ndarray` of rank `dimension` and type `dtype`.

  Raises:
    ValueError: If arguments are invalid.
  """
  coefficients = check_coefficients(coefficients)
  if dimension < 1:
    raise ValueError("`dimension` must be positive, got {}.".format(dimension))
  if not 0 <= direction < dimension:
    raise ValueError("`direction` must be in [0, {}), got {}.".format(
      dimension, direction))

  kernel_radius = coefficients.shape[0] // 2
  if radius is None:
    radius = kernel_radius
  if radius < 0:
    raise ValueError("`radius` must be non-negative, got {}.".format(radius))

  line = np.zeros([2 * radius + 1])
  if radius >= kernel_radius:
    line[radius - kernel_radius:radius + kernel_radius + 1] = coefficients
  else:
    line[:] = coefficients[kernel_radius - radius:kernel_radius + radius + 1]

  shape = [1] * dimension
  shape[direction] = 2 * radius + 1
  return line.reshape(shape).astype(dtype)


def create_directional(
    parameters: defs.KernelParameters,
    dimension: int,
    direction: int,
    radius: Optional[int] = None,
    dtype=np.float64,
) -> np.ndarray:
  """Generates a kernel from `parameters` and centers it in a neighborhood."""
  return fill_centered_directional(
    gaussian_derivative.generate_coefficients(parameters),
    dimension, direction, radius, dtype)
