"""Applies 1D kernels to numpy arrays."""

from typing import List, Optional

import numpy as np

from scipy import ndimage

from kernels import defs
from kernels import gaussian_derivative
from neighborhood import assembly

_MODES = ["reflect", "constant", "nearest", "mirror", "wrap"]


def correlate_along_axis(
    image: np.ndarray,
    coefficients: np.ndarray,
    axis: int,
    mode: str = "nearest",
) -> np.ndarray:
  """Takes the inner product of `coefficients` with a window along `axis`.

  The window is centered on each element, so the midpoint of `coefficients`
  weighs the element itself and `coefficients[c + k]` weighs the element `k`
  steps further along `axis`.

  Args:
    image: Array of any rank. Integer images are converted to `float64`.
    coefficients: 1D array of odd length.
    axis: Axis of `image` to filter.
    mode: Boundary handling, one of `_MODES`. See `scipy.ndimage`.

  Returns:
    Filtered array of same shape as `image`.

  Raises:
    ValueError: If `mode` is not recognized or `coefficients` is invalid.
  """
  if mode not in _MODES:
    raise ValueError("`mode` must be one of {} but got `{}`".format(
      _MODES, mode))
  coefficients = assembly.check_coefficients(coefficients)
  image = np.asarray(image)
  if not np.issubdtype(image.dtype, np.floating):
    image = image.astype(np.float64)
  return ndimage.correlate1d(image, coefficients, axis=axis, mode=mode)


def separable_correlate(
    image: np.ndarray,
    kernels: List[Optional[np.ndarray]],
    mode: str = "nearest",
) -> np.ndarray:
  """Applies `kernels[i]` along axis `i` of `image`, skipping `None` entries.

  Raises:
    ValueError: If `kernels` does not have one entry per axis of `image`.
  """
  image = np.asarray(image)
  if len(kernels) != image.ndim:
    raise ValueError("`kernels` must have one entry per axis of `image`, got "
                     "{} for rank {}.".format(len(kernels), image.ndim))
  for axis, coefficients in enumerate(kernels):
    if coefficients is not None:
      image = correlate_along_axis(image, coefficients, axis, mode)
  return image


def gaussian_derivative_filter(
    image: np.ndarray,
    variance: float,
    orders: List[int],
    spacing: Optional[List[float]] = None,
    mode: str = "nearest",
    **parameter_kwargs
) -> np.ndarray:
  """Computes a separable Gaussian derivative of `image`.

  One `KernelParameters` is built per axis with the shared `variance` and
  `parameter_kwargs` and the axis' own derivative order and spacing.

  Args:
    image: Array of any rank.
    variance: Variance of the Gaussian in physical units.
    orders: Derivative order along each axis.
    spacing: Sample spacing along each axis. Defaults to 1.
    mode: Boundary handling, see `correlate_along_axis`.
    **parameter_kwargs: Further `KernelParameters` fields.

  Returns:
    Filtered array of same shape as `image`.

  Raises:
    ValueError: If `orders` or `spacing` do not match the rank of `image`.
  """
  image = np.asarray(image)
  if spacing is None:
    spacing = [1.] * image.ndim
  if len(orders) != image.ndim or len(spacing) != image.ndim:
    raise ValueError("`orders` and `spacing` must have one entry per axis of "
                     "`image`.")

  kernels = [
    gaussian_derivative.generate_coefficients(defs.KernelParameters(
      variance=variance, spacing=axis_spacing, order=order,
      **parameter_kwargs))
    for order, axis_spacing in zip(orders, spacing)]
  return separable_correlate(image, kernels, mode)
