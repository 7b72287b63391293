"""Discrete Gaussian (zero order) kernel coefficients."""

import logging
import math
from typing import Optional

import numpy as np

from kernels import bessel


def discrete_gaussian(
    t: float,
    maximum_error: float,
    maximum_radius: Optional[int] = None,
) -> np.ndarray:
  """Computes the discrete Gaussian kernel of Lindeberg.

  The coefficient at integer offset `n` is `exp(-t) * I_|n|(t)` where `I_n` is
  the modified Bessel function of the first kind. The kernel grows until the
  mass it omits is no more than `maximum_error`. If that requires a radius
  larger than `maximum_radius` the kernel is truncated and a warning is
  logged. In both cases the coefficients are renormalized to sum to one.

  For further information see:
    https://en.wikipedia.org/wiki/Scale_space_implementation \
    #The_discrete_Gaussian_kernel

  Args:
    t: Variance in units of samples squared.
    maximum_error: Fraction of the Gaussian mass the kernel may omit.
    maximum_radius: Optional cap on the kernel radius.

  Returns:
    `np.ndarray` of shape `[2 * radius + 1]` with the center at index
    `radius`.

  Raises:
    ValueError: If `t` or `maximum_radius` is negative.
  """
  if not (t >= 0 and math.isfinite(t)):
    raise ValueError("`t` must be finite and non-negative, got {}.".format(t))
  if maximum_radius is not None and maximum_radius < 0:
    raise ValueError("`maximum_radius` must be non-negative, got {}.".format(
      maximum_radius))
  if t == 0.:
    return np.ones([1])

  cap = 1. - maximum_error
  half = [bessel.modified_bessel_i0e(t)]
  total = half[0]
  while total < cap:
    radius = len(half)
    if maximum_radius is not None and radius > maximum_radius:
      logging.warning(
        "Gaussian kernel has exceeded the maximum radius of {} and has been "
        "truncated to {} elements. Raise `maximum_kernel_width` to keep the "
        "requested `maximum_error` of {}.".format(
          maximum_radius, 2 * len(half) - 1, maximum_error))
      break
    coefficient = bessel.modified_bessel_ie(radius, t)
    # Underflow.
    if coefficient <= 0.:
      break
    half.append(coefficient)
    total += 2. * coefficient

  # Re-accumulate from the smallest coefficient to the largest.
  total = 2. * sum(reversed(half[1:])) + half[0]

  half = np.array(half) / total
  return np.concatenate([half[:0:-1], half])
