"""Generates discrete Gaussian derivative kernels.

The kernel is built in three steps:
  * `gaussian.discrete_gaussian` computes the zero order kernel.
  * `derivative.differentiate` raises it to the requested order.
  * `normalization.normalize` applies scale-space and gamma normalization.

`n` successive applications of such kernels, one along each axis, compute
separable N-D Gaussian derivatives of an image. See `neighborhood` for code
that applies them.

References:
  T. Lindeberg, Discrete Scale-Space Theory and the Scale-Space Primal
  Sketch. Dissertation. Royal Institute of Technology, Stockholm, 1991.
"""

import numpy as np

from kernels import defs
from kernels import derivative
from kernels import gaussian
from kernels import normalization


def generate_coefficients(
    parameters: defs.KernelParameters,
) -> np.ndarray:
  """Computes the coefficients of a Gaussian derivative kernel.

  Args:
    parameters: `KernelParameters` describing the kernel.

  Returns:
    Read-only `np.ndarray` of odd length at most
    `parameters.effective_kernel_width`. The element at the midpoint index
    corresponds to offset zero.
  """
  coefficients = gaussian.discrete_gaussian(
    parameters.pixel_variance,
    parameters.maximum_error,
    parameters.maximum_radius,
  )
  coefficients = derivative.differentiate(
    coefficients, parameters.order, parameters.spacing)
  coefficients = normalization.normalize(coefficients, parameters)
  coefficients.setflags(write=False)
  return coefficients
