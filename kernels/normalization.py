"""Amplitude normalization of derivative kernels."""

import numpy as np

from kernels import defs


def scale_space_factor(
    variance: float,
    order: int,
    exponent: float = defs.DEFAULT_SCALE_EXPONENT,
) -> float:
  """Scale-space normalization factor `variance ** (exponent * order)`.

  With the default exponent this is `t^{m/2}` of Lindeberg's normalized
  derivatives, which makes the response to a structure independent of its
  size. Identity for `order == 0` and for `variance == 0`.
  """
  if order == 0 or variance == 0.:
    return 1.
  return variance ** (exponent * order)


def gamma_factor(
    variance: float,
    spacing: float,
    order: int,
    gamma: float,
    exponent: float = defs.DEFAULT_GAMMA_EXPONENT,
) -> float:
  """Gamma normalization factor `t ** (gamma * exponent * order)`.

  `t = variance / spacing ** 2` is the variance in samples. Identity for
  `gamma == 0`, `order == 0` and `variance == 0`.
  """
  if order == 0 or variance == 0. or gamma == 0.:
    return 1.
  return (variance / spacing / spacing) ** (gamma * exponent * order)


def normalization_factor(parameters: defs.KernelParameters) -> float:
  """Product of the factors enabled by `parameters`."""
  factor = 1.
  if parameters.normalize_across_scale:
    factor *= scale_space_factor(
      parameters.variance, parameters.order, parameters.scale_exponent)
  factor *= gamma_factor(
    parameters.variance, parameters.spacing, parameters.order,
    parameters.gamma, parameters.gamma_exponent)
  return factor


def normalize(
    coefficients: np.ndarray,
    parameters: defs.KernelParameters,
) -> np.ndarray:
  """Scales `coefficients` by `normalization_factor(parameters)`."""
  return np.asarray(coefficients) * normalization_factor(parameters)
