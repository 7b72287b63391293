"""Common definitions for Gaussian derivative kernels."""

from collections import namedtuple
import math
import numbers

_MINIMUM_ERROR = 1.e-5
_MAXIMUM_ERROR = 1. - _MINIMUM_ERROR

DEFAULT_VARIANCE = 1.
DEFAULT_SPACING = 1.
DEFAULT_ORDER = 1
DEFAULT_GAMMA = 0.
DEFAULT_MAXIMUM_ERROR = .005
DEFAULT_MAXIMUM_KERNEL_WIDTH = 30
DEFAULT_SCALE_EXPONENT = .5
DEFAULT_GAMMA_EXPONENT = .5


def clamp_maximum_error(maximum_error):
  """Clamps `maximum_error` into `[1e-5, 1 - 1e-5]`."""
  return max(_MINIMUM_ERROR, min(_MAXIMUM_ERROR, float(maximum_error)))


def odd_width(width):
  """Rounds `width` down to the nearest odd integer."""
  return width if width % 2 == 1 else width - 1


class KernelParameters(namedtuple(
  'KernelParameters',
  ['variance', 'spacing', 'order', 'gamma', 'maximum_error',
   'maximum_kernel_width', 'normalize_across_scale', 'scale_exponent',
   'gamma_exponent'])):
  """Parameters of a one dimensional discrete Gaussian derivative kernel.

  `variance` is the variance of the continuous Gaussian in the same physical
  units as `spacing`, the distance between samples along the kernel axis.

  `maximum_error` is the fraction of the Gaussian mass the kernel is allowed
  to omit. Small values combined with large variances yield very long
  kernels, so the length is additionally capped by `maximum_kernel_width`.
  `maximum_error` is silently clamped into `[1e-5, 1 - 1e-5]`.

  `normalize_across_scale` multiplies the kernel by
  `variance ** (scale_exponent * order)`. `gamma` multiplies it by
  `pixel_variance ** (gamma * gamma_exponent * order)`.

  Instances are immutable. Use `replace` to derive modified parameters.
  """
  __slots__ = ()

  def __new__(
      cls,
      variance: float = DEFAULT_VARIANCE,
      spacing: float = DEFAULT_SPACING,
      order: int = DEFAULT_ORDER,
      gamma: float = DEFAULT_GAMMA,
      maximum_error: float = DEFAULT_MAXIMUM_ERROR,
      maximum_kernel_width: int = DEFAULT_MAXIMUM_KERNEL_WIDTH,
      normalize_across_scale: bool = True,
      scale_exponent: float = DEFAULT_SCALE_EXPONENT,
      gamma_exponent: float = DEFAULT_GAMMA_EXPONENT,
  ):
    for name, value in [
        ("variance", variance), ("spacing", spacing), ("gamma", gamma),
        ("scale_exponent", scale_exponent),
        ("gamma_exponent", gamma_exponent)]:
      if not math.isfinite(value):
        raise ValueError("`{}` must be finite, got {}.".format(name, value))
    if math.isnan(maximum_error):
      raise ValueError("`maximum_error` must not be NaN.")
    if variance < 0:
      raise ValueError(
        "`variance` must be non-negative, got {}.".format(variance))
    if spacing <= 0:
      raise ValueError("`spacing` must be greater than 0, got {}.".format(
        spacing))
    if not math.isfinite(variance / spacing / spacing):
      raise ValueError("`variance / spacing ** 2` must be finite, got {} / {} "
                       "** 2.".format(variance, spacing))
    if (isinstance(order, bool) or not isinstance(order, numbers.Integral)
        or order < 0):
      raise ValueError(
        "`order` must be a non-negative integer, got {}.".format(order))
    if (isinstance(maximum_kernel_width, bool)
        or not isinstance(maximum_kernel_width, numbers.Integral)
        or maximum_kernel_width < 1):
      raise ValueError("`maximum_kernel_width` must be a positive integer, "
                       "got {}.".format(maximum_kernel_width))
    if odd_width(maximum_kernel_width) < 2 * order + 1:
      raise ValueError(
        "`maximum_kernel_width` of {} cannot hold a kernel of order {}, which "
        "needs at least {} elements.".format(
          maximum_kernel_width, order, 2 * order + 1))

    return super(KernelParameters, cls).__new__(
      cls,
      float(variance),
      float(spacing),
      int(order),
      float(gamma),
      clamp_maximum_error(maximum_error),
      int(maximum_kernel_width),
      bool(normalize_across_scale),
      float(scale_exponent),
      float(gamma_exponent),
    )

  def replace(self, **changes):
    """Returns new validated `KernelParameters` with `changes` applied."""
    values = self._asdict()
    unknown = set(changes) - set(values)
    if unknown:
      raise ValueError("Unknown kernel parameters {}.".format(sorted(unknown)))
    values.update(changes)
    return KernelParameters(**values)

  @property
  def pixel_variance(self):
    """Variance in units of samples, `t = variance / spacing ** 2`."""
    return self.variance / self.spacing / self.spacing

  @property
  def effective_kernel_width(self):
    return odd_width(self.maximum_kernel_width)

  @property
  def maximum_radius(self):
    """Largest smoothing radius whose derivative kernel fits the width cap."""
    return (self.effective_kernel_width - 1) // 2 - self.order

  def describe(self):
    """Returns a readable multi-line summary of the parameters."""
    lines = ["KernelParameters:"]
    lines += ["  {}: {}".format(name, value) for name, value in
              self._asdict().items()]
    lines.append("  pixel_variance: {}".format(self.pixel_variance))
    lines.append("  effective_kernel_width: {}".format(
      self.effective_kernel_width))
    return "\n".join(lines)
