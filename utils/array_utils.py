"""Array utility functions."""

import numpy as np


def center_index(array: np.ndarray) -> int:
  """Returns the midpoint index of a 1D array of odd length.

  Raises:
    ValueError: If `array` is not 1D or has even length.
  """
  if array.ndim != 1:
    raise ValueError("`array` must be 1D, got shape {}.".format(array.shape))
  if array.shape[0] % 2 != 1:
    raise ValueError("`array` must have odd length, got {}.".format(
      array.shape[0]))
  return array.shape[0] // 2


def is_symmetric(array: np.ndarray, atol: float = 0.) -> bool:
  """Checks `array[c + i] == array[c - i]` around the center index `c`."""
  center_index(array)
  return np.allclose(array, array[::-1], rtol=0., atol=atol)


def is_antisymmetric(array: np.ndarray, atol: float = 0.) -> bool:
  """Checks `array[c + i] == -array[c - i]` around the center index `c`."""
  center_index(array)
  return np.allclose(array, -array[::-1], rtol=0., atol=atol)
