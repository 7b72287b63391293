"""Applies 1D kernels to `tf.Tensor`."""

import numpy as np
import tensorflow as tf

from neighborhood import assembly


def correlate_along_axis(
    tensor: tf.Tensor,
    coefficients: np.ndarray,
    axis: int,
) -> tf.Tensor:
  """Takes the inner product of `coefficients` with a window along `axis`.

  Values outside `tensor` are taken to be zero. The kernel is cast to the
  dtype of `tensor`.

  Args:
    tensor: `tf.Tensor` of known rank and floating dtype.
    coefficients: 1D array of odd length.
    axis: Axis of `tensor` to filter.

  Returns:
    `tf.Tensor` of same shape and dtype as `tensor`.

  Raises:
    ValueError: If `coefficients` is invalid, `axis` is out of range or
      `tensor` is not floating point.
  """
  coefficients = assembly.check_coefficients(coefficients)
  tensor = tf.convert_to_tensor(tensor)
  if not tensor.dtype.is_floating:
    raise ValueError("`tensor` must have a floating dtype, got {}.".format(
      tensor.dtype))
  rank = tensor.shape.ndims
  if not -rank <= axis < rank:
    raise ValueError("`axis` must be in [{}, {}), got {}.".format(
      -rank, rank, axis))
  axis = axis % rank

  # Move `axis` last and fold all other axes into the batch dimension.
  permutation = [i for i in range(rank) if i != axis] + [axis]
  moved = tf.transpose(tensor, permutation)
  moved_shape = tf.shape(moved)
  batched = tf.reshape(moved, [-1, moved_shape[-1], 1])

  # `tf.nn.conv1d` computes a correlation. `SAME` padding with an odd filter
  # pads the same number of zeros on both sides.
  kernel = tf.reshape(
    tf.constant(coefficients.astype(tensor.dtype.as_numpy_dtype)), [-1, 1, 1])
  filtered = tf.nn.conv1d(batched, kernel, stride=1, padding="SAME")

  filtered = tf.reshape(filtered, moved_shape)
  return tf.transpose(filtered, np.argsort(permutation))
