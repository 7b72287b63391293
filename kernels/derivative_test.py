"""Tests for `derivative.py`."""

import math
import unittest

import numpy as np
from parameterized import parameterized

from kernels import derivative
from kernels import gaussian
from utils import array_utils


class DerivativeTest(unittest.TestCase):

  def testCentralDifference(self):
    np.testing.assert_allclose(
      [-1., 0., 1.], derivative.central_difference(.5))

  def testCentralDifferenceBadSpacing(self):
    with self.assertRaisesRegex(ValueError, "`spacing` must be greater"):
      derivative.central_difference(0.)

  @parameterized.expand([
    (0, [1.]),
    (1, [-.5, 0., .5]),
    (2, [.25, 0., -.5, 0., .25]),
    (3, [-.125, 0., .375, 0., -.375, 0., .125]),
  ])
  def testDerivativeOperator(self, order, expected):
    np.testing.assert_allclose(
      expected, derivative.derivative_operator(order), atol=1e-15)

  def testOrderZeroUnchanged(self):
    coefficients = gaussian.discrete_gaussian(2., .01)
    self.assertIs(coefficients, derivative.differentiate(coefficients, 0))

  @parameterized.expand([(o,) for o in range(1, 6)])
  def testLengthParityAndSum(self, order):
    coefficients = gaussian.discrete_gaussian(3., 1e-4)
    result = derivative.differentiate(coefficients, order)
    self.assertEqual(coefficients.shape[0] + 2 * order, result.shape[0])
    self.assertAlmostEqual(0., result.sum(), places=12)
    if order % 2:
      self.assertTrue(array_utils.is_antisymmetric(result, atol=1e-15))
      self.assertAlmostEqual(0., result[result.shape[0] // 2], places=15)
    else:
      self.assertTrue(array_utils.is_symmetric(result, atol=1e-15))

  @parameterized.expand([(o,) for o in range(1, 5)])
  def testMatchesSingleOperator(self, order):
    """Repeated differencing equals one convolution with the m-th operator."""
    coefficients = gaussian.discrete_gaussian(2.5, 1e-3)
    np.testing.assert_allclose(
      np.convolve(coefficients, derivative.derivative_operator(order, .7)),
      derivative.differentiate(coefficients, order, .7),
      rtol=1e-12, atol=1e-15)

  @parameterized.expand([
    (1, 1.),
    (2, .5),
    (3, 2.),
    (4, 1.3),
  ])
  def testMomentIdentity(self, order, spacing):
    """Correlating with `x^m / m!` gives exactly one."""
    coefficients = gaussian.discrete_gaussian(1.7, 1e-3)
    result = derivative.differentiate(coefficients, order, spacing)
    radius = result.shape[0] // 2
    offsets = np.arange(-radius, radius + 1) * spacing
    moment = np.sum(result * offsets ** order) / math.factorial(order)
    self.assertAlmostEqual(1., moment, places=10)
    # Lower moments vanish.
    for lower in range(order):
      self.assertAlmostEqual(0., np.sum(result * offsets ** lower), places=10)

  def testBadOrder(self):
    with self.assertRaisesRegex(ValueError, "`order` must be non-negative"):
      derivative.differentiate(np.ones([1]), -1)

  @parameterized.expand([
    (np.ones([4]),),
    (np.ones([3, 3]),),
  ])
  def testBadCoefficients(self, coefficients):
    with self.assertRaisesRegex(ValueError, "`coefficients` must be 1D"):
      derivative.differentiate(coefficients, 1)


if __name__ == "__main__":
  unittest.main()
