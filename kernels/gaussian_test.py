"""Test for `gaussian.py`"""

import math
import unittest
from unittest import mock

import numpy as np
from parameterized import parameterized
from scipy import special

from kernels import gaussian
from utils import array_utils


class DiscreteGaussianTest(unittest.TestCase):

  def testDiscreteGaussian(self):
    """Tests versus values computed using
    `https://keisan.casio.com/exec/system/1180573473`
    """
    coefficients = gaussian.discrete_gaussian(1., .01)
    self.assertEqual(7, coefficients.shape[0])
    real_values = 0.3679 * np.array(
      [0.02217, 0.1357, 0.5652, 1.2661, 0.5652, 0.1357, 0.02217])
    real_values /= real_values.sum()
    for real, computed in zip(real_values, coefficients):
      self.assertAlmostEqual(real, computed, 3)

  def testCenterBeforeRenormalization(self):
    self.assertAlmostEqual(
      .4658, math.exp(-1.) * special.iv(0, 1.), places=4)
    coefficients = gaussian.discrete_gaussian(1., .01)
    raw = special.ive(np.arange(-3, 4), 1.)
    np.testing.assert_allclose(raw / raw.sum(), coefficients, rtol=1e-10)

  @parameterized.expand([
    (.5, .01),
    (1., 1e-5),
    (4., .005),
    (25., 1e-3),
    (100., 1e-5),
  ])
  def testSumsToOneAndSymmetric(self, t, maximum_error):
    coefficients = gaussian.discrete_gaussian(t, maximum_error)
    self.assertAlmostEqual(1., coefficients.sum(), places=12)
    self.assertTrue(array_utils.is_symmetric(coefficients))
    self.assertTrue(np.all(coefficients > 0))

  @parameterized.expand([
    (.5, .01),
    (4., 1e-5),
    (25., 1e-3),
  ])
  def testOmittedMassWithinMaximumError(self, t, maximum_error):
    coefficients = gaussian.discrete_gaussian(t, maximum_error)
    radius = array_utils.center_index(coefficients)
    retained = special.ive(np.arange(-radius, radius + 1), t).sum()
    self.assertGreaterEqual(retained, 1. - maximum_error)
    # One element less on each side would not have been enough.
    smaller = special.ive(np.arange(-radius + 1, radius), t).sum()
    self.assertLess(smaller, 1. - maximum_error)

  def testSmallerErrorGrowsKernel(self):
    coarse = gaussian.discrete_gaussian(9., 1e-2)
    fine = gaussian.discrete_gaussian(9., 1e-5)
    self.assertGreater(fine.shape[0], coarse.shape[0])

  @parameterized.expand([(1e-5,), (.5,), (.99999,)])
  def testZeroVariance(self, maximum_error):
    np.testing.assert_equal(
      [1.], gaussian.discrete_gaussian(0., maximum_error, None))

  @parameterized.expand([(0, 1), (3, 7), (5, 11)])
  def testTruncation(self, maximum_radius, length):
    with self.assertLogs(level='WARNING') as logs:
      coefficients = gaussian.discrete_gaussian(25., 1e-5, maximum_radius)
    self.assertEqual(1, len(logs.output))
    self.assertIn("truncated to {} elements".format(length), logs.output[0])
    self.assertEqual(length, coefficients.shape[0])
    self.assertAlmostEqual(1., coefficients.sum(), places=12)
    self.assertTrue(array_utils.is_symmetric(coefficients))

  def testNoWarningWhenCapNotBinding(self):
    with mock.patch.object(gaussian.logging, 'warning') as warning:
      coefficients = gaussian.discrete_gaussian(1., .01, 3)
    warning.assert_not_called()
    self.assertEqual(7, coefficients.shape[0])

  def testDeterministic(self):
    np.testing.assert_array_equal(
      gaussian.discrete_gaussian(7.3, 1e-4, 20),
      gaussian.discrete_gaussian(7.3, 1e-4, 20))

  @parameterized.expand([(-1.,), (float("nan"),), (float("inf"),)])
  def testBadVariance(self, t):
    with self.assertRaisesRegex(ValueError, "`t` must be finite and non-neg"):
      gaussian.discrete_gaussian(t, .01)

  def testBadMaximumRadius(self):
    with self.assertRaisesRegex(ValueError, "`maximum_radius` must be"):
      gaussian.discrete_gaussian(1., .01, -1)


if __name__ == "__main__":
  unittest.main()
