"""Tests for `array_utils.py`."""

import unittest
from parameterized import parameterized

import numpy as np

from utils import array_utils

class arrayUtilsTest(unittest.TestCase):

  @parameterized.expand([
    (1, 0),
    (5, 2),
    (31, 15),
  ])
  def testCenterIndex(self, length, center):
    self.assertEqual(center, array_utils.center_index(np.zeros(length)))

  def testCenterIndexEvenLength(self):
    with self.assertRaisesRegex(ValueError, "`array` must have odd length"):
      array_utils.center_index(np.zeros(4))

  def testCenterIndexBadShape(self):
    with self.assertRaisesRegex(ValueError, "`array` must be 1D"):
      array_utils.center_index(np.zeros([3, 3]))

  @parameterized.expand([
    ([1., 2., 1.], True, False),
    ([-1., 0., 1.], False, True),
    ([1., 2., 3.], False, False),
    ([0.], True, True),
  ])
  def testSymmetry(self, array, symmetric, antisymmetric):
    array = np.array(array)
    self.assertEqual(symmetric, array_utils.is_symmetric(array))
    self.assertEqual(antisymmetric, array_utils.is_antisymmetric(array))

  def testSymmetryTolerance(self):
    array = np.array([1., 2., 1. + 1e-12])
    self.assertFalse(array_utils.is_symmetric(array))
    self.assertTrue(array_utils.is_symmetric(array, atol=1e-10))


if __name__ == "__main__":
  unittest.main()
