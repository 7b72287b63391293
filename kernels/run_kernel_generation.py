"""Generates a Gaussian derivative kernel and saves it to disk.

Example usage:
python kernels/run_kernel_generation.py -out /tmp/kernels/dx -v 2. -o 1 -e 1e-3 -w 41 --plot
python kernels/run_kernel_generation.py -out /tmp/kernels/dxx -p /tmp/kernels/dxx.json
"""
import argparse
import logging
import os
import sys

import numpy as np

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt

# Add repository root.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kernels import create_kernel_parameters
from kernels import defs
from kernels import gaussian_derivative
from utils import array_utils
from utils import logging_utils


def _save_kernel_plot(
    coefficients: np.ndarray,
    kernel_parameters: defs.KernelParameters,
    file_name: str,
):
  radius = array_utils.center_index(coefficients)
  offsets = np.arange(-radius, radius + 1) * kernel_parameters.spacing

  fig, ax = plt.subplots(1, 1)
  ax.stem(offsets, coefficients)
  ax.set_xlabel("Offset")
  ax.set_ylabel("Coefficient")

  fig.suptitle(
    "Order {order} variance {variance} with {count} elements.".format(
      order=kernel_parameters.order, variance=kernel_parameters.variance,
      count=coefficients.shape[0]))

  plt.savefig(file_name)
  plt.close(fig)


def generate_and_save(
    kernel_parameters: defs.KernelParameters,
    output_path: str,
    plot: bool = False,
):
  """Generates kernel coefficients and saves them as `output_path.npy`.

  Args:
    kernel_parameters: `KernelParameters` describing the kernel.
    output_path: Path without extension. Parent directories are created.
    plot: If `True` also saves a plot to `output_path.png`.

  Returns:
    The generated coefficients.
  """
  logging.info(kernel_parameters.describe())

  directory = os.path.dirname(output_path)
  if directory and not os.path.exists(directory):
    os.makedirs(directory)

  coefficients = gaussian_derivative.generate_coefficients(kernel_parameters)
  logging.info("Generated kernel with {} elements.".format(
    coefficients.shape[0]))

  np.save(output_path + ".npy", coefficients)
  logging.debug("Saved coefficients to {}.npy".format(output_path))

  if plot:
    _save_kernel_plot(coefficients, kernel_parameters, output_path + ".png")
    logging.debug("Saved plot to {}.png".format(output_path))

  return coefficients


def parse_args():
  parser = argparse.ArgumentParser()

  parser.add_argument('-out', '--output_path', dest='output_path',
                      help='Path (without extension) to save the kernel.',
                      type=str,
                      required=True)

  parser.add_argument('-p', '--parameters_path', dest='parameters_path',
                      help='Path to a `KernelParameters` JSON file. Overrides '
                           'the individual parameter arguments.',
                      type=str,
                      required=False)

  parser.add_argument('--plot', dest='plot',
                      help='Also save a plot of the kernel.',
                      action='store_true')

  create_kernel_parameters.add_parameter_arguments(parser)

  parsed_args = parser.parse_args()

  return parsed_args


def main():
  logging_utils.set_up_logging('kernel_generation.log')

  args = parse_args()
  logging.info(args)

  if args.parameters_path is not None:
    kernel_parameters = create_kernel_parameters.load_kernel_parameters(
      args.parameters_path)
    logging.info("Loaded parameters from {}".format(args.parameters_path))
  else:
    kernel_parameters = create_kernel_parameters.kernel_parameters_from_args(
      args)

  generate_and_save(kernel_parameters, args.output_path, args.plot)


if __name__ == "__main__":
  main()
