"""Creates `KernelParameters` files.

Example usage:
python kernels/create_kernel_parameters.py -sd /tmp/kernels -n dxx -v 4. -s .5 -o 2 -e 1e-4 -w 61
"""

import argparse
import json
import os
import sys

# Add repository root.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from kernels import defs


def kernel_parameters_from_dict(d):
  """Builds `KernelParameters` from a dictionary of field values.

  Missing fields take their default value.

  Raises:
    ValueError: If `d` contains keys that are not `KernelParameters` fields.
  """
  unknown = set(d) - set(defs.KernelParameters._fields)
  if unknown:
    raise ValueError("Unknown kernel parameters {}.".format(sorted(unknown)))
  return defs.KernelParameters(**d)


def save_kernel_parameters(
    kernel_parameters: defs.KernelParameters,
    save_dir: str,
    name: str = "kernel_parameters"
):
  file_name = os.path.join(save_dir, name + ".json")

  with open(file_name, "w") as file:
    file.write(json.dumps(kernel_parameters._asdict()))
  return file_name


def load_kernel_parameters(
    file_path: str
):
  """Loads `KernelParameters` from file path."""
  with open(file_path, 'r') as f:
    return kernel_parameters_from_dict(json.load(f))


def add_parameter_arguments(parser):
  """Adds one optional argument per `KernelParameters` field to `parser`."""
  parser.add_argument('-v', '--variance', dest='variance',
                      help='Variance of the Gaussian in physical units.',
                      type=float,
                      default=defs.DEFAULT_VARIANCE)

  parser.add_argument('-s', '--spacing', dest='spacing',
                      help='Sample spacing along the kernel axis.',
                      type=float,
                      default=defs.DEFAULT_SPACING)

  parser.add_argument('-o', '--order', dest='order',
                      help='Order of the derivative.',
                      type=int,
                      default=defs.DEFAULT_ORDER)

  parser.add_argument('-g', '--gamma', dest='gamma',
                      help='Gamma normalization factor.',
                      type=float,
                      default=defs.DEFAULT_GAMMA)

  parser.add_argument('-e', '--maximum_error', dest='maximum_error',
                      help='Fraction of the Gaussian mass the kernel may omit.',
                      type=float,
                      default=defs.DEFAULT_MAXIMUM_ERROR)

  parser.add_argument('-w', '--maximum_kernel_width',
                      dest='maximum_kernel_width',
                      help='Maximum number of kernel elements.',
                      type=int,
                      default=defs.DEFAULT_MAXIMUM_KERNEL_WIDTH)

  parser.add_argument('--no_scale_normalization',
                      dest='normalize_across_scale',
                      help='Disable scale-space normalization.',
                      action='store_false')

  parser.add_argument('--scale_exponent', dest='scale_exponent',
                      help='Scale normalization exponent per order.',
                      type=float,
                      default=defs.DEFAULT_SCALE_EXPONENT)

  parser.add_argument('--gamma_exponent', dest='gamma_exponent',
                      help='Gamma normalization exponent per order.',
                      type=float,
                      default=defs.DEFAULT_GAMMA_EXPONENT)
  return parser


def kernel_parameters_from_args(args):
  """Builds `KernelParameters` from parsed `add_parameter_arguments` args."""
  return defs.KernelParameters(
    **{field: getattr(args, field) for field in
       defs.KernelParameters._fields})


def parse_args():
  parser = argparse.ArgumentParser()

  parser.add_argument('-sd', '--save_dir', dest='save_dir',
                      help='Path to save the KernelParameters.',
                      type=str,
                      required=True)

  parser.add_argument('-n', '--name', dest='name',
                      help='Optional name.',
                      type=str,
                      default="kernel_parameters",
                      required=False)

  add_parameter_arguments(parser)

  parsed_args = parser.parse_args()

  return parsed_args


def main():
  args = parse_args()
  save_kernel_parameters(
    kernel_parameters_from_args(args), args.save_dir, args.name)


if __name__ == "__main__":
  main()
