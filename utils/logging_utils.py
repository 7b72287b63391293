"""Utils for logging"""

import logging
import os


def set_up_logging(file_name: str = 'kernels.log'):
  """Sets up logging to `file_name` in `$JOB_DIRECTORY` (default `.`)."""

  # Check for environmental variable.
  file_location = os.getenv('JOB_DIRECTORY', '.')

  print("Logging file writing to {}".format(file_location), flush=True)

  logging.basicConfig(
    filename=os.path.join(file_location, file_name),
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(processName)s - %(process)d - %(message)s'
  )

  logging.debug("Initialize debug.")
