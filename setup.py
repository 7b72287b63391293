from setuptools import find_packages
from setuptools import setup

REQUIRED_PACKAGES = [
    'numpy',
    'scipy',
    'matplotlib >= 3',
    'tensorflow >= 2',
]

TEST_PACKAGES = [
    'parameterized',
    'pytest',
]

setup(
    name='scale_space_kernels',
    version='0.0.1',
    install_requires=REQUIRED_PACKAGES,
    extras_require={'test': TEST_PACKAGES},
    packages=find_packages(),
    include_package_data=True,
    description='Discrete Gaussian derivative kernels for scale-space filtering.'
)
