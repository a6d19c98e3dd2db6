#!/usr/bin/env python3

from setuptools import find_packages, setup

from ds4report.data import constants

setup(name='ds4report',
      version=constants.VERSION,
      description='DualShock 4 input report decoder.',
      install_requires=['construct>=2.10', 'hidapi>=0.14', 'distro>=1.6'],
      extras_require={
          'tests': ['pytest>=7.0']
      },
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.8',
      scripts=['ds4report-cli.py']
      )
