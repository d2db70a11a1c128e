#!/usr/bin/env python

from setuptools import setup

lamcps_version = '0.0.1'

setup(name='lamcps',
      version=lamcps_version,
      description='three CPS conversions for the untyped lambda calculus',
      author='Eric Siedel, Michael Walter, N Lance Hepler',
      packages=[
        'lamcps'
      ],
      package_dir={
        'lamcps': 'lamcps',
      },
      extras_require={
        'test': ['pytest'],
      }
     )
