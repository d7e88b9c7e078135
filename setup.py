"""
elanframe setup: elanframe is a library for reading ELAN annotation
files into pandas tables
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'frozendict',
    'joblib',
    'pandas >= 2.1',
    'tabulate',
]


setup(name='elanframe',
      version='0.3',
      author='Eric Kow',
      author_email='eric@erickow.com',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      install_requires=REQS,
      extras_require={'test': ['pytest']})
