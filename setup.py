import os
import re

from setuptools import find_packages, setup


def read_version():
    with open(os.path.join('meldheaps', 'version.py')) as f:
        return re.search(r"__version__\s*=\s*'([^']+)'", f.read()).group(1)


setup(name='meldheaps',
      version=read_version(),
      description='Mergeable priority queues: Fibonacci, pairing and skew heaps',
      packages=find_packages(exclude=['tests']),
      python_requires='>=3.9',
      install_requires=['treelib>=1.7.0'],
      extras_require={'test': ['pytest', 'numpy']})
