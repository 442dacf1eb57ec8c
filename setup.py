# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tagsmith',
  version='0.0.1',
  description='Immutable, fluent builders that render HTML elements, with layered attribute defaults.',
  python_requires='>=3.11',
  packages=['tagsmith', 'utest'],
  license='CC0-1.0',
)
