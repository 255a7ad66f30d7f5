from pathlib import Path

from setuptools import (find_packages,
                        setup)

setup(name='polysplit',
      packages=find_packages(exclude=('tests', 'tests.*')),
      version='0.1.0-alpha',
      description="""Polygon splitting to parts of equal area""",
      long_description=Path('README.md').read_text(encoding='utf-8'),
      long_description_content_type='text/markdown',
      author='polysplit contributors',
      classifiers=[
          'License :: OSI Approved :: MIT License',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: Implementation :: CPython',
      ],
      license='MIT License',
      python_requires='>=3.8',
      install_requires=Path('requirements.txt').read_text(encoding='utf-8'),
      extras_require={'tests': Path('requirements-tests.txt')
                      .read_text(encoding='utf-8')})
