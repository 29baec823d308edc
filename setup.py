#!/usr/bin/env python3

import os
from setuptools import setup

directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(directory, 'README.md'), encoding='utf-8') as f:
  long_description = f.read()

setup(name='pdfsalvage',
      version='0.1.0',
      description='recover readable text from PDF files without a PDF library',
      license='MIT',
      long_description=long_description,
      long_description_content_type='text/markdown',
      packages = ['pdfsalvage'],
      classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License"
      ],
      install_requires=['requests', 'tqdm'],
      python_requires='>=3.10',
      extras_require={
        'linting': [
          "flake8",
          "pylint",
          "mypy",
          "pre-commit",
        ],
        'testing': [
          "pytest",
        ],
      },
      entry_points={
        'console_scripts': [
          'pdfsalvage=pdfsalvage.main:main'
        ]
      },
      include_package_data=True)
