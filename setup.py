#! /usr/bin/env python3

import os
from setuptools import setup

def read_file(file_name):
    path = os.path.join(os.path.dirname(__file__), file_name)
    with open(path) as f:
        lines = f.readlines()
    return '\n'.join(lines)

VERSION = read_file('basequal/version.py').split("'")[1]

setup(
    name='basequal',
    version=VERSION,
    description='Phred quality score probabilities and log-space arithmetic',
    long_description=read_file('README.rst'),
    packages=[
        'basequal',
    ],
    install_requires=[
        'numpy',
        'numba',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>3.7.0',
    keywords=['biology', 'bioinformatics', 'genetics', 'genomics'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ]
    )
