#!/usr/bin/env python3
"""
Setup script for SwapKeys
"""

import os

from setuptools import setup, find_packages


def read_version():
    """Read __version__ without importing the package."""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'swapkeys', '__version__.py')
    namespace = {}
    with open(path, encoding='utf-8') as f:
        exec(f.read(), namespace)
    return namespace['__version__']


setup(
    name='swapkeys',
    version=read_version(),
    description='Swap digits with their shifted symbols (and other key pairs) while typing text in a modal editor',
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.9',
    install_requires=[],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov',
            'pytest-timeout',
        ],
        'test': [
            'pytest>=7.0',
            'pytest-timeout',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Editors',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
    ],
)
