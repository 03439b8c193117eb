#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from os import path
from setuptools import setup, find_packages


with open(path.join(path.dirname(__file__), 'requirements.txt')) as f:
    requirements = f.read().splitlines()

setup(
    author="Harvester System Tests maintainers",
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Framework :: Pytest',
    ],
    description="Utilities for running Harvester UI System Tests",
    install_requires=requirements,
    extras_require={'test': ['pytest']},
    license="GPL-2.0-or-later",
    include_package_data=True,
    keywords='HST harvester selenium',
    name='hst_utils',
    packages=find_packages(include=['hst_utils', 'hst_utils.*']),
    python_requires='>=3.9',
    version='0.1.0',
    zip_safe=False,
)
