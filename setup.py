#!/usr/bin/env python3
# -*- tab-width: 4 -*- ;; Emacs
# vi: set ts=4 sw=4 noet :: Vi/ViM
############################################################ IDENT(1)
#
# $Title: Python setup for swiftdot $
# $Copyright: 2025 Devin Teske. All rights reserved. $
# $FrauBSD$
#
############################################################ LICENSE
#
# BSD 2-Clause
#
############################################################ DOCSTRING

"""Setup script for swiftdot."""

############################################################ IMPORTS

from setuptools import setup, find_packages
from pathlib import Path

############################################################ GLOBALS

# Read version from version.py
version = {}
with open(Path(__file__).parent / 'swiftdot' / 'version.py') as f:
	exec(f.read(), version)

# Read README if it exists
readme_file = Path(__file__).parent / 'README.md'
long_description = readme_file.read_text() if readme_file.exists() else ''

############################################################ SETUP

setup(
	name='swiftdot',
	version=version['VERSION'],
	description='Swift module dependency analysis and visualization tool',
	long_description=long_description,
	long_description_content_type='text/markdown',
	author='Devin Teske',
	author_email='dteske@FreeBSD.org',
	url='https://github.com/FrauBSD/swiftdot',
	packages=find_packages(exclude=['tests', 'tests.*']),
	entry_points={
		'console_scripts': [
			'swiftdot=swiftdot.__main__:main',
		],
	},
	extras_require={
		'test': ['pytest'],
	},
	python_requires='>=3.6',
	classifiers=[
		'Development Status :: 4 - Beta',
		'Intended Audience :: Developers',
		'Topic :: Software Development :: Code Generators',
		'Topic :: Software Development :: Documentation',
		'Programming Language :: Python :: 3',
		'Programming Language :: Python :: 3.6',
		'Programming Language :: Python :: 3.7',
		'Programming Language :: Python :: 3.8',
		'Programming Language :: Python :: 3.9',
		'Programming Language :: Python :: 3.10',
		'Programming Language :: Python :: 3.11',
		'Programming Language :: Python :: 3.12',
		'Programming Language :: Python :: 3.13',
	],
	keywords='swift dependency-graph visualization graphviz imports architecture',
)

################################################################################
# END
################################################################################
