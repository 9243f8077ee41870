# -*- coding: utf-8 -*-
#
# This file is part of Invenio.
# Copyright (C) 2026 CERN.
#
# Invenio is free software; you can redistribute it and/or modify it
# under the terms of the MIT License; see LICENSE file for more details.

"""Invenio module for syncing records to Algolia."""

import os

from setuptools import find_packages, setup

readme = open('README.rst').read()
history = open('CHANGES.rst').read()

tests_require = [
    'coverage>=4.0',
    'isort>=4.2.15',
    'mock>=4.0.0',
    'pydocstyle>=1.0.0',
    'pytest-cov>=1.8.0',
    'pytest>=6',
]

extras_require = {
    'docs': [
        'Sphinx>=4.2.0',
    ],
    'tests': tests_require,
}

extras_require['all'] = []
for name, reqs in extras_require.items():
    if name[0] == ':' or name == 'all':
        continue
    extras_require['all'].extend(reqs)

install_requires = [
    'algoliasearch>=4.0.0,<5.0.0',
    'Flask>=2.3.0',
    'invenio-base>=2.0.0',
]

packages = find_packages(exclude=['tests', 'tests.*', 'examples'])

# Get the version string. Cannot be done with import!
g = {}
with open(os.path.join('invenio_algolia', 'version.py'), 'rt') as fp:
    exec(fp.read(), g)
    version = g['__version__']

setup(
    name='invenio-algolia',
    version=version,
    description=__doc__,
    long_description=readme + '\n\n' + history,
    keywords='invenio search algolia',
    license='MIT',
    author='CERN',
    author_email='info@inveniosoftware.org',
    url='https://github.com/inveniosoftware/invenio-algolia',
    packages=packages,
    zip_safe=False,
    include_package_data=True,
    platforms='any',
    python_requires='>=3.8',
    entry_points={
        'invenio_base.api_apps': [
            'invenio_algolia = invenio_algolia:InvenioAlgolia',
        ],
        'invenio_base.apps': [
            'invenio_algolia = invenio_algolia:InvenioAlgolia',
        ],
    },
    extras_require=extras_require,
    install_requires=install_requires,
    tests_require=tests_require,
    classifiers=[
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Topic :: Internet :: WWW/HTTP :: Indexing/Search',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
        'Development Status :: 4 - Beta',
    ],
)
