# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('linkheader', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

setup(
    name='linkheader',
    version=metadata['version'],
    description='Parser for the HTTP Link header (RFC 8288)',
    long_description=long_description,
    license='MIT',

    install_requires=[
        'lxml >= 3.6.0',
        'bitstring >= 3.1.4, < 4.3',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },

    packages=[
        'linkheader',
        'linkheader.reports',
        'linkheader.syntax',
        'linkheader.util',
    ],
    package_data={
        'linkheader': ['notices.xml'],
    },
    entry_points={
        'console_scripts': [
            'linkheader=linkheader.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
    ],
    keywords='HTTP Link header RFC 8288 web linking parser',
)
