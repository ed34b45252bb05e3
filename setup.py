#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'soapstub', '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC = "Generates TypeScript types and service interfaces from WSDL " \
"documents."

LONG_DESC = """soapstub reads a WSDL 1.1 document along with the XML Schema
documents it imports, compiles its types and port types into a normalized type
model and emits one TypeScript module per target namespace and one per port
type.

Run ``wsdl2ts -h`` for command line options.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='soapstub',
    packages=find_packages(),

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Code Generators',
    ],
    keywords='soap wsdl xsd xml typescript codegen',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'lxml',
        'colorama',
    ],
    extras_require={
        'test': ['pytest'],
    },

    entry_points={
        'console_scripts': [
            'wsdl2ts=soapstub.cmd:main',
        ]
    },
)
