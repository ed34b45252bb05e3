#
# soapstub - Copyright (C) Soapstub contributors.
#
# This library is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License as published by the Free Software Foundation; either
# version 2.1 of the License, or (at your option) any later version.
#
# This library is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this library; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301
#

"""The ``soapstub.const`` package contains miscellanous constant values needed
in various parts of soapstub."""


UNIT_SUFFIX = '/index.ts'
"""Appended to the host and path of a namespace uri to name its output
unit."""

PORT_TYPE_SUFFIX = '.ts'
"""Appended to a port type name to name its output unit."""

OPTIONAL_MARKER = '?'
"""Suffix of the names of fields generated from nillable elements."""

ATTRIBUTES_FIELD = '$attributes' + OPTIONAL_MARKER
"""Name of the implicit open-attributes field every root record carries."""

INPUT_FIELD = 'input'
"""Name of the single argument of every operation."""

DEFAULT_OUTPUT_PATH = 'generated'
"""Directory the emitted source files are written to when none is given."""

WRITE_POOL_SIZE = 4
"""Max. number of threads used to write the emitted units in parallel."""

FETCH_TIMEOUT = 30.0
"""Timeout in seconds for fetching remote wsdl and xml schema documents."""

MISSING_MESSAGE_SUFFIX = {
    'input': 'Request',
    'output': 'Response',
}
"""Appended to an operation name to name the empty message that stands in for
a missing ``input`` or ``output``, as in one-way operations."""
