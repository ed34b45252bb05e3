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

"""The ``soapstub.model.primitive`` module maps xml schema builtins to the
type categories of the model.

Only the names in :data:`PRIMITIVE_MAP` get a category. Every other name,
``string`` and ``boolean`` included, is used as is and left to the emitter.
"""

from enum import Enum


class Builtin(Enum):
    """Type categories that are not named types of any output unit."""

    NUMBER = 'number'
    DATE_TIME = 'dateTime'
    BYTES = 'bytes'
    STRING = 'string'

    ATTRIBUTE_MAP = 'attributeMap'
    """Type of the implicit open-attributes field of root records."""

    ANY_MAP = 'anyMap'
    """Base of records that accept arbitrary additional properties."""


_NUMERIC = (
    'int', 'integer',
    'negativeInteger', 'nonNegativeInteger',
    'nonPositiveInteger', 'positiveInteger',
    'double', 'decimal', 'float',
    'byte', 'short', 'long',
    'unsignedLong', 'unsignedInt', 'unsignedShort', 'unsignedByte',
)

PRIMITIVE_MAP = dict([(n, Builtin.NUMBER) for n in _NUMERIC])
PRIMITIVE_MAP.update({
    'dateTime': Builtin.DATE_TIME,
    'base64Binary': Builtin.BYTES,
    'duration': Builtin.STRING,
})


def map_primitive(type_name):
    """Returns the category of the given unprefixed xml schema type name, or
    the name itself when it's not in :data:`PRIMITIVE_MAP`."""

    return PRIMITIVE_MAP.get(type_name, type_name)
