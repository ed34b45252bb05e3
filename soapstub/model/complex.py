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

"""The ``soapstub.model.complex`` module contains the record types and their
members."""

from soapstub.const import ATTRIBUTES_FIELD
from soapstub.const import OPTIONAL_MARKER
from soapstub.model.primitive import Builtin


class Field(object):
    """A named member of a record.

    :param name: Field name. Ends with :data:`soapstub.const.OPTIONAL_MARKER`
        when the field came from a nillable element.
    :param type: Either a :class:`Builtin`, the name of a record or enum or
        a name that's assumed to be defined elsewhere.
    :param is_array: Whether the field holds a sequence of ``type``.
    """

    __slots__ = ('name', 'type', 'is_array')

    def __init__(self, name, type, is_array=False):
        self.name = name
        self.type = type
        self.is_array = is_array

    @property
    def is_optional(self):
        return self.name.endswith(OPTIONAL_MARKER)

    def __eq__(self, other):
        return isinstance(other, Field) and (self.name, self.type,
                  self.is_array) == (other.name, other.type, other.is_array)

    def __hash__(self):
        return hash((self.name, self.type, self.is_array))

    def __repr__(self):
        return "Field(%r, %r%s)" % (self.name, self.type,
                                      ', is_array=True' if self.is_array else '')


def attributes_field():
    return Field(ATTRIBUTES_FIELD, Builtin.ATTRIBUTE_MAP)


class Operation(object):
    """A method of a port type."""

    __slots__ = ('name', 'input', 'output_type')

    def __init__(self, name, input, output_type):
        self.name = name
        self.input = input
        self.output_type = output_type

    def __repr__(self):
        return "Operation(%r, %r, %r)" % (self.name, self.input,
                                                               self.output_type)


class RecordType(object):
    """A named structured type with at most one supertype."""

    def __init__(self, name, fields=None, base=None):
        self.name = name
        self.base = base
        self.fields = [] if fields is None else list(fields)
        self.operations = []

    @classmethod
    def root(cls, name):
        """Returns a record that carries the implicit attributes field."""
        return cls(name, [attributes_field()])

    @property
    def is_open(self):
        return self.base is Builtin.ANY_MAP

    def get_field(self, name):
        for f in self.fields:
            if f.name == name:
                return f

    def __repr__(self):
        return "RecordType(%r, base=%r, fields=%r)" % (self.name, self.base,
                                                                    self.fields)
