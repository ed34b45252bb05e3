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

"""Document level containers of the schema node tree."""


class Schema(object):
    """Type catalogs of one target namespace.

    :param target_namespace: Namespace uri of the schema.
    :param simple_types: Dict of ``simpleType`` nodes keyed by name.
    :param complex_types: Dict of ``complexType`` nodes keyed by name.
    """

    def __init__(self, target_namespace, simple_types=None,
                                                            complex_types=None):
        self.target_namespace = target_namespace
        self.simple_types = {} if simple_types is None else simple_types
        self.complex_types = {} if complex_types is None else complex_types

    def __repr__(self):
        return "Schema(%r)" % (self.target_namespace,)


class Operation(object):
    """A port type operation. ``input`` and ``output`` are message nodes
    whose names are what the operation takes and returns."""

    def __init__(self, name, input=None, output=None):
        self.name = name
        self.input = input
        self.output = output

    def __repr__(self):
        return "Operation(%r)" % (self.name,)


class PortType(object):
    def __init__(self, name, operations=None):
        self.name = name
        self.operations = [] if operations is None else operations

    def __repr__(self):
        return "PortType(%r)" % (self.name,)


class Definitions(object):
    """The whole parsed wsdl document."""

    def __init__(self, schemas=None, port_types=None):
        self.schemas = [] if schemas is None else schemas
        self.port_types = [] if port_types is None else port_types
