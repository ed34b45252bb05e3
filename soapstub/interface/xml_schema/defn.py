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

"""Schema nodes, the input of the visitors in
:mod:`soapstub.interface.xml_schema.parser`.

A :class:`Node` is a tagged union: its ``tag`` is the local name of the xml
schema construct it was read from and says which of the attributes are
meaningful. The tags the visitors act on are listed below. Every other tag
(``sequence``, ``choice``, ``complexContent``, ...) is a plain container.
"""

ELEMENT = 'element'
ANY = 'any'
COMPLEX_TYPE = 'complexType'
EXTENSION = 'extension'
SIMPLE_TYPE = 'simpleType'
RESTRICTION = 'restriction'
ENUMERATION = 'enumeration'
LIST = 'list'

INPUT = 'input'
OUTPUT = 'output'

UNBOUNDED = 'unbounded'


class Node(object):
    """A parsed schema node.

    :param tag: The variant of the node.
    :param name: ``name`` attribute of elements, named types and messages.
    :param type: Prefixed type name of elements, e.g. ``xs:string``.
    :param base: Prefixed base type name of extensions and restrictions.
    :param value: Literal value of enumerations.
    :param nillable: Whether the element is nillable.
    :param max_occurs: ``maxOccurs`` of elements as a string, e.g.
        ``"unbounded"``.
    :param xmlns: Prefix to namespace uri bindings in scope for this node.
    :param children: Child nodes, in document order.
    """

    __slots__ = ('tag', 'name', 'type', 'base', 'value', 'nillable',
                                              'max_occurs', 'xmlns', 'children')

    def __init__(self, tag, name=None, type=None, base=None, value=None,
                  nillable=False, max_occurs=None, xmlns=None, children=None):
        self.tag = tag
        self.name = name
        self.type = type
        self.base = base
        self.value = value
        self.nillable = nillable
        self.max_occurs = max_occurs
        self.xmlns = {} if xmlns is None else xmlns
        self.children = [] if children is None else children

    @property
    def is_array(self):
        return self.max_occurs == UNBOUNDED

    def __repr__(self):
        attrs = ["%s=%r" % (k, getattr(self, k))
                                 for k in ('name', 'type', 'base', 'value')
                                             if getattr(self, k) is not None]
        return "<%s %s>" % (self.tag, ' '.join(attrs))
