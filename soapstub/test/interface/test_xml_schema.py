#!/usr/bin/env python
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

import logging
import unittest

from soapstub._base import ParserContext
from soapstub.const.xml import NS_XSD
from soapstub.error import SchemaContractError
from soapstub.model import Builtin
from soapstub.model import Field
from soapstub.interface.wsdl.defn import Schema
from soapstub.interface.xml_schema.defn import ANY
from soapstub.interface.xml_schema.defn import COMPLEX_TYPE
from soapstub.interface.xml_schema.defn import ELEMENT
from soapstub.interface.xml_schema.defn import ENUMERATION
from soapstub.interface.xml_schema.defn import EXTENSION
from soapstub.interface.xml_schema.defn import LIST
from soapstub.interface.xml_schema.defn import RESTRICTION
from soapstub.interface.xml_schema.defn import SIMPLE_TYPE
from soapstub.interface.xml_schema.defn import Node
from soapstub.interface.xml_schema.parser import parse_element
from soapstub.interface.xml_schema.parser import parse_schema
from soapstub.interface.xml_schema.parser import parse_simple_type


TNS = 'https://ex.com/svc'
OTHER_NS = 'http://other.org/types'
XMLNS = {'xs': NS_XSD, 'tns': TNS, 'q1': OTHER_NS}

ATTRIBUTES = Field('$attributes?', Builtin.ATTRIBUTE_MAP)


def _element(name, type=None, **kwargs):
    kwargs.setdefault('xmlns', XMLNS)
    return Node(ELEMENT, name=name, type=type, **kwargs)


def _complex_type(name, *children):
    return Node(COMPLEX_TYPE, name=name,
                                   children=[Node('sequence', children=list(children))])


def _simple_type(name, base, *values):
    return Node(SIMPLE_TYPE, name=name, children=[
        Node(RESTRICTION, base=base,
               children=[Node(ENUMERATION, value=v) for v in values]),
    ])


class TestElementVisitor(unittest.TestCase):
    def setUp(self):
        self.ctx = ParserContext()
        self.unit = self.ctx.get_unit('ex.com/svc/index.ts')

    def parse(self, node):
        parse_element(self.ctx, self.unit, None, node)

    def test_fields_in_declared_order(self):
        self.parse(_complex_type('Widget',
            _element('a', 'xs:string'),
            _element('b', 'xs:int'),
            _element('c', 'xs:dateTime'),
            _element('d', 'xs:base64Binary'),
        ))

        r = self.unit.get_record('Widget')
        assert r.fields == [
            ATTRIBUTES,
            Field('a', 'string'),
            Field('b', Builtin.NUMBER),
            Field('c', Builtin.DATE_TIME),
            Field('d', Builtin.BYTES),
        ]
        assert r.base is None

    def test_array_and_optional_markers(self):
        self.parse(_complex_type('Markers',
            _element('plain', 'xs:string'),
            _element('many', 'xs:string', max_occurs='unbounded'),
            _element('maybe', 'xs:string', nillable=True),
            _element('both', 'xs:string', nillable=True,
                                                         max_occurs='unbounded'),
            _element('bounded', 'xs:string', max_occurs='5'),
        ))

        fields = self.unit.get_record('Markers').fields[1:]
        assert [f.name for f in fields] == \
                                   ['plain', 'many', 'maybe?', 'both?', 'bounded']
        assert [f.is_array for f in fields] == [False, True, False, True, False]
        assert [f.is_optional for f in fields] == \
                                               [False, False, True, True, False]

    def test_anonymous_nested_record(self):
        self.parse(_complex_type('Parent',
            _element('Child', children=[
                Node(COMPLEX_TYPE, children=[
                    Node('sequence', children=[_element('x', 'xs:string')]),
                ]),
            ]),
            _element('after', 'xs:int'),
        ))

        assert [r.name for r in self.unit.records] == ['Parent', 'Parent_Child']

        parent = self.unit.get_record('Parent')
        assert parent.fields == [
            ATTRIBUTES,
            Field('Child', 'Parent_Child'),
            Field('after', Builtin.NUMBER),
        ]

        child = self.unit.get_record('Parent_Child')
        assert child.fields == [ATTRIBUTES, Field('x', 'string')]

    def test_top_level_anonymous_element(self):
        self.parse(_element('Request', children=[
            Node(COMPLEX_TYPE, children=[
                Node('sequence', children=[_element('id', 'xs:long')]),
            ]),
        ]))

        r = self.unit.get_record('Request')
        assert r.fields == [ATTRIBUTES, Field('id', Builtin.NUMBER)]

    def test_typed_element_without_record_is_dropped(self):
        self.parse(_element('Loose', 'xs:string'))

        assert self.unit.records == []

    def test_any(self):
        self.parse(_complex_type('Bag',
            _element('a', 'xs:string'),
            Node(ANY),
        ))

        r = self.unit.get_record('Bag')
        assert r.fields == []
        assert r.base is Builtin.ANY_MAP
        assert r.is_open

    def test_fields_after_any(self):
        self.parse(_complex_type('Bag',
            _element('a', 'xs:string'),
            Node(ANY),
            _element('b', 'xs:string'),
        ))

        assert self.unit.get_record('Bag').fields == [Field('b', 'string')]

    def test_extension(self):
        self.parse(Node(COMPLEX_TYPE, name='Derived', children=[
            Node('complexContent', children=[
                Node(EXTENSION, base='tns:Base', children=[
                    Node('sequence', children=[_element('extra', 'xs:string')]),
                ]),
            ]),
        ]))

        r = self.unit.get_record('Derived')
        assert r.base == 'Base'
        assert r.fields == [ATTRIBUTES, Field('extra', 'string')]

    def test_extension_without_base(self):
        node = Node(COMPLEX_TYPE, name='Broken', children=[Node(EXTENSION)])

        with self.assertRaises(SchemaContractError) as cm:
            self.parse(node)

        assert cm.exception.attr == 'base'

    def test_element_without_name(self):
        with self.assertRaises(SchemaContractError):
            self.parse(_complex_type('Broken', _element(None, 'xs:string')))

    def test_local_type(self):
        parse_simple_type(self.ctx, self.unit, None,
                                       _simple_type('Color', 'xs:string', 'Red'))
        self.parse(_complex_type('Widget', _element('color', 'tns:Color')))

        assert self.unit.get_record('Widget').fields[1] == \
                                                          Field('color', 'Color')
        assert len(self.unit.required_imports) == 0

    def test_unknown_type_passes_through(self):
        self.parse(_complex_type('Widget',
            _element('thing', 'tns:Unknown'),
            _element('flag', 'xs:boolean'),
            _element('raw', 'Unprefixed'),
        ))

        assert self.unit.get_record('Widget').fields[1:] == [
            Field('thing', 'Unknown'),
            Field('flag', 'boolean'),
            Field('raw', 'Unprefixed'),
        ]
        assert len(self.unit.required_imports) == 0

    def test_cross_namespace_import_is_deduplicated(self):
        self.parse(_complex_type('Widget',
            _element('first', 'q1:Thing'),
            _element('second', 'q1:Thing', max_occurs='unbounded'),
            _element('name', 'xs:string'),
        ))

        assert dict(self.unit.required_imports) == {
            'other.org/types/index.ts': set(['Thing']),
        }

        fields = self.unit.get_record('Widget').fields
        assert fields[1] == Field('first', 'Thing')
        assert fields[2] == Field('second', 'Thing', is_array=True)

    def test_duplicate_record_overwrites(self):
        self.parse(_complex_type('Dup', _element('old', 'xs:string')))
        self.parse(_complex_type('Other'))
        self.parse(_complex_type('Dup', _element('new', 'xs:string')))

        assert [r.name for r in self.unit.records] == ['Dup', 'Other']
        assert self.unit.get_record('Dup').fields[1] == Field('new', 'string')


class TestSimpleTypeVisitor(unittest.TestCase):
    def setUp(self):
        self.ctx = ParserContext()
        self.unit = self.ctx.get_unit('ex.com/svc/index.ts')

    def parse(self, node):
        parse_simple_type(self.ctx, self.unit, None, node)

    def test_enumeration(self):
        self.parse(_simple_type('Color', 'xs:string', 'A', 'B'))

        e = self.unit.get_enum('Color')
        assert e.values == ['A', 'B']
        assert e.base == 'string'
        assert not e.is_alias

    def test_alias(self):
        self.parse(_simple_type('Amount', 'xs:decimal'))

        e = self.unit.get_enum('Amount')
        assert e.values == []
        assert e.base is Builtin.NUMBER
        assert e.is_alias

    def test_list_discards_values(self):
        node = _simple_type('Colors', 'xs:string', 'A', 'B')
        node.children.append(Node(LIST, children=[
            Node(ENUMERATION, value='C'),
        ]))

        self.parse(node)

        e = self.unit.get_enum('Colors')
        assert e.values == []
        assert e.base is Builtin.STRING
        assert e.is_alias

    def test_enumeration_without_value(self):
        node = Node(SIMPLE_TYPE, name='Broken', children=[
            Node(RESTRICTION, base='xs:string', children=[Node(ENUMERATION)]),
        ])

        with self.assertRaises(SchemaContractError):
            self.parse(node)

    def test_restriction_of_inline_simple_type(self):
        node = Node(SIMPLE_TYPE, name='ShortCode', children=[
            Node(RESTRICTION, children=[
                Node(SIMPLE_TYPE, children=[
                    Node(RESTRICTION, base='xs:string'),
                ]),
                Node('maxLength', value='3'),
            ]),
        ])

        self.parse(node)

        e = self.unit.get_enum('ShortCode')
        assert e.base == 'string'
        assert e.is_alias

    def test_inline_restriction_keeps_values(self):
        node = Node(SIMPLE_TYPE, name='Size', children=[
            Node(RESTRICTION, children=[
                Node(SIMPLE_TYPE, children=[
                    Node(RESTRICTION, base='xs:int'),
                ]),
                Node(ENUMERATION, value='1'),
                Node(ENUMERATION, value='2'),
            ]),
        ])

        self.parse(node)

        e = self.unit.get_enum('Size')
        assert e.base is Builtin.NUMBER
        assert e.values == ['1', '2']

    def test_restriction_without_base(self):
        self.parse(Node(SIMPLE_TYPE, name='Loose', children=[Node(RESTRICTION)]))

        e = self.unit.get_enum('Loose')
        assert e.base is None
        assert e.is_alias


class TestSchema(unittest.TestCase):
    def test_schema(self):
        ctx = ParserContext()
        schema = Schema(TNS,
            simple_types={'Color': _simple_type('Color', 'xs:string', 'Red')},
            complex_types={'Widget': _complex_type('Widget',
                                                _element('color', 'tns:Color'))},
        )

        unit = parse_schema(ctx, schema)

        assert unit.name == 'ex.com/svc/index.ts'
        assert ctx.units == {unit.name: unit}
        assert [e.name for e in unit.enums] == ['Color']
        assert unit.get_record('Widget').fields[1] == Field('color', 'Color')

    def test_schemas_sharing_a_namespace(self):
        ctx = ParserContext()

        a = parse_schema(ctx, Schema(TNS, {}, {'A': _complex_type('A')}))
        b = parse_schema(ctx, Schema(TNS, {}, {'B': _complex_type('B')}))

        assert a is b
        assert [r.name for r in a.records] == ['A', 'B']

    def test_schema_without_target_namespace(self):
        with self.assertRaises(SchemaContractError):
            parse_schema(ParserContext(), Schema(None))


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
