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

"""Visitors that turn schema node trees into records and enums.

Both visitors are pre-order descents that carry the record (or enum) being
populated as an argument, so that nested anonymous types attach to the type
that encloses them. Only a subset of Xml Schema is understood. Unknown node
tags are walked through, unknown type names are passed through as they are.
"""

import logging
logger = logging.getLogger(__name__)

from soapstub.const import OPTIONAL_MARKER
from soapstub.const.xml import NS_XSD
from soapstub.error import SchemaContractError
from soapstub.model import Builtin
from soapstub.model import EnumType
from soapstub.model import Field
from soapstub.model import RecordType
from soapstub.model import map_primitive
from soapstub.util import local_name
from soapstub.util import namespace_to_unit_name
from soapstub.util import split_qname
from soapstub.util.color import B, G, MAG

from soapstub.interface.xml_schema import defn


def _require(node, attr):
    retval = getattr(node, attr)
    if retval is None:
        raise SchemaContractError(node, attr)
    return retval


def resolve_type(ctx, unit, node):
    """Returns the type of the given typed element as seen from ``unit``.

    A type whose prefix is bound to another namespace is recorded as an import
    request of ``unit``. A name that's not a record or enum of ``unit`` goes
    through :func:`soapstub.model.map_primitive` and is returned unchanged
    when it's not a primitive either.
    """

    prefix, type_name = split_qname(node.type)

    ns = node.xmlns.get(prefix) if prefix is not None else None
    if ns is not None and ns != NS_XSD:
        unit_name = namespace_to_unit_name(ns)
        if unit_name != unit.name:
            ctx.debug2("import %s from %s", type_name, unit_name)
            unit.require_import(unit_name, type_name)

    if unit.get_type(type_name) is not None:
        return type_name

    return map_primitive(type_name)


def parse_element(ctx, unit, record, node):
    """Visits ``node`` and its descendants, adding what they define to
    ``unit``.

    :param ctx: The :class:`soapstub._base.ParserContext` of the compilation.
    :param unit: The :class:`soapstub.model.OutputUnit` types are added to.
    :param record: The record fields are added to, or None at the top level.
    :param node: A :class:`soapstub.interface.xml_schema.defn.Node`.
    """

    tag = node.tag

    if tag == defn.ELEMENT:
        name = _require(node, 'name')

        if node.type is not None:
            if record is None:
                ctx.debug1("skipping element %s: no record to add it to", name)

            else:
                if node.nillable:
                    name += OPTIONAL_MARKER

                field = Field(name, resolve_type(ctx, unit, node),
                                                       is_array=node.is_array)
                ctx.debug2("field %s.%r", record.name, field)
                record.fields.append(field)

        else:
            if record is None:
                sub_name = name
            else:
                sub_name = '_'.join((record.name, name))

            ctx.debug1("adding record: %s", sub_name)
            sub = unit.add_record(RecordType.root(sub_name))
            if record is not None:
                record.fields.append(Field(name, sub.name))

            record = sub

    elif tag == defn.ANY:
        if record is not None:
            ctx.debug2("record %s is open", record.name)
            del record.fields[:]
            record.base = Builtin.ANY_MAP

    elif tag == defn.COMPLEX_TYPE:
        if node.name is not None:
            ctx.debug1("adding record: %s", node.name)
            record = unit.add_record(RecordType.root(node.name))

    elif tag == defn.EXTENSION:
        base = _require(node, 'base')
        if record is not None:
            record.base = local_name(base)

    for child in node.children:
        parse_element(ctx, unit, record, child)


def parse_simple_type(ctx, unit, enum, node):
    """Visits ``node`` and its descendants, adding the enums they define to
    ``unit``. ``enum`` is the enum being populated, or None at the top level.
    """

    tag = node.tag

    if tag == defn.SIMPLE_TYPE:
        if node.name is not None:
            ctx.debug1("adding enum: %s", node.name)
            enum = unit.add_enum(EnumType(node.name))

    elif tag == defn.RESTRICTION:
        # without a base, the restricted type is an inline simpleType child
        # whose own restriction sets it.
        if enum is not None and node.base is not None:
            enum.base = map_primitive(local_name(node.base))

    elif tag == defn.ENUMERATION:
        value = _require(node, 'value')
        if enum is not None:
            enum.values.append(value)

    elif tag == defn.LIST:
        # FIXME: A list of enumerated values should keep its values. This
        # degrades it to a plain string until that's settled.
        if enum is not None:
            ctx.debug2("enum %s is a list, using string", enum.name)
            del enum.values[:]
            enum.base = Builtin.STRING
        return

    for child in node.children:
        parse_simple_type(ctx, unit, enum, child)


def parse_schema(ctx, schema):
    """Adds the simple and complex types of the given
    :class:`soapstub.interface.wsdl.defn.Schema` to the unit of its target
    namespace and returns that unit."""

    tns = _require(schema, 'target_namespace')
    unit = ctx.get_unit(namespace_to_unit_name(tns))

    ctx.debug0("%s processing simple types", G(tns))
    for node in schema.simple_types.values():
        parse_simple_type(ctx, unit, None, node)

    ctx.debug0("%s processing complex types", B(tns))
    for node in schema.complex_types.values():
        parse_element(ctx, unit, None, node)

    ctx.debug0("%s done: %d records, %d enums", MAG(tns), len(unit.records),
                                                                len(unit.enums))
    return unit
