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

"""The ``soapstub.protocol.typescript`` module renders output units as
TypeScript declaration modules: one exported interface per record, one
exported enum or type alias per enum type and one named import per unit
that's depended on."""

import logging
logger = logging.getLogger(__name__)

import json
import posixpath
import re

from soapstub.const import OPTIONAL_MARKER
from soapstub.const import PORT_TYPE_SUFFIX
from soapstub.model import Builtin
from soapstub.protocol._base import ProtocolBase


INDENT = '    '

TYPE_MAP = {
    Builtin.NUMBER: 'number',
    Builtin.DATE_TIME: 'Date',
    Builtin.BYTES: 'number[]',
    Builtin.STRING: 'string',
    Builtin.ATTRIBUTE_MAP:
             '{ $xsiType?: {type: string; xmlns: string}; [key:string]: any; }',
    Builtin.ANY_MAP: 'Record<string, any>',
}

_IDENTIFIER = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')

# names that TypeScript reads as numbers: String(Number(name)) == name
_NUMERIC_NAME = re.compile(
                     r'^(-?(0|[1-9][0-9]*)(\.[0-9]*[1-9])?|NaN|-?Infinity)$')


def quote_name(name):
    """Returns the given member name as is when it's a valid identifier, as a
    string literal otherwise."""

    if _IDENTIFIER.match(name):
        return name
    return json.dumps(name)


def enum_member_name(value):
    """Returns the enum member name of the given value. Enum members can't
    have numeric names, so those get a leading underscore.

    >>> enum_member_name('1')
    '_1'
    """

    if _NUMERIC_NAME.match(value):
        value = '_' + value
    return quote_name(value)


def get_module_specifier(from_name, to_name):
    """Returns the relative import path of unit ``to_name`` as seen from unit
    ``from_name``.

    >>> get_module_specifier('Service.ts', 'ex.com/svc/index.ts')
    './ex.com/svc'
    """

    from_name = posixpath.normpath(from_name)
    to_name = posixpath.normpath(to_name)

    if to_name.endswith(PORT_TYPE_SUFFIX):
        to_name = to_name[:-len(PORT_TYPE_SUFFIX)]
    if posixpath.basename(to_name) == 'index':
        to_name = posixpath.dirname(to_name)

    retval = posixpath.relpath(to_name, posixpath.dirname(from_name) or '.')
    if not retval.startswith('.'):
        retval = './' + retval
    return retval


class TypeScript(ProtocolBase):
    """Emits TypeScript.

    >>> TypeScript().save(units, 'generated')
    """

    def type_to_string(self, type_, is_array=False):
        retval = TYPE_MAP.get(type_, type_)
        if retval is None:
            retval = 'any'
        if is_array:
            retval += '[]'
        return retval

    def field_to_stream(self, field, ostr, indent):
        name = field.name
        marker = ''
        if field.is_optional:
            name = name[:-len(OPTIONAL_MARKER)]
            marker = OPTIONAL_MARKER

        ostr.write(INDENT * indent)
        ostr.write("%s%s: %s;\n" % (quote_name(name), marker,
                               self.type_to_string(field.type, field.is_array)))

    def operation_to_stream(self, operation, ostr, indent):
        ostr.write(INDENT * indent)
        ostr.write("%s(%s: %s): Promise<{result: %s, envelope: string}>;\n" % (
            quote_name(operation.name),
            operation.input.name,
            self.type_to_string(operation.input.type, operation.input.is_array),
            self.type_to_string(operation.output_type),
        ))

    def import_to_stream(self, unit, ref, ostr):
        ostr.write('import { %s } from "%s";\n' % (', '.join(ref.names),
                                   get_module_specifier(unit.name, ref.unit.name)))

    def record_to_stream(self, record, ostr, indent=0):
        ostr.write(INDENT * indent)
        ostr.write("export interface %s" % record.name)
        if record.base is not None:
            ostr.write(" extends %s" % self.type_to_string(record.base))
        ostr.write(" {\n")

        for f in record.fields:
            self.field_to_stream(f, ostr, indent + 1)

        for op in record.operations:
            self.operation_to_stream(op, ostr, indent + 1)

        ostr.write(INDENT * indent)
        ostr.write("}\n")

    def enum_to_stream(self, enum, ostr, indent=0):
        ostr.write(INDENT * indent)

        if enum.is_alias:
            base = enum.base
            if base is None:
                base = Builtin.STRING
            ostr.write("export type %s = %s;\n" % (enum.name,
                                                     self.type_to_string(base)))
            return

        ostr.write("export enum %s {\n" % enum.name)
        for v in enum.values:
            ostr.write(INDENT * (indent + 1))
            ostr.write("%s = %s,\n" % (enum_member_name(v), json.dumps(v)))
        ostr.write(INDENT * indent)
        ostr.write("}\n")

    def unit_to_stream(self, unit, ostr):
        for ref in unit.imports:
            self.import_to_stream(unit, ref, ostr)

        entries = [(self.record_to_stream, r) for r in unit.records]
        entries.extend([(self.enum_to_stream, e) for e in unit.enums])

        for i, (to_stream, entry) in enumerate(entries):
            if i > 0 or len(unit.imports) > 0:
                ostr.write("\n")
            to_stream(entry, ostr)
