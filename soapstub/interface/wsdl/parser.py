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
logger = logging.getLogger(__name__)

from soapstub.const import INPUT_FIELD
from soapstub.error import SchemaContractError
from soapstub.model import Field
from soapstub.model import Operation
from soapstub.model import RecordType
from soapstub.util import port_type_unit_name
from soapstub.util.color import YEL

from soapstub.interface.xml_schema.parser import parse_element


def _parse_message(ctx, unit, operation, attr):
    message = getattr(operation, attr)
    if message is None:
        raise SchemaContractError(operation, attr)
    if message.name is None:
        raise SchemaContractError(message, 'name')

    parse_element(ctx, unit, None, message)
    return message.name


def parse_operation(ctx, unit, operation):
    """Returns the :class:`soapstub.model.Operation` for the given port type
    operation. The records of its input and output messages are added to
    ``unit``, the unit of the port type, not to the unit of any schema."""

    if operation.name is None:
        raise SchemaContractError(operation, 'name')

    ctx.debug1("adding operation: %s", operation.name)

    input_type = _parse_message(ctx, unit, operation, 'input')
    output_type = _parse_message(ctx, unit, operation, 'output')

    return Operation(operation.name, Field(INPUT_FIELD, input_type),
                                                                    output_type)


def parse_port_type(ctx, port_type):
    """Builds the unit of the given port type: one record named after the port
    type that has one method per operation, plus the records of the
    operation messages."""

    if port_type.name is None:
        raise SchemaContractError(port_type, 'name')

    ctx.debug0("%s processing port type", YEL(port_type.name))

    unit = ctx.get_unit(port_type_unit_name(port_type.name))

    record = RecordType(port_type.name)
    record.operations = [parse_operation(ctx, unit, op)
                                                 for op in port_type.operations]
    unit.add_record(record)

    return unit
