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

"""The ``soapstub.model`` package contains the abstract type model the
compiler produces and the emitters consume."""

from soapstub.model.primitive import Builtin
from soapstub.model.primitive import PRIMITIVE_MAP
from soapstub.model.primitive import map_primitive

from soapstub.model.complex import Field
from soapstub.model.complex import Operation
from soapstub.model.complex import RecordType

from soapstub.model.enum import EnumType

from soapstub.model.unit import ImportReference
from soapstub.model.unit import OutputUnit


__all__ = [
    'Builtin', 'PRIMITIVE_MAP', 'map_primitive',
    'Field', 'Operation', 'RecordType', 'EnumType',
    'ImportReference', 'OutputUnit',
]
