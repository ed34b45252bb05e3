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

__version__ = '0.1.0'

from soapstub._base import ParserContext

from soapstub.model import *

from soapstub.error import SoapStubError
from soapstub.error import SchemaContractError
from soapstub.error import UnitFinalizedError
from soapstub.error import DocumentError

from soapstub.interface import Interface
from soapstub.interface import build_units
from soapstub.interface.wsdl import read_wsdl
from soapstub.interface.wsdl import read_wsdl_string

from soapstub.protocol import TypeScript
