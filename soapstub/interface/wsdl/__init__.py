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

"""The ``soapstub.interface.wsdl`` package reads wsdl 1.1 documents and turns
their port types into operation signatures."""

from soapstub.interface.wsdl.defn import Definitions
from soapstub.interface.wsdl.defn import Operation
from soapstub.interface.wsdl.defn import PortType
from soapstub.interface.wsdl.defn import Schema

from soapstub.interface.wsdl.parser import parse_operation
from soapstub.interface.wsdl.parser import parse_port_type

from soapstub.interface.wsdl.wsdl11 import Wsdl11Reader
from soapstub.interface.wsdl.wsdl11 import read_wsdl
from soapstub.interface.wsdl.wsdl11 import read_wsdl_string
