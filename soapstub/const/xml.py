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

"""The ``soapstub.const.xml`` module contains the namespaces and qualified tag
names of the wsdl and xml schema constructs the reader understands.
"""

NS_XSD = 'http://www.w3.org/2001/XMLSchema'
NS_WSDL11 = 'http://schemas.xmlsoap.org/wsdl/'


def Tnswrap(ns):
    return lambda s: "{%s}%s" % (ns, s)

XSD = Tnswrap(NS_XSD)
WSDL11 = Tnswrap(NS_WSDL11)
