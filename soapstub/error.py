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


"""The ``soapstub.error`` module contains the exceptions soapstub raises.

Unresolved type names and imports are not errors. Only documents that can't
be read and node trees that break the input contract are.
"""


class SoapStubError(Exception):
    """Base class for all soapstub errors."""


class SchemaContractError(SoapStubError):
    """Raised when a schema node lacks an attribute its grammar requires."""

    def __init__(self, node, attr, message="%r is missing the %r attribute."):
        try:
            message = message % (node, attr)
        except TypeError:
            pass

        super(SchemaContractError, self).__init__(message)

        self.node = node
        self.attr = attr


class UnitFinalizedError(SoapStubError):
    """Raised when an output unit is modified after import resolution."""

    def __init__(self, unit, message="Output unit %r is read-only."):
        super(UnitFinalizedError, self).__init__(message % (unit.name,))

        self.unit = unit


class DocumentError(SoapStubError):
    """Raised when a wsdl or xml schema document can't be fetched or
    parsed."""

    def __init__(self, url, orig_exc=None,
                               message="Could not read document at %r: %s"):
        super(DocumentError, self).__init__(message % (url, orig_exc))

        self.url = url
        self.orig_exc = orig_exc
