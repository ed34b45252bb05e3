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

from urllib.parse import urlsplit

from soapstub.const import UNIT_SUFFIX
from soapstub.const import PORT_TYPE_SUFFIX


def split_url(url):
    """Splits a url into (uri_scheme, host, path). The host is lowercased, the
    path is kept as is."""
    parts = urlsplit(url)
    return parts.scheme.lower(), parts.hostname or '', parts.path


def namespace_to_unit_name(namespace):
    """Returns the name of the output unit that holds the types of the given
    namespace.

    >>> namespace_to_unit_name('https://ex.com/svc')
    'ex.com/svc/index.ts'
    """

    _, host, path = split_url(namespace)
    return host + path + UNIT_SUFFIX


def port_type_unit_name(name):
    """Returns the name of the output unit that holds the given port type."""

    return name + PORT_TYPE_SUFFIX


def split_qname(qname):
    """Splits a ``prefix:local`` type name into (prefix, local). The prefix is
    ``None`` for unqualified names."""

    if ':' in qname:
        prefix, local = qname.split(':', 1)
        return prefix, local

    return None, qname


def local_name(qname):
    return split_qname(qname)[1]
