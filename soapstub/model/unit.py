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

"""The ``soapstub.model.unit`` module contains the output unit, the bundle of
types that ends up in one emitted source file."""

import logging
logger = logging.getLogger(__name__)

from collections import defaultdict

from soapstub.error import UnitFinalizedError


class ImportReference(object):
    """Names of types one unit uses from another."""

    __slots__ = ('unit', 'names')

    def __init__(self, unit, names):
        self.unit = unit
        self.names = tuple(sorted(names))

    def __repr__(self):
        return "ImportReference(%r, %r)" % (self.unit.name, self.names)


class OutputUnit(object):
    """A namespace or port type scoped bundle of records and enums.

    Visitors append types and record the names they need from other units in
    :attr:`required_imports`. Those requests are turned into
    :attr:`imports` once every unit exists, after which the unit is
    read-only.

    :param name: The path-like identifier of the unit. See
        :func:`soapstub.util.namespace_to_unit_name`.
    """

    def __init__(self, name):
        self.name = name
        self.records = []
        self.enums = []
        self.required_imports = defaultdict(set)
        self.imports = []
        self.finalized = False

        # name -> position in records / enums
        self._record_index = {}
        self._enum_index = {}

    def _check_mutable(self):
        if self.finalized:
            raise UnitFinalizedError(self)

    @staticmethod
    def _put(coll, index, t):
        i = index.get(t.name)
        if i is not None:
            logger.debug("overwriting %r", t.name)
            coll[i] = t
            return

        index[t.name] = len(coll)
        coll.append(t)

    def add_record(self, record):
        """Appends the given record. A record with the same name is replaced
        in place."""

        self._check_mutable()
        self._put(self.records, self._record_index, record)
        return record

    def add_enum(self, enum):
        """Appends the given enum. An enum with the same name is replaced in
        place."""

        self._check_mutable()
        self._put(self.enums, self._enum_index, enum)
        return enum

    def get_record(self, name):
        i = self._record_index.get(name)
        if i is not None:
            return self.records[i]

    def get_enum(self, name):
        i = self._enum_index.get(name)
        if i is not None:
            return self.enums[i]

    def get_type(self, name):
        """Returns the record or enum with the given name, or None."""

        retval = self.get_record(name)
        if retval is None:
            retval = self.get_enum(name)
        return retval

    def require_import(self, unit_name, type_name):
        self._check_mutable()
        self.required_imports[unit_name].add(type_name)

    def add_import(self, unit, names):
        self._check_mutable()
        retval = ImportReference(unit, names)
        self.imports.append(retval)
        return retval

    def finalize(self):
        self.finalized = True

    def __repr__(self):
        return "OutputUnit(%r, records=%r, enums=%r)" % (self.name,
                   [r.name for r in self.records], [e.name for e in self.enums])
