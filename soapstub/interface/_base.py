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

from soapstub._base import ParserContext
from soapstub.util.color import R

from soapstub.interface.xml_schema.parser import parse_schema
from soapstub.interface.wsdl.parser import parse_port_type


class Interface(object):
    """Compiles a :class:`soapstub.interface.wsdl.Definitions` into output
    units.

    The build has two phases. First every schema and every port type is
    visited, which creates all units and collects the type names each unit
    needs from the others. Only then are those requests wired to the units
    they point to, as a unit may be requested before it's created.

    >>> units = Interface().build(definitions)
    """

    def __init__(self, ctx=None):
        if ctx is None:
            ctx = ParserContext()
        self.ctx = ctx

    @property
    def units(self):
        return list(self.ctx.units.values())

    def populate_interface(self, definitions):
        """Runs the first phase."""

        for schema in definitions.schemas:
            parse_schema(self.ctx, schema)

        for port_type in definitions.port_types:
            parse_port_type(self.ctx, port_type)

    def resolve_imports(self):
        """Runs the second phase. Requests for units that don't exist are
        dropped. Every unit is read-only afterwards."""

        self.ctx.debug0("%s resolving imports", R("*"))

        for unit in self.ctx.units.values():
            for unit_name, names in unit.required_imports.items():
                target = self.ctx.units.get(unit_name)
                if target is None:
                    self.ctx.debug1("%s: no unit %s for %r, skipped",
                                               unit.name, unit_name, sorted(names))
                    continue

                ref = unit.add_import(target, names)
                self.ctx.debug1("%s: %r", unit.name, ref)

        for unit in self.ctx.units.values():
            unit.finalize()

    def build(self, definitions):
        """Runs both phases and returns the units in the order they were
        created."""

        self.populate_interface(definitions)
        self.resolve_imports()

        return self.units


def build_units(definitions):
    """Shortcut for ``Interface().build(definitions)``."""

    return Interface().build(definitions)
