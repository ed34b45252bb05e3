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


class EnumType(object):
    """A type restricted to a closed set of string literals. Without values,
    it's a plain alias of its base."""

    def __init__(self, name, base=None, values=None):
        self.name = name
        self.base = base
        self.values = [] if values is None else list(values)

    @property
    def is_alias(self):
        return len(self.values) == 0

    def __repr__(self):
        return "EnumType(%r, base=%r, values=%r)" % (self.name, self.base,
                                                                    self.values)
