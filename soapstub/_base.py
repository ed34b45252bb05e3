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

from soapstub.model import OutputUnit


class ParserContext(object):
    """State of one compilation: the registry of output units keyed by unit
    name. It's passed down through every visitor. The record or enum being
    populated is passed alongside it and never stored here.
    """

    def __init__(self):
        self.units = {}

    def get_unit(self, name):
        """Returns the unit with the given name, creating it on first use."""

        retval = self.units.get(name)
        if retval is None:
            self.debug1("adding unit: %s", name)
            retval = self.units[name] = OutputUnit(name)
        return retval

    def debug0(self, s, *args, **kwargs):
        logger.debug(s, *args, **kwargs)

    def debug1(self, s, *args, **kwargs):
        logger.debug("  %s" % s, *args, **kwargs)

    def debug2(self, s, *args, **kwargs):
        logger.debug("    %s" % s, *args, **kwargs)
