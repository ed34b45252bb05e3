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

import io
import os

from io import StringIO
from multiprocessing.pool import ThreadPool

from soapstub.const import DEFAULT_OUTPUT_PATH
from soapstub.const import WRITE_POOL_SIZE


class ProtocolBase(object):
    """Base class for emitters that render output units as source files.

    Subclasses implement :func:`unit_to_stream`.

    :param pool_size: Max. number of threads that write units in parallel.
    """

    def __init__(self, pool_size=WRITE_POOL_SIZE):
        self.pool_size = pool_size

    def unit_to_stream(self, unit, ostr):
        raise NotImplementedError()

    def unit_to_string(self, unit):
        ostr = StringIO()
        self.unit_to_stream(unit, ostr)
        return ostr.getvalue()

    def get_file_name(self, output_path, unit):
        return os.path.normpath(os.path.join(output_path, unit.name))

    def write_unit(self, output_path, unit):
        file_name = self.get_file_name(output_path, unit)
        logger.debug("writing %s", file_name)

        dir_name = os.path.dirname(file_name)
        if dir_name:
            os.makedirs(dir_name, exist_ok=True)

        with io.open(file_name, 'w', encoding='utf8') as f:
            self.unit_to_stream(unit, f)

        return file_name

    def save(self, units, output_path=DEFAULT_OUTPUT_PATH):
        """Writes every unit under ``output_path`` and returns the written file
        names. Units are independent, so they're written in parallel. The
        first failed write is re-raised once all writes are done. Files that
        were written are left in place."""

        units = list(units)
        if len(units) == 0:
            return []

        pool = ThreadPool(min(self.pool_size, len(units)))
        try:
            return pool.map(lambda u: self.write_unit(output_path, u), units)
        finally:
            pool.close()
            pool.join()
