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

"""Bright terminal colors for the phase banners in debug logs."""

from colorama import Fore
from colorama import Style


def _bright(fore):
    return lambda s: ''.join((fore, Style.BRIGHT, s, Style.RESET_ALL))


R = _bright(Fore.RED)
G = _bright(Fore.GREEN)
B = _bright(Fore.BLUE)
YEL = _bright(Fore.YELLOW)
MAG = _bright(Fore.MAGENTA)
