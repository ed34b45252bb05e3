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

"""The ``wsdl2ts`` script. Run ``wsdl2ts -h`` for command line options."""

import logging
logger = logging.getLogger(__name__)

import argparse

from os.path import abspath

from soapstub.const import DEFAULT_OUTPUT_PATH
from soapstub.const import FETCH_TIMEOUT
from soapstub.error import SoapStubError
from soapstub.interface import Interface
from soapstub.interface.wsdl import read_wsdl
from soapstub.protocol import TypeScript


EPILOG = """Examples:
  wsdl2ts -o ./generated -u "https://www.example.com/service.svc?WSDL"
"""


def wsdl_to_ts(url, output_path=DEFAULT_OUTPUT_PATH, timeout=FETCH_TIMEOUT):
    """Reads the wsdl at ``url``, compiles it and writes TypeScript sources
    under ``output_path``. Returns the written file names."""

    definitions = read_wsdl(url, timeout=timeout)
    units = Interface().build(definitions)
    return TypeScript().save(units, output_path)


def get_parser():
    parser = argparse.ArgumentParser(prog='wsdl2ts', epilog=EPILOG,
                         formatter_class=argparse.RawDescriptionHelpFormatter,
                         description="Generates TypeScript types and service "
                                     "interfaces from a wsdl document.")

    parser.add_argument('-u', '--url', required=True,
                        help="WSDL url or file name")
    parser.add_argument('-o', '--outputPath', dest='output_path',
                        default=DEFAULT_OUTPUT_PATH,
                        help="Folder path where to save typescript source "
                             "files (default: %(default)s)")
    parser.add_argument('-t', '--timeout', type=float, default=FETCH_TIMEOUT,
                        help="Timeout in seconds for fetching documents "
                             "(default: %(default)s)")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Log every step of the compilation")

    return parser


def main(argv=None):
    args = get_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        wsdl_to_ts(args.url, args.output_path, args.timeout)

    except (SoapStubError, OSError) as e:
        logger.error("%s", e)
        return 1

    print("typescript source files saved to: %s" % abspath(args.output_path))
    return 0


if __name__ == '__main__':
    import sys
    sys.exit(main())
