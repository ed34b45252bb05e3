#!/usr/bin/env python
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

import io
import os
import shutil
import logging
import tempfile
import unittest

from soapstub.cmd import get_parser
from soapstub.cmd import main
from soapstub.const import DEFAULT_OUTPUT_PATH
from soapstub.const import FETCH_TIMEOUT


WSDL = """<wsdl:definitions xmlns:wsdl="http://schemas.xmlsoap.org/wsdl/"
        xmlns:xs="http://www.w3.org/2001/XMLSchema"
        xmlns:tns="https://ex.com/svc"
        targetNamespace="https://ex.com/svc">
    <wsdl:types>
        <xs:schema targetNamespace="https://ex.com/svc">
            <xs:element name="Echo">
                <xs:complexType>
                    <xs:sequence>
                        <xs:element name="text" type="xs:string"/>
                    </xs:sequence>
                </xs:complexType>
            </xs:element>
            <xs:complexType name="Note">
                <xs:sequence>
                    <xs:element name="text" type="xs:string"/>
                </xs:sequence>
            </xs:complexType>
        </xs:schema>
    </wsdl:types>
    <wsdl:message name="EchoIn">
        <wsdl:part name="parameters" element="tns:Echo"/>
    </wsdl:message>
    <wsdl:message name="EchoOut">
        <wsdl:part name="parameters" element="tns:Echo"/>
    </wsdl:message>
    <wsdl:portType name="EchoService">
        <wsdl:operation name="Echo">
            <wsdl:input message="tns:EchoIn"/>
            <wsdl:output message="tns:EchoOut"/>
        </wsdl:operation>
    </wsdl:portType>
</wsdl:definitions>
"""


class TestCmd(unittest.TestCase):
    def setUp(self):
        self.path = tempfile.mkdtemp()
        self.wsdl = os.path.join(self.path, 'echo.wsdl')
        with io.open(self.wsdl, 'w', encoding='utf8') as f:
            f.write(WSDL)

    def tearDown(self):
        shutil.rmtree(self.path)

    def test_defaults(self):
        args = get_parser().parse_args(['-u', 'x.wsdl'])

        assert args.url == 'x.wsdl'
        assert args.output_path == DEFAULT_OUTPUT_PATH
        assert args.timeout == FETCH_TIMEOUT
        assert not args.verbose

    def test_url_is_required(self):
        with self.assertRaises(SystemExit):
            get_parser().parse_args([])

    def test_main(self):
        out = os.path.join(self.path, 'out')

        assert main(['-u', self.wsdl, '--outputPath', out]) == 0

        assert os.path.isfile(os.path.join(out, 'ex.com', 'svc', 'index.ts'))

        with io.open(os.path.join(out, 'EchoService.ts'),
                                                         encoding='utf8') as f:
            data = f.read()

        assert "export interface EchoService {\n" in data
        assert "    Echo(input: Echo): " \
                   "Promise<{result: Echo, envelope: string}>;\n" in data

    def test_missing_wsdl(self):
        out = os.path.join(self.path, 'out')

        assert main(['-u', os.path.join(self.path, 'nope.wsdl'),
                                                       '-o', out]) == 1
        assert not os.path.exists(out)


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
