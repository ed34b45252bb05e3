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

"""The ``soapstub.interface.wsdl.wsdl11`` module reads Wsdl 1.1 documents into
the node tree the compiler works on.

This is the only place where raw xml is handled. Imported and included
documents are fetched relative to the document that refers to them.
"""

import logging
logger = logging.getLogger(__name__)

from os.path import dirname
from os.path import join
from urllib.parse import urljoin
from urllib.request import urlopen

from lxml import etree

from soapstub.const import FETCH_TIMEOUT
from soapstub.const import MISSING_MESSAGE_SUFFIX
from soapstub.const.xml import XSD
from soapstub.const.xml import WSDL11
from soapstub.error import DocumentError
from soapstub.util import local_name
from soapstub.util import split_qname

from soapstub.interface.xml_schema.defn import ELEMENT
from soapstub.interface.xml_schema.defn import INPUT
from soapstub.interface.xml_schema.defn import OUTPUT
from soapstub.interface.xml_schema.defn import Node
from soapstub.interface.wsdl.defn import Definitions
from soapstub.interface.wsdl.defn import Operation
from soapstub.interface.wsdl.defn import PortType
from soapstub.interface.wsdl.defn import Schema


PARSER = etree.XMLParser(remove_comments=True)


def fetch(url, timeout=FETCH_TIMEOUT):
    """Returns the contents of the given url or local file name as bytes."""

    try:
        if '://' in url:
            with urlopen(url, timeout=timeout) as f:
                return f.read()

        with open(url, 'rb') as f:
            return f.read()

    except (OSError, ValueError) as e:
        raise DocumentError(url, e)


def parse(data, url=None):
    if isinstance(data, str):
        data = data.encode('utf8')

    try:
        return etree.fromstring(data, parser=PARSER)
    except etree.XMLSyntaxError as e:
        raise DocumentError(url, e)


def join_location(base_url, location):
    """Resolves a ``location`` or ``schemaLocation`` against the url of the
    document it appears in."""

    if base_url is None or '://' in location:
        return location

    if '://' in base_url:
        return urljoin(base_url, location)

    return join(dirname(base_url), location)


def _qname(elt, ref, default_ns=None):
    prefix, name = split_qname(ref)
    ns = elt.nsmap.get(prefix, default_ns)
    return "{%s}%s" % (ns, name)


def _xmlns(elt):
    return dict([(k, v) for k, v in elt.nsmap.items() if k is not None])


def _empty_message(tag, name):
    # the anonymous element gives the message a record of its own
    return Node(tag, name=name, children=[Node(ELEMENT, name=name)])


class Wsdl11Reader(object):
    """Collects schemas, messages and port types from a wsdl document and the
    documents it imports, then builds a
    :class:`soapstub.interface.wsdl.Definitions` out of them.

    Type catalogs are turned into nodes only after every document is loaded,
    so element references may point forward or to another document.

    :param timeout: Timeout in seconds for fetching remote documents.
    """

    def __init__(self, timeout=FETCH_TIMEOUT):
        self.timeout = timeout

        self.simple_types = {}
        self.complex_types = {}
        self.elements = {}
        self.messages = {}
        self.port_types = []
        self.seen = set()

        self._resolving = set()

    def read(self, url):
        self.seen.add(url)
        self.process_document(self.load(url), url)
        return self.get_definitions()

    def read_string(self, data, url=None):
        if url is not None:
            self.seen.add(url)
        self.process_document(parse(data, url), url)
        return self.get_definitions()

    def load(self, url):
        logger.debug("loading %s", url)
        return parse(fetch(url, self.timeout), url)

    def load_location(self, base_url, location):
        """Returns (root, url) of the referred document, or None when it was
        already loaded."""

        url = join_location(base_url, location)
        if url in self.seen:
            logger.debug("already loaded %s", url)
            return

        self.seen.add(url)
        return self.load(url), url

    def process_document(self, root, url):
        if root.tag == XSD('schema'):
            self.process_schema(root, url)
            return

        tns = root.get('targetNamespace')

        for imp in root.iterchildren(WSDL11('import')):
            location = imp.get('location')
            if location is None:
                continue

            sub = self.load_location(url, location)
            if sub is not None:
                self.process_document(*sub)

        for types in root.iterchildren(WSDL11('types')):
            for schema in types.iterchildren(XSD('schema')):
                self.process_schema(schema, url)

        for message in root.iterchildren(WSDL11('message')):
            self.messages["{%s}%s" % (tns, message.get('name'))] = message

        self.port_types.extend(root.iterchildren(WSDL11('portType')))

    def process_schema(self, elt, url, tns=None):
        # an include without its own target namespace takes the includer's
        tns = elt.get('targetNamespace', tns)
        logger.debug("processing schema %s", tns)

        for imp in elt.iterchildren(XSD('import'), XSD('include')):
            location = imp.get('schemaLocation')
            if location is None:
                continue

            sub = self.load_location(url, location)
            if sub is None:
                continue

            sub_root, sub_url = sub
            if imp.tag == XSD('include'):
                self.process_schema(sub_root, sub_url, tns)
            else:
                self.process_schema(sub_root, sub_url)

        simple_types = self.simple_types.setdefault(tns, {})
        complex_types = self.complex_types.setdefault(tns, {})

        for child in elt.iterchildren(XSD('simpleType')):
            simple_types[child.get('name')] = child

        for child in elt.iterchildren(XSD('complexType')):
            complex_types[child.get('name')] = child

        for child in elt.iterchildren(XSD('element')):
            self.elements["{%s}%s" % (tns, child.get('name'))] = child

    def to_node(self, elt):
        """Returns the :class:`Node` tree of the given schema element."""

        tag = etree.QName(elt).localname
        if tag == ELEMENT and elt.get('ref') is not None:
            return self.ref_to_node(elt, elt.get('ref'))

        children = [self.to_node(c) for c in elt.iterchildren(etree.Element)
                                                 if c.tag != XSD('annotation')]

        return Node(tag,
            name=elt.get('name'),
            type=elt.get('type'),
            base=elt.get('base'),
            value=elt.get('value'),
            nillable=elt.get('nillable') == 'true',
            max_occurs=elt.get('maxOccurs'),
            xmlns=_xmlns(elt),
            children=children,
        )

    def ref_to_node(self, elt, ref):
        """Returns the node of the global element ``ref`` points to, with the
        occurrence constraints of ``elt``. Unknown and recursive references
        become an element typed with the reference itself."""

        qname = _qname(elt, ref)
        target = self.elements.get(qname)

        if target is None or qname in self._resolving:
            logger.debug("can't inline %s, using it as type name", qname)
            return Node(ELEMENT,
                name=local_name(ref),
                type=ref,
                nillable=elt.get('nillable') == 'true',
                max_occurs=elt.get('maxOccurs'),
                xmlns=_xmlns(elt),
            )

        self._resolving.add(qname)
        try:
            retval = self.to_node(target)
        finally:
            self._resolving.discard(qname)

        retval.max_occurs = elt.get('maxOccurs')
        retval.nillable = retval.nillable or elt.get('nillable') == 'true'
        return retval

    def message_to_node(self, operation, tag):
        """Returns the message node of the ``input`` or ``output`` child of the
        given port type operation.

        An operation without such a child (e.g. a one-way operation) gets an
        empty message named after the operation with
        :data:`soapstub.const.MISSING_MESSAGE_SUFFIX`. A message that can't be
        found is empty too, and keeps the name it's referred to with.

        A message whose only part refers to an anonymous element is named
        after that element and carries it as its child. Any other message is
        named after itself and carries one anonymous element of the same name
        that holds one element per part.
        """

        io = operation.find(WSDL11(tag))
        if io is None or io.get('message') is None:
            op_name = operation.get('name')
            if op_name is None:
                return

            name = op_name + MISSING_MESSAGE_SUFFIX[tag]
            logger.debug("operation %s has no %s, using %s", op_name, tag, name)
            return _empty_message(tag, name)

        ref = io.get('message')
        message = self.messages.get(_qname(io, ref))
        if message is None:
            logger.debug("message %s not found, using an empty one", ref)
            return _empty_message(tag, local_name(ref))

        parts = list(message.iterchildren(WSDL11('part')))
        if len(parts) == 1 and parts[0].get('element') is not None:
            child = self.ref_to_node(parts[0], parts[0].get('element'))
            if child.type is None:
                return Node(tag, name=child.name, children=[child])

        children = []
        for part in parts:
            if part.get('element') is not None:
                children.append(self.ref_to_node(part, part.get('element')))
            else:
                children.append(Node(ELEMENT, name=part.get('name'),
                                  type=part.get('type'), xmlns=_xmlns(part)))

        name = message.get('name')
        return Node(tag, name=name,
                             children=[Node(ELEMENT, name=name, children=children)])

    def get_definitions(self):
        schemas = []
        for tns, simple_types in self.simple_types.items():
            complex_types = self.complex_types[tns]
            schemas.append(Schema(tns,
                dict([(k, self.to_node(v)) for k, v in simple_types.items()]),
                dict([(k, self.to_node(v)) for k, v in complex_types.items()]),
            ))

        port_types = []
        for elt in self.port_types:
            operations = [Operation(op.get('name'),
                                     self.message_to_node(op, INPUT),
                                     self.message_to_node(op, OUTPUT))
                          for op in elt.iterchildren(WSDL11('operation'))]

            port_types.append(PortType(elt.get('name'), operations))

        return Definitions(schemas, port_types)


def read_wsdl(url, timeout=FETCH_TIMEOUT):
    """Reads the wsdl document at the given url or file name."""

    return Wsdl11Reader(timeout=timeout).read(url)


def read_wsdl_string(data, url=None):
    """Reads the given wsdl document. ``url`` is used to resolve relative
    import locations."""

    return Wsdl11Reader().read_string(data, url)
