"""Generic XML writer turning XmlNode trees into text, backed by lxml."""

import logging

from lxml import etree

from podcast_rss.feeds.serialization import NAMESPACES, CData, XmlNode

logger = logging.getLogger(__name__)


class XmlWriter:
    """Writes XmlNode trees as XML documents.

    Tag names in Clark notation are mapped to the prefixes of the namespace
    map, which is declared once on the root element.
    """

    def __init__(
        self,
        namespaces: dict[str, str] | None = None,
        pretty_print: bool = True,
    ) -> None:
        """Initialize the writer.

        Args:
            namespaces: Prefix to namespace URI mapping. Defaults to itunes and content.
            pretty_print: Indent the produced XML
        """
        self.namespaces = NAMESPACES if namespaces is None else namespaces
        self.pretty_print = pretty_print

    def write_document(
        self,
        root_name: str,
        nodes: list[XmlNode],
        attributes: dict[str, str] | None = None,
    ) -> str:
        """Write a complete UTF-8 XML document.

        Args:
            root_name: Name of the root element (e.g. "rss")
            nodes: Children of the root element
            attributes: Raw attributes of the root element (e.g. the version)

        Returns:
            The document, including the XML declaration
        """
        root = etree.Element(root_name, attrib=attributes or {}, nsmap=self.namespaces)
        for node in nodes:
            self._append(root, node)

        return etree.tostring(
            root,
            encoding="UTF-8",
            xml_declaration=True,
            pretty_print=self.pretty_print,
        ).decode("utf-8")

    def write_fragment(self, node: XmlNode) -> str:
        """Write a single element without an XML declaration."""
        root = etree.Element(node.name, attrib=node.attributes, nsmap=self.namespaces)
        self._write_value(root, node)

        return etree.tostring(
            root, encoding="unicode", pretty_print=self.pretty_print
        )

    def _append(self, parent: etree._Element, node: XmlNode) -> None:
        element = etree.SubElement(parent, node.name, attrib=node.attributes)
        self._write_value(element, node)

    def _write_value(self, element: etree._Element, node: XmlNode) -> None:
        value = node.value

        if isinstance(value, CData):
            # "]]>" cannot appear inside a CDATA section
            if "]]>" in value.text:
                logger.warning(
                    "Content of <%s> contains ']]>', writing it as escaped text",
                    node.name,
                )
                element.text = value.text
            else:
                element.text = etree.CDATA(value.text)
        elif isinstance(value, list):
            for child in value:
                self._append(element, child)
        elif isinstance(value, dict):
            for tag_name, text in value.items():
                etree.SubElement(element, tag_name).text = text
        elif value is not None:
            element.text = value
