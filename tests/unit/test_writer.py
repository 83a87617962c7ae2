"""Tests for the lxml-backed XML writer."""

import logging

from lxml import etree

from podcast_rss.feeds.serialization import ITUNES_NS, CData, XmlNode, itunes_name
from podcast_rss.feeds.writer import XmlWriter


class TestXmlWriter:
    """Tests for XmlWriter."""

    def test_document_has_utf8_declaration(self) -> None:
        """Test the XML prolog."""
        xml = XmlWriter().write_document("rss", [], {"version": "2.0"})
        assert xml.startswith("<?xml")
        assert "UTF-8" in xml.splitlines()[0]

    def test_root_attributes_and_namespaces(self) -> None:
        """Test that namespaces are declared once on the root."""
        xml = XmlWriter().write_document(
            "rss", [XmlNode(itunes_name("author"), value="Jane")], {"version": "2.0"}
        )
        root = etree.fromstring(xml.encode("utf-8"))

        assert root.get("version") == "2.0"
        assert root.nsmap["itunes"] == ITUNES_NS
        assert "<itunes:author>Jane</itunes:author>" in xml
        assert xml.count("xmlns:itunes") == 1

    def test_text_is_escaped(self) -> None:
        """Test that plain text markup is escaped."""
        xml = XmlWriter().write_document("rss", [XmlNode("description", value="<p>hi</p>")])
        assert "&lt;p&gt;hi&lt;/p&gt;" in xml

    def test_cdata_is_preserved(self) -> None:
        """Test that CDATA content is written unescaped."""
        xml = XmlWriter().write_document(
            "rss", [XmlNode("description", value=CData("<p>hi</p>"))]
        )
        assert "<![CDATA[<p>hi</p>]]>" in xml

    def test_cdata_terminator_falls_back_to_text(self, caplog) -> None:
        """Test that "]]>" inside CDATA content is escaped instead."""
        with caplog.at_level(logging.WARNING):
            xml = XmlWriter().write_document(
                "rss", [XmlNode("description", value=CData("a ]]> b"))]
            )

        assert "CDATA" not in xml
        assert "a ]]&gt; b" in xml
        assert "]]>" in caplog.text

    def test_nested_nodes_and_mappings(self) -> None:
        """Test child node lists and tag-to-text mappings."""
        nodes = [
            XmlNode(
                "channel",
                value=[
                    XmlNode("item", value=[XmlNode("title", value="Ep1")]),
                    XmlNode(
                        itunes_name("owner"),
                        value={itunes_name("name"): "Jane", itunes_name("email"): "j@x.com"},
                    ),
                ],
            )
        ]
        root = etree.fromstring(XmlWriter().write_document("rss", nodes).encode("utf-8"))

        assert root.findtext("channel/item/title") == "Ep1"
        owner = root.find(f"channel/{itunes_name('owner')}")
        assert [child.tag for child in owner] == [itunes_name("name"), itunes_name("email")]

    def test_attribute_only_element(self) -> None:
        """Test an element with attributes and no value."""
        xml = XmlWriter(pretty_print=False).write_document(
            "rss", [XmlNode("enclosure", {"url": "https://x/e.mp3"})]
        )
        assert '<enclosure url="https://x/e.mp3"/>' in xml

    def test_compact_output(self) -> None:
        """Test that pretty printing can be disabled."""
        xml = XmlWriter(pretty_print=False).write_document(
            "rss", [XmlNode("channel", value=[XmlNode("title", value="x")])]
        )
        assert "<channel><title>x</title></channel></rss>" in xml

    def test_write_fragment(self) -> None:
        """Test writing a standalone element."""
        xml = XmlWriter(pretty_print=False).write_fragment(
            XmlNode("item", value=[XmlNode(itunes_name("episode"), value="3")])
        )
        assert not xml.startswith("<?xml")
        assert "<itunes:episode>3</itunes:episode>" in xml
