"""Serialization helpers shared by the Podcast and Episode entities.

Entities do not write XML themselves. They describe their fields as a tree of
:class:`XmlNode` objects through a :class:`FeedSerializer`, which takes care of
namespace naming, CDATA wrapping and dropping empty values. The resulting tree
is handed to :class:`~podcast_rss.feeds.writer.XmlWriter`.
"""

from dataclasses import dataclass, field
from typing import Any, Union

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"

# Declared once on the document root
NAMESPACES = {
    "itunes": ITUNES_NS,
    "content": CONTENT_NS,
}


def element_name(local_name: str, namespace: str) -> str:
    """Qualify a tag name with a namespace using Clark notation.

    Example:
        >>> element_name("block", ITUNES_NS)
        '{http://www.itunes.com/dtds/podcast-1.0.dtd}block'
    """
    return "{" + namespace.strip("{}") + "}" + local_name


def itunes_name(local_name: str) -> str:
    """Qualify a tag name with the itunes namespace."""
    return element_name(local_name, ITUNES_NS)


@dataclass(frozen=True)
class CData:
    """Text that must be written as a CDATA section instead of being escaped."""

    text: str


@dataclass
class XmlNode:
    """One element of the feed document.

    The value is either text, CDATA, a list of child nodes, or a mapping of
    child tag names to their text.
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    value: Union[str, CData, list["XmlNode"], dict[str, str], None] = None


@dataclass
class Category:
    """A category label with its ordered subcategories."""

    label: str
    children: list["Category"] = field(default_factory=list)

    def write(self, serializer: "FeedSerializer") -> None:
        """Write this category (and its subtree) as an itunes:category element."""
        children = FeedSerializer()
        for child in self.children:
            child.write(children)

        serializer.write_field(
            itunes_name("category"), children.nodes, {"text": self.label}
        )


def filter_empty_values(data: Any) -> Any:
    """Strip empty values from a mapping or a list, recursively.

    Strings are trimmed; None values and blank strings are dropped. Nested
    mappings and lists are filtered the same way. Anything else is kept as is.

    Args:
        data: A dict or a list

    Returns:
        A filtered copy of the same type
    """
    if isinstance(data, dict):
        filtered_dict = {}
        for key, item in data.items():
            item = _filter_item(item)
            if item is not None:
                filtered_dict[key] = item
        return filtered_dict

    filtered_list = []
    for item in data:
        item = _filter_item(item)
        if item is not None:
            filtered_list.append(item)
    return filtered_list


def _filter_item(item: Any) -> Any:
    if isinstance(item, (dict, list)):
        return filter_empty_values(item)
    if isinstance(item, str):
        item = item.strip()
        return item or None
    return item


class FeedSerializer:
    """Collects the XML nodes describing one entity.

    Example:
        >>> serializer = FeedSerializer()
        >>> serializer.write_field("title", "  My Show ")
        >>> serializer.write_field("copyright", "")
        >>> serializer.nodes
        [XmlNode(name='title', attributes={}, value='My Show')]
    """

    def __init__(self) -> None:
        self.nodes: list[XmlNode] = []

    def write_field(
        self,
        tag_name: str,
        value: Any,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Add an element unless both its value and its attributes are empty.

        Args:
            tag_name: Element name, optionally in Clark notation
            value: Text, CData, child nodes, or a tag-to-text mapping
            attributes: Element attributes; values are stringified
        """
        attributes = filter_empty_values(
            {
                key: None if item is None else str(item)
                for key, item in (attributes or {}).items()
            }
        )

        if isinstance(value, (dict, list)):
            value = filter_empty_values(value)
        elif isinstance(value, CData):
            value = CData(value.text.strip()) if value.text.strip() else None
        elif isinstance(value, str):
            value = value.strip()
        elif value is not None:
            value = str(value)

        if not value and not attributes:
            return

        self.nodes.append(XmlNode(tag_name, attributes, value or None))

    def write_html_field(
        self,
        tag_name: str,
        value: str | None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        """Add an element whose text is protected from escaping by CDATA."""
        if value:
            value = CData(value)

        self.write_field(tag_name, value, attributes)

    def write_description(self, description: str | None, is_html: bool) -> None:
        """Add the description, as CDATA when it was marked as HTML."""
        if is_html:
            self.write_html_field("description", description)
        else:
            self.write_field("description", description)

    def write_explicit(self, is_explicit: bool | None) -> None:
        """Add itunes:explicit, which is always present as "true" or "false"."""
        self.write_field(itunes_name("explicit"), "true" if is_explicit else "false")

    def write_flag(self, local_name: str, enabled: bool) -> None:
        """Add an itunes flag element with the value "Yes", only when enabled."""
        if enabled:
            self.write_field(itunes_name(local_name), "Yes")
