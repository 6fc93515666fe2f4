"""
Generic document tree built from WordprocessingML parts.
"""

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from xml.sax.saxutils import escape as xml_escape

from ..exceptions import DocumentParseError
from ..utils.xml_utils import local_name


class NodeKind(enum.Enum):
    """Element kinds the markdown walker knows how to render."""

    TEXT = 't'
    HYPERLINK = 'hyperlink'
    PARAGRAPH_PROPERTIES = 'pPr'
    PARAGRAPH_STYLE = 'pStyle'
    INDENT = 'ind'
    TABLE = 'tbl'
    TABLE_ROW = 'tr'
    TABLE_CELL = 'tc'
    NUMBERING_PROPERTIES = 'numPr'
    RUN = 'r'
    RUN_PROPERTIES = 'rPr'
    PARAGRAPH = 'p'
    IMAGE = 'blip'
    FALLBACK = 'Fallback'
    TEXT_BOX = 'txbxContent'
    PASSTHROUGH = None

    @classmethod
    def from_tag(cls, tag):
        """Returns the kind for a local tag name, PASSTHROUGH if unknown."""
        if tag is None:
            return cls.PASSTHROUGH
        try:
            return cls(tag)
        except ValueError:
            return cls.PASSTHROUGH


@dataclass(frozen=True)
class Node:
    """One element of a parsed document part."""

    tag: str
    attrs: dict = field(default_factory=dict)
    text: str = ''
    children: tuple = ()

    @property
    def kind(self):
        return NodeKind.from_tag(self.tag)

    @property
    def content(self):
        """
        Inline character data in its XML-encoded form.

        ``&``, ``<`` and ``>`` stay entity-encoded, so markup-like text in
        the document is never emitted as raw HTML.
        """
        return xml_escape(self.text)

    def attr(self, name, default=None):
        """Looks up an attribute by its local name."""
        return self.attrs.get(name, default)

    def find(self, kind):
        """Returns the first direct child of the given kind, or None."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None

    def iter_children(self, kind):
        for child in self.children:
            if child.kind is kind:
                yield child


def node_from_element(elem):
    """
    Converts an ElementTree element into a Node tree.

    Tag and attribute names are reduced to their local part. When two
    attributes share a local name, the first one in document order is kept.

    Args:
        elem: xml.etree.ElementTree.Element

    Returns:
        Node
    """
    attrs = {}
    for key, value in elem.attrib.items():
        attrs.setdefault(local_name(key), value)
    children = tuple(node_from_element(child) for child in elem)
    return Node(
        tag=local_name(elem.tag),
        attrs=attrs,
        text=elem.text or '',
        children=children,
    )


def parse_xml(xml):
    """
    Parses an XML part into a Node tree.

    Args:
        xml: XML content as bytes or string

    Returns:
        Root Node

    Raises:
        DocumentParseError: If the content is not well-formed
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise DocumentParseError(str(e)) from e
    return node_from_element(root)
