"""Parsers for DOCX XML structures."""

from .node_parser import Node, NodeKind, node_from_element, parse_xml
from .relationship_parser import (
    Relationship,
    RelationshipKind,
    Relationships,
    load_relationships,
    parse_relationships,
)
from .style_parser import StyleEntry, Styles, load_styles, parse_styles

__all__ = [
    'Node',
    'NodeKind',
    'node_from_element',
    'parse_xml',
    'Relationship',
    'RelationshipKind',
    'Relationships',
    'load_relationships',
    'parse_relationships',
    'StyleEntry',
    'Styles',
    'load_styles',
    'parse_styles',
]
