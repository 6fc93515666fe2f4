"""
Parser for DOCX relationship files to resolve hyperlinks and images.
"""

import enum
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..exceptions import DocumentParseError
from ..utils.file_utils import read_part
from ..utils.xml_utils import NSMAP

logger = logging.getLogger(__name__)

RELATIONSHIPS_XML = 'word/_rels/document.xml.rels'


class RelationshipKind(enum.Enum):
    HYPERLINK = 'hyperlink'
    IMAGE = 'image'
    OTHER = 'other'


@dataclass(frozen=True)
class Relationship:
    """A binding from a relationship ID to a link target or package part."""

    id: str
    type: str = ''
    target: str = ''
    target_mode: str = 'Internal'

    @property
    def kind(self):
        # Type is a URI such as .../officeDocument/2006/relationships/image
        suffix = self.type.rstrip('/').rsplit('/', 1)[-1].lower()
        if suffix == 'hyperlink':
            return RelationshipKind.HYPERLINK
        if suffix == 'image':
            return RelationshipKind.IMAGE
        return RelationshipKind.OTHER

    @property
    def is_external(self):
        return self.target_mode.lower() == 'external'


class Relationships:
    """
    Relationship records of one document, in document order.

    IDs are expected to be unique; if they are not, the first record wins.
    """

    def __init__(self, relationships=()):
        self._items = list(relationships)
        self._by_id = {}
        for rel in self._items:
            self._by_id.setdefault(rel.id, rel)

    def lookup(self, rel_id):
        """Returns the relationship with the given ID, or None."""
        if rel_id is None:
            return None
        return self._by_id.get(rel_id)

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


def parse_relationships(rels_xml):
    """
    Parses a relationships part.

    Args:
        rels_xml: XML content of a ``.rels`` part as bytes or string

    Returns:
        Relationships

    Raises:
        DocumentParseError: If the part is not well-formed
    """
    try:
        root = ET.fromstring(rels_xml)
    except ET.ParseError as e:
        raise DocumentParseError(
            'invalid relationships part: {}'.format(e)) from e

    items = []
    for rel in root.findall('.//{' + NSMAP['rel'] + '}Relationship'):
        items.append(Relationship(
            id=rel.get('Id', ''),
            type=rel.get('Type', ''),
            target=rel.get('Target', ''),
            target_mode=rel.get('TargetMode') or 'Internal',
        ))
    return Relationships(items)


def load_relationships(zipf, rel_file=RELATIONSHIPS_XML):
    """
    Loads the document relationships from a DOCX package.

    A package without a relationships part yields an empty table.

    Args:
        zipf: ZipFile object of the DOCX file
        rel_file: Path to the relationship file within the DOCX

    Returns:
        Relationships
    """
    rels_xml = read_part(zipf, rel_file)
    if rels_xml is None:
        logger.debug('%s not found, no relationships loaded', rel_file)
        return Relationships()

    relationships = parse_relationships(rels_xml)
    logger.debug('loaded %d relationships', len(relationships))
    return relationships
