"""
Parser for DOCX styles.xml to understand custom styles and formatting.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..exceptions import DocumentParseError
from ..utils.file_utils import read_part
from ..utils.xml_utils import qn

logger = logging.getLogger(__name__)

STYLES_XML = 'word/styles.xml'

BODY_TEXT_OUTLINE_LEVEL = 9

HEADING_NAME_RE = re.compile(r'heading\s*([0-9]+)', re.IGNORECASE)


def _to_int(value):
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class StyleEntry:
    id: str
    name: str = None
    type: str = None
    based_on: str = None
    outline_level: int = None
    indent_left: int = None


class Styles:
    """Style entries of one document, keyed by style ID."""

    def __init__(self, entries=()):
        self._entries = {}
        for entry in entries:
            self._entries.setdefault(entry.id, entry)

    def get(self, style_id):
        return self._entries.get(style_id)

    def __contains__(self, style_id):
        return style_id in self._entries

    def __len__(self):
        return len(self._entries)

    def _outline_level(self, style_id):
        # Follow the basedOn chain until a style declares an outline level
        seen = set()
        entry = self._entries.get(style_id)
        while entry is not None and entry.id not in seen:
            if entry.outline_level is not None:
                return entry.outline_level
            seen.add(entry.id)
            entry = self._entries.get(entry.based_on)
        return None

    def heading_level(self, style_id):
        """
        Maps a paragraph style ID to a markdown heading level.

        The style name is checked first (``heading 2`` gives 2), then the
        outline level declared by the style or one of the styles it is
        based on (outline levels are zero-based).

        Args:
            style_id: Paragraph style ID

        Returns:
            int: Heading level, or None if the style is unknown or not
            a heading
        """
        entry = self._entries.get(style_id)
        if entry is None:
            return None
        if entry.name:
            match = HEADING_NAME_RE.fullmatch(entry.name.strip())
            if match:
                return int(match.group(1))
        level = self._outline_level(style_id)
        # Outline level 9 marks body text
        if level is not None and 0 <= level < BODY_TEXT_OUTLINE_LEVEL:
            return level + 1
        return None


def _child_val(elem, tag, attr='w:val'):
    child = elem.find(qn(tag))
    if child is None:
        return None
    return child.get(qn(attr))


def parse_styles(styles_xml):
    """
    Parses a styles part.

    Args:
        styles_xml: XML content of ``styles.xml`` as bytes or string

    Returns:
        Styles

    Raises:
        DocumentParseError: If the part is not well-formed
    """
    try:
        root = ET.fromstring(styles_xml)
    except ET.ParseError as e:
        raise DocumentParseError('invalid styles part: {}'.format(e)) from e

    entries = []
    for style in root.findall('.//' + qn('w:style')):
        style_id = style.get(qn('w:styleId'))
        if not style_id:
            continue

        outline_level = None
        indent_left = None
        pPr = style.find(qn('w:pPr'))
        if pPr is not None:
            outline_level = _to_int(_child_val(pPr, 'w:outlineLvl'))
            indent_left = _to_int(_child_val(pPr, 'w:ind', 'w:left'))

        entries.append(StyleEntry(
            id=style_id,
            name=_child_val(style, 'w:name'),
            type=style.get(qn('w:type')),
            based_on=_child_val(style, 'w:basedOn'),
            outline_level=outline_level,
            indent_left=indent_left,
        ))
    return Styles(entries)


def load_styles(zipf, styles_file=STYLES_XML):
    """
    Loads the style definitions from a DOCX package.

    A package without a styles part yields an empty style table.

    Args:
        zipf: ZipFile object of the DOCX file
        styles_file: Path to the styles part within the DOCX

    Returns:
        Styles
    """
    styles_xml = read_part(zipf, styles_file)
    if styles_xml is None:
        logger.debug('%s not found, no styles loaded', styles_file)
        return Styles()

    styles = parse_styles(styles_xml)
    logger.debug('loaded %d styles', len(styles))
    return styles
