"""
Markdown converter for DOCX files.
Walks the document tree and renders paragraphs, runs, tables, lists,
headings, hyperlinks and images as markdown.
"""

import logging
import re
from dataclasses import dataclass

from ..parsers.node_parser import NodeKind
from ..parsers.relationship_parser import Relationships
from ..parsers.style_parser import Styles
from ..utils.file_utils import (
    embed_resource,
    has_resource,
    read_resource,
    reference_resource,
)
from ..utils.text_utils import escape
from .table_converter import render_table

logger = logging.getLogger(__name__)

HEADING_STYLE_PREFIX = 'Heading'
CODE_STYLE = 'Code'
# Indentation is measured in twentieths of a point
INDENT_UNIT = 360

LINK_TEXT_ESCAPE = '[]'
LINK_TARGET_ESCAPE = '()'
RUN_ESCAPE = '*~\\'

INT_RE = re.compile(r'[+-]?[0-9]+')


def _parse_int(value):
    if value is None or not INT_RE.fullmatch(value):
        return None
    return int(value)


def paragraph_style(pPr):
    """Returns the style ID named by a paragraph properties node, or None."""
    pStyle = pPr.find(NodeKind.PARAGRAPH_STYLE)
    if pStyle is None:
        return None
    return pStyle.attr('val')


@dataclass(frozen=True)
class RunFormat:
    bold: bool = False
    italic: bool = False
    strike: bool = False

    @classmethod
    def from_run(cls, run):
        """Reads the formatting flags from the properties of a run."""
        bold = italic = strike = False
        for rPr in run.iter_children(NodeKind.RUN_PROPERTIES):
            for prop in rPr.children:
                if prop.tag == 'b':
                    bold = True
                elif prop.tag == 'i':
                    italic = True
                elif prop.tag == 'strike':
                    strike = True
        return cls(bold=bold, italic=italic, strike=strike)

    def delimiters(self):
        """Opening delimiters, outermost first."""
        marks = []
        if self.strike:
            marks.append('~~')
        if self.bold:
            marks.append('**')
        if self.italic:
            marks.append('*')
        return marks


class MarkdownWalker:
    """
    Renders a document Node tree as markdown.

    In extract mode the relationships of the images referenced by the
    document are collected in ``resources``; writing them to disk is left
    to the caller. In embed mode images are inlined as data URIs and
    ``resources`` stays empty.

    Args:
        zipf: ZipFile object of the DOCX file, used to read image payloads
        relationships: Relationships of the document
        styles: Styles of the document
        embed: Inline images instead of referencing extracted files
    """

    def __init__(self, zipf, relationships=None, styles=None, embed=False):
        self.zipf = zipf
        self.relationships = (relationships if relationships is not None
                              else Relationships())
        self.styles = styles if styles is not None else Styles()
        self.embed = embed
        self.resources = []
        self._handlers = {
            NodeKind.TEXT: self._text,
            NodeKind.HYPERLINK: self._hyperlink,
            NodeKind.PARAGRAPH_PROPERTIES: self._paragraph_properties,
            NodeKind.PARAGRAPH_STYLE: self._walk_children,
            NodeKind.INDENT: self._walk_children,
            NodeKind.TABLE: self._table,
            NodeKind.TABLE_ROW: self._walk_children,
            NodeKind.TABLE_CELL: self._walk_children,
            NodeKind.NUMBERING_PROPERTIES: self._numbering_properties,
            NodeKind.RUN: self._run,
            NodeKind.RUN_PROPERTIES: self._walk_children,
            NodeKind.PARAGRAPH: self._paragraph,
            NodeKind.IMAGE: self._image,
            NodeKind.FALLBACK: self._fallback,
            NodeKind.TEXT_BOX: self._text_box,
            NodeKind.PASSTHROUGH: self._walk_children,
        }

    def render(self, node):
        """Renders a node and its descendants to a markdown string."""
        out = []
        self.walk(node, out)
        return ''.join(out)

    def walk(self, node, out):
        """Appends the markdown for ``node`` to the ``out`` list."""
        self._handlers[node.kind](node, out)

    def _walk_children(self, node, out):
        for child in node.children:
            self.walk(child, out)

    def _render_children(self, node):
        out = []
        self._walk_children(node, out)
        return ''.join(out)

    def _text(self, node, out):
        out.append(node.content)

    def _hyperlink(self, node, out):
        text = escape(self._render_children(node), LINK_TEXT_ESCAPE)
        target = ''
        rel_id = node.attr('id')
        rel = self.relationships.lookup(rel_id)
        if rel is not None:
            target = escape(rel.target, LINK_TARGET_ESCAPE)
        elif rel_id is not None:
            logger.debug('hyperlink relationship %s not found', rel_id)
        out.append('[{}]({})'.format(text, target))

    def heading_level(self, style_id):
        """
        Maps a paragraph style ID to a heading level.

        ``Heading<n>`` IDs give n directly. Other IDs are looked up in the
        document styles, and finally read as a bare outline number.

        Returns:
            int or None
        """
        if style_id is None or style_id == CODE_STYLE:
            return None
        if style_id.startswith(HEADING_STYLE_PREFIX):
            return _parse_int(style_id[len(HEADING_STYLE_PREFIX):])
        level = self.styles.heading_level(style_id)
        if level is None:
            level = _parse_int(style_id)
        return level

    def _paragraph_properties(self, node, out):
        for child in node.children:
            if child.kind is NodeKind.INDENT:
                left = _parse_int(child.attr('left'))
                if left is not None and left > 0:
                    out.append(' ' * (left // INDENT_UNIT))
            elif child.kind is NodeKind.PARAGRAPH_STYLE:
                level = self.heading_level(child.attr('val'))
                if level is not None and level > 0:
                    out.append('#' * level + ' ')
        self._walk_children(node, out)

    def _paragraph(self, node, out):
        code = False
        for child in node.children:
            self.walk(child, out)
            if (child.kind is NodeKind.PARAGRAPH_PROPERTIES and not code
                    and paragraph_style(child) == CODE_STYLE):
                out.append('`')
                code = True
        if code:
            out.append('`')
        out.append('\n')

    def _table(self, node, out):
        rows = []
        for tr in node.iter_children(NodeKind.TABLE_ROW):
            cells = []
            for tc in tr.iter_children(NodeKind.TABLE_CELL):
                # Pipe table rows are single line
                cells.append(self._render_children(tc).replace('\n', ''))
            rows.append(cells)
        out.append(render_table(rows))
        out.append('\n')

    def _numbering_properties(self, node, out):
        out.append('* ')

    def _run(self, node, out):
        marks = RunFormat.from_run(node).delimiters()
        out.extend(marks)
        out.append(escape(self._render_children(node), RUN_ESCAPE))
        out.extend(reversed(marks))

    def _image(self, node, out):
        rel_id = node.attr('embed') or node.attr('link')
        rel = self.relationships.lookup(rel_id)
        if rel is None:
            logger.debug('image relationship %s not found', rel_id)
            return

        if rel.is_external:
            out.append(reference_resource(rel))
        elif self.embed:
            payload = read_resource(self.zipf, rel)
            if payload is not None:
                out.append(embed_resource(payload))
        elif has_resource(self.zipf, rel):
            out.append(reference_resource(rel))
            self.resources.append(rel)
        else:
            logger.debug('image %s not found in package', rel.target)

    def _fallback(self, node, out):
        pass

    def _text_box(self, node, out):
        out.append('\n```\n' + self._render_children(node) + '```\n')


def convert_to_markdown(root, zipf, relationships=None, styles=None,
                        embed=False):
    """
    Converts a parsed document tree to markdown.

    Args:
        root: Root Node of ``word/document.xml``
        zipf: ZipFile object of the DOCX file
        relationships: Relationships of the document
        styles: Styles of the document
        embed: Inline images as data URIs

    Returns:
        tuple: (markdown string, list of Relationship objects to extract)
    """
    walker = MarkdownWalker(zipf, relationships, styles, embed=embed)
    markdown = walker.render(root)
    return markdown, walker.resources
