"""Tests for node, relationship and style parsers."""

from __future__ import annotations

import io
import zipfile
import zlib

import pytest

from conftest import (
    HYPERLINK_TYPE,
    IMAGE_TYPE,
    build_docx,
    fragment,
    rels_xml,
    styles_xml,
)
from docx2md.exceptions import ArchiveError, DocumentParseError
from docx2md.parsers.node_parser import NodeKind, parse_xml
from docx2md.parsers.relationship_parser import (
    RelationshipKind,
    load_relationships,
    parse_relationships,
)
from docx2md.parsers.style_parser import load_styles, parse_styles


def open_zip(data: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(data))


class CorruptZip:
    """A package whose every part fails to decompress."""

    def read(self, name: str) -> bytes:
        raise zlib.error('Error -3 while decompressing data')


class TestParseXml:
    """Tests for the generic node tree."""

    def test_local_names_and_order(self) -> None:
        """Tags and attributes lose their namespace; child order is kept."""
        root = fragment('<w:p><w:pPr/><w:r/><w:hyperlink r:id="rId1"/></w:p>')
        p = root.children[0]
        assert p.tag == 'p'
        assert [c.tag for c in p.children] == ['pPr', 'r', 'hyperlink']
        assert p.children[2].attr('id') == 'rId1'

    def test_text_content(self) -> None:
        root = fragment('<w:t xml:space="preserve"> a &amp; b </w:t>')
        assert root.children[0].text == ' a & b '

    def test_content_keeps_entities_encoded(self) -> None:
        root = fragment('<w:t>a &amp; &lt;b&gt;</w:t>')
        assert root.children[0].content == 'a &amp; &lt;b&gt;'

    def test_kinds(self) -> None:
        """Known tags map to their kind, others pass through."""
        root = fragment('<w:tbl/><w:sectPr/><mc:Fallback/><a:blip/>')
        kinds = [c.kind for c in root.children]
        assert kinds == [
            NodeKind.TABLE,
            NodeKind.PASSTHROUGH,
            NodeKind.FALLBACK,
            NodeKind.IMAGE,
        ]

    def test_first_attribute_wins_on_local_name_clash(self) -> None:
        root = fragment('<w:hyperlink w:id="first" r:id="second"/>')
        assert root.children[0].attr('id') == 'first'

    def test_malformed_raises(self) -> None:
        with pytest.raises(DocumentParseError):
            parse_xml(b'<w:document>')


class TestRelationships:
    """Tests for relationship parsing and lookup."""

    def test_parse_and_lookup(self) -> None:
        rels = parse_relationships(rels_xml(
            ('rId1', HYPERLINK_TYPE, 'https://example.com', 'External'),
            ('rId2', IMAGE_TYPE, 'media/image1.png'),
        ))
        assert len(rels) == 2

        link = rels.lookup('rId1')
        assert link.target == 'https://example.com'
        assert link.kind is RelationshipKind.HYPERLINK
        assert link.is_external

        image = rels.lookup('rId2')
        assert image.kind is RelationshipKind.IMAGE
        assert image.target_mode == 'Internal'
        assert not image.is_external

    def test_unknown_id(self) -> None:
        rels = parse_relationships(rels_xml(('rId1', IMAGE_TYPE, 'a.png')))
        assert rels.lookup('rId9') is None
        assert rels.lookup(None) is None

    def test_first_duplicate_wins(self) -> None:
        rels = parse_relationships(rels_xml(
            ('rId1', IMAGE_TYPE, 'first.png'),
            ('rId1', IMAGE_TYPE, 'second.png'),
        ))
        assert rels.lookup('rId1').target == 'first.png'

    def test_other_kind(self) -> None:
        rels = parse_relationships(rels_xml(
            ('rId1', 'http://example.com/relationships/styles', 'styles.xml'),
        ))
        assert rels.lookup('rId1').kind is RelationshipKind.OTHER

    def test_missing_part_gives_empty_table(self) -> None:
        with open_zip(build_docx(body='')) as zf:
            assert len(load_relationships(zf)) == 0

    def test_malformed_part_raises(self) -> None:
        with open_zip(build_docx(body='', rels='<Relationships>')) as zf:
            with pytest.raises(DocumentParseError):
                load_relationships(zf)

    def test_corrupt_part_raises_archive_error(self) -> None:
        with pytest.raises(ArchiveError, match='document.xml.rels'):
            load_relationships(CorruptZip())


STYLES = styles_xml(
    '<w:style w:type="paragraph" w:styleId="1">'
    '<w:name w:val="heading 3"/></w:style>'
    '<w:style w:type="paragraph" w:styleId="MyTitle">'
    '<w:name w:val="My Title"/><w:pPr><w:outlineLvl w:val="0"/>'
    '<w:ind w:left="720"/></w:pPr></w:style>'
    '<w:style w:type="paragraph" w:styleId="Child">'
    '<w:name w:val="Child"/><w:basedOn w:val="MyTitle"/></w:style>'
    '<w:style w:type="paragraph" w:styleId="Body">'
    '<w:name w:val="Body"/><w:pPr><w:outlineLvl w:val="9"/></w:pPr></w:style>'
    '<w:style w:type="paragraph" w:styleId="LoopA">'
    '<w:name w:val="Loop A"/><w:basedOn w:val="LoopB"/></w:style>'
    '<w:style w:type="paragraph" w:styleId="LoopB">'
    '<w:name w:val="Loop B"/><w:basedOn w:val="LoopA"/></w:style>'
)


class TestStyles:
    """Tests for style parsing and heading resolution."""

    def test_entries(self) -> None:
        styles = parse_styles(STYLES)
        assert len(styles) == 6
        entry = styles.get('MyTitle')
        assert entry.name == 'My Title'
        assert entry.type == 'paragraph'
        assert entry.outline_level == 0
        assert entry.indent_left == 720
        assert styles.get('Child').based_on == 'MyTitle'
        assert 'Body' in styles

    def test_heading_from_name(self) -> None:
        assert parse_styles(STYLES).heading_level('1') == 3

    def test_heading_from_outline_level(self) -> None:
        assert parse_styles(STYLES).heading_level('MyTitle') == 1

    def test_outline_level_inherited(self) -> None:
        assert parse_styles(STYLES).heading_level('Child') == 1

    def test_body_text_is_not_heading(self) -> None:
        assert parse_styles(STYLES).heading_level('Body') is None

    def test_unknown_and_cyclic(self) -> None:
        styles = parse_styles(STYLES)
        assert styles.heading_level('Missing') is None
        assert styles.heading_level('LoopA') is None

    def test_missing_part_gives_empty_styles(self) -> None:
        with open_zip(build_docx(body='')) as zf:
            assert len(load_styles(zf)) == 0

    def test_corrupt_part_raises_archive_error(self) -> None:
        with pytest.raises(ArchiveError, match='styles.xml'):
            load_styles(CorruptZip())
