"""Test setup for docx2md."""

from __future__ import annotations

import io
import sys
import zipfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docx2md.parsers.node_parser import parse_xml  # noqa: E402

NAMESPACES = (
    'xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships" '
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:mc="http://schemas.openxmlformats.org/markup-compatibility/2006" '
    'xmlns:wps="http://schemas.microsoft.com/office/word/2010/wordprocessingShape"'
)

REL_NS = 'http://schemas.openxmlformats.org/package/2006/relationships'
HYPERLINK_TYPE = (
    'http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink'
)
IMAGE_TYPE = (
    'http://schemas.openxmlformats.org/officeDocument/2006/relationships/image'
)


def document_xml(body: str) -> str:
    """Wrap body content in a w:document element."""
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document {NAMESPACES}><w:body>{body}</w:body></w:document>'
    )


def rels_xml(*rels: tuple) -> str:
    """Build a relationships part from (id, type, target[, mode]) tuples."""
    items = []
    for rel in rels:
        rel_id, rel_type, target = rel[:3]
        mode = f' TargetMode="{rel[3]}"' if len(rel) > 3 else ''
        items.append(
            f'<Relationship Id="{rel_id}" Type="{rel_type}" Target="{target}"{mode}/>'
        )
    return f'<Relationships xmlns="{REL_NS}">{"".join(items)}</Relationships>'


def styles_xml(styles: str) -> str:
    return (
        '<w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f'{styles}</w:styles>'
    )


def build_docx(
    body: str | None = None,
    rels: str | None = None,
    styles: str | None = None,
    media: dict | None = None,
) -> bytes:
    """Assemble a DOCX package in memory."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w', zipfile.ZIP_DEFLATED) as zf:
        if body is not None:
            zf.writestr('word/document.xml', document_xml(body))
        if rels is not None:
            zf.writestr('word/_rels/document.xml.rels', rels)
        if styles is not None:
            zf.writestr('word/styles.xml', styles)
        for name, payload in (media or {}).items():
            zf.writestr(name, payload)
    return buf.getvalue()


def fragment(xml: str):
    """Parse a WordprocessingML fragment into a Node wrapped in w:body."""
    return parse_xml(f'<w:body {NAMESPACES}>{xml}</w:body>')


@pytest.fixture
def make_docx(tmp_path: Path):
    """Write a DOCX package to a temporary file and return its path."""

    def _make(name: str = 'test.docx', **kwargs) -> Path:
        path = tmp_path / name
        path.write_bytes(build_docx(**kwargs))
        return path

    return _make


@pytest.fixture
def media_zip():
    """An open package holding one image under word/media."""
    data = build_docx(body='', media={'word/media/image1.png': b'PNGDATA'})
    zf = zipfile.ZipFile(io.BytesIO(data))
    yield zf
    zf.close()
