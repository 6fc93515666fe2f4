"""
Core processing functions for docx2md.
"""

import io
import logging
import zipfile
from dataclasses import dataclass, field

from .converters.markdown_converter import convert_to_markdown
from .exceptions import ArchiveError, IncorrectDocumentError
from .parsers.node_parser import parse_xml
from .parsers.relationship_parser import load_relationships
from .parsers.style_parser import load_styles
from .utils.file_utils import extract_resources, read_part

logger = logging.getLogger(__name__)

DOCUMENT_XML = 'word/document.xml'


@dataclass
class ConversionResult:
    """Markdown of one document and the images it references on disk."""

    markdown: str
    resources: list = field(default_factory=list)


def _open_package(docx):
    if isinstance(docx, (bytes, bytearray)):
        docx = io.BytesIO(docx)
    try:
        return zipfile.ZipFile(docx)
    except (zipfile.BadZipFile, OSError) as e:
        raise ArchiveError('unable to open package: {}'.format(e)) from e


def _convert_package(zipf, embed):
    doc_xml = read_part(zipf, DOCUMENT_XML)
    if doc_xml is None:
        raise IncorrectDocumentError()

    relationships = load_relationships(zipf)
    styles = load_styles(zipf)
    root = parse_xml(doc_xml)
    markdown, resources = convert_to_markdown(
        root, zipf, relationships, styles, embed=embed)
    return ConversionResult(markdown, resources)


def convert(docx, embed=False):
    """
    Convert a DOCX package to markdown without touching the filesystem.

    Args:
        docx: Path, file-like object or bytes of the DOCX file
        embed: Inline images as data URIs instead of referencing files

    Returns:
        ConversionResult
    """
    with _open_package(docx) as zipf:
        return _convert_package(zipf, embed)


def process(docx, embed=False, base_dir='.'):
    """
    Convert a DOCX file to markdown, extracting referenced images.

    Unless ``embed`` is set, every image the markdown references is written
    below ``base_dir`` at the path it has inside the package's ``word/``
    directory (for example ``media/image1.png``).

    Args:
        docx: Path, file-like object or bytes of the DOCX file
        embed: Inline images as data URIs instead of writing them to disk
        base_dir: Directory image targets are written relative to

    Returns:
        Markdown string
    """
    with _open_package(docx) as zipf:
        result = _convert_package(zipf, embed)
        if result.resources:
            written = extract_resources(zipf, result.resources, base_dir)
            logger.debug('extracted %d images', len(written))
    return result.markdown


def process_bytes(data, embed=False):
    """Convert the bytes of a DOCX file to markdown."""
    return process(data, embed=embed)
