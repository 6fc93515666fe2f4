"""
File utility functions for handling images embedded in DOCX files.
"""

import base64
import logging
import os
import zipfile
import zlib

from ..exceptions import ArchiveError, ResourceError
from .text_utils import escape

logger = logging.getLogger(__name__)

MEDIA_PREFIX = 'word/'
EMBED_MIME_TYPE = 'image/png'

# Errors zipfile raises for corrupt, truncated or unsupported entries
READ_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, EOFError,
               OSError)


def read_part(zipf, name):
    """
    Reads a part of the DOCX package.

    Args:
        zipf: ZipFile object of the DOCX file
        name: Path of the part inside the package

    Returns:
        bytes, or None if the package has no such part

    Raises:
        ArchiveError: If the part exists but cannot be read
    """
    try:
        return zipf.read(name)
    except KeyError:
        return None
    except READ_ERRORS as e:
        raise ArchiveError('unable to read {}: {}'.format(name, e)) from e


def resource_path(rel):
    """Returns the archive path of the part a relationship points at."""
    return MEDIA_PREFIX + rel.target


def has_resource(zipf, rel):
    try:
        zipf.getinfo(resource_path(rel))
    except KeyError:
        return False
    return True


def read_resource(zipf, rel):
    """
    Reads the payload a relationship points at.

    The read is sized by the uncompressed size declared in the archive. A
    short read is accepted and returns the bytes actually read.

    Args:
        zipf: ZipFile object of the DOCX file
        rel: Relationship of the resource

    Returns:
        bytes, or None if the package has no such entry

    Raises:
        ResourceError: If the entry exists but cannot be read
    """
    try:
        info = zipf.getinfo(resource_path(rel))
    except KeyError:
        logger.debug('%s not found in package', resource_path(rel))
        return None

    try:
        with zipf.open(info) as f:
            return f.read(info.file_size)
    except READ_ERRORS as e:
        raise ResourceError(
            'unable to read {}: {}'.format(info.filename, e)) from e


def embed_resource(payload):
    """Returns an inline markdown image carrying ``payload`` as a data URI."""
    encoded = base64.b64encode(payload).decode('ascii')
    return '![](data:{};base64,{})'.format(EMBED_MIME_TYPE, encoded)


def reference_resource(rel):
    """Returns an inline markdown image pointing at the relationship target."""
    return '![]({})'.format(escape(rel.target, '()'))


def write_resource(payload, target, base_dir='.'):
    """
    Writes a payload to ``base_dir/target``, creating missing directories.

    Raises:
        ResourceError: If a directory or the file cannot be created
    """
    dst_fname = os.path.join(base_dir, target)
    dst_dir = os.path.dirname(dst_fname)
    try:
        if dst_dir:
            os.makedirs(dst_dir, exist_ok=True)
        with open(dst_fname, 'wb') as dst_f:
            dst_f.write(payload)
    except OSError as e:
        raise ResourceError('unable to write {}: {}'.format(dst_fname, e)) from e
    logger.debug('wrote %d bytes to %s', len(payload), dst_fname)
    return dst_fname


def extract_resources(zipf, rels, base_dir='.'):
    """
    Extracts the payloads of the given relationships to disk.

    Each target is written once even if several relationships share it.
    Files written before a failure are left in place.

    Args:
        zipf: ZipFile object of the DOCX file
        rels: Iterable of Relationship objects
        base_dir: Directory the relationship targets are relative to

    Returns:
        list: Paths of the files written
    """
    written = []
    seen = set()
    for rel in rels:
        if rel.target in seen:
            continue
        seen.add(rel.target)
        payload = read_resource(zipf, rel)
        if payload is None:
            continue
        written.append(write_resource(payload, rel.target, base_dir))
    return written
