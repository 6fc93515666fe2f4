"""
docx2md - Convert DOCX files to markdown, resolving hyperlinks, tables,
headings, lists and images.
"""

from .core import ConversionResult, convert, process, process_bytes
from .cli import process_args

__version__ = '0.1.0'

__all__ = [
    'ConversionResult',
    'convert',
    'process',
    'process_bytes',
    'process_args',
]
