"""Converters for DOCX content to markdown."""

from .markdown_converter import MarkdownWalker, convert_to_markdown
from .table_converter import render_table

__all__ = ['MarkdownWalker', 'convert_to_markdown', 'render_table']
