"""
Markdown pipe-table layout for DOCX tables.
"""

from ..utils.text_utils import display_width, escape


def _column_widths(rows, maxcol):
    widths = [0] * maxcol
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], display_width(cell))
    return widths


def _row_line(cells):
    return ''.join('|' + cell for cell in cells) + '|'


def render_table(rows):
    """
    Lays out rendered cell texts as a markdown pipe table.

    Columns are padded to the widest cell, measured in terminal columns so
    wide glyphs line up. The header line is left blank and every row,
    including the first, is emitted below the separator. Ragged rows are
    padded with blank cells.

    Args:
        rows: List of rows, each a list of single-line cell strings

    Returns:
        Markdown table string, one ``\\n``-terminated line per row plus the
        header and separator lines; empty string for no rows
    """
    if not rows:
        return ''

    rows = [[escape(cell, '|') for cell in row] for row in rows]
    maxcol = max(len(row) for row in rows)
    widths = _column_widths(rows, maxcol)

    lines = [
        _row_line(' ' * w for w in widths),
        _row_line('-' * w for w in widths),
    ]
    for row in rows:
        cells = []
        for i, width in enumerate(widths):
            cell = row[i] if i < len(row) else ''
            cells.append(cell + ' ' * (width - display_width(cell)))
        lines.append(_row_line(cells))

    return ''.join(line + '\n' for line in lines)
