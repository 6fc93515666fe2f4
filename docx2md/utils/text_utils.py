"""
Text helpers shared by the markdown converters.
"""

from wcwidth import wcwidth


def escape(text, charset):
    """
    Prefixes every character of ``charset`` found in ``text`` with a backslash.

    All characters are substituted in a single pass, so a backslash inserted
    for one character is never escaped again for another. A backslash in
    ``text`` is only escaped when the backslash itself is part of ``charset``.

    Args:
        text: Text to escape
        charset: String of characters to escape

    Returns:
        Escaped text
    """
    if not charset:
        return text
    table = {ord(ch): '\\' + ch for ch in charset}
    return text.translate(table)


def display_width(text):
    """
    Returns the number of terminal columns ``text`` occupies.

    Wide East Asian glyphs count as two columns; combining marks and
    non-printable characters count as zero.
    """
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w > 0:
            width += w
    return width
