#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/utils/escape.py
"""Markdown text escaping.

The output of the emitters may be read as HTML-flavored Markdown, so running
text is protected against both Markdown and HTML interpretation.

"""

from __future__ import annotations

import html

from apidoc2md.constants import (
    ESCAPED_HYPHEN_RUN,
    HYPHEN_RUN,
    MARKDOWN_SPECIAL_CHARS_PATTERN,
)


def escape_markdown(text: str) -> str:
    r"""Escape text so that Markdown renders it literally.

    The substitutions run in a fixed order:

    1. ``\`` becomes ``\\`` (first, so later backslashes are not doubled)
    2. each of ``* # [ ] _ | ` ~`` gets a backslash prefix
    3. every ``---`` becomes ``\-\-\-``; shorter hyphen runs are kept
    4. ``&``, ``<`` and ``>`` become ``&amp;``, ``&lt;`` and ``&gt;``

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("a_b *c*")
        'a\\_b \\*c\\*'
        >>> escape_markdown("x --- y -- z")
        'x \\-\\-\\- y -- z'
        >>> escape_markdown("<T> & U")
        '&lt;T&gt; &amp; U'

    """
    if not text:
        return text

    result = text.replace("\\", "\\\\")
    result = MARKDOWN_SPECIAL_CHARS_PATTERN.sub(lambda match: "\\" + match.group(0), result)
    result = result.replace(HYPHEN_RUN, ESCAPED_HYPHEN_RUN)
    return html.escape(result, quote=False)
