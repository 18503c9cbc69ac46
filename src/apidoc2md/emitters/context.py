#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/emitters/context.py
"""State threaded through one Markdown emission."""

from __future__ import annotations

from dataclasses import dataclass, field

from apidoc2md.options.markdown import MarkdownEmitterOptions
from apidoc2md.utils.indented_writer import IndentedWriter


@dataclass
class MarkdownEmitterContext:
    """Mutable formatting state for a single ``emit`` call.

    A context is created by ``MarkdownEmitter.emit``, passed by reference to
    every write method and dropped when ``emit`` returns.

    Parameters
    ----------
    writer : IndentedWriter
        Sink for the generated Markdown
    options : MarkdownEmitterOptions
        Options passed to ``emit``
    inside_table : bool, default False
        Whether output currently goes into a single-line table cell
    bold_requested : bool, default False
        Wrap plain text written from now on in ``<b>`` tags
    italic_requested : bool, default False
        Wrap plain text written from now on in ``<i>`` tags
    writing_bold : bool, default False
        Set by derived emitters while a bold run is open
    writing_italic : bool, default False
        Set by derived emitters while an italic run is open

    """

    writer: IndentedWriter
    options: MarkdownEmitterOptions = field(default_factory=MarkdownEmitterOptions)
    inside_table: bool = False

    bold_requested: bool = False
    italic_requested: bool = False

    writing_bold: bool = False
    writing_italic: bool = False
