#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/emitters/markdown.py
"""Markdown emission from documentation-comment trees.

This module provides the MarkdownEmitter class, which walks a
documentation-comment tree depth-first and writes Markdown through an
``IndentedWriter``. Running text is escaped so that Markdown and HTML
metacharacters from the source comment are rendered literally.

For more info on the output format: https://en.wikipedia.org/wiki/Markdown

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from apidoc2md.ast.nodes import (
    DocCodeSpan,
    DocErrorText,
    DocEscapedText,
    DocFencedCode,
    DocHtmlEndTag,
    DocHtmlStartTag,
    DocLinkTag,
    DocNode,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
)
from apidoc2md.ast.transforms import trim_spaces_in_paragraph
from apidoc2md.ast.visitors import DocNodeVisitor
from apidoc2md.constants import (
    INLINE_SEPARATOR,
    LINE_SPLIT_PATTERN,
    SURROUNDING_WHITESPACE_PATTERN,
    SYMBOL_SAFE_PRECEDING_CHARS,
    TABLE_CELL_LINE_BREAK,
    WHITESPACE_RUN_PATTERN,
)
from apidoc2md.emitters.context import MarkdownEmitterContext
from apidoc2md.exceptions import CodeDestinationNotSupportedError, InvalidOptionsError, UnsupportedNodeKindError
from apidoc2md.options.markdown import MarkdownEmitterOptions
from apidoc2md.utils.escape import escape_markdown
from apidoc2md.utils.indented_writer import IndentedWriter, StringBuilder

logger = logging.getLogger(__name__)


class MarkdownEmitter(DocNodeVisitor):
    """Render documentation-comment nodes as Markdown.

    Each node kind is written by its ``visit_<kind>`` method, so derived
    emitters change the output for a kind by overriding that method and add
    kinds by defining new ones. Links to declarations need a derived emitter:
    the base class cannot turn a declaration reference into a URL.

    The emitter keeps no state between calls; everything that changes during
    a traversal lives in the ``MarkdownEmitterContext`` created by ``emit``.

    Examples
    --------
    Basic usage:

        >>> from apidoc2md.ast import DocParagraph, DocPlainText
        >>> emitter = MarkdownEmitter()
        >>> emitter.emit(None, DocParagraph(nodes=[DocPlainText("a_b")]))
        'a\\\\_b\\n\\n'

    """

    options_class: type[MarkdownEmitterOptions] = MarkdownEmitterOptions

    def emit(
        self,
        builder: Optional[StringBuilder],
        doc_node: DocNode,
        options: Optional[MarkdownEmitterOptions] = None,
    ) -> str:
        """Render a tree and return the builder's full content.

        Parameters
        ----------
        builder : StringBuilder or None
            Buffer to append to; a fresh buffer is used when None
        doc_node : DocNode
            Root of the tree to render
        options : MarkdownEmitterOptions or None, default = None
            Emission options, available to write methods as ``context.options``

        Returns
        -------
        str
            The rendered Markdown, ending with a line break unless empty

        Raises
        ------
        InvalidOptionsError
            If ``options`` is not an instance of ``options_class``
        UnsupportedNodeKindError
            If the tree contains a node kind this emitter does not handle
        CodeDestinationNotSupportedError
            If a link targets a declaration and the emitter cannot resolve it

        """
        if options is not None and not isinstance(options, self.options_class):
            raise InvalidOptionsError(
                emitter_name=type(self).__name__,
                expected_type=self.options_class,
                received_type=type(options),
            )

        writer = IndentedWriter(builder)
        context = MarkdownEmitterContext(writer=writer, options=options or self.options_class())

        logger.debug("Emitting Markdown for %s node", doc_node.kind)
        self.write_node(doc_node, context)

        writer.ensure_new_line()  # finish the last line

        return writer.to_string()

    def get_escaped_text(self, text: str) -> str:
        """Escape running text; override to change the escaping rules."""
        return escape_markdown(text)

    def write_node(self, doc_node: DocNode, context: MarkdownEmitterContext) -> None:
        """Write a single node by dispatching to its ``visit_<kind>`` method."""
        doc_node.accept(self, context)

    def write_nodes(self, doc_nodes: Iterable[DocNode], context: MarkdownEmitterContext) -> None:
        for doc_node in doc_nodes:
            self.write_node(doc_node, context)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def visit_plain_text(self, node: DocPlainText, context: MarkdownEmitterContext) -> None:
        self.write_plain_text(node.text, context)

    def visit_escaped_text(self, node: DocEscapedText, context: MarkdownEmitterContext) -> None:
        self.write_plain_text(node.decoded_text, context)

    def visit_error_text(self, node: DocErrorText, context: MarkdownEmitterContext) -> None:
        # Rendered like normal text; reporting parse errors is up to the caller
        self.write_plain_text(node.text, context)

    def visit_soft_break(self, node: DocSoftBreak, context: MarkdownEmitterContext) -> None:
        last_character = context.writer.peek_last_character()
        if last_character and not last_character.isspace():
            context.writer.write(" ")

    # ------------------------------------------------------------------
    # HTML and code
    # ------------------------------------------------------------------

    def visit_html_start_tag(self, node: DocHtmlStartTag, context: MarkdownEmitterContext) -> None:
        context.writer.write(node.emit_as_html())

    def visit_html_end_tag(self, node: DocHtmlEndTag, context: MarkdownEmitterContext) -> None:
        context.writer.write(node.emit_as_html())

    def visit_code_span(self, node: DocCodeSpan, context: MarkdownEmitterContext) -> None:
        """Write inline code between single backticks.

        Table cells are single lines, so inside a table each line break closes
        the span, inserts ``<p/>`` and reopens it.

        """
        writer = context.writer
        writer.write("`")
        if context.inside_table:
            writer.write(TABLE_CELL_LINE_BREAK.join(LINE_SPLIT_PATTERN.split(node.code)))
        else:
            writer.write(node.code)
        writer.write("`")

    def visit_fenced_code(self, node: DocFencedCode, context: MarkdownEmitterContext) -> None:
        writer = context.writer
        writer.ensure_new_line()
        writer.write("```")
        writer.write(node.language)
        writer.write_line()
        writer.write(node.code)
        writer.write_line()
        writer.write_line("```")

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def visit_link_tag(self, node: DocLinkTag, context: MarkdownEmitterContext) -> None:
        if node.code_destination:
            self.write_link_tag_with_code_destination(node, context)
        elif node.url_destination:
            self.write_link_tag_with_url_destination(node, context)
        elif node.link_text:
            self.write_plain_text(node.link_text, context)

    def write_link_tag_with_code_destination(self, node: DocLinkTag, context: MarkdownEmitterContext) -> None:
        """Write a link to a declaration.

        Subclasses must override this to support code destinations.

        Raises
        ------
        CodeDestinationNotSupportedError
            Always, in the base emitter

        """
        reference = node.code_destination.emit_as_tsdoc() if node.code_destination else ""
        raise CodeDestinationNotSupportedError(reference)

    def write_link_tag_with_url_destination(self, node: DocLinkTag, context: MarkdownEmitterContext) -> None:
        """Write ``[text](url)``; the text defaults to the URL itself."""
        url = node.url_destination or ""
        link_text = node.link_text if node.link_text is not None else url
        self.write_markdown_link(link_text, url, context)

    def write_markdown_link(self, link_text: str, url: str, context: MarkdownEmitterContext) -> None:
        encoded_link_text = self.get_escaped_text(WHITESPACE_RUN_PATTERN.sub(" ", link_text))

        writer = context.writer
        writer.write("[")
        writer.write(encoded_link_text)
        writer.write(f"]({url})")

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def visit_paragraph(self, node: DocParagraph, context: MarkdownEmitterContext) -> None:
        writer = context.writer
        trimmed_paragraph = trim_spaces_in_paragraph(node)
        if context.inside_table:
            writer.write("<p>")
            self.write_nodes(trimmed_paragraph.nodes, context)
            writer.write("</p>")
        else:
            self.write_nodes(trimmed_paragraph.nodes, context)
            writer.ensure_new_line()
            writer.write_line()

    def visit_section(self, node: DocSection, context: MarkdownEmitterContext) -> None:
        self.write_nodes(node.nodes, context)

    def generic_visit(self, node: DocNode, context: MarkdownEmitterContext) -> None:
        raise UnsupportedNodeKindError(str(node.kind))

    # ------------------------------------------------------------------
    # Plain text
    # ------------------------------------------------------------------

    def write_plain_text(self, text: str, context: MarkdownEmitterContext) -> None:
        """Write escaped text, keeping its surrounding whitespace.

        Parameters
        ----------
        text : str
            Unescaped text
        context : MarkdownEmitterContext
            Current emission state; ``bold_requested`` and ``italic_requested``
            wrap the text in ``<b>`` and ``<i>`` tags

        """
        writer = context.writer

        # split out the [ leading whitespace, content, trailing whitespace ]
        match = SURROUNDING_WHITESPACE_PATTERN.match(text)
        leading, middle, trailing = match.groups() if match else ("", text, "")

        writer.write(leading)

        if middle:
            if writer.peek_last_character() not in SYMBOL_SAFE_PRECEDING_CHARS:
                # This is no problem:        "**one** *two* **three**"
                # But this is trouble:       "**one***two***three**"
                # The most general solution: "**one**<!-- -->*two*<!-- -->**three**"
                writer.write(INLINE_SEPARATOR)

            if context.bold_requested:
                writer.write("<b>")
            if context.italic_requested:
                writer.write("<i>")

            writer.write(self.get_escaped_text(middle))

            if context.italic_requested:
                writer.write("</i>")
            if context.bold_requested:
                writer.write("</b>")

        writer.write(trailing)
