#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/emitters/custom.py
"""Markdown emitter for generated API reference pages.

``CustomMarkdownEmitter`` extends the core emitter with the page-layout nodes
from ``apidoc2md.ast.custom_nodes`` and resolves links that point at
declarations through a ``DeclarationResolver``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

from apidoc2md.ast.custom_nodes import (
    DocEmphasisSpan,
    DocHeading,
    DocNoteBox,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from apidoc2md.ast.nodes import DocDeclarationReference, DocLinkTag
from apidoc2md.constants import DEFAULT_HEADING_PREFIX, HEADING_PREFIXES, NOTE_BOX_INDENT_PREFIX
from apidoc2md.emitters.context import MarkdownEmitterContext
from apidoc2md.emitters.markdown import MarkdownEmitter
from apidoc2md.exceptions import UnresolvedReferenceError
from apidoc2md.options.markdown import CustomMarkdownEmitterOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedDeclaration:
    """Where a declaration's documentation lives.

    Parameters
    ----------
    url : str
        Link target, typically the relative file name of the declaration's page
    scoped_name : str
        Name used as link text when the link has none, e.g. ``Widget.render()``

    """

    url: str
    scoped_name: str = ""


class DeclarationResolver(Protocol):
    """Turns declaration references into link targets."""

    def resolve(self, reference: DocDeclarationReference) -> Optional[ResolvedDeclaration]:
        """Return the resolved declaration, or None if it cannot be found."""
        ...


class MappingDeclarationResolver:
    """Resolve references by their TSDoc notation in a fixed mapping.

    Parameters
    ----------
    declarations : Mapping[str, ResolvedDeclaration]
        Resolved declarations keyed by ``DocDeclarationReference.emit_as_tsdoc()``

    Examples
    --------
        >>> resolver = MappingDeclarationResolver({
        ...     "widgets#Button": ResolvedDeclaration("widgets.button.md", "Button"),
        ... })

    """

    def __init__(self, declarations: Mapping[str, ResolvedDeclaration]):
        self._declarations = dict(declarations)

    def resolve(self, reference: DocDeclarationReference) -> Optional[ResolvedDeclaration]:
        return self._declarations.get(reference.emit_as_tsdoc())


class CustomMarkdownEmitter(MarkdownEmitter):
    """Markdown emitter with declaration links and page-layout nodes.

    Parameters
    ----------
    resolver : DeclarationResolver
        Resolves the code destinations of ``{@link}`` tags

    """

    options_class = CustomMarkdownEmitterOptions

    def __init__(self, resolver: DeclarationResolver):
        self._resolver = resolver

    def write_link_tag_with_code_destination(self, node: DocLinkTag, context: MarkdownEmitterContext) -> None:
        """Write a link to the page of the referenced declaration.

        Unresolved references are reported and fall back to the link text,
        unless ``fail_on_unresolved_links`` is set.

        Raises
        ------
        UnresolvedReferenceError
            If the reference does not resolve and ``fail_on_unresolved_links`` is set

        """
        reference = node.code_destination
        assert reference is not None
        resolved = self._resolver.resolve(reference)

        if resolved is None:
            options = context.options
            if isinstance(options, CustomMarkdownEmitterOptions) and options.fail_on_unresolved_links:
                raise UnresolvedReferenceError(reference.emit_as_tsdoc())
            logger.warning('Unable to resolve reference "%s"', reference.emit_as_tsdoc())
            if node.link_text:
                self.write_plain_text(node.link_text, context)
            return

        link_text = node.link_text or resolved.scoped_name
        if not link_text:
            logger.warning('Unable to determine link text for "%s"', reference.emit_as_tsdoc())
            return

        self.write_markdown_link(link_text, resolved.url, context)

    def visit_emphasis_span(self, node: DocEmphasisSpan, context: MarkdownEmitterContext) -> None:
        old_bold = context.bold_requested
        old_italic = context.italic_requested
        context.bold_requested = node.bold
        context.italic_requested = node.italic
        try:
            self.write_nodes(node.nodes, context)
        finally:
            context.bold_requested = old_bold
            context.italic_requested = old_italic

    def visit_heading(self, node: DocHeading, context: MarkdownEmitterContext) -> None:
        writer = context.writer
        writer.ensure_skipped_line()

        prefix = HEADING_PREFIXES.get(node.level, DEFAULT_HEADING_PREFIX)
        writer.write_line(f"{prefix} {self.get_escaped_text(node.title)}")
        writer.write_line()

    def visit_note_box(self, node: DocNoteBox, context: MarkdownEmitterContext) -> None:
        writer = context.writer
        writer.ensure_new_line()
        with writer.indent_scope(NOTE_BOX_INDENT_PREFIX):
            self.write_node(node.content, context)
            writer.ensure_new_line()
        writer.write_line()

    def visit_table(self, node: DocTable, context: MarkdownEmitterContext) -> None:
        """Write a pipe table.

        Markdown requires a header row, so an empty one is written when the
        table has none. Rows may be shorter than the widest row.

        """
        writer = context.writer

        # GitHub's renderer needs a blank line above a table
        writer.ensure_skipped_line()

        old_inside_table = context.inside_table
        context.inside_table = True
        try:
            column_count = node.get_column_count()

            writer.write("| ")
            header_cells = node.header.cells if node.header else ()
            for index in range(column_count):
                writer.write(" ")
                if index < len(header_cells):
                    self.write_node(header_cells[index].content, context)
                writer.write(" |")
            writer.write_line()

            writer.write("| ")
            for _ in range(column_count):
                writer.write(" --- |")
            writer.write_line()

            for row in node.rows:
                self._write_table_row(row, context)

            writer.write_line()
        finally:
            context.inside_table = old_inside_table

    def _write_table_row(self, node: DocTableRow, context: MarkdownEmitterContext) -> None:
        writer = context.writer
        writer.write("| ")
        for cell in node.cells:
            writer.write(" ")
            self._write_table_cell(cell, context)
            writer.write(" |")
        writer.write_line()

    def _write_table_cell(self, node: DocTableCell, context: MarkdownEmitterContext) -> None:
        self.write_node(node.content, context)
