#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/ast/custom_nodes.py
"""Node kinds added by the API documentation pages.

A documentation-comment parser never produces these nodes. Page generators
build them around parsed comments to lay out headings, tables and callouts,
and ``CustomMarkdownEmitter`` knows how to write them. The core
``MarkdownEmitter`` rejects them like any other unknown kind.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional

from apidoc2md.ast.nodes import DocNode, DocSection, _freeze_nodes


class CustomDocNodeKind(str, Enum):
    """Kinds of the page-layout nodes."""

    EMPHASIS_SPAN = "emphasis_span"
    HEADING = "heading"
    NOTE_BOX = "note_box"
    TABLE = "table"
    TABLE_CELL = "table_cell"
    TABLE_ROW = "table_row"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DocEmphasisSpan(DocNode):
    """Inline nodes rendered in bold and/or italic.

    Parameters
    ----------
    nodes : tuple of DocNode, default = empty tuple
        Inline content
    bold : bool, default = False
        Request bold output for the text inside
    italic : bool, default = False
        Request italic output for the text inside

    """

    kind: ClassVar[str] = CustomDocNodeKind.EMPHASIS_SPAN.value

    nodes: tuple[DocNode, ...] = field(default_factory=tuple)
    bold: bool = False
    italic: bool = False

    def __post_init__(self) -> None:
        _freeze_nodes(self, self.nodes)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return self.nodes


@dataclass(frozen=True)
class DocHeading(DocNode):
    """Page heading.

    Parameters
    ----------
    title : str
        Heading text; escaped like plain text
    level : int, default = 1
        Heading level, 1 being the topmost heading below the page title

    """

    kind: ClassVar[str] = CustomDocNodeKind.HEADING.value

    title: str
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"Heading level must be at least 1, got {self.level}")


@dataclass(frozen=True)
class DocNoteBox(DocNode):
    """Callout rendered as a block quote."""

    kind: ClassVar[str] = CustomDocNodeKind.NOTE_BOX.value

    content: DocSection = field(default_factory=DocSection)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return (self.content,)


@dataclass(frozen=True)
class DocTableCell(DocNode):
    """A single table cell."""

    kind: ClassVar[str] = CustomDocNodeKind.TABLE_CELL.value

    content: DocSection = field(default_factory=DocSection)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return (self.content,)


@dataclass(frozen=True)
class DocTableRow(DocNode):
    """A table row; rows may have different cell counts."""

    kind: ClassVar[str] = CustomDocNodeKind.TABLE_ROW.value

    cells: tuple[DocTableCell, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return self.cells


@dataclass(frozen=True)
class DocTable(DocNode):
    """Table with an optional header row.

    Parameters
    ----------
    header : DocTableRow or None, default = None
        Header row; Markdown requires one, so an empty header is written when absent
    rows : tuple of DocTableRow, default = empty tuple
        Body rows

    """

    kind: ClassVar[str] = CustomDocNodeKind.TABLE.value

    header: Optional[DocTableRow] = None
    rows: tuple[DocTableRow, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", tuple(self.rows))

    def get_column_count(self) -> int:
        """Return the widest row width, header included."""
        column_count = len(self.header.cells) if self.header else 0
        for row in self.rows:
            column_count = max(column_count, len(row.cells))
        return column_count

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        if self.header:
            return (self.header, *self.rows)
        return self.rows
