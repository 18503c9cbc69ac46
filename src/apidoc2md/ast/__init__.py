#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/ast/__init__.py
"""Documentation-comment tree consumed by the Markdown emitters.

The module consists of several components:

- nodes: node classes produced by a documentation-comment parser
- custom_nodes: page-layout nodes (headings, tables, note boxes, emphasis)
- visitors: visitor base class used for traversal
- transforms: pre-emission transforms such as paragraph trimming

Examples
--------
Basic usage:

    >>> from apidoc2md.ast import DocParagraph, DocPlainText, DocSection
    >>> from apidoc2md.emitters import MarkdownEmitter
    >>>
    >>> tree = DocSection(nodes=[DocParagraph(nodes=[DocPlainText("Hello *world*")])])
    >>> MarkdownEmitter().emit(None, tree)
    'Hello \\\\*world\\\\*\\n\\n'

"""

from __future__ import annotations

from apidoc2md.ast.custom_nodes import (
    CustomDocNodeKind,
    DocEmphasisSpan,
    DocHeading,
    DocNoteBox,
    DocTable,
    DocTableCell,
    DocTableRow,
)
from apidoc2md.ast.nodes import (
    DocCodeSpan,
    DocDeclarationReference,
    DocErrorText,
    DocEscapedText,
    DocFencedCode,
    DocHtmlAttribute,
    DocHtmlEndTag,
    DocHtmlStartTag,
    DocLinkTag,
    DocMemberReference,
    DocNode,
    DocNodeKind,
    DocParagraph,
    DocPlainText,
    DocSection,
    DocSoftBreak,
)
from apidoc2md.ast.transforms import trim_spaces_in_paragraph
from apidoc2md.ast.visitors import DocNodeVisitor

__all__ = [
    # Nodes
    "DocCodeSpan",
    "DocDeclarationReference",
    "DocErrorText",
    "DocEscapedText",
    "DocFencedCode",
    "DocHtmlAttribute",
    "DocHtmlEndTag",
    "DocHtmlStartTag",
    "DocLinkTag",
    "DocMemberReference",
    "DocNode",
    "DocNodeKind",
    "DocParagraph",
    "DocPlainText",
    "DocSection",
    "DocSoftBreak",
    # Page layout nodes
    "CustomDocNodeKind",
    "DocEmphasisSpan",
    "DocHeading",
    "DocNoteBox",
    "DocTable",
    "DocTableCell",
    "DocTableRow",
    # Traversal
    "DocNodeVisitor",
    "trim_spaces_in_paragraph",
]
