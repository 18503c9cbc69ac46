#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/ast/visitors.py
"""Visitor pattern implementation for documentation-comment traversal.

Nodes dispatch to ``visit_<kind>`` on the visitor, passing the traversal
context along. Node kinds without a matching method go to ``generic_visit``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class DocNodeVisitor(ABC):
    """Abstract base class for documentation-comment visitors.

    Concrete visitors must handle every core node kind. Derived visitors add
    kinds by defining ``visit_<kind>`` methods or overriding ``generic_visit``.

    Examples
    --------
    Collecting all code spans:

        >>> class CodeCollector(DocNodeVisitor):
        ...     def __init__(self):
        ...         self.spans = []
        ...
        ...     def visit_code_span(self, node, context):
        ...         self.spans.append(node.code)

    """

    @abstractmethod
    def visit_plain_text(self, node: DocPlainText, context: Any) -> Any:
        """Visit a DocPlainText node."""

    @abstractmethod
    def visit_escaped_text(self, node: DocEscapedText, context: Any) -> Any:
        """Visit a DocEscapedText node."""

    @abstractmethod
    def visit_error_text(self, node: DocErrorText, context: Any) -> Any:
        """Visit a DocErrorText node."""

    @abstractmethod
    def visit_html_start_tag(self, node: DocHtmlStartTag, context: Any) -> Any:
        """Visit a DocHtmlStartTag node."""

    @abstractmethod
    def visit_html_end_tag(self, node: DocHtmlEndTag, context: Any) -> Any:
        """Visit a DocHtmlEndTag node."""

    @abstractmethod
    def visit_code_span(self, node: DocCodeSpan, context: Any) -> Any:
        """Visit a DocCodeSpan node."""

    @abstractmethod
    def visit_link_tag(self, node: DocLinkTag, context: Any) -> Any:
        """Visit a DocLinkTag node."""

    @abstractmethod
    def visit_paragraph(self, node: DocParagraph, context: Any) -> Any:
        """Visit a DocParagraph node."""

    @abstractmethod
    def visit_fenced_code(self, node: DocFencedCode, context: Any) -> Any:
        """Visit a DocFencedCode node."""

    @abstractmethod
    def visit_section(self, node: DocSection, context: Any) -> Any:
        """Visit a DocSection node."""

    @abstractmethod
    def visit_soft_break(self, node: DocSoftBreak, context: Any) -> Any:
        """Visit a DocSoftBreak node."""

    def generic_visit(self, node: DocNode, context: Any) -> Any:
        """Visit a node that has no dedicated visit method.

        The default implementation visits the node's children in order.

        Parameters
        ----------
        node : DocNode
            Node to visit
        context : Any
            Traversal context

        """
        for child in node.get_child_nodes():
            child.accept(self, context)
