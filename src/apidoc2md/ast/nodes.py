#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/ast/nodes.py
"""Documentation-comment node classes.

This module defines the node hierarchy produced by a documentation-comment
parser and consumed by the Markdown emitters. The tree is read-only: nodes are
frozen dataclasses and composite nodes store their children as tuples.

Node Hierarchy
--------------
All nodes inherit from the base DocNode class and support the visitor pattern.

Container nodes group other nodes:
    - DocSection, DocParagraph

Leaf nodes carry text or markup:
    - DocPlainText, DocEscapedText, DocErrorText
    - DocHtmlStartTag, DocHtmlEndTag
    - DocCodeSpan, DocFencedCode
    - DocLinkTag, DocSoftBreak

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional


class DocNodeKind(str, Enum):
    """Discriminant of every node kind understood by the core emitter."""

    PLAIN_TEXT = "plain_text"
    ESCAPED_TEXT = "escaped_text"
    ERROR_TEXT = "error_text"
    HTML_START_TAG = "html_start_tag"
    HTML_END_TAG = "html_end_tag"
    CODE_SPAN = "code_span"
    LINK_TAG = "link_tag"
    PARAGRAPH = "paragraph"
    FENCED_CODE = "fenced_code"
    SECTION = "section"
    SOFT_BREAK = "soft_break"

    def __str__(self) -> str:
        return self.value


class DocNode:
    """Base class for all documentation-comment nodes.

    Every node has exactly one ``kind``. Subclasses outside this module may
    introduce their own kinds as plain strings; a visitor receives them through
    ``visit_<kind>`` when it defines such a method and through
    ``generic_visit`` otherwise.

    """

    kind: ClassVar[str]

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        context : Any, optional
            State threaded through the traversal, passed to the visit method

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        handler = getattr(visitor, f"visit_{self.kind}", None)
        if handler is None:
            return visitor.generic_visit(self, context)
        return handler(self, context)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        """Return the direct children of this node (empty for leaf nodes)."""
        return ()


def _freeze_nodes(node: DocNode, nodes: Any) -> None:
    object.__setattr__(node, "nodes", tuple(nodes))


# ============================================================================
# Text Nodes
# ============================================================================


@dataclass(frozen=True)
class DocPlainText(DocNode):
    """Plain text node.

    Parameters
    ----------
    text : str
        Raw text content

    """

    kind: ClassVar[str] = DocNodeKind.PLAIN_TEXT.value

    text: str


@dataclass(frozen=True)
class DocEscapedText(DocNode):
    """Text that was written with a backslash escape in the source comment.

    Parameters
    ----------
    decoded_text : str
        Text after the parser removed the escape
    encoded_text : str, default = ""
        Text exactly as it appeared in the source comment

    """

    kind: ClassVar[str] = DocNodeKind.ESCAPED_TEXT.value

    decoded_text: str
    encoded_text: str = ""


@dataclass(frozen=True)
class DocErrorText(DocNode):
    """Text the parser could not interpret and recovered from.

    Parameters
    ----------
    text : str
        Raw text content
    error_message : str or None, default = None
        Parser diagnostic; never rendered

    """

    kind: ClassVar[str] = DocNodeKind.ERROR_TEXT.value

    text: str
    error_message: Optional[str] = None


@dataclass(frozen=True)
class DocSoftBreak(DocNode):
    """Line-wrap point in the source comment; collapses to a single space."""

    kind: ClassVar[str] = DocNodeKind.SOFT_BREAK.value


# ============================================================================
# HTML Nodes
# ============================================================================


@dataclass(frozen=True)
class DocHtmlAttribute:
    """A single ``name="value"`` attribute of an HTML start tag."""

    name: str
    value: str

    def emit_as_html(self) -> str:
        return f'{self.name}="{self.value}"'


@dataclass(frozen=True)
class DocHtmlStartTag(DocNode):
    """HTML start tag such as ``<b>`` or ``<img src="x" />``.

    Parameters
    ----------
    name : str
        Element name
    html_attributes : tuple of DocHtmlAttribute, default = empty tuple
        Attributes in source order
    self_closing : bool, default = False
        Whether the tag is written as ``<name />``

    """

    kind: ClassVar[str] = DocNodeKind.HTML_START_TAG.value

    name: str
    html_attributes: tuple[DocHtmlAttribute, ...] = ()
    self_closing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "html_attributes", tuple(self.html_attributes))

    def emit_as_html(self) -> str:
        """Render the tag as literal HTML.

        Returns
        -------
        str
            The tag, e.g. ``<a href="x">`` or ``<br />``

        """
        parts = [self.name]
        parts.extend(attribute.emit_as_html() for attribute in self.html_attributes)
        closing = " />" if self.self_closing else ">"
        return "<" + " ".join(parts) + closing


@dataclass(frozen=True)
class DocHtmlEndTag(DocNode):
    """HTML end tag such as ``</b>``."""

    kind: ClassVar[str] = DocNodeKind.HTML_END_TAG.value

    name: str

    def emit_as_html(self) -> str:
        return f"</{self.name}>"


# ============================================================================
# Code Nodes
# ============================================================================


@dataclass(frozen=True)
class DocCodeSpan(DocNode):
    """Inline code.

    Parameters
    ----------
    code : str
        Code content; never escaped

    """

    kind: ClassVar[str] = DocNodeKind.CODE_SPAN.value

    code: str


@dataclass(frozen=True)
class DocFencedCode(DocNode):
    """Fenced code block.

    Parameters
    ----------
    code : str
        Code body; never escaped
    language : str, default = ""
        Language tag written after the opening fence

    """

    kind: ClassVar[str] = DocNodeKind.FENCED_CODE.value

    code: str
    language: str = ""


# ============================================================================
# Links
# ============================================================================


@dataclass(frozen=True)
class DocMemberReference:
    """One step of a declaration reference, e.g. ``Widget`` or ``(render:instance)``."""

    identifier: str
    selector: Optional[str] = None

    def emit_as_tsdoc(self) -> str:
        if self.selector:
            return f"({self.identifier}:{self.selector})"
        return self.identifier


@dataclass(frozen=True)
class DocDeclarationReference:
    """Opaque reference to an API declaration, the target of a code link.

    Parameters
    ----------
    package_name : str or None, default = None
        Package that declares the item, e.g. ``@scope/widgets``
    import_path : str or None, default = None
        Path inside the package
    member_references : tuple of DocMemberReference, default = empty tuple
        Member chain leading to the declaration

    """

    package_name: Optional[str] = None
    import_path: Optional[str] = None
    member_references: tuple[DocMemberReference, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_references", tuple(self.member_references))

    def emit_as_tsdoc(self) -> str:
        """Render the reference in TSDoc notation.

        Examples
        --------
            >>> ref = DocDeclarationReference(
            ...     package_name="widgets",
            ...     member_references=(DocMemberReference("Button"), DocMemberReference("render")),
            ... )
            >>> ref.emit_as_tsdoc()
            'widgets#Button.render'

        """
        prefix = self.package_name or ""
        if self.import_path:
            import_path = self.import_path.lstrip("/")
            prefix = f"{prefix}/{import_path}" if prefix else import_path
        members = ".".join(member.emit_as_tsdoc() for member in self.member_references)
        if prefix:
            return f"{prefix}#{members}"
        return members


@dataclass(frozen=True)
class DocLinkTag(DocNode):
    """``{@link ...}`` inline tag.

    At most one destination is expected. A code destination takes precedence
    over a URL destination; with neither, only ``link_text`` is rendered.

    Parameters
    ----------
    code_destination : DocDeclarationReference or None, default = None
        Declaration the link points to
    url_destination : str or None, default = None
        URL the link points to
    link_text : str or None, default = None
        Explicit display text

    """

    kind: ClassVar[str] = DocNodeKind.LINK_TAG.value

    code_destination: Optional[DocDeclarationReference] = None
    url_destination: Optional[str] = None
    link_text: Optional[str] = None


# ============================================================================
# Containers
# ============================================================================


@dataclass(frozen=True)
class DocParagraph(DocNode):
    """Paragraph of inline nodes.

    Parameters
    ----------
    nodes : tuple of DocNode, default = empty tuple
        Inline content in order

    """

    kind: ClassVar[str] = DocNodeKind.PARAGRAPH.value

    nodes: tuple[DocNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, self.nodes)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return self.nodes


@dataclass(frozen=True)
class DocSection(DocNode):
    """Structural grouping of block nodes with no formatting of its own.

    Parameters
    ----------
    nodes : tuple of DocNode, default = empty tuple
        Child nodes in order

    """

    kind: ClassVar[str] = DocNodeKind.SECTION.value

    nodes: tuple[DocNode, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_nodes(self, self.nodes)

    def get_child_nodes(self) -> tuple[DocNode, ...]:
        return self.nodes
