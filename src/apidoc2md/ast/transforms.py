#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/ast/transforms.py
"""Transformations applied to documentation-comment nodes before emission.

Transforms never modify their input; they return new nodes.

"""

from __future__ import annotations

from apidoc2md.ast.nodes import DocNode, DocParagraph, DocPlainText, DocSoftBreak


def _is_blank(node: DocNode) -> bool:
    if isinstance(node, DocSoftBreak):
        return True
    return isinstance(node, DocPlainText) and not node.text.strip()


def trim_spaces_in_paragraph(paragraph: DocParagraph) -> DocParagraph:
    """Trim the whitespace at both ends of a paragraph.

    Blank children (soft breaks and whitespace-only plain text) at either end
    are dropped. Leading whitespace of the first plain-text child and trailing
    whitespace of the last plain-text child are stripped. Interior text is left
    as is.

    Parameters
    ----------
    paragraph : DocParagraph
        Paragraph to trim

    Returns
    -------
    DocParagraph
        New paragraph with trimmed content

    Examples
    --------
        >>> para = DocParagraph(nodes=[DocSoftBreak(), DocPlainText("  Hello  world ")])
        >>> trim_spaces_in_paragraph(para).nodes
        (DocPlainText(text='Hello  world'),)

    """
    nodes = list(paragraph.nodes)

    while nodes and _is_blank(nodes[0]):
        nodes.pop(0)
    while nodes and _is_blank(nodes[-1]):
        nodes.pop()

    if nodes and isinstance(nodes[0], DocPlainText):
        nodes[0] = DocPlainText(nodes[0].text.lstrip())
    if nodes and isinstance(nodes[-1], DocPlainText):
        nodes[-1] = DocPlainText(nodes[-1].text.rstrip())

    return DocParagraph(nodes=nodes)
