#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/emitters/__init__.py
"""Markdown emitters for documentation-comment trees.

- ``MarkdownEmitter``: the core emitter for parser-produced nodes
- ``CustomMarkdownEmitter``: adds declaration links and page-layout nodes
"""

from __future__ import annotations

from apidoc2md.emitters.context import MarkdownEmitterContext
from apidoc2md.emitters.custom import (
    CustomMarkdownEmitter,
    DeclarationResolver,
    MappingDeclarationResolver,
    ResolvedDeclaration,
)
from apidoc2md.emitters.markdown import MarkdownEmitter

__all__ = [
    "CustomMarkdownEmitter",
    "DeclarationResolver",
    "MappingDeclarationResolver",
    "MarkdownEmitter",
    "MarkdownEmitterContext",
    "ResolvedDeclaration",
]
