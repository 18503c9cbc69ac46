#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the apidoc2md emitters.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from apidoc2md.options.base import BaseEmitterOptions, CloneFrozenMixin
from apidoc2md.options.markdown import CustomMarkdownEmitterOptions, MarkdownEmitterOptions

__all__ = [
    "BaseEmitterOptions",
    "CloneFrozenMixin",
    "CustomMarkdownEmitterOptions",
    "MarkdownEmitterOptions",
]
