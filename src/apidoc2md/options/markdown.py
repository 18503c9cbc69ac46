#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown emission."""
# src/apidoc2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from apidoc2md.constants import DEFAULT_FAIL_ON_UNRESOLVED_LINKS
from apidoc2md.options.base import BaseEmitterOptions


@dataclass(frozen=True)
class MarkdownEmitterOptions(BaseEmitterOptions):
    """Options for ``MarkdownEmitter``.

    The core emitter has no recognized keys; this class exists so derived
    emitters can extend it.

    """


@dataclass(frozen=True)
class CustomMarkdownEmitterOptions(MarkdownEmitterOptions):
    """Options for ``CustomMarkdownEmitter``.

    Parameters
    ----------
    fail_on_unresolved_links : bool, default False
        Raise UnresolvedReferenceError when a declaration reference cannot be
        resolved. If False (default), a warning is logged and the link text is
        written as plain text.

    """

    fail_on_unresolved_links: bool = field(
        default=DEFAULT_FAIL_ON_UNRESOLVED_LINKS,
        metadata={
            "help": "Raise UnresolvedReferenceError for unresolved {@link} references instead of logging warnings",
            "importance": "advanced",
        },
    )
