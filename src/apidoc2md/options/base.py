#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for emitter options.

This module defines the foundation classes for the options records passed to
``MarkdownEmitter.emit`` and its subclasses.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseEmitterOptions(CloneFrozenMixin):
    """Base class for all emitter options.

    The core emitter recognizes no keys. Derived emitters declare their own
    options as frozen dataclass fields on a subclass and read them from
    ``context.options``.

    """
