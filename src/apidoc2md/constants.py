#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for apidoc2md.

Constants are organized by category:
1. Escaping - character classes and patterns used by the Markdown escaper
2. Inline Disambiguation - characters after which a symbol may follow directly
3. Writer Defaults - indentation used by the indented writer
4. Emitter Defaults - default option values
"""

from __future__ import annotations

import re

# =============================================================================
# Escaping
# =============================================================================

# Characters that carry Markdown meaning inside running text
MARKDOWN_SPECIAL_CHARS = "*#[]_|`~"
MARKDOWN_SPECIAL_CHARS_PATTERN = re.compile(r"[*#\[\]_|`~]")

# Three hyphens in a row can become a thematic break or a setext underline
HYPHEN_RUN = "---"
ESCAPED_HYPHEN_RUN = r"\-\-\-"

# =============================================================================
# Inline Disambiguation
# =============================================================================

# Splits text into leading whitespace, content and trailing whitespace
SURROUNDING_WHITESPACE_PATTERN = re.compile(r"^(\s*)(.*?)(\s*)$", re.DOTALL)

# After these characters a formatting symbol cannot merge with what came before
SYMBOL_SAFE_PRECEDING_CHARS = frozenset({"", "\n", " ", "[", ">"})

# "**one***two***three**" is ambiguous, "**one**<!-- -->*two*<!-- -->**three**" is not
INLINE_SEPARATOR = "<!-- -->"

WHITESPACE_RUN_PATTERN = re.compile(r"\s+")
LINE_SPLIT_PATTERN = re.compile(r"\r?\n")

TABLE_CELL_LINE_BREAK = "`<p/>`"

# =============================================================================
# Writer Defaults
# =============================================================================

DEFAULT_INDENT_PREFIX = "    "
NOTE_BOX_INDENT_PREFIX = "> "

# =============================================================================
# Emitter Defaults
# =============================================================================

DEFAULT_FAIL_ON_UNRESOLVED_LINKS = False

# Heading prefixes keyed by heading level; deeper levels use the fallback
HEADING_PREFIXES = {1: "##", 2: "###", 3: "###"}
DEFAULT_HEADING_PREFIX = "####"
