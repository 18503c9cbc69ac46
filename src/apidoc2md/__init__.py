"""apidoc2md - Markdown emission for documentation-comment trees.

apidoc2md takes the node tree produced by a documentation-comment parser
(plain text, code spans, links, fenced code, HTML tags, paragraphs, sections)
and writes it out as Markdown. Running text is escaped so Markdown and HTML
metacharacters from the source comment are shown literally, while code and
HTML payloads pass through untouched.

Key Features
------------
- Escaping of Markdown metacharacters, hyphen runs and HTML entities
- Disambiguation of adjacent inline formatting runs
- Table-cell aware rendering of paragraphs and code spans
- Extensible emitter: override ``visit_<kind>`` methods or add new kinds
- Declaration links through a pluggable ``DeclarationResolver``

Requirements
------------
- Python 3.10+

Examples
--------
Basic usage:

    >>> from apidoc2md import MarkdownEmitter
    >>> from apidoc2md.ast import DocLinkTag, DocParagraph
    >>> tree = DocParagraph(nodes=[DocLinkTag(url_destination="https://example.com")])
    >>> print(MarkdownEmitter().emit(None, tree))
    [https://example.com](https://example.com)
    <BLANKLINE>

See Also
--------
apidoc2md.ast : node definitions
apidoc2md.emitters : emitters and declaration resolvers

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "apidoc2md requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from apidoc2md.emitters import (  # noqa: E402
    CustomMarkdownEmitter,
    DeclarationResolver,
    MappingDeclarationResolver,
    MarkdownEmitter,
    MarkdownEmitterContext,
    ResolvedDeclaration,
)
from apidoc2md.exceptions import (  # noqa: E402
    ApiDoc2MdError,
    CodeDestinationNotSupportedError,
    InvalidOptionsError,
    RenderingError,
    UnresolvedReferenceError,
    UnsupportedNodeKindError,
)
from apidoc2md.options import CustomMarkdownEmitterOptions, MarkdownEmitterOptions  # noqa: E402
from apidoc2md.utils.escape import escape_markdown  # noqa: E402
from apidoc2md.utils.indented_writer import IndentedWriter  # noqa: E402

__all__ = [
    "__version__",
    # Emitters
    "CustomMarkdownEmitter",
    "DeclarationResolver",
    "MappingDeclarationResolver",
    "MarkdownEmitter",
    "MarkdownEmitterContext",
    "ResolvedDeclaration",
    # Options
    "CustomMarkdownEmitterOptions",
    "MarkdownEmitterOptions",
    # Utilities
    "IndentedWriter",
    "escape_markdown",
    # Exceptions
    "ApiDoc2MdError",
    "CodeDestinationNotSupportedError",
    "InvalidOptionsError",
    "RenderingError",
    "UnresolvedReferenceError",
    "UnsupportedNodeKindError",
]
