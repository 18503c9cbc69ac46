#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidoc2md/utils/indented_writer.py
"""Line-oriented text writer with indentation support.

The emitters never build strings themselves; they append through an
``IndentedWriter``, which tracks line starts so it can insert indentation and
answer questions about the last characters written.

"""

from __future__ import annotations

import io
from contextlib import contextmanager
from typing import Iterator, Optional, Protocol

from apidoc2md.constants import DEFAULT_INDENT_PREFIX


class StringBuilder(Protocol):
    """Text buffer the writer appends to (``io.StringIO`` satisfies it)."""

    def write(self, s: str) -> int: ...

    def getvalue(self) -> str: ...


class IndentedWriter:
    """Append text line by line, indenting every line that receives content.

    Parameters
    ----------
    builder : StringBuilder or None, default = None
        Buffer to append to. Existing content is kept and is part of
        ``to_string()``. A new ``io.StringIO`` is used when None.

    Examples
    --------
        >>> writer = IndentedWriter()
        >>> writer.write_line("items:")
        >>> with writer.indent_scope("  - "):
        ...     writer.write_line("one")
        >>> writer.to_string()
        'items:\\n  - one\\n'

    """

    def __init__(self, builder: Optional[StringBuilder] = None):
        self.default_indent_prefix: str = DEFAULT_INDENT_PREFIX
        self._builder: StringBuilder = builder if builder is not None else io.StringIO()
        if isinstance(self._builder, io.StringIO):
            # StringIO("...") starts at position 0 and would overwrite its initial value
            self._builder.seek(0, io.SEEK_END)
        self._latest_chunk: Optional[str] = None
        self._previous_chunk: Optional[str] = None
        self._at_start_of_line: bool = True
        self._indent_stack: list[str] = []
        self._indent_text: str = ""

    def increase_indent(self, indent_prefix: Optional[str] = None) -> None:
        """Push an indentation prefix; it applies to lines started afterwards."""
        self._indent_stack.append(indent_prefix if indent_prefix is not None else self.default_indent_prefix)
        self._update_indent_text()

    def decrease_indent(self) -> None:
        """Pop the most recent indentation prefix."""
        if not self._indent_stack:
            raise ValueError("decrease_indent() called without a matching increase_indent()")
        self._indent_stack.pop()
        self._update_indent_text()

    @contextmanager
    def indent_scope(self, indent_prefix: Optional[str] = None) -> Iterator[IndentedWriter]:
        """Indent everything written inside the ``with`` block."""
        self.increase_indent(indent_prefix)
        try:
            yield self
        finally:
            self.decrease_indent()

    def ensure_new_line(self) -> None:
        """Start a new line unless the cursor is already at the start of one."""
        last_character = self.peek_last_character()
        if last_character not in ("\n", ""):
            self._write_new_line()

    def ensure_skipped_line(self) -> None:
        """Make sure the previous line is blank, unless nothing has been written."""
        self.ensure_new_line()
        second_last_character = self.peek_second_last_character()
        if second_last_character not in ("\n", ""):
            self._write_new_line()

    def peek_last_character(self) -> str:
        """Return the last character written, or ``""`` if nothing was written."""
        if self._latest_chunk is not None:
            return self._latest_chunk[-1:]
        return ""

    def peek_second_last_character(self) -> str:
        """Return the character before the last one, or ``""`` if there is none."""
        if self._latest_chunk is not None:
            if len(self._latest_chunk) > 1:
                return self._latest_chunk[-2]
            if self._previous_chunk is not None:
                return self._previous_chunk[-1:]
        return ""

    def write(self, message: str) -> None:
        """Append text; newlines in ``message`` start new (indented) lines.

        Carriage returns are dropped.

        """
        if not message:
            return

        if "\n" not in message and "\r" not in message:
            self._write_line_part(message)
            return

        for index, line_part in enumerate(message.split("\n")):
            if index > 0:
                self._write_new_line()
            if line_part:
                self._write_line_part(line_part.replace("\r", ""))

    def write_line(self, message: str = "") -> None:
        """Append ``message`` followed by a line break."""
        if message:
            self.write(message)
        self._write_new_line()

    def to_string(self) -> str:
        return self._builder.getvalue()

    def __str__(self) -> str:
        return self.to_string()

    def _write_line_part(self, message: str) -> None:
        if message:
            if self._at_start_of_line and self._indent_text:
                self._write(self._indent_text)
            self._write(message)
            self._at_start_of_line = False

    def _write_new_line(self) -> None:
        if self._at_start_of_line and self._indent_text:
            self._write(self._indent_text)
        self._write("\n")
        self._at_start_of_line = True

    def _write(self, text: str) -> None:
        self._previous_chunk = self._latest_chunk
        self._latest_chunk = text
        self._builder.write(text)

    def _update_indent_text(self) -> None:
        self._indent_text = "".join(self._indent_stack)
