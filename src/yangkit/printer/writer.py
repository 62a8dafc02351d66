# Copyright 2026 yangkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Indentation-aware writer threading nesting level and output sink through a print run.

A :class:`Writer` is created per print invocation and passed explicitly to
every printing function, so independent runs share no state.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import BinaryIO

from yangkit.config.settings import PrinterSettings

# ###############
# Public Interface
# ###############

INDENT = "  "


class PrinterError(Exception):
    """Raised when the output sink cannot be written.

    The underlying ``OSError`` is available as ``__cause__``.
    """


@dataclass
class Writer:
    """Output sink plus the current nesting level.

    Attributes:
        sink: Byte-oriented stream receiving UTF-8 text.
        settings: Options of the current print run.
        level: Current nesting level; each level indents by two spaces.
    """

    sink: BinaryIO
    settings: PrinterSettings = field(default_factory=PrinterSettings)
    level: int = 0

    def write(self, text: str) -> None:
        """Write *text* verbatim to the sink.

        Raises:
            PrinterError: If the sink fails.
        """
        try:
            self.sink.write(text.encode("utf-8"))
        except OSError as exc:
            raise PrinterError(f"Cannot write to output sink: {exc}") from exc

    def emit(self, text: str) -> None:
        """Write *text* as one line indented to the current level."""
        self.write(f"{INDENT * self.level}{text}\n")

    @contextmanager
    def block(self, opening: str) -> Iterator[None]:
        """Emit ``opening {``, nest one level for the body, then emit ``}``.

        The level is restored on every exit path; the closing brace is
        written only when the body completes.
        """
        self.emit(f"{opening} {{")
        self.level += 1
        try:
            yield
        finally:
            self.level -= 1
        self.emit("}")

    def text(self, keyword: str, value: str) -> None:
        """Emit *keyword* followed by *value* as a quoted, re-indented literal.

        The literal starts on the next line one level deeper. Each line break in
        *value* is kept and followed by that indentation; nothing else in
        *value* is altered. The statement ends with ``";`` and a blank line.
        """
        self.emit(keyword)
        pad = INDENT * (self.level + 1)
        body = f"\n{pad}".join(value.split("\n"))
        self.write(f'{pad}"{body}";\n\n')
