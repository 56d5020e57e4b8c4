"""Line-indexed document access."""

from __future__ import annotations

import hashlib
import re
from pathlib import Path
from typing import Protocol

from gdasset.exceptions import LineOutOfRangeError
from gdasset.models import Position, Span

LINE_BREAK = re.compile(r"\r\n|\r|\n")


class AssetDocument(Protocol):
    """What the scanner needs from a host document."""

    @property
    def uri(self) -> str: ...

    @property
    def version(self) -> int | str: ...

    @property
    def line_count(self) -> int: ...

    def line_at(self, line: int) -> str: ...

    def get_text(self, span: Span) -> str: ...


class TextDocument:
    """In-memory document over a string.

    A text ending with a line break has a final empty line, so
    ``line_count`` is always the number of line breaks plus one.

    Args:
        uri: Stable identity of the document (a file URI or a path).
        text: Full document text.
        version: Version token. Defaults to the SHA-256 of ``text``.
    """

    def __init__(self, uri: str, text: str, version: int | str | None = None) -> None:
        self._uri = uri
        self._lines = LINE_BREAK.split(text)
        if version is None:
            version = hashlib.sha256(text.encode()).hexdigest()
        self._version = version

    @classmethod
    def from_path(cls, path: str | Path) -> TextDocument:
        """Load a document from disk.

        Raises:
            FileNotFoundError: If the path doesn't exist.
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Input path does not exist: {path}")
        return cls(file_path.resolve().as_uri(), file_path.read_text(encoding="utf-8"))

    @property
    def uri(self) -> str:
        return self._uri

    @property
    def version(self) -> int | str:
        return self._version

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        if not 0 <= line < len(self._lines):
            raise LineOutOfRangeError(line, len(self._lines))
        return self._lines[line]

    def validate_position(self, position: Position) -> Position:
        """Clamp a position to the document."""
        if position.line < 0:
            return Position(0, 0)
        if position.line >= len(self._lines):
            last = len(self._lines) - 1
            return Position(last, len(self._lines[last]))
        text = self._lines[position.line]
        return Position(position.line, min(max(position.column, 0), len(text)))

    def get_text(self, span: Span) -> str:
        """Return the text covered by ``span``, clamped to the document."""
        start = self.validate_position(span.start)
        end = self.validate_position(span.end)
        if start.line == end.line:
            return self._lines[start.line][start.column:end.column]
        parts = [self._lines[start.line][start.column:]]
        parts.extend(self._lines[start.line + 1:end.line])
        parts.append(self._lines[end.line][:end.column])
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"TextDocument(uri={self._uri!r}, lines={len(self._lines)})"
