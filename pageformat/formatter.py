"""Reflow a text file into fixed-width lines grouped into numbered pages."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from os import PathLike
from pathlib import Path

DEFAULT_WIDTH = 40
MAX_WIDTH = 99
PAGE_LINES = 40
INDENT = "   "
_PAGE_NUMBER_PAD = " " * 9


class FormatterError(Exception):
    """Raised when a file cannot be used or a setting is out of range."""


def _collapsed_chars(text: str) -> Iterator[str]:
    previous = None
    for char in text:
        if char == "\n":
            continue
        if char == " " and previous == " ":
            continue
        previous = char
        yield char


def collapse_text(text: str) -> str:
    """Drop line breaks and squeeze runs of spaces into a single space."""
    return "".join(_collapsed_chars(text))


def _row_count(length: int, width: int, indented: int) -> int:
    return 1 + (length + 1 + len(INDENT) * indented) // width


def _layout(text: str, width: int, paragraphs: Iterable[int]) -> list[str]:
    if width < 1:
        raise FormatterError(f"line width must be positive, got {width}")
    indented = {index for index in paragraphs if index >= 0}
    chars = _collapsed_chars(text)
    rows = []
    for index in range(_row_count(len(text), width, len(indented))):
        prefix = INDENT[:width] if index in indented else ""
        rows.append(prefix + "".join(islice(chars, width - len(prefix))))
    return rows


def _paginate(rows: list[str]) -> str:
    parts = []
    page = 1
    for number, row in enumerate(rows, 1):
        parts.append(row + "\n")
        if number % PAGE_LINES == 0:
            parts.append(f"\n{_PAGE_NUMBER_PAD}{page}\n")
            page += 1
    if len(rows) % PAGE_LINES:
        parts.append(f"\n{_PAGE_NUMBER_PAD}{page}")
    return "".join(parts)


def format_text(text: str, width: int, paragraphs: Iterable[int]) -> str:
    """Lay text out in lines of ``width`` characters with page numbers.

    ``paragraphs`` holds zero-based line indexes that start with an indent.
    """
    return _paginate(_layout(text, width, paragraphs))


class Formatter:
    """Formats one file in place, keeping a saved copy of its plain text."""

    def __init__(self, path: str | PathLike[str], width: int = DEFAULT_WIDTH) -> None:
        self.width = DEFAULT_WIDTH
        self.set_width(width)
        self.paragraphs: set[int] = set()
        self.lines = 0
        self._saved: str | None = None
        self.path = Path(path)
        self.select(path)

    def _read(self) -> str:
        try:
            with self.path.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except OSError as exc:
            raise FormatterError(f"cannot read {self.path}: {exc}") from exc

    def _write(self, text: str) -> None:
        try:
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise FormatterError(f"cannot write {self.path}: {exc}") from exc

    def select(self, path: str | PathLike[str]) -> None:
        """Switch to another file, which must exist and be readable."""
        candidate = Path(path)
        try:
            with candidate.open("rb"):
                pass
        except OSError as exc:
            raise FormatterError(f"cannot open {candidate}: {exc}") from exc
        self.path = candidate
        self._saved = None

    def clear(self) -> None:
        """Truncate the file to nothing."""
        self._write("")

    def save(self) -> str:
        """Remember the current file contents and return them."""
        self._saved = self._read()
        return self._saved

    def restore(self) -> None:
        """Write the remembered contents back, if any were saved."""
        if self._saved is not None:
            self._write(self._saved)

    def no_format(self) -> str:
        """Rewrite the file as one line with single spaces; return the result."""
        text = self._read()
        self.lines = _row_count(len(text), self.width, 0)
        result = collapse_text(text)
        self._write(result)
        return result

    def format(self) -> str:
        """Restore the saved text, lay it out in pages and write it back."""
        self.restore()
        rows = _layout(self._read(), self.width, self.paragraphs)
        self.lines = len(rows)
        result = _paginate(rows)
        self._write(result)
        return result

    def set_width(self, width: int) -> None:
        """Set the line width, which must lie between 1 and 99."""
        if not 0 < width <= MAX_WIDTH:
            raise FormatterError(f"line width must be between 1 and {MAX_WIDTH}, got {width}")
        self.width = width

    def add_paragraph(self, line: int) -> None:
        """Indent the given one-based line of the last layout."""
        if not 0 < line <= self.lines:
            raise FormatterError(f"line must be between 1 and {self.lines}, got {line}")
        self.paragraphs.add(line - 1)

    def reset_paragraphs(self) -> None:
        """Forget every paragraph indent."""
        self.paragraphs.clear()