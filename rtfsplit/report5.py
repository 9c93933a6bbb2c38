"""Splitting of report5-generated RTF tables into files of a fixed page count."""

from __future__ import annotations

import os
import re
from pathlib import Path

from .field import handle_field
from .report import part_path

TROWD = rb"\trowd"
PAGE = rb"\page"
FIELD = rb"{\field"

_FIELD_RE = re.compile(re.escape(FIELD))
_BLANK = b" \n\r"
_CLOSE = b"}"


def _text_end(content: bytes, field_start: int) -> tuple[int, bool]:
    """Find where the text before a field ends, and whether a brace is kept back."""
    stripped = content[:field_start].rstrip(_BLANK)
    if stripped.endswith(_CLOSE):
        return len(stripped) - 1, True
    return len(stripped), False


class Report5Divider:
    """Split a report5 RTF table on its page breaks, inlining page numbers."""

    def __init__(self, filename: str, data: bytes, pagesize: int) -> None:
        if pagesize < 1:
            raise ValueError(f"page size must be at least 1, got {pagesize}")
        self.filename = filename
        self.data = bytes(data)
        self.pagesize = pagesize
        self._header_end = 0
        self._pages: list[tuple[int, int]] = []

    def divide(self, dest: str | os.PathLike) -> list[Path]:
        """Write the parts into *dest* and return their paths in order."""
        dest = Path(dest)
        dest.mkdir(parents=True, exist_ok=True)
        self._header_end = self._find_header_end()
        self._pages = self._divide_pages()

        written = []
        starts = range(0, len(self._pages), self.pagesize)
        for index, first in enumerate(starts, start=1):
            path = part_path(dest, self.filename, index)
            self._write(first, path)
            written.append(path)
        return written

    def _find_header_end(self) -> int:
        pos = self.data.find(TROWD)
        return pos if pos >= 0 else 0

    def _divide_pages(self) -> list[tuple[int, int]]:
        data = self.data
        pages = []
        start = self._header_end
        head = start
        while (pos := data.find(PAGE, head)) != -1:
            close = data.find(_CLOSE, pos + len(PAGE) - 1)
            if close == -1:
                raise ValueError(f"page break at offset {pos} is never closed")
            pages.append((start, pos))
            head = start = close + 1
        pages.append((start, len(data) - 1))
        return pages

    def _write(self, first: int, path: Path) -> None:
        first_start = self._pages[first][0]
        last = min(first + self.pagesize, len(self._pages))
        last_end = self._pages[last - 1][1]
        content = self.data[first_start:last_end]

        chunks = [self.data[: self._header_end]]
        cursor = 0
        # Automatic page-number fields are replaced by the number they show.
        for match in _FIELD_RE.finditer(content):
            if match.end() >= len(content):
                break
            field_start = match.start()
            text_end, keep_brace = _text_end(content, field_start)
            chunks.append(content[cursor:text_end])
            field = handle_field(content[field_start:])
            cursor = field_start + field.tail + 1
            if field.page is not None:
                chunks.append(field.page.encode("utf-8"))
            if keep_brace:
                chunks.append(_CLOSE)
        chunks.append(content[cursor:])
        chunks.append(b"}}")
        path.write_bytes(b"".join(chunks))