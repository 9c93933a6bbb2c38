"""Splitting of generic RTF reports into files of a fixed number of pages."""

from __future__ import annotations

import os
import re
from pathlib import Path

SECTD = rb"\sectd"
SECT = rb"\sect"
SECT_SECTD = rb"\sect\sectd"
PAGE_PAR = rb"{\page\par}"
RTF_EXTENSION = ".rtf"

_SECT_PREFIX = rb"\sect"
_BREAK = re.compile(re.escape(PAGE_PAR) + b"|" + re.escape(SECT_SECTD))


def part_path(dest: str | os.PathLike, stem: str, index: int) -> Path:
    """Return the path of the *index*-th part written for *stem* under *dest*."""
    return Path(dest) / f"{stem}_part_{index:0>4}{RTF_EXTENSION}"


class ReportDivider:
    """Split an RTF report on section or explicit page breaks."""

    def __init__(self, filename: str, data: bytes, pagesize: int) -> None:
        if pagesize < 1:
            raise ValueError(f"page size must be at least 1, got {pagesize}")
        self.filename = filename
        self.data = bytes(data)
        self.pagesize = pagesize
        self._header_end = 0
        self._pages: list[tuple[int, int]] = []
        self._using_page_break = False

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
        pos = self.data.find(SECTD)
        return pos if pos >= 0 else 0

    def _divide_pages(self) -> list[tuple[int, int]]:
        data = self.data
        size = len(data)
        limit = size - len(SECT_SECTD)
        pages = []
        start = self._header_end
        end_of_last_page = 0
        page_break = False

        for match in _BREAK.finditer(data, self._header_end):
            head = match.start()
            if head >= limit:
                break
            if match.group() == PAGE_PAR:
                page_break = True
                end = head + len(PAGE_PAR) + 1
                end_of_last_page = end
                pages.append((start, end))
                start = end
            elif not page_break:
                pages.append((start, head))
                start = head

        head = max(self._header_end, limit)
        if head < size - 1:
            pages.append((end_of_last_page, size - 1))
        self._using_page_break = page_break
        return pages

    def _skip_leading_sect(self, start: int, end: int) -> int:
        """Drop a leading section break so a part does not open on a blank page."""
        limit = end - len(SECT_SECTD)
        j = self.data.find(_SECT_PREFIX, start)
        while 0 <= j < limit:
            if self.data.startswith(SECT_SECTD, j):
                return j + len(SECT)
            if self.data.startswith(SECTD, j):
                return start
            j = self.data.find(_SECT_PREFIX, j + 1)
        return start

    def _trim_page_break(self, start: int, end: int) -> int:
        """Cut the final explicit page break off the last page of a part."""
        top = min(end, len(self.data) - len(PAGE_PAR) - 1)
        pos = self.data.rfind(PAGE_PAR, start + 1, top + len(PAGE_PAR))
        return pos if pos != -1 else end

    def _write(self, first: int, path: Path) -> None:
        data = self.data
        last = min(first + self.pagesize, len(self._pages))
        chunks = [data[: self._header_end]]
        for i in range(first, last):
            start, end = self._pages[i]
            if i == first:
                start = self._skip_leading_sect(start, end)
            if i == last - 1 and self._using_page_break:
                end = self._trim_page_break(start, end)
            chunks.append(data[start:end])
        chunks.append(b"}")
        path.write_bytes(b"".join(chunks))