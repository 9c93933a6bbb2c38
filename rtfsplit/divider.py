"""Splitting of an RTF output file into parts of a fixed number of pages."""

from __future__ import annotations

import os
from pathlib import Path

from .detect import is_report5
from .report import ReportDivider
from .report5 import Report5Divider

DEFAULT_PAGE_SIZE = 10


class RTFDivider:
    """Split one RTF file, choosing the strategy that suits how it was written."""

    def __init__(self, target: str | os.PathLike, pagesize: int = DEFAULT_PAGE_SIZE) -> None:
        path = Path(target)
        if not path.exists():
            raise FileNotFoundError(f"file path {str(path)!r} is invalid")
        if path.is_dir():
            raise IsADirectoryError(f"file path {str(path)!r} is invalid")
        if pagesize < 1:
            raise ValueError(f"page size must be at least 1, got {pagesize}")
        self.filename = path.stem
        self.pagesize = pagesize
        self.data = path.read_bytes()

    def divide(self, dest: str | os.PathLike) -> list[Path]:
        """Write the parts into *dest* and return their paths in order."""
        if is_report5(self.data):
            divider = Report5Divider(self.filename, self.data, self.pagesize)
        else:
            divider = ReportDivider(self.filename, self.data, self.pagesize)
        return divider.divide(dest)