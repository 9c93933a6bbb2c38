"""Listing of table, listing and figure RTF outputs in a directory."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

RTF_EXTENSION = "rtf"


class Kind(Enum):
    """Kind of output, derived from the first letter of the file name."""

    FIGURE = "Figure"
    LISTING = "Listing"
    TABLE = "Table"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Kind):
            return NotImplemented
        members = list(Kind)
        return members.index(self) < members.index(other)

    @classmethod
    def from_filename(cls, name: str) -> Kind | None:
        """Return the kind of an RTF file name, or None if it has none."""
        if not is_rtf(name):
            return None
        return _PREFIXES.get(name[0])


_PREFIXES = {
    "l": Kind.LISTING,
    "L": Kind.LISTING,
    "t": Kind.TABLE,
    "T": Kind.TABLE,
    "f": Kind.FIGURE,
    "F": Kind.FIGURE,
}


@dataclass(frozen=True)
class RtfFile:
    """An RTF output file found in a directory."""

    name: str
    size: int
    kind: Kind
    modified_at: int

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping of this file."""
        return {
            "name": self.name,
            "size": self.size,
            "kind": self.kind.value,
            "modified_at": self.modified_at,
        }


def is_rtf(filename: str) -> bool:
    """Check by its name whether a file is an RTF file."""
    if len(filename.encode("utf-8")) < 5:
        return False
    return filename.endswith(RTF_EXTENSION)


def list_rtf(directory: str | os.PathLike) -> list[RtfFile]:
    """List the RTF outputs of *directory*, ordered by kind."""
    found = []
    with os.scandir(Path(directory)) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                continue
            stat = entry.stat(follow_symlinks=False)
            if stat.st_mtime < 0:
                raise ValueError(f"modification time of {entry.name!r} is before the epoch")
            kind = Kind.from_filename(entry.name)
            if kind is not None:
                found.append(
                    RtfFile(
                        name=entry.name,
                        size=stat.st_size,
                        kind=kind,
                        modified_at=int(stat.st_mtime),
                    )
                )
    found.sort(key=lambda rtf: rtf.kind)
    return found


def list_rtf_json(directory: str | os.PathLike) -> str:
    """Return the RTF outputs of *directory* as a compact JSON array."""
    return json.dumps(
        [rtf.to_dict() for rtf in list_rtf(directory)],
        separators=(",", ":"),
        ensure_ascii=False,
    )