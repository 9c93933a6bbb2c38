"""Detection of RTF documents produced by the report5 reporting macro."""

from __future__ import annotations

import re

# A report5 document carries a ``\field`` control word (the page number)
# before its fifth table row definition.
_TAG = re.compile(rb"\\(field|trowd)")
_MIN_LENGTH = 6
_MAX_ROWS = 5


def is_report5(data: bytes) -> bool:
    """Return True if *data* looks like an RTF document written by report5."""
    if len(data) < _MIN_LENGTH:
        return False
    rows = 0
    for match in _TAG.finditer(bytes(data)):
        if match.group(1) == b"field":
            return True
        rows += 1
        if rows >= _MAX_ROWS:
            return False
    return False