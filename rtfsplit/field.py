"""Parsing of RTF ``{\\field ...}`` groups holding page numbers."""

from __future__ import annotations

from dataclasses import dataclass

FLDINST = rb"\*\fldinst"
FLDRSLT = rb"\fldrslt"
_OPEN = ord("{")
_CLOSE = ord("}")
_SPACE = ord(" ")


@dataclass(frozen=True)
class Field:
    """A parsed field group: its displayed page number and closing offset."""

    page: str | None
    tail: int


def _enter_group(data: bytes, i: int, balance: int, span: tuple[int, int]):
    """Advance to the first closing brace, tracking brace balance and span."""
    start, end = span
    while i < len(data):
        c = data[i]
        if c == _OPEN:
            balance -= 1
            start = i + 1
        elif c == _CLOSE:
            balance += 1
            end = i
            break
        i += 1
    return i, balance, (start, end)


def _page_number(data: bytes, end: int) -> str | None:
    """Read backwards from *end* for the last space-delimited word."""
    tail = None
    for i in range(end, -1, -1):
        c = data[i]
        if tail is None:
            if c != _SPACE:
                tail = i
            continue
        if c == _SPACE:
            return data[i + 1:tail].decode("utf-8")
    return None


def handle_field(data: bytes) -> Field:
    """Parse a field group starting at the beginning of *data*."""
    data = bytes(data)
    size = len(data)
    i = 0
    balance = 0
    tail = 0
    fldrslt = (0, 0)
    while i < size:
        c = data[i]
        if c == _OPEN:
            balance -= 1
        elif c == _CLOSE:
            balance += 1
        if i < len(FLDINST):
            i += 1
            continue
        if data[i - len(FLDINST) + 1:i + 1] == FLDINST:
            i, balance, _ = _enter_group(data, i, balance, (0, 0))
        if data[i - len(FLDRSLT) + 1:i + 1] == FLDRSLT:
            i, balance, fldrslt = _enter_group(data, i, balance, fldrslt)
        if balance == 0:
            tail = i
            break
        i += 1

    page = _page_number(data, fldrslt[1]) if fldrslt != (0, 0) else None
    return Field(page=page, tail=tail)