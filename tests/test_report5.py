import os

import pytest

from rtfsplit.report import part_path
from rtfsplit.report5 import Report5Divider

HEADER = b"{\\rtf1\\ansi{\\fonttbl}"


def _field(number):
    return b"{\\field{\\*\\fldinst { PAGE }}{\\fldrslt { " + number + b"}}}"


BODY = (
    b"\\trowd row "
    + _field(b"1")
    + b"\\page}"
    + b"\\trowd row "
    + _field(b"2")
    + b"}"
)


def _divide(dest, data, pagesize, stem="doc"):
    divider = Report5Divider(stem, data, pagesize)
    paths = divider.divide(dest)
    return paths, [p.read_bytes() for p in paths]


def test_one_page_per_part(tmp_path):
    _, contents = _divide(tmp_path, HEADER + BODY, 1)
    assert contents == [
        HEADER + b"\\trowd row1}}",
        HEADER + b"\\trowd row2}}",
    ]


def test_two_pages_per_part(tmp_path):
    _, contents = _divide(tmp_path, HEADER + BODY, 2)
    assert contents == [HEADER + b"\\trowd row1\\page}\\trowd row2}}"]


def test_closing_brace_before_field_is_kept(tmp_path):
    data = HEADER + b"\\trowd {\\b x} " + _field(b"7") + b"}"
    _, contents = _divide(tmp_path, data, 1)
    assert contents == [HEADER + b"\\trowd {\\b x7}}}"]


def test_field_without_result_is_dropped(tmp_path):
    data = HEADER + b"\\trowd a " + b"{\\field{\\*\\fldinst { PAGE }}}" + b" b}"
    _, contents = _divide(tmp_path, data, 1)
    assert contents == [HEADER + b"\\trowd a b}}"]


def test_field_mark_at_end_is_left_alone(tmp_path):
    data = HEADER + b"\\trowd a {\\field}"
    _, contents = _divide(tmp_path, data, 1)
    assert contents == [HEADER + b"\\trowd a {\\field}}"]


def test_document_without_rows_has_no_header(tmp_path):
    data = b"{\\rtf1 " + _field(b"3") + b"}"
    _, contents = _divide(tmp_path, data, 1)
    assert contents == [b"{\\rtf1" + b"3}}"]


def test_unclosed_page_break_rejected(tmp_path):
    divider = Report5Divider("doc", HEADER + b"\\trowd x\\page", 1)
    with pytest.raises(ValueError):
        divider.divide(tmp_path)


def test_zero_pagesize_rejected():
    with pytest.raises(ValueError):
        Report5Divider("doc", HEADER + BODY, 0)


@pytest.mark.parametrize("pagesize,count", [(1, 2), (2, 1), (10, 1)])
def test_part_count_and_names(tmp_path, pagesize, count):
    paths, _ = _divide(tmp_path, HEADER + BODY, pagesize, stem="table")
    expected = [part_path(tmp_path, "table", n) for n in range(1, count + 1)]
    assert paths == expected
    assert sorted(os.listdir(tmp_path)) == [p.name for p in expected]


@pytest.mark.parametrize("pagesize", [1, 2])
def test_parts_have_header_and_no_fields(tmp_path, pagesize):
    _, contents = _divide(tmp_path, HEADER + BODY, pagesize)
    for content in contents:
        assert content.startswith(HEADER)
        assert content.endswith(b"}}")
        assert b"\\field" not in content


def test_creates_nested_destination(tmp_path):
    dest = tmp_path / "x" / "y"
    paths, _ = _divide(dest, HEADER + BODY, 1)
    assert dest.is_dir()
    assert all(p.parent == dest for p in paths)


def test_rerun_overwrites(tmp_path):
    _, first = _divide(tmp_path, HEADER + BODY, 1)
    _, second = _divide(tmp_path, HEADER + BODY, 1)
    assert first == second