import pytest

from rtfsplit.cli import main

HEADER = b"{\\rtf1\\ansi"


def _document() -> bytes:
    pages = [b"\\sectd page" + str(n).encode() + b" " for n in range(1, 4)]
    return HEADER + b"\\sect".join(pages) + b"text}"


@pytest.fixture
def target(tmp_path):
    path = tmp_path / "t_demo.rtf"
    path.write_bytes(_document())
    return path


def test_main_writes_parts(target, tmp_path):
    dest = tmp_path / "out"
    status = main(["-t", str(target), "-p", "2", "-d", str(dest)])
    assert status == 0
    assert sorted(p.name for p in dest.iterdir()) == [
        "t_demo_part_0001.rtf",
        "t_demo_part_0002.rtf",
    ]


def test_main_default_pagesize(target, tmp_path):
    dest = tmp_path / "out"
    assert main(["--target", str(target), "--dest", str(dest)]) == 0
    assert len(list(dest.iterdir())) == 1


def test_main_missing_target(tmp_path, capsys):
    status = main(["-t", str(tmp_path / "none.rtf"), "-d", str(tmp_path / "out")])
    assert status == 1
    assert "Error:" in capsys.readouterr().err


def test_main_rejects_zero_pagesize(target, tmp_path, capsys):
    status = main(["-t", str(target), "-p", "0", "-d", str(tmp_path / "out")])
    assert status == 1
    assert "page size" in capsys.readouterr().err


def test_main_requires_dest(target):
    with pytest.raises(SystemExit) as excinfo:
        main(["-t", str(target)])
    assert excinfo.value.code == 2