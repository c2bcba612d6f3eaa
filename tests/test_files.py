import pytest

from tblpeek import peek_lines, peekfile


def _write(tmp_path, name, lines):
    (tmp_path / name).write_text("".join(f"{line}\n" for line in lines))
    return name


def test_peek_first_lines(tmp_path):
    name = _write(tmp_path, "five.txt", ["l1", "l2", "l3", "l4", "l5"])
    assert peek_lines(tmp_path, name, n=3) == [(1, "l1"), (2, "l2"), (3, "l3")]


def test_peek_short_file(tmp_path, capsys):
    name = _write(tmp_path, "two.txt", ["a", "b"])
    assert len(peek_lines(tmp_path, name, n=3)) == 2
    assert "Warning:" in capsys.readouterr().err


def test_peek_reverse(tmp_path):
    name = _write(tmp_path, "abc.txt", ["a", "b", "c"])
    assert peek_lines(tmp_path, name, rev=True) == [(1, "c"), (2, "b"), (3, "a")]
    assert peek_lines(tmp_path, name, n=2, rev=True) == [(1, "c"), (2, "b")]


def test_peekfile_output(tmp_path, capsys):
    name = _write(tmp_path, "abc.txt", ["a", "b", "c"])
    peekfile(str(tmp_path), name, n=3, rev=True)
    assert capsys.readouterr().out == "1  c\n2  b\n3  a\n"


def test_peekfile_default_ten_lines(tmp_path, capsys):
    name = _write(tmp_path, "many.txt", [f"row {i}" for i in range(1, 26)])
    peekfile(tmp_path, name)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 10
    assert out[0] == "1  row 1"
    assert out[-1] == "10  row 10"


def test_peekfile_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        peekfile(tmp_path, "absent.txt")
