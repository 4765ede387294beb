# tests/test_lines.py
import pytest

from textstats.core.lines import count_lines, is_blank


@pytest.fixture
def write(tmp_path):
    def _write(text):
        path = tmp_path / "lines.txt"
        path.write_text(text, encoding="utf-8", newline="")
        return path
    return _write


@pytest.mark.parametrize("line, expected", [
    ("", True),
    ("   ", True),
    ("\t\n", True),
    (" x ", False),
    (".", False),
])
def test_is_blank(line, expected):
    assert is_blank(line) is expected

@pytest.mark.parametrize("text, total", [
    ("", 0),
    ("a", 1),
    ("a\n", 1),
    ("a\nb", 2),
    ("\n\n", 2),
])
def test_no_synthetic_trailing_line(write, text, total):
    assert count_lines(write(text)) == total

def test_mixed_line_endings(write):
    path = write("one\r\ntwo\rthree\nfour")
    assert count_lines(path) == 4

def test_ignore_blank_lines(write):
    path = write("one\n\n   \n\t\ntwo\n")
    assert count_lines(path, ignore_blank=False) == 5
    assert count_lines(path, ignore_blank=True) == 2

def test_ignoring_blanks_never_increases_count(write):
    for text in ["", "a", "\n", "a\n\nb\n  \n", " \n \n"]:
        path = write(text)
        assert count_lines(path, False) >= count_lines(path, True)
