# src/textstats/core/lines.py
from pathlib import Path

from textstats.config import DEFAULT_ENCODING
from textstats.exceptions import DocumentIOError


def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines."""
    return not line.strip()


def count_lines(path: Path, ignore_blank: bool = False, encoding: str = DEFAULT_ENCODING) -> int:
    """
    Counts the lines of the file at path.
    Universal newlines apply, and a final line without a terminator is
    counted once, so an empty file has 0 lines.
    """
    count = 0
    try:
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                if ignore_blank and is_blank(line):
                    continue
                count += 1
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"Could not read '{path}': {e}") from e
    return count
