# src/textstats/core/letters.py
from pathlib import Path
from typing import Dict, Iterator, Optional

from textstats.config import DEFAULT_ENCODING, DEFAULT_TIE_BREAK, READ_CHUNK_SIZE
from textstats.exceptions import DocumentIOError
from textstats.models import NO_LETTER, TieBreak


def _read_chars(path: Path, encoding: str) -> Iterator[str]:
    """Yields the characters of the file one at a time, reading in chunks."""
    try:
        with open(path, "r", encoding=encoding) as f:
            while True:
                chunk = f.read(READ_CHUNK_SIZE)
                if not chunk:
                    return
                yield from chunk
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentIOError(f"Could not read '{path}': {e}") from e


def most_common_letter(path: Path, tie_break: TieBreak = DEFAULT_TIE_BREAK,
                       encoding: str = DEFAULT_ENCODING) -> Optional[str]:
    """
    Finds the most frequent letter in the file, ignoring case.

    Only characters for which str.isalpha() holds are counted. Returns
    NO_LETTER when the file contains no letters at all. Ties are settled by
    tie_break:

    - FIRST_TO_REACH_MAX: the leader changes only when another letter's
      count becomes strictly greater, so the first letter to reach the
      final maximum wins.
    - FIRST_SEEN: of the letters sharing the final maximum, the one that
      appeared first in the file wins.
    """
    tally: Dict[str, int] = {}
    leader = NO_LETTER
    leader_count = 0

    for raw in _read_chars(path, encoding):
        # lower() can expand a character (e.g. 'İ'), so walk the result.
        for char in raw.lower():
            if not char.isalpha():
                continue
            count = tally.get(char, 0) + 1
            tally[char] = count
            if count > leader_count:
                leader, leader_count = char, count

    if tie_break is TieBreak.FIRST_SEEN and tally:
        # max() returns the first maximal key; dicts keep insertion order.
        return max(tally, key=tally.__getitem__)
    return leader
