# src/textstats/models.py
from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Optional

# Returned by most_common_letter() when the document holds no letters.
NO_LETTER = None


class TieBreak(Enum):
    """How most_common_letter() picks between letters with equal counts."""

    # The first letter whose running count exceeds every other count wins;
    # letters that later only equal that count do not displace it.
    FIRST_TO_REACH_MAX = "first-to-reach-max"
    # Of the letters sharing the final maximum, the one seen first wins.
    FIRST_SEEN = "first-seen"


@dataclass(frozen=True)
class DocumentReport:
    """Immutable data class holding the statistics of one document."""
    path: Path
    line_count: int
    non_blank_line_count: int
    word_count: int
    average_word_length: float
    most_common_letter: Optional[str]

    def as_dict(self) -> dict:
        data = asdict(self)
        data["path"] = str(self.path)
        return data
