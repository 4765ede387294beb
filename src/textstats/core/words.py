# src/textstats/core/words.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from textstats.config import ROUNDING_QUANTUM


def average_word_length(tokens: Sequence[str]) -> float:
    """
    Mean token length rounded half-up to one decimal place.
    No tokens gives 0.0.
    """
    if not tokens:
        return 0.0

    total = sum(len(token) for token in tokens)
    mean = Decimal(total) / Decimal(len(tokens))
    return float(mean.quantize(Decimal(ROUNDING_QUANTUM), rounding=ROUND_HALF_UP))
