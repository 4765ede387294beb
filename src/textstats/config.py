# src/textstats/config.py
from textstats.models import TieBreak

DEFAULT_ENCODING = "utf-8"

# Used when no delimiter (or a blank one) is given: any run of whitespace.
DEFAULT_DELIMITER_PATTERN = r"\s+"

# Average word length is reported to one decimal place.
ROUNDING_QUANTUM = "0.1"

# Characters per read when scanning for letters.
READ_CHUNK_SIZE = 8192

DEFAULT_TIE_BREAK = TieBreak.FIRST_TO_REACH_MAX

REPORT_FORMATS = ("text", "json")
