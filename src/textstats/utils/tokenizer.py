# src/textstats/utils/tokenizer.py
import re
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Pattern

from textstats.config import DEFAULT_DELIMITER_PATTERN, DEFAULT_ENCODING
from textstats.exceptions import DocumentIOError, InvalidInputError


class Tokenizer:

    @staticmethod
    @lru_cache(maxsize=32)
    def compile(delimiter: Optional[str], literal: bool = False) -> Pattern:
        """
        Returns the compiled delimiter pattern.
        A missing or blank delimiter falls back to a run of whitespace.
        """
        if delimiter is None or not delimiter.strip():
            return re.compile(DEFAULT_DELIMITER_PATTERN)
        if literal:
            return re.compile(re.escape(delimiter))
        try:
            return re.compile(delimiter)
        except re.error as e:
            raise InvalidInputError(f"Invalid delimiter pattern '{delimiter}': {e}") from e

    @staticmethod
    def split(content: str, delimiter: Optional[str] = None, literal: bool = False) -> List[str]:
        """
        Splits content into the pieces between delimiter matches.

        Capturing groups in the delimiter never produce tokens, and
        zero-width matches are not treated as delimiters. An empty piece
        before the first match or after the last one is dropped; empty
        pieces between two adjacent matches are kept.
        """
        pattern = Tokenizer.compile(delimiter, literal)
        pieces: List[str] = []
        start = 0
        for match in pattern.finditer(content):
            if match.start() == match.end():
                continue
            pieces.append(content[start:match.start()])
            start = match.end()
        pieces.append(content[start:])

        if pieces and not pieces[0]:
            pieces.pop(0)
        if pieces and not pieces[-1]:
            pieces.pop()
        return pieces

    @staticmethod
    def read(path: Path, delimiter: Optional[str] = None, literal: bool = False,
             encoding: str = DEFAULT_ENCODING) -> List[str]:
        """Reads the whole file at path and tokenizes it."""
        # Compile first so a bad pattern is reported before the file is touched.
        Tokenizer.compile(delimiter, literal)
        try:
            with open(path, "r", encoding=encoding) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f"Could not read '{path}': {e}") from e
        return Tokenizer.split(content, delimiter, literal)
