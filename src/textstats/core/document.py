# src/textstats/core/document.py
import codecs
import os
from pathlib import Path
from typing import List, Optional, Union

from textstats.config import DEFAULT_ENCODING, DEFAULT_TIE_BREAK
from textstats.core.letters import most_common_letter
from textstats.core.lines import count_lines
from textstats.core.words import average_word_length
from textstats.exceptions import InvalidInputError
from textstats.models import DocumentReport, TieBreak
from textstats.utils.tokenizer import Tokenizer


class DocumentStatistics:
    """
    Read-only statistics over a single plain-text file.

    The path is validated once, here. Every query then opens the file on its
    own and keeps no state between calls, so a file removed after
    construction surfaces as a DocumentIOError from the query.
    """

    __slots__ = ("_path", "_encoding", "_tie_break")

    def __init__(self, path: Union[str, os.PathLike], encoding: str = DEFAULT_ENCODING,
                 tie_break: TieBreak = DEFAULT_TIE_BREAK):
        if path is None or not str(path).strip():
            raise InvalidInputError("An empty file path was provided.")

        file_path = Path(path)
        if not file_path.is_file():
            raise InvalidInputError(f"'{file_path}' is not a valid file.")

        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise InvalidInputError(f"Unknown encoding: {encoding!r}") from e

        self._path = file_path
        self._encoding = encoding
        try:
            self._tie_break = TieBreak(tie_break)
        except ValueError as e:
            raise InvalidInputError(f"Unknown tie-break policy: {tie_break!r}") from e

    @property
    def path(self) -> Path:
        return self._path

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    def count_lines(self, ignore_blank: bool = False) -> int:
        return count_lines(self._path, ignore_blank, self._encoding)

    def tokenize(self, delimiter: Optional[str] = None, literal: bool = False) -> List[str]:
        """
        Splits the document into words.

        A None or blank delimiter splits on runs of whitespace. Any other
        delimiter is a regular expression unless literal is True.
        """
        return Tokenizer.read(self._path, delimiter, literal, self._encoding)

    def count_words(self, delimiter: Optional[str] = None, literal: bool = False) -> int:
        return len(self.tokenize(delimiter, literal))

    def average_word_length(self, delimiter: Optional[str] = None, literal: bool = False) -> float:
        return average_word_length(self.tokenize(delimiter, literal))

    def most_common_letter(self) -> Optional[str]:
        """Lowercase most frequent letter, or NO_LETTER if there are none."""
        return most_common_letter(self._path, self._tie_break, self._encoding)

    def report(self, delimiter: Optional[str] = None, literal: bool = False) -> DocumentReport:
        return DocumentReport(
            path=self._path,
            line_count=self.count_lines(False),
            non_blank_line_count=self.count_lines(True),
            word_count=self.count_words(delimiter, literal),
            average_word_length=self.average_word_length(delimiter, literal),
            most_common_letter=self.most_common_letter(),
        )

    def __repr__(self) -> str:
        return f"DocumentStatistics(path={str(self._path)!r})"
