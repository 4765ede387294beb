# src/textstats/core/ignore.py
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pathspec

from textstats.exceptions import InvalidInputError


def load_exclude_spec(patterns: Optional[Iterable[str]] = None,
                      exclude_file: Optional[Path] = None) -> pathspec.PathSpec:
    """
    Builds a PathSpec from gitignore-style patterns.
    Lines from exclude_file are read first, then the extra patterns.
    """
    lines: List[str] = []

    if exclude_file is not None:
        try:
            with open(exclude_file, "r", encoding="utf-8") as f:
                lines.extend(f.read().splitlines())
        except OSError as e:
            raise InvalidInputError(f"Could not read exclude file '{exclude_file}': {e}") from e

    if patterns:
        lines.extend(patterns)

    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as e:
        raise InvalidInputError(f"Invalid exclude pattern: {e}") from e


def split_excluded(paths: Iterable[str], spec: pathspec.PathSpec) -> Tuple[List[str], List[str]]:
    """Partitions paths into (kept, excluded), preserving order."""
    kept: List[str] = []
    excluded: List[str] = []
    for path in paths:
        if spec.match_file(Path(path).as_posix()):
            excluded.append(path)
        else:
            kept.append(path)
    return kept, excluded
