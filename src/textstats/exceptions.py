# src/textstats/exceptions.py


class TextStatsError(Exception):
    """Base class for every error raised by textstats."""


class InvalidInputError(TextStatsError, ValueError):
    """A path or argument was rejected before any statistics were read."""


class DocumentIOError(TextStatsError, OSError):
    """The document could not be opened, read or decoded during a query."""
