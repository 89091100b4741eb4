from typing import Optional

from .base import TranscriptError


class SourceParseError(TranscriptError):
    """The JavaScript parser rejected the source text."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column
