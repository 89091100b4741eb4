from .base import TranscriptError


class SpanError(TranscriptError):
    """A comment or token span is missing, out of range, or overlaps another."""
