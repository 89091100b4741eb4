from .base import TranscriptError
from .parse import SourceParseError
from .span import SpanError

__all__ = ["TranscriptError", "SourceParseError", "SpanError"]
