from .core import transcribe_file, transcribe_text
from .parse import parse_source
from .transcript import build_transcript, collect_segments, order_spans, render_segments
from .models import BLOCK_COMMENT, LINE_COMMENT, TOKEN, Fence, Segment, Span
from .errors import SourceParseError, SpanError, TranscriptError

__all__ = [
    "transcribe_file",
    "transcribe_text",
    "parse_source",
    "build_transcript",
    "collect_segments",
    "order_spans",
    "render_segments",
    "Fence",
    "Segment",
    "Span",
    "BLOCK_COMMENT",
    "LINE_COMMENT",
    "TOKEN",
    "SourceParseError",
    "SpanError",
    "TranscriptError",
]
