from .fence import Fence
from .segment import CODE, PROSE, Segment
from .span import BLOCK_COMMENT, LINE_COMMENT, SPAN_KINDS, TOKEN, Span

__all__ = [
    "Fence",
    "Segment",
    "Span",
    "CODE",
    "PROSE",
    "BLOCK_COMMENT",
    "LINE_COMMENT",
    "TOKEN",
    "SPAN_KINDS",
]
