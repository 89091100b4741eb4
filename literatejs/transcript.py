# literatejs/transcript.py
"""
Merge comment and token spans into a literate transcript.

Block-comment bodies become prose; everything else is sliced verbatim out of
the source and wrapped in fenced code blocks. Given already-parsed spans the
whole pass is a pure function of its inputs.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from ._logging import resolve_logger
from .config import DEFAULT_FENCE_TAG
from .errors import SpanError
from .models import CODE, PROSE, Fence, Segment, Span


def _order_key(span: Span):
    # On an exact (line, column) tie, non-comments come first.
    return (span.line, span.column, 1 if span.is_comment else 0)


def order_spans(comments: Sequence[Span], tokens: Sequence[Span]) -> List[Span]:
    """Merge comments and tokens into source order."""
    return sorted(list(comments) + list(tokens), key=_order_key)


def _check_range(span: Span, source_len: int) -> None:
    if span.start < 0 or span.end > source_len or span.end < span.start:
        raise SpanError(
            f"{span.kind} at {span.line}:{span.column} has range "
            f"[{span.start}, {span.end}) outside a source of length {source_len}"
        )


def _check_dropped(source_text: str, start: int, end: int, where: str) -> None:
    dropped = source_text[start:end]
    if dropped.strip():
        raise SpanError(f"Untokenized text {dropped.strip()!r} {where} would be lost")


def collect_segments(
    source_text: str,
    comments: Sequence[Span],
    tokens: Sequence[Span],
    *,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> List[Segment]:
    """
    Walk the spans in source order and produce one segment per span.

    Code segments bridge from the end of the previous span to the end of the
    current one, so whitespace and line comments between tokens survive
    unchanged. Prose segments carry the comment body only.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    spans = order_spans(comments, tokens)
    lg.debug(f"ordered {len(comments)} comment(s) and {len(tokens)} token(s)")

    segments: List[Segment] = []
    previous_end = 0
    for span in spans:
        _check_range(span, len(source_text))
        if span.start < previous_end:
            raise SpanError(
                f"{span.kind} at {span.line}:{span.column} starts at {span.start}, "
                f"inside the previous span ending at {previous_end}"
            )
        if span.is_block_comment:
            _check_dropped(
                source_text, previous_end, span.start,
                f"before the comment at {span.line}:{span.column}",
            )
            segments.append(
                Segment(PROSE, span.raw_text, span.start, span.end, span.line, span.column)
            )
        else:
            segments.append(
                Segment(
                    CODE, source_text[previous_end:span.end],
                    previous_end, span.end, span.line, span.column,
                )
            )
        previous_end = span.end

    _check_dropped(source_text, previous_end, len(source_text), "after the last span")
    return segments


def render_segments(segments: Sequence[Segment], lang: str = DEFAULT_FENCE_TAG) -> str:
    """
    Join segments into the final text, opening a fence on every prose->code
    transition and closing it on every code->prose transition.
    """
    fence = Fence.for_code("".join(s.content for s in segments if not s.is_prose), lang)

    out = ""
    in_comment = True
    for seg in segments:
        if seg.is_prose and not in_comment:
            in_comment = True
            out += fence.closing(out, seg.content)
        elif not seg.is_prose and in_comment:
            in_comment = False
            out += fence.opening(out, seg.content)
        out += seg.content

    if not in_comment:
        out += fence.closing(out, "")
    return out


def build_transcript(
    source_text: str,
    comments: Sequence[Span],
    tokens: Sequence[Span],
    *,
    lang: str = DEFAULT_FENCE_TAG,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> str:
    """Build the transcript for `source_text` from its parsed comments and tokens."""
    segments = collect_segments(source_text, comments, tokens, logger=logger, log=log)
    return render_segments(segments, lang=lang)
