# literatejs/parse.py
"""
Adapter over the esprima parser.

esprima hands back comment and token objects with `type`, `value`, `range`
and `loc`; this module turns them into `Span` instances so the transcript
builder never sees parser objects.
"""
from __future__ import annotations

import logging
from typing import Any, List, Tuple

import esprima
from esprima.error_handler import Error as EsprimaError

from ._logging import resolve_logger
from .config import DEFAULT_SOURCE_TYPE, SOURCE_TYPES
from .errors import SourceParseError, SpanError
from .models import BLOCK_COMMENT, LINE_COMMENT, TOKEN, Span

# esprima reports "Block"/"Line"; the ESTree-style names show up in some builds.
_COMMENT_KINDS = {
    "Block": BLOCK_COMMENT,
    "BlockComment": BLOCK_COMMENT,
    "Line": LINE_COMMENT,
    "LineComment": LINE_COMMENT,
}


def _attr(node: Any, name: str) -> Any:
    if isinstance(node, dict):
        return node.get(name)
    return getattr(node, name, None)


def _to_span(node: Any, kind: str) -> Span:
    rng = _attr(node, "range")
    loc = _attr(node, "loc")
    if not rng or len(rng) != 2:
        raise SpanError(f"{kind} {_attr(node, 'value')!r} has no source range")
    if loc is None:
        raise SpanError(f"{kind} {_attr(node, 'value')!r} has no source location")
    start = _attr(loc, "start")
    return Span(
        kind=kind,
        start=int(rng[0]),
        end=int(rng[1]),
        line=int(_attr(start, "line")),
        column=int(_attr(start, "column")),
        raw_text=_attr(node, "value") or "",
    )


def _comment_span(node: Any) -> Span:
    node_type = _attr(node, "type")
    kind = _COMMENT_KINDS.get(node_type)
    if kind is None:
        raise SpanError(f"Unknown comment type {node_type!r}")
    return _to_span(node, kind)


def parse_source(
    source_text: str,
    *,
    source_type: str = DEFAULT_SOURCE_TYPE,
    jsx: bool = False,
    logger: logging.Logger | None = None,
    log: bool = False,
) -> Tuple[List[Span], List[Span]]:
    """
    Parse JavaScript and return `(comments, tokens)` as `Span` lists.

    Raises:
        SourceParseError: esprima rejected the source.
        SpanError: esprima produced a comment or token without position data.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    if source_type not in SOURCE_TYPES:
        raise ValueError(f"source_type must be one of {SOURCE_TYPES}, got {source_type!r}")

    options = {
        "comment": True,
        "tokens": True,
        "range": True,
        "loc": True,
        "sourceType": source_type,
        "jsx": jsx,
    }
    try:
        program = esprima.parse(source_text, options)
    except EsprimaError as e:
        raise SourceParseError(
            f"Could not parse source: {e}",
            line=getattr(e, "lineNumber", None),
            column=getattr(e, "column", None),
        ) from e

    comments = [_comment_span(c) for c in (_attr(program, "comments") or [])]
    tokens = [_to_span(t, TOKEN) for t in (_attr(program, "tokens") or [])]
    lg.debug(f"parsed {len(comments)} comment(s) and {len(tokens)} token(s) as {source_type}")
    return comments, tokens
