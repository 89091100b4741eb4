# literatejs/core.py
import logging
from typing import Optional

from .config import DEFAULT_ENCODING, DEFAULT_FENCE_TAG, DEFAULT_SOURCE_TYPE
from .parse import parse_source
from .transcript import build_transcript
from .utils.language import _get_fence_tag_from_path, _get_source_type_from_path, _is_jsx_path

logger = logging.getLogger(__name__)


def transcribe_text(
    source_text: str,
    *,
    lang: str = DEFAULT_FENCE_TAG,
    source_type: str = DEFAULT_SOURCE_TYPE,
    jsx: bool = False,
    log: bool = False,
) -> str:
    """
    Parse JavaScript source and return its literate transcript.

    Parse failures propagate as SourceParseError; nothing partial is returned.
    """
    comments, tokens = parse_source(source_text, source_type=source_type, jsx=jsx, log=log)
    return build_transcript(source_text, comments, tokens, lang=lang, log=log)


def transcribe_file(
    path: str,
    *,
    lang: Optional[str] = None,
    source_type: Optional[str] = None,
    jsx: Optional[bool] = None,
    encoding: str = DEFAULT_ENCODING,
    log: bool = False,
) -> str:
    """
    Read `path` and return its transcript.

    Settings left as None are inferred from the file extension. Read errors
    (missing file, permissions, decoding) are raised as-is.
    """
    path = str(path)
    with open(path, encoding=encoding) as f:
        source_text = f.read()

    if lang is None:
        lang = _get_fence_tag_from_path(path)
    if source_type is None:
        source_type = _get_source_type_from_path(path)
    if jsx is None:
        jsx = _is_jsx_path(path)

    logger.debug(f"transcribing {path} ({len(source_text)} chars, {source_type}, fence '{lang}')")
    return transcribe_text(source_text, lang=lang, source_type=source_type, jsx=jsx, log=log)
