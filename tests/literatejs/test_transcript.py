import pytest

from literatejs.errors import SpanError
from literatejs.models import BLOCK_COMMENT, LINE_COMMENT, TOKEN, Span
from literatejs.transcript import (
    build_transcript,
    collect_segments,
    order_spans,
    render_segments,
)


def _span(source, start, end, kind=TOKEN, raw=None):
    line = source.count("\n", 0, start) + 1
    column = start - (source.rfind("\n", 0, start) + 1)
    return Span(kind, start, end, line, column, source[start:end] if raw is None else raw)


def _tokens(source, *texts):
    """Locate each token text in order, the way a tokenizer would report it."""
    spans, cursor = [], 0
    for text in texts:
        start = source.index(text, cursor)
        spans.append(_span(source, start, start + len(text)))
        cursor = start + len(text)
    return spans


def _block(source, text):
    start = source.index(text)
    return _span(source, start, start + len(text), BLOCK_COMMENT, text[2:-2])


def _line(source, text):
    start = source.index(text)
    return _span(source, start, start + len(text), LINE_COMMENT, text[2:])


def test_code_only_is_one_fence():
    src = "var x = 1;"
    out = build_transcript(src, [], _tokens(src, "var", "x", "=", "1", ";"))
    assert out == "```js\n" + src + "\n```"


def test_leading_comment_has_no_empty_fence():
    src = "/* hello */\nvar x = 1;"
    out = build_transcript(src, [_block(src, "/* hello */")], _tokens(src, "var", "x", "=", "1", ";"))
    assert out == " hello \n```js\nvar x = 1;\n```"
    assert out.lstrip().startswith("hello")


def test_comment_between_code_closes_and_reopens():
    src = "a;\n/* note */\nb;"
    out = build_transcript(src, [_block(src, "/* note */")], _tokens(src, "a", ";", "b", ";"))
    assert out == "```js\na;\n```\n note \n```js\nb;\n```"


def test_multiline_comments_line_up_with_fences():
    src = "/*\nIntro.\n*/\nf()\n/*\nOutro.\n*/\ng()"
    comments = [_block(src, "/*\nIntro.\n*/"), _block(src, "/*\nOutro.\n*/")]
    tokens = _tokens(src, "f", "(", ")", "g", "(", ")")
    out = build_transcript(src, comments, tokens)
    assert out == "\nIntro.\n```js\nf()\n```\nOutro.\n```js\ng()\n```"


def test_line_comments_stay_in_code():
    src = "a; // hi\nb;"
    comments = [_line(src, "// hi")]
    out = build_transcript(src, comments, _tokens(src, "a", ";", "b", ";"))
    assert out == "```js\na; // hi\nb;\n```"


def test_adjacent_block_comments_concatenate():
    src = "/*a*//*b*/x"
    comments = [_block(src, "/*a*/"), _block(src, "/*b*/")]
    out = build_transcript(src, comments, _tokens(src, "x"))
    assert out == "ab\n```js\nx\n```"


def test_comment_only_source_has_no_fence():
    src = "/* only */"
    assert build_transcript(src, [_block(src, src)], []) == " only "


def test_empty_source():
    assert build_transcript("", [], []) == ""


def test_lang_tags_the_opening_fence_only():
    src = "x"
    out = build_transcript(src, [], _tokens(src, "x"), lang="javascript")
    assert out == "```javascript\nx\n```"


def test_backticks_in_code_lengthen_the_fence():
    src = "s = '```';"
    out = build_transcript(src, [], _tokens(src, "s", "=", "'```'", ";"))
    assert out == "````js\ns = '```';\n````"


def test_order_spans_by_line_then_column():
    src = "a /*c*/ b\nd"
    comment = _block(src, "/*c*/")
    tokens = _tokens(src, "a", "b", "d")
    ordered = order_spans([comment], tokens)
    assert [s.raw_text for s in ordered] == ["a", "c", "b", "d"]


def test_order_spans_puts_token_before_comment_on_tie():
    comment = Span(BLOCK_COMMENT, 0, 3, 2, 4, "c")
    token = Span(TOKEN, 0, 1, 2, 4, "t")
    assert order_spans([comment], [token]) == [token, comment]
    line_comment = Span(LINE_COMMENT, 0, 3, 2, 4, "l")
    assert order_spans([line_comment], [token]) == [token, line_comment]


def test_fences_balance_and_never_nest():
    src = "/*p1*/a;/*p2*/b;/*p3*/c;"
    comments = [_block(src, "/*p1*/"), _block(src, "/*p2*/"), _block(src, "/*p3*/")]
    out = build_transcript(src, comments, _tokens(src, "a", ";", "b", ";", "c", ";"))
    fence_lines = [ln for ln in out.split("\n") if ln.startswith("```")]
    assert fence_lines == ["```js", "```"] * 3


def test_code_segments_reproduce_source_outside_comments():
    src = "var a = 1;  // keep\n\n/* drop\n me */\nfunction f() { return a }\n"
    comment = _block(src, "/* drop\n me */")
    tokens = _tokens(src, "var", "a", "=", "1", ";", "function", "f", "(", ")", "{", "return", "a", "}")
    segments = collect_segments(src, [comment, _line(src, "// keep")], tokens)

    code = "".join(s.content for s in segments if not s.is_prose)
    prose = [s.content for s in segments if s.is_prose]
    assert code == "var a = 1;  // keep\nfunction f() { return a }"
    assert prose == [" drop\n me "]
    assert "/*" not in render_segments(segments) and "*/" not in render_segments(segments)


def test_segments_follow_source_order():
    src = "x;/*c*/y;"
    segments = collect_segments(src, [_block(src, "/*c*/")], _tokens(src, "x", ";", "y", ";"))
    positions = [(s.line, s.column) for s in segments]
    assert positions == sorted(positions)
    assert [s.type for s in segments] == ["code", "code", "prose", "code", "code"]


def test_range_outside_source_raises():
    with pytest.raises(SpanError):
        build_transcript("ab", [], [Span(TOKEN, 0, 5, 1, 0, "ab")])


def test_overlapping_spans_raise():
    src = "abc"
    tokens = [Span(TOKEN, 0, 2, 1, 0, "ab"), Span(TOKEN, 1, 3, 1, 1, "bc")]
    with pytest.raises(SpanError):
        build_transcript(src, [], tokens)


def test_untokenized_text_before_comment_raises():
    src = "a b /*c*/"
    with pytest.raises(SpanError, match="'b'"):
        build_transcript(src, [_block(src, "/*c*/")], _tokens(src, "a"))


def test_untokenized_text_at_end_raises():
    src = "a b"
    with pytest.raises(SpanError):
        build_transcript(src, [], _tokens(src, "a"))
