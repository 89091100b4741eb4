from dataclasses import dataclass

BLOCK_COMMENT = "BlockComment"
LINE_COMMENT = "LineComment"
TOKEN = "Token"

SPAN_KINDS = (BLOCK_COMMENT, LINE_COMMENT, TOKEN)


@dataclass
class Span:
    """A comment or token covering source_text[start:end]."""

    kind: str      # BLOCK_COMMENT, LINE_COMMENT or TOKEN
    start: int     # absolute index of the first character
    end: int       # absolute index AFTER the last character
    line: int      # 1-based line of the first character
    column: int    # 0-based column of the first character
    raw_text: str = ""  # comment body without delimiters, or the token text

    @property
    def is_comment(self) -> bool:
        return self.kind != TOKEN

    @property
    def is_block_comment(self) -> bool:
        # Line comments stay in the code stream; only block comments are prose.
        return self.kind == BLOCK_COMMENT
