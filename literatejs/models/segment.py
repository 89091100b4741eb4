from dataclasses import dataclass

PROSE = "prose"
CODE = "code"


@dataclass
class Segment:
    """One emitted piece of a transcript."""

    type: str      # PROSE or CODE
    content: str
    start: int     # code: slice start in the source; prose: comment start
    end: int
    line: int
    column: int

    @property
    def is_prose(self) -> bool:
        return self.type == PROSE
