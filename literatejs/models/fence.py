from dataclasses import dataclass

from ..utils.text import longest_backtick_run


@dataclass(frozen=True)
class Fence:
    """A markdown code fence: `length` copies of `char`, tagged with `info` when opening."""

    info: str
    char: str = "`"
    length: int = 3

    @classmethod
    def for_code(cls, code: str, info: str) -> "Fence":
        """Pick a fence that cannot be closed early by a backtick run inside `code`."""
        run = longest_backtick_run(code)
        return cls(info=info, length=run + 1 if run else 3)

    @property
    def marker(self) -> str:
        return self.char * self.length

    def opening(self, before: str, after: str) -> str:
        return _own_line(self.marker + self.info, before, after)

    def closing(self, before: str, after: str) -> str:
        return _own_line(self.marker, before, after)


def _own_line(marker: str, before: str, after: str) -> str:
    """Wrap `marker` in just enough newlines to sit alone on its line."""
    if before and not before.endswith("\n"):
        marker = "\n" + marker
    if after and not after.startswith("\n"):
        marker += "\n"
    return marker
