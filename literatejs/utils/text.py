import re

_BACKTICK_RUN = re.compile(r"`{3,}")


def longest_backtick_run(text: str) -> int:
    """
    Length of the longest run of three or more backticks in `text`.
    Returns 0 when the text holds no fence-like run.
    """
    if not text:
        return 0
    return max((len(m.group(0)) for m in _BACKTICK_RUN.finditer(text)), default=0)
