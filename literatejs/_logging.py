"""
Opt-in logging for library code.

Usage:
    from literatejs._logging import resolve_logger

    def build(..., logger=None, log: bool = False):
        lg = resolve_logger(logger=logger, enabled=log, name=__name__)
        lg.debug("ordering spans")  # no-op unless enabled or logger passed

Library code never prints; the CLI is the only place that configures handlers.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "literatejs")
        lg.setLevel(level)
        # Bubble to the root so caplog and the CLI handler both see records.
        lg.propagate = True
        return lg
    return NoopLogger()
