"""Logging helpers for applications embedding STREAMINDEX.

The library only emits records through module-level loggers and never
installs handlers on import. This module offers an opt-in console setup
built on Rich, plus a filter that annotates third-party log records with a
short prefix used by the console format.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "streamindex"
CONSOLE_HANDLER_NAME = "streamindex-console"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[urllib3]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "urllib3.connectionpool" -> "[urllib3]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr. In debug mode it is set to DEBUG and
    includes source file/line information; otherwise a short third-party
    prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    logger: logging.Logger | None = None,
) -> RichHandler:
    """Attach a Rich console handler to ``logger`` (the `streamindex` logger by default).

    Records from the index, its config and adapters propagate to the
    `streamindex` logger, so the default shows exactly this library's output.
    Pass the root logger to include third-party records. Any console handler
    previously installed by this function is replaced, so calling it twice
    does not duplicate output.

    Returns:
        RichHandler: The handler that was attached.
    """
    target = logger if logger is not None else logging.getLogger(PROJECT_PREFIX)
    for existing in list(target.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            target.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    handler.set_name(CONSOLE_HANDLER_NAME)
    target.addHandler(handler)
    target.setLevel(handler.level)
    return handler
