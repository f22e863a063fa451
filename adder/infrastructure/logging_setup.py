"""
Logging Setup

Root logger configuration for the CLI.
Records go to stderr only; stdout is reserved for prompts and the result.
"""

import logging
import sys
from typing import Optional, TextIO

from adder.infrastructure.config import get_config

TRACE_LEVEL = 5
if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore[attr-defined]

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_HANDLER_NAME = "adder-console"
_configured = False


def resolve_level(level_name: str, debug: bool = False) -> int:
    """Map a LOG_LEVEL string to a numeric level (unknown names -> WARNING)."""
    if debug:
        return logging.DEBUG
    level_name = level_name.upper()
    if level_name == "TRACE":
        return TRACE_LEVEL
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(force: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger once (unless force=True)."""
    global _configured
    if _configured and not force:
        return

    config = get_config()
    level = resolve_level(config.log_level, config.debug)

    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    console = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console.set_name(_HANDLER_NAME)
    console.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    console.setLevel(level)

    root.setLevel(level)
    root.addHandler(console)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; configuration is applied lazily by the CLI."""
    return logging.getLogger(name)
