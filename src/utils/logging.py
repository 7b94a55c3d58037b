"""
Logging configuration for the longhand square root tools.

Console output goes through rich's RichHandler on stderr, so log lines never
mix with the computed root on stdout.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(log_level: Optional[Union[str, int]] = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Logging level name or number (defaults to WARNING)
    """
    log_level = log_level or DEFAULT_LOG_LEVEL
    if isinstance(log_level, str):
        log_level = log_level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).debug("Logging configured (level=%s)", log_level)
