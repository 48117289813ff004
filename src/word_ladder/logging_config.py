"""
Logging setup shared by the CLI and the HTTP backend.

Log records go to stderr so that ladders printed on stdout can be piped.
"""

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s"
TIME_FORMAT = "%H:%M:%S"

# Per-request access lines from uvicorn drown out the solver summaries
QUIET_LOGGERS = ("uvicorn.access",)


def _build_handler(level: int, use_rich: bool, stream: TextIO) -> logging.Handler:
    if use_rich:
        handler: logging.Handler = RichHandler(
            console=Console(file=stream),
            level=level,
            show_path=False,
            rich_tracebacks=True,
            markup=False,
            log_time_format=f"[{TIME_FORMAT}]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    else:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=TIME_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logging(
    level: str = "INFO",
    use_rich: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Replace the root logger's handlers with a single word_ladder handler.

    Args:
        level: Level name such as DEBUG or WARNING. Unknown names fall back to INFO.
        use_rich: Colored Rich output; plain timestamped lines when False.
        stream: Where records are written. Defaults to stderr.

    Returns:
        The installed handler.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = _build_handler(numeric_level, use_rich, stream or sys.stderr)
    root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging configured: level={logging.getLevelName(numeric_level)}, rich={use_rich}")
    return handler
