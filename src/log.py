import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def resolve_level(level: str | None = None) -> str:
    """Argument first, then $EDM_LOG_LEVEL, then the default."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = str(level).upper().strip()
    if level not in LEVELS:
        level = DEFAULT_LOG_LEVEL
    return level


def setup_logging(level: str | None = None) -> None:
    """Console logging through RichHandler. Safe to call more than once."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )
