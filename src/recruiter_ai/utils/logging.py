"""Logging setup shared by the CLI and the web UI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Third-party loggers that are noisy at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3")


def setup_logging(level: str = "INFO", console: Console | None = None) -> None:
    """Route the standard logging tree through Rich.

    Args:
        level: Root log level name.
        console: Console to log to. Defaults to stderr.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
