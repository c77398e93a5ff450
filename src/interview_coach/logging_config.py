"""Logging setup routed through the rich console."""
import logging

from rich.console import Console
from rich.logging import RichHandler

from interview_coach.config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL, console: Console | None = None) -> None:
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(name)s | %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
