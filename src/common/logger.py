"""Rich-backed logging for the kindle-highlights importer.

Modules obtain their logger once at import time:

    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Skipping heading with 0 inline spans")

User-facing notifications (import succeeded, invalid folder, file already
exists) do not go through a logger; they are printed with the console helpers
at the bottom of this module so they stay visible regardless of LOG_LEVEL.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared consoles so log records and notifications interleave correctly
console = Console()
err_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    return RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger that renders through rich.

    Args:
        name: Logger name, usually the calling module's __name__
        level: Logging level name. Falls back to the LOG_LEVEL environment
               variable, then INFO.
        show_time: Prefix records with a timestamp
        show_path: Suffix records with the emitting file and line

    Returns:
        The configured logger. Calling again with the same name returns the
        same instance without stacking handlers.
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logger.setLevel(level.upper())

    handler = _rich_handler(show_time=show_time, show_path=show_path)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)

    # pytest's caplog listens on the root logger
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger. Call once from the CLI entry point.

    Args:
        level: Default level, overridden by LOG_LEVEL when set
        log_file: Optional path that also receives plain-text records
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = _rich_handler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def progress(message: str) -> None:
    """Print a plain progress line, e.g. "Reading export.html..."."""
    console.print(message)


def success(message: str) -> None:
    """Print a success notification with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning notification with a yellow warning sign."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print a failure notification with a red cross on stderr."""
    err_console.print(f"[red]✗[/red] {message}")
