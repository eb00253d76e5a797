"""Logging setup for styledown entry points."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configure the root logger with a rich handler.

    Library modules only create loggers; handlers are attached here, by
    the CLI or by applications embedding the generator.

    Args:
        level: Numeric level or level name (e.g. "INFO")
        verbose: Force DEBUG level and show logger names and times
        console: Console to log to (defaults to stderr)

    Returns:
        The configured root logger
    """
    if verbose:
        resolved = logging.DEBUG
    elif isinstance(level, int):
        resolved = level
    else:
        resolved = getattr(logging, str(level).upper(), logging.WARNING)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )
    fmt = "%(name)s: %(message)s" if verbose else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt))

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    return root_logger
