"""Logging configuration for the console script.

Library modules only create loggers; this is the single place that
attaches a handler.  Rich's handler is used when available.  Log
records always go to stderr so stdout stays machine-readable.
"""

from __future__ import annotations

import logging

from crystallize_setup.cli.console import get_rich_console

PACKAGE_LOGGER: str = "crystallize_setup"


def configure_logging(verbose: bool = False) -> None:
    """Attach a handler to the package logger.

    ``verbose`` lowers the level from WARNING to DEBUG.  Calling this
    more than once replaces the previous handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler: logging.Handler
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=get_rich_console(),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
