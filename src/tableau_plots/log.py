"""Opt-in log output for tableau_plots, via loguru."""

import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"


def configure_logging(level: str = "INFO", sink=sys.stderr) -> int:
    """Turn on tableau_plots log output and send it to ``sink``.

    The package is silent by default (it is disabled on import). This
    re-enables it and adds a sink that only sees tableau_plots records.
    Returns the loguru sink id, for ``logger.remove()``.
    """
    logger.enable("tableau_plots")
    return logger.add(
        sink,
        format=_FORMAT,
        level=level,
        filter=lambda record: record["name"].startswith("tableau_plots"),
    )
