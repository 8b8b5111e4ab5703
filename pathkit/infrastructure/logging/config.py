"""Logging bootstrap for the pathkit logger hierarchy."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a rich console handler to the ``pathkit`` logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    logger = logging.getLogger("pathkit")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    logger.addHandler(handler)

    return logger
