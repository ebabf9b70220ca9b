"""
Console and logging helpers.

The library itself only ever calls `logging.getLogger(__name__)`; nothing is
configured on import. Applications (and the benchmark sweep) opt in with:

    from seqalgo.console import configure_logging
    configure_logging("DEBUG")   # shows which traversal strategy each call picked
"""

from __future__ import annotations

import logging
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["console", "configure_logging"]

console = Console()

_HANDLER_NAME = "seqalgo-rich"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach a rich handler to the `seqalgo` logger and set its level.

    Calling this more than once replaces the level but never stacks handlers.
    """
    logger = logging.getLogger("seqalgo")
    logger.setLevel(level)
    if not any(getattr(h, "name", None) == _HANDLER_NAME for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
