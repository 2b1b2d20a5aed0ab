"""Console and logging setup shared by both entry points."""

from __future__ import annotations

import logging
from typing import Final

from rich.console import Console

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"

# Paths and ${...} templates must print verbatim.
console: Final[Console] = Console(
    markup=False, emoji=False, highlight=False, soft_wrap=True
)
err_console: Final[Console] = Console(
    stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True
)


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Configure root logging once; later calls keep the first handler."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
