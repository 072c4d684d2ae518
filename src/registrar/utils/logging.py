from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# System messages go to stderr so stdout stays clean for data.
error_console = Console(stderr=True)


def create_logger(name: Optional[str] = None, level: str = "WARNING") -> logging.Logger:
	logger = logging.getLogger(name if name is not None else "registrar")
	if not logger.handlers:
		handler = RichHandler(console=error_console, show_path=False, markup=False)
		handler.setFormatter(logging.Formatter(fmt="%(name)s | %(message)s"))
		logger.addHandler(handler)
	logger.setLevel(level.upper())
	return logger
