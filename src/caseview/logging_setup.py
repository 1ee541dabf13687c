"""
Logging setup for the command line tools.

The engine modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by whoever owns the process.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler


def setup_logging(level: int | str = logging.INFO, log_file: Path | None = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        log_file: Optional file path for a plain-text copy of the log
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = RichHandler(show_time=False, show_path=False, rich_tracebacks=True)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)
