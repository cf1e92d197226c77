"""loguru setup for data-proxy: rich console output plus an optional log file."""

import sys
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

console = Console(file=sys.stderr)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


class LoggingConfig:
    """Replaces loguru's sinks with the ones data-proxy is configured for."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_to_console: bool = True,
        log_file: Optional[Union[str, Path]] = None,
    ):
        self.log_level = log_level.upper()
        self.log_to_console = log_to_console
        self.log_file = Path(log_file) if log_file else None
        self._sink_ids: List[int] = []

        logger.remove()
        if self.log_to_console:
            self._sink_ids.append(logger.add(
                RichHandler(console=console, markup=False),
                format="{name}:{function}:{line} - {message}",
                level=self.log_level,
            ))
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._sink_ids.append(logger.add(
                self.log_file,
                format=FILE_FORMAT,
                level=self.log_level,
                rotation="10 MB",
                retention="7 days",
            ))

    def shutdown(self):
        """Remove the sinks added by this configuration."""
        while self._sink_ids:
            logger.remove(self._sink_ids.pop())


def setup_logging(
    log_level: str = "INFO",
    log_to_console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
) -> LoggingConfig:
    """Quick setup for logging configuration."""
    return LoggingConfig(log_level=log_level, log_to_console=log_to_console, log_file=log_file)


def get_logger(name: str = __name__):
    """Get a logger bound to ``name``."""
    return logger.bind(name=name)
