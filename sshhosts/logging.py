"""
Logging setup for the sshhosts command line.

Library modules only call get_logger(); handlers are installed by
setup_logging(), which the entry point calls once. Console output goes to
stderr so that stdout carries nothing but host listings.
"""

import logging
import logging.handlers
import sys
from dataclasses import dataclass
from pathlib import Path


ROOT_LOGGER = "sshhosts"

RESET = "\033[0m"

# Level name colors on a terminal
LEVEL_COLORS = {
    logging.DEBUG: "\033[2;36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;91m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when use_colors is set."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        # Work on a copy so other handlers see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = LEVEL_COLORS.get(record.levelno, "")
        colored.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(colored)


@dataclass
class LogConfig:
    """Logging configuration built from command line flags."""

    console_level: str = "warning"
    console_colors: bool = True

    # Rotating log file, disabled when None
    file_path: str | None = None
    file_level: str = "debug"
    file_max_bytes: int = 1024 * 1024
    file_backup_count: int = 3

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"


def get_log_level(name: str) -> int:
    """Map a level name such as "debug" to its logging constant (INFO if unknown)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(config: LogConfig | None = None) -> logging.Logger:
    """
    Install console (and optionally file) handlers on the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Returns:
        The package root logger
    """
    config = config or LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(get_log_level(config.console_level))
    console.setFormatter(
        ColoredFormatter(
            config.format,
            config.date_format,
            use_colors=config.console_colors and sys.stderr.isatty(),
        )
    )
    root_logger.addHandler(console)

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)
        log_file = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.file_max_bytes,
            backupCount=config.file_backup_count,
            encoding="utf-8",
        )
        log_file.setLevel(get_log_level(config.file_level))
        log_file.setFormatter(logging.Formatter(config.format, config.date_format))
        root_logger.addHandler(log_file)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package root, e.g. get_logger("config.parser")."""
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
