"""Logging configuration for localekit consumers."""

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import settings

# Log levels for different components
LOGGING_CONFIG = {
    "localekit": logging.INFO,
    "localekit.core": logging.INFO,
    # Resource loading is chatty at DEBUG (one line per file merged)
    "localekit.infra": logging.WARNING,
}


class LevelColorFormatter(logging.Formatter):
    """Console formatter that tints the level name, only when writing to a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(self, fmt: str, datefmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        code = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or code is None:
            return super().format(record)
        levelname = record.levelname
        record.levelname = f"\033[{code}m{levelname}\033[0m"
        try:
            return super().format(record)
        finally:
            # the record is shared with the file handler
            record.levelname = levelname


def setup_logging(log_file: Optional[bool] = None, debug: bool = False, log_dir: str = "logs") -> None:
    """Configure root logging with a console handler and an optional rotating file."""
    if log_file is None:
        log_file = settings.LOG_FILE
    level = logging.DEBUG if debug else logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        LevelColorFormatter(
            "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            datefmt="%H:%M:%S",
            use_color=sys.stdout.isatty(),
        )
    )
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_dir)
        path.mkdir(exist_ok=True)
        log_filename = path / f"localekit_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    for logger_name, component_level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else component_level)

    logging.getLogger(__name__).info(
        "Logging configured (console=%s, file=%s)",
        logging.getLevelName(level),
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
