"""
Global Logger Manager using loguru.

Stdout carries the tool-invocation protocol, so every sink writes either to
stderr or to files.

Configuration via environment (or .env file):
- LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- LOG_MODE: Environment mode (development, production)
- LOG_DIR: Log directory for production (default: logs)
- LOG_ROTATION: Rotation size (e.g., "10 MB", "1 GB", "1 day")
- LOG_RETENTION: Retention time (e.g., "7 days", "1 month")
- LOG_COMPRESSION: Compression format (e.g., "zip", "gz", "tar")
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_MODE = "development"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_ROTATION = "10 MB"
DEFAULT_LOG_RETENTION = "7 days"
DEFAULT_LOG_COMPRESSION = "zip"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


class LoggerManager:
    """Global singleton logger manager."""

    _instance: Optional["LoggerManager"] = None
    _initialized: bool = False

    def __new__(cls) -> "LoggerManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if LoggerManager._initialized:
            return
        LoggerManager._initialized = True

        self.log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        self.log_mode = os.getenv("LOG_MODE", DEFAULT_LOG_MODE).lower()
        self.log_dir = Path(os.getenv("LOG_DIR", DEFAULT_LOG_DIR))
        self.log_rotation = os.getenv("LOG_ROTATION", DEFAULT_LOG_ROTATION)
        self.log_retention = os.getenv("LOG_RETENTION", DEFAULT_LOG_RETENTION)
        self.log_compression = os.getenv("LOG_COMPRESSION", DEFAULT_LOG_COMPRESSION)

        self._configure()

    def _configure(self):
        # Drops loguru's default stderr handler as well as our own
        logger.remove()
        if self.log_mode == "production":
            self._configure_production()
        else:
            self._configure_development()

    def _configure_development(self):
        """Configure logger for development (stderr output)."""
        logger.add(
            sys.stderr,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            level=self.log_level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )

    def _configure_production(self):
        """Configure logger for production (file output with rotation)."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        logger.add(
            self.log_dir / "page_toolbox_{time:YYYY-MM-DD}.log",
            format=LOG_FORMAT,
            level=self.log_level,
            rotation=self.log_rotation,
            retention=self.log_retention,
            compression=self.log_compression,
            encoding="utf-8",
            enqueue=True,
        )

        # Errors also go to their own file
        logger.add(
            self.log_dir / "error_{time:YYYY-MM-DD}.log",
            format=LOG_FORMAT,
            level="ERROR",
            rotation=self.log_rotation,
            retention=self.log_retention,
            compression=self.log_compression,
            encoding="utf-8",
            enqueue=True,
        )

    def get_logger(self, name: Optional[str] = None):
        """
        Get a logger bound to ``name`` (``"root"`` when omitted).

        Example:
            log = LoggerManager().get_logger(__name__)
            log.info("Hello, world!")
        """
        return logger.bind(name=name or "root")


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance. This is the recommended way to use the logger.

    Example:
        from page_toolbox.utils.logger import get_logger

        log = get_logger(__name__)
        log.info("This is an info message")
    """
    return LoggerManager().get_logger(name)


__all__ = ["LoggerManager", "get_logger"]
