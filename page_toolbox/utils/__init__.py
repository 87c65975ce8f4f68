"""
Utility modules for the tool server.

- logger: Structured logging with loguru
"""

from page_toolbox.utils.logger import get_logger, LoggerManager

__all__ = [
    "get_logger",
    "LoggerManager",
]
