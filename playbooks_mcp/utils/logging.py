"""
Logging for the playbooks server

MCP speaks over stdout, so the single handler writes to stderr. The handler
sits on the package logger; module loggers (logging.getLogger(__name__)) and
setup_logging("<child>") loggers propagate to it.
"""

import logging
import sys
from typing import Optional

from ..config import Config

PACKAGE_LOGGER = "playbooks_mcp"

# httpx/httpcore log every ClickUp request at INFO; one tool call fans out to a request per doc
CHATTY_LIBRARIES = ("httpx", "httpcore")

LOG_FORMAT = '[%(asctime)s] %(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def log_level() -> int:
    if not Config.ENABLE_LOGGING:
        return logging.CRITICAL
    return logging.DEBUG if Config.DEBUG else logging.INFO

def setup_logging(name: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger and return a logger under it

    Safe to call repeatedly; the stderr handler is attached once.

    Args:
        name: Child name ("tools" -> "playbooks_mcp.tools"); None for the package logger

    Returns:
        Configured logger instance
    """
    level = log_level()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(handler)
    for handler in package_logger.handlers:
        handler.setLevel(level)

    # Request-level HTTP logs only when debugging
    for library in CHATTY_LIBRARIES:
        logging.getLogger(library).setLevel(logging.DEBUG if Config.DEBUG else logging.WARNING)

    if not name or name == PACKAGE_LOGGER:
        return package_logger
    if name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return package_logger.getChild(name)

# Shared logger for tools and the server
logger = setup_logging()
