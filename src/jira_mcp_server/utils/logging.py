"""Logging helpers for the Jira MCP server.

stdout carries the MCP stdio protocol, so every record is written to stderr.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Loggers whose level follows the server's verbosity
_MANAGED_LOGGERS = ("jira-mcp-server", "mcp.server", "mcp.server.lowlevel.server")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Route all logging to a single stderr handler at the given level.

    Calling it again replaces the handler instead of stacking a second one.

    Args:
        level: Minimum level to emit (default: WARNING)

    Returns:
        The "jira-mcp-server" application logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for name in _MANAGED_LOGGERS:
        logging.getLogger(name).setLevel(level)

    return logging.getLogger("jira-mcp-server")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Hide the middle of a secret, e.g. 'abcd****ijkl'.

    Values too short to keep both ends visible are masked completely.
    """
    if not value:
        return "Not Provided"
    hidden = len(value) - 2 * keep_chars
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one loaded configuration value at INFO, masking secrets."""
    if sensitive:
        shown = mask_sensitive(value)
    else:
        shown = value or "Not Provided"
    logger.info(f"Jira {param}: {shown}")
