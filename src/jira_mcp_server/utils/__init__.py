"""
Utility functions for the Jira MCP server.
This package provides various utility functions used throughout the codebase.
"""

from .adf import adf_to_text, text_to_adf
from .date import format_local_date, parse_date
from .io import is_read_only_mode
from .logging import mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .tools import get_enabled_tools, should_include_tool

__all__ = [
    "SSLIgnoreAdapter",
    "adf_to_text",
    "configure_ssl_verification",
    "format_local_date",
    "get_enabled_tools",
    "is_read_only_mode",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
    "should_include_tool",
    "text_to_adf",
]
