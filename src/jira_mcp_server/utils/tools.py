"""Selection of the tools the server registers."""

import logging
import os

logger = logging.getLogger("jira-mcp-server.utils.tools")


def get_enabled_tools() -> list[str] | None:
    """Read the ENABLED_TOOLS allow-list.

    ENABLED_TOOLS="get_issue, search_issues" gives ["get_issue", "search_issues"].
    An unset variable, or one holding only separators and blanks, places no
    restriction.

    Returns:
        Tool names in the order given, or None to register every tool
    """
    raw = os.getenv("ENABLED_TOOLS", "")
    names = [name.strip() for name in raw.split(",") if name.strip()]
    if not names:
        return None

    logger.debug(f"Tool allow-list from ENABLED_TOOLS: {names}")
    return names


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Whether `tool_name` passes the allow-list (None lets every tool through)."""
    return enabled_tools is None or tool_name in enabled_tools
