"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from jira_mcp_server import __version__
from jira_mcp_server.jira import JiraFetcher
from jira_mcp_server.utils.tools import should_include_tool

from .context import MainAppContext
from .jira import JIRA_TOOLS

logger = logging.getLogger("jira-mcp-server.server.main")

SERVER_NAME = "jira-mcp-server"


class JiraMCP(FastMCP[MainAppContext]):
    """FastMCP server that advertises its own version to the host."""

    def __init__(self, name: str, version: str, **kwargs: Any) -> None:
        super().__init__(name=name, **kwargs)
        self._mcp_server.version = version


def create_server(
    jira: JiraFetcher,
    read_only: bool = False,
    enabled_tools: list[str] | None = None,
) -> JiraMCP:
    """Build the MCP server around an already configured Jira client.

    Args:
        jira: The Jira client shared by all tool invocations.
        read_only: Skip tools tagged 'write'.
        enabled_tools: Only register these tool names (None registers all).

    Returns:
        The server, ready to run.
    """

    @asynccontextmanager
    async def lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[MainAppContext]:
        logger.info("Jira MCP server lifespan starting...")
        try:
            yield MainAppContext(jira=jira)
        finally:
            logger.info("Jira MCP server lifespan shutting down.")

    server = JiraMCP(name=SERVER_NAME, version=__version__, lifespan=lifespan)

    for tool_fn, tags in JIRA_TOOLS:
        tool_name = tool_fn.__name__
        if not should_include_tool(tool_name, enabled_tools):
            logger.debug(f"Excluding tool '{tool_name}' (not enabled)")
            continue
        if read_only and "write" in tags:
            logger.debug(f"Excluding tool '{tool_name}' due to read-only mode")
            continue
        server.tool(tags=tags)(tool_fn)

    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    return server
