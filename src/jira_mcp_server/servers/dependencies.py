"""Dependency providers for the Jira tools."""

import logging

from fastmcp import Context

from jira_mcp_server.jira import JiraFetcher

logger = logging.getLogger("jira-mcp-server.server.dependencies")


def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Return the Jira client held in the server lifespan context.

    Args:
        ctx: The FastMCP context of the current tool call.

    Returns:
        The configured JiraFetcher.

    Raises:
        ValueError: If no Jira client is available.
    """
    lifespan_ctx = ctx.request_context.lifespan_context
    jira = getattr(lifespan_ctx, "jira", None)
    if jira is None:
        logger.error("Jira client requested but not present in lifespan context.")
        raise ValueError("Jira client is not configured or available.")
    return jira
