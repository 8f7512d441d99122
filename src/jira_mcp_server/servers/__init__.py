"""Server implementation for the Jira MCP server."""

from .main import JiraMCP, create_server

__all__ = ["JiraMCP", "create_server"]
