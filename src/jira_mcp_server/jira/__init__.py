"""Jira API module for jira_mcp_server.

This module provides the Jira REST API client used by the MCP tools.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .formatting import format_issue, format_project, format_transition
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    ProjectsMixin,
    TransitionsMixin,
    CommentsMixin,
    SearchMixin,
    IssuesMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific functionality:
    - ProjectsMixin: Project listing
    - TransitionsMixin: Listing and applying status transitions
    - CommentsMixin: Adding comments
    - SearchMixin: JQL search
    - IssuesMixin: Fetching, creating and updating issues

    Every operation is a single request through JiraClient.request.
    """

    pass


__all__ = [
    "JiraFetcher",
    "JiraConfig",
    "JiraClient",
    "format_issue",
    "format_project",
    "format_transition",
]
