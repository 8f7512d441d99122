"""
Pydantic models for Jira API responses.

This package provides type-safe models for working with Jira REST API data,
including conversion methods from API responses to structured models.
"""

from .base import ApiModel
from .constants import (  # noqa: F401 - Keep constants available
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
    NO_DESCRIPTION,
    NO_TITLE,
    UNASSIGNED,
    UNKNOWN,
)
from .jira import (
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraSearchResult,
    JiraStatus,
    JiraTransition,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraSearchResult",
    "JiraStatus",
    "JiraTransition",
    "JiraUser",
]
