"""
Jira data models.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .issue import JiraIssue
from .project import JiraProject
from .search import JiraSearchResult
from .workflow import JiraTransition

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    # Entity-specific models
    "JiraProject",
    "JiraTransition",
    "JiraIssue",
    "JiraSearchResult",
]
