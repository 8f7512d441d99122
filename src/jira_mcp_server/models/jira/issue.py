"""
Jira issue models.

This module provides Pydantic models for Jira issues.
"""

import logging
from typing import Any

from ...utils import adf_to_text
from ..base import ApiModel
from ..constants import JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import JiraIssueType, JiraPriority, JiraStatus, JiraUser
from .project import JiraProject

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Issues are read-only external state: they are never mutated locally,
    only replaced by fetching them again.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str | None = None
    description: str | None = None
    status: JiraStatus | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    priority: JiraPriority | None = None
    issue_type: JiraIssueType | None = None
    created: str | None = None
    updated: str | None = None
    project: JiraProject | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        The create endpoint answers with only id, key and self; such partial
        payloads produce an issue whose fields are all unset.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields")
        if not isinstance(fields, dict):
            fields = {}

        issue_id = data.get("id", JIRA_DEFAULT_ID)
        if issue_id is not None:
            issue_id = str(issue_id)

        summary = fields.get("summary")

        return cls(
            id=issue_id,
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            summary=str(summary) if summary is not None else None,
            description=cls._extract_description(fields.get("description")),
            status=cls._optional(JiraStatus, fields.get("status")),
            assignee=cls._optional(JiraUser, fields.get("assignee")),
            reporter=cls._optional(JiraUser, fields.get("reporter")),
            priority=cls._optional(JiraPriority, fields.get("priority")),
            issue_type=cls._optional(JiraIssueType, fields.get("issuetype")),
            created=fields.get("created"),
            updated=fields.get("updated"),
            project=cls._optional(JiraProject, fields.get("project")),
        )

    @staticmethod
    def _optional(model: type[ApiModel], value: Any) -> Any:
        if not value or not isinstance(value, dict):
            return None
        return model.from_api_response(value)

    @staticmethod
    def _extract_description(value: Any) -> str | None:
        # API v3 returns rich text documents, older payloads plain strings
        if not value:
            return None
        if isinstance(value, dict):
            return adf_to_text(value) or None
        return str(value)
