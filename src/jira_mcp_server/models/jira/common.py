"""
Common Jira entity models.

This module provides Pydantic models for the small entities embedded in an
issue: users, statuses, issue types and priorities.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import JIRA_DEFAULT_ID

logger = logging.getLogger(__name__)


class JiraUser(ApiModel):
    """
    Model representing a Jira user (assignee, reporter or project lead).
    """

    account_id: str | None = None
    display_name: str | None = None
    email: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a Jira API response.

        Args:
            data: The user data from the Jira API

        Returns:
            A JiraUser instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        display_name = data.get("displayName")
        return cls(
            account_id=data.get("accountId"),
            display_name=str(display_name) if display_name is not None else None,
            email=data.get("emailAddress"),
        )


class _NamedEntity(ApiModel):
    """Shared shape of the id/name entities Jira nests inside issue fields."""

    id: str = JIRA_DEFAULT_ID
    name: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> Any:
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        # The API sometimes returns integer ids
        entity_id = data.get("id", JIRA_DEFAULT_ID)
        if entity_id is not None:
            entity_id = str(entity_id)

        name = data.get("name")
        return cls(
            id=entity_id,
            name=str(name) if name is not None else None,
        )


class JiraStatus(_NamedEntity):
    """
    Model representing a Jira issue status.
    """


class JiraIssueType(_NamedEntity):
    """
    Model representing a Jira issue type.
    """


class JiraPriority(_NamedEntity):
    """
    Model representing a Jira priority.
    """
