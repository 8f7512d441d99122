"""
Jira project models.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import JIRA_DEFAULT_ID
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraProject(ApiModel):
    """
    A Jira project.

    Entries of GET /project carry type and lead; the reference embedded in
    an issue's `project` field only has id, key and name, leaving the rest
    unset.
    """

    id: str = JIRA_DEFAULT_ID
    key: str | None = None
    name: str | None = None
    project_type_key: str | None = None
    lead: JiraUser | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Build a project from a list entry or an embedded issue reference.

        Args:
            data: The decoded project object

        Returns:
            A JiraProject; an empty one for missing or non-dict input
        """
        if not isinstance(data, dict) or not data:
            logger.debug(f"Ignoring project payload of type {type(data).__name__}")
            return cls()

        lead_data = data.get("lead")
        raw_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if raw_id is None else str(raw_id),
            key=data.get("key"),
            name=data.get("name"),
            project_type_key=data.get("projectTypeKey"),
            lead=JiraUser.from_api_response(lead_data)
            if isinstance(lead_data, dict) and lead_data
            else None,
        )
