"""
Jira workflow models.

A transition is one edge of an issue's workflow that the current user may
take from the issue's present status.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    An available status change, as listed by GET /issue/{key}/transitions.

    `id` is what transition_issue expects.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        if not isinstance(data, dict) or not data:
            logger.debug(f"Ignoring transition payload of type {type(data).__name__}")
            return cls()

        raw_id = data.get("id")
        return cls(
            id=JIRA_DEFAULT_ID if raw_id is None else str(raw_id),
            name=str(data.get("name") or EMPTY_STRING),
        )
