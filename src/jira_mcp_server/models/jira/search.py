"""
Jira search result models.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


def _as_int(value: Any, default: int) -> int:
    try:
        return default if value is None else int(value)
    except (TypeError, ValueError):
        return default


class JiraSearchResult(ApiModel):
    """
    The single page returned by GET /search.

    `total` counts every match of the query and may exceed `len(issues)`;
    further pages are never requested.
    """

    total: int = 0
    start_at: int = 0
    max_results: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Build the result page from the search response envelope.

        Counters missing from the envelope fall back to the number of
        issues actually returned.

        Args:
            data: The decoded search response

        Returns:
            A JiraSearchResult; an empty one for missing or non-dict input
        """
        if not isinstance(data, dict) or not data:
            logger.debug(f"Ignoring search payload of type {type(data).__name__}")
            return cls()

        raw_issues = data.get("issues")
        issues = (
            [JiraIssue.from_api_response(item) for item in raw_issues if item]
            if isinstance(raw_issues, list)
            else []
        )

        return cls(
            total=_as_int(data.get("total"), len(issues)),
            start_at=_as_int(data.get("startAt"), 0),
            max_results=_as_int(data.get("maxResults"), len(issues)),
            issues=issues,
        )
