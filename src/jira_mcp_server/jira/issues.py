"""Module for Jira issue operations."""

import logging
from typing import Any
from urllib.parse import quote

from ..models.jira import JiraIssue
from ..utils.adf import text_to_adf
from .client import JiraClient
from .constants import DEFAULT_ISSUE_TYPE

logger = logging.getLogger("jira-mcp-server.jira")


def issue_path(issue_key: str) -> str:
    """Build the endpoint of a single issue, e.g. '/issue/PROJ-123'."""
    return f"/issue/{quote(issue_key, safe='')}"


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            JiraIssue model with the issue data
        """
        response = self.request(issue_path(issue_key))
        return JiraIssue.from_api_response(response)

    def create_issue(
        self,
        project_key: str,
        summary: str,
        description: str,
        issue_type: str = DEFAULT_ISSUE_TYPE,
        assignee: str | None = None,
        story_points: float | None = None,
    ) -> JiraIssue:
        """
        Create a new Jira issue.

        The assignee is resolved with a best-effort heuristic: a value
        containing '@' is sent as an email address, anything else as an
        account ID. Nothing verifies the guess, so Jira may reject it.

        Args:
            project_key: The key of the project (e.g. 'PROJ')
            summary: The issue summary
            description: The issue description as plain text
            issue_type: The issue type name (e.g. 'Task', 'Bug')
            assignee: Optional email address or account ID
            story_points: Optional story point estimate

        Returns:
            JiraIssue built from the creation response (id and key only)
        """
        fields: dict[str, Any] = {
            "project": {"key": project_key},
            "summary": summary,
            "description": text_to_adf(description),
            "issuetype": {"name": issue_type},
        }

        if assignee:
            if "@" in assignee:
                fields["assignee"] = {"emailAddress": assignee}
            else:
                fields["assignee"] = {"accountId": assignee}

        if story_points is not None:
            fields[self.config.story_points_field] = story_points

        response = self.request("/issue", method="POST", body={"fields": fields})
        issue = JiraIssue.from_api_response(response)
        logger.info(f"Created issue {issue.key} in project {project_key}")
        return issue

    def update_issue(self, issue_key: str, fields: dict[str, Any]) -> None:
        """
        Update fields of an existing issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            fields: Raw mapping of field name to value, sent as-is
        """
        self.request(issue_path(issue_key), method="PUT", body={"fields": fields})
