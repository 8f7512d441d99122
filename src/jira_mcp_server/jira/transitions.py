"""Module for Jira transition operations."""

import logging

from ..models.jira import JiraTransition
from .client import JiraClient
from .issues import issue_path

logger = logging.getLogger("jira-mcp-server.jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the status transitions currently available for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of JiraTransition models
        """
        response = self.request(f"{issue_path(issue_key)}/transitions")
        transitions = response.get("transitions", []) if isinstance(response, dict) else []
        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    def transition_issue(self, issue_key: str, transition_id: str) -> None:
        """
        Move an issue along a transition.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            transition_id: ID of the transition, as listed by get_transitions
        """
        self.request(
            f"{issue_path(issue_key)}/transitions",
            method="POST",
            body={"transition": {"id": transition_id}},
        )
        logger.info(f"Transitioned {issue_key} using transition {transition_id}")
