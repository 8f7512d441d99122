"""Module for Jira project operations."""

import logging

from ..models.jira import JiraProject
from .client import JiraClient

logger = logging.getLogger("jira-mcp-server.jira")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def get_projects(self) -> list[JiraProject]:
        """
        Get all projects visible to the current user.

        Returns:
            List of JiraProject models, in the order the API returns them
        """
        projects = self.request("/project")
        if not isinstance(projects, list):
            logger.warning(
                f"Unexpected return value type from project list: {type(projects)}"
            )
            return []

        return [JiraProject.from_api_response(project) for project in projects]
