"""Module for Jira comment operations."""

import logging

from ..utils.adf import text_to_adf
from .client import JiraClient
from .issues import issue_path

logger = logging.getLogger("jira-mcp-server.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def add_comment(self, issue_key: str, comment: str) -> None:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text, sent as a one-paragraph rich text document
        """
        self.request(
            f"{issue_path(issue_key)}/comment",
            method="POST",
            body={"body": text_to_adf(comment)},
        )
        logger.info(f"Added comment to {issue_key}")
