"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_SEARCH_MAX_RESULTS, SEARCH_FIELDS

logger = logging.getLogger("jira-mcp-server.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self, jql: str, max_results: int = DEFAULT_SEARCH_MAX_RESULTS
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Only one page is fetched: `max_results` bounds it and no further
        requests are made even when `total` is larger.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues to return

        Returns:
            JiraSearchResult with the issues of the first page and the totals
        """
        params = {
            "jql": jql,
            "maxResults": str(max_results),
            "fields": ",".join(SEARCH_FIELDS),
        }

        response = self.request("/search", params=params)
        result = JiraSearchResult.from_api_response(response)
        logger.debug(
            f"Search returned {len(result.issues)} of {result.total} issues for JQL: {jql}"
        )
        return result
