"""
Test fixtures for model testing.
"""

from typing import Any

import pytest

from tests.fixtures.jira_mocks import (
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_JIRA_PROJECTS_RESPONSE,
    MOCK_JIRA_SEARCH_RESPONSE,
    MOCK_JIRA_TRANSITIONS_RESPONSE,
)


@pytest.fixture
def jira_issue_data() -> dict[str, Any]:
    """Return mock Jira issue data."""
    return MOCK_JIRA_ISSUE_RESPONSE


@pytest.fixture
def jira_search_data() -> dict[str, Any]:
    """Return mock Jira search (JQL) results."""
    return MOCK_JIRA_SEARCH_RESPONSE


@pytest.fixture
def jira_project_data() -> dict[str, Any]:
    """Return mock data of a single Jira project."""
    return MOCK_JIRA_PROJECTS_RESPONSE[0]


@pytest.fixture
def jira_transitions_data() -> dict[str, Any]:
    """Return mock Jira transitions data."""
    return MOCK_JIRA_TRANSITIONS_RESPONSE
