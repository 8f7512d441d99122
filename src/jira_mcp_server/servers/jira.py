"""Jira tool definitions for the FastMCP server.

Every tool turns a failure into its normal text result, prefixed with
"Error", instead of raising: hosts then show the message to the model
rather than treating the call as a protocol failure.

Tool parameters use the camelCase names of the published tool schemas
(issueKey, maxResults, ...).
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastmcp import Context
from pydantic import Field

from jira_mcp_server.jira.constants import DEFAULT_ISSUE_TYPE
from jira_mcp_server.jira.formatting import (
    format_issue,
    format_project,
    format_transition,
)

from .dependencies import get_jira_fetcher

logger = logging.getLogger("jira-mcp-server.server.jira")

ISSUE_KEY_DESCRIPTION = "Issue key (e.g., 'PROJ-123')"


def _error_result(message: str, error: Exception) -> str:
    text = f"{message}: {error}"
    logger.error(text, exc_info=logger.isEnabledFor(logging.DEBUG))
    return text


async def search_issues(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description="JQL query string (e.g., 'project = PROJ AND status = Open')"
        ),
    ],
    maxResults: Annotated[
        int,
        Field(description="Maximum number of results to return (default: 20)"),
    ] = 20,
) -> str:
    """Search for Jira issues using JQL (Jira Query Language)"""
    try:
        jira = get_jira_fetcher(ctx)
        result = jira.search_issues(jql, max_results=maxResults)
    except Exception as e:
        return _error_result("Error searching issues", e)

    if not result.issues:
        return f"No issues found for JQL: {jql}"

    formatted_issues = "\n\n---\n\n".join(format_issue(i) for i in result.issues)
    return f"Found {len(result.issues)} of {result.total} issues:\n\n{formatted_issues}"


async def get_issue(
    ctx: Context,
    issueKey: Annotated[str, Field(description=ISSUE_KEY_DESCRIPTION)],
) -> str:
    """Get detailed information about a specific Jira issue"""
    try:
        jira = get_jira_fetcher(ctx)
        issue = jira.get_issue(issueKey)
    except Exception as e:
        return _error_result(f"Error getting issue {issueKey}", e)

    return format_issue(issue)


async def create_issue(
    ctx: Context,
    projectKey: Annotated[str, Field(description="Project key (e.g., 'PROJ')")],
    summary: Annotated[str, Field(description="Issue summary/title")],
    description: Annotated[str, Field(description="Issue description")],
    issueType: Annotated[
        str, Field(description="Issue type (default: 'Task')")
    ] = DEFAULT_ISSUE_TYPE,
    assignee: Annotated[
        str | None,
        Field(description="Assignee account ID or email (optional)"),
    ] = None,
    storyPoints: Annotated[
        float | None,
        Field(description="Story points for the issue (optional)"),
    ] = None,
) -> str:
    """Create a new Jira issue"""
    try:
        jira = get_jira_fetcher(ctx)
        created = jira.create_issue(
            project_key=projectKey,
            summary=summary,
            description=description,
            issue_type=issueType,
            assignee=assignee,
            story_points=storyPoints,
        )
        # The creation response only carries id and key
        issue = jira.get_issue(created.key)
    except Exception as e:
        return _error_result("Error creating issue", e)

    return f"Successfully created issue:\n\n{format_issue(issue)}"


async def add_comment(
    ctx: Context,
    issueKey: Annotated[str, Field(description=ISSUE_KEY_DESCRIPTION)],
    comment: Annotated[str, Field(description="Comment text")],
) -> str:
    """Add a comment to a Jira issue"""
    try:
        jira = get_jira_fetcher(ctx)
        jira.add_comment(issueKey, comment)
    except Exception as e:
        return _error_result(f"Error adding comment to {issueKey}", e)

    return f"Successfully added comment to {issueKey}"


async def get_projects(ctx: Context) -> str:
    """Get list of available Jira projects"""
    try:
        jira = get_jira_fetcher(ctx)
        projects = jira.get_projects()
    except Exception as e:
        return _error_result("Error getting projects", e)

    if not projects:
        return "No projects found"

    formatted_projects = "\n\n".join(format_project(p) for p in projects)
    return f"Found {len(projects)} projects:\n\n{formatted_projects}"


async def get_transitions(
    ctx: Context,
    issueKey: Annotated[str, Field(description=ISSUE_KEY_DESCRIPTION)],
) -> str:
    """Get available transitions for a Jira issue"""
    try:
        jira = get_jira_fetcher(ctx)
        transitions = jira.get_transitions(issueKey)
    except Exception as e:
        return _error_result(f"Error getting transitions for {issueKey}", e)

    if not transitions:
        return f"No transitions available for {issueKey}"

    formatted_transitions = "\n".join(format_transition(t) for t in transitions)
    return f"Available transitions for {issueKey}:\n\n{formatted_transitions}"


async def transition_issue(
    ctx: Context,
    issueKey: Annotated[str, Field(description=ISSUE_KEY_DESCRIPTION)],
    transitionId: Annotated[
        str,
        Field(description="Transition ID (use get_transitions to find available IDs)"),
    ],
) -> str:
    """Transition a Jira issue to a new status"""
    try:
        jira = get_jira_fetcher(ctx)
        jira.transition_issue(issueKey, transitionId)
    except Exception as e:
        return _error_result(f"Error transitioning {issueKey}", e)

    return f"Successfully transitioned {issueKey} using transition ID {transitionId}"


# Registration order is the order tools are advertised in
JIRA_TOOLS: list[tuple[Callable[..., Awaitable[str]], set[str]]] = [
    (search_issues, {"jira", "read"}),
    (get_issue, {"jira", "read"}),
    (create_issue, {"jira", "write"}),
    (add_comment, {"jira", "write"}),
    (get_projects, {"jira", "read"}),
    (get_transitions, {"jira", "read"}),
    (transition_issue, {"jira", "write"}),
]
