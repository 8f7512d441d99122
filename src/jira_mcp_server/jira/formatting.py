"""Text rendering of Jira models for tool results.

Pure functions: they never raise, and absent values render as fixed
placeholders instead of empty or None.
"""

from ..models.constants import NO_DESCRIPTION, NO_TITLE, UNASSIGNED, UNKNOWN
from ..models.jira import JiraIssue, JiraProject, JiraTransition, JiraUser
from ..utils.date import format_local_date


def _name(entity: object | None, fallback: str = UNKNOWN) -> str:
    value = getattr(entity, "name", None) if entity is not None else None
    return value or fallback


def _display_name(user: JiraUser | None, fallback: str) -> str:
    if user is None or not user.display_name:
        return fallback
    return user.display_name


def format_issue(issue: JiraIssue) -> str:
    """Render an issue as a fixed multi-line block.

    Args:
        issue: The issue to render

    Returns:
        Header with key and summary, followed by project, status, type,
        priority, people, dates and the description
    """
    project_key = issue.project.key if issue.project else None
    created = format_local_date(issue.created) or UNKNOWN
    updated = format_local_date(issue.updated) or UNKNOWN

    return (
        f"**{issue.key}: {issue.summary or NO_TITLE}**\n"
        f"Project: {_name(issue.project)} ({project_key or UNKNOWN})\n"
        f"Status: {_name(issue.status)}\n"
        f"Type: {_name(issue.issue_type)}\n"
        f"Priority: {_name(issue.priority)}\n"
        f"Assignee: {_display_name(issue.assignee, UNASSIGNED)}\n"
        f"Reporter: {_display_name(issue.reporter, UNKNOWN)}\n"
        f"Created: {created}\n"
        f"Updated: {updated}\n"
        f"\n"
        f"Description: {issue.description or NO_DESCRIPTION}"
    )


def format_project(project: JiraProject) -> str:
    """Render a project as a header with its type and lead."""
    return (
        f"**{project.key or UNKNOWN}: {project.name or UNKNOWN}**\n"
        f"Type: {project.project_type_key or UNKNOWN}\n"
        f"Lead: {_display_name(project.lead, UNKNOWN)}"
    )


def format_transition(transition: JiraTransition) -> str:
    """Render a transition as a list item, e.g. '- Done (ID: 31)'."""
    return f"- {transition.name} (ID: {transition.id})"
