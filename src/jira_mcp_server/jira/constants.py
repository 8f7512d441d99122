"""Constants specific to Jira operations."""

# Path prefix of the Jira Cloud REST API, appended to the configured base URL
API_PATH = "rest/api/3"

# Fields requested by search_issues; matches what format_issue renders
SEARCH_FIELDS: list[str] = [
    "id",
    "key",
    "summary",
    "description",
    "status",
    "assignee",
    "reporter",
    "priority",
    "issuetype",
    "created",
    "updated",
    "project",
]

DEFAULT_ISSUE_TYPE = "Task"
DEFAULT_SEARCH_MAX_RESULTS = 50

# Installation-specific; override with JIRA_STORY_POINTS_FIELD
DEFAULT_STORY_POINTS_FIELD = "customfield_10032"
