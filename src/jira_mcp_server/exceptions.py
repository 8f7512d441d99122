"""Exceptions raised by the Jira MCP server."""


class JiraMCPError(Exception):
    """Base class for errors raised while talking to Jira."""


class JiraApiError(JiraMCPError):
    """Raised when the Jira REST API answers with a non-2xx status.

    Every failure mode (authentication, not found, validation, rate limit)
    surfaces as this single error; the status code and the raw response body
    are kept so the message stays useful to the caller.
    """

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Jira API error ({status_code}): {body}")
