"""Configuration module for Jira API interactions."""

import logging
import os
import re
from dataclasses import dataclass
from urllib.parse import urlparse

from ..utils.logging import log_config_param
from .constants import DEFAULT_STORY_POINTS_FIELD

logger = logging.getLogger("jira-mcp-server.jira.config")

REQUIRED_ENV_VARS = ("JIRA_BASE_URL", "JIRA_EMAIL", "JIRA_API_TOKEN")

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class JiraConfig:
    """Jira Cloud API configuration.

    Authentication is always basic auth built from the account email and an
    API token.
    """

    url: str  # Base URL for Jira, without trailing slash
    email: str  # Account email
    api_token: str  # API token
    story_points_field: str = DEFAULT_STORY_POINTS_FIELD  # Custom field holding story points
    ssl_verify: bool = True  # Whether to verify SSL certificates

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            error_msg = (
                f"Missing required environment variables: {', '.join(missing)}"
            )
            raise ValueError(error_msg)

        story_points_field = (
            os.getenv("JIRA_STORY_POINTS_FIELD") or DEFAULT_STORY_POINTS_FIELD
        )

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        config = cls(
            url=os.environ["JIRA_BASE_URL"].rstrip("/"),
            email=os.environ["JIRA_EMAIL"],
            api_token=os.environ["JIRA_API_TOKEN"],
            story_points_field=story_points_field,
            ssl_verify=ssl_verify,
        )
        config.validate()

        log_config_param(logger, "URL", config.url)
        log_config_param(logger, "email", config.email)
        log_config_param(logger, "API token", config.api_token, sensitive=True)
        log_config_param(logger, "story points field", config.story_points_field)
        return config

    def validate(self) -> None:
        """Check that the configuration is complete and well-formed.

        Raises:
            ValueError: If the URL is not an absolute http(s) URL, the email
                is not email-shaped, or the API token is empty
        """
        parsed = urlparse(self.url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(
                f"Invalid Jira base URL '{self.url}': expected an absolute http(s) URL"
            )
        if not self.email or not EMAIL_PATTERN.match(self.email):
            raise ValueError(
                f"Invalid Jira email '{self.email}': expected an email address"
            )
        if not self.api_token:
            raise ValueError("Jira API token must not be empty")
        if not self.story_points_field:
            raise ValueError("Story points field must not be empty")
