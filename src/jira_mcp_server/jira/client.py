"""Base client module for Jira API interactions."""

import base64
import logging
from typing import Any

from atlassian import Jira
from requests import Session

from ..exceptions import JiraApiError
from ..utils.ssl import configure_ssl_verification
from .config import JiraConfig
from .constants import API_PATH

logger = logging.getLogger("jira-mcp-server.jira")


class JiraClient:
    """Base client for Jira API interactions.

    Owns the configuration, the precomputed authorization header and the
    single `request` primitive every operation goes through.
    """

    config: JiraConfig
    auth_header: str

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        self.config.validate()

        credentials = f"{self.config.email}:{self.config.api_token}".encode()
        self.auth_header = f"Basic {base64.b64encode(credentials).decode('ascii')}"

        session = Session()
        configure_ssl_verification(
            url=self.config.url,
            session=session,
            ssl_verify=self.config.ssl_verify,
        )

        self.jira = Jira(
            url=self.config.url,
            session=session,
            cloud=True,
            verify_ssl=self.config.ssl_verify,
        )

    def request(
        self,
        endpoint: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Issue one authenticated request against the Jira REST API.

        Args:
            endpoint: Path below the API root, e.g. '/issue/PROJ-123'
            method: The HTTP method to use
            params: Optional query parameters
            body: Optional JSON-serializable request body
            headers: Optional headers; these override the defaults

        Returns:
            The decoded JSON response, or None when the response has no body

        Raises:
            JiraApiError: If Jira answers with a non-2xx status
            requests.RequestException: If the request could not be sent
            ValueError: If a response body is not valid JSON
        """
        request_headers = {
            "Authorization": self.auth_header,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        path = f"{API_PATH}{endpoint}"
        logger.debug(f"Jira request: {method} {path} params={params}")

        response = self.jira.request(
            method=method,
            path=path,
            params=params,
            data=body,
            headers=request_headers,
            advanced_mode=True,
        )

        if not 200 <= response.status_code < 300:
            error_text = response.text
            logger.debug(
                f"Jira request {method} {path} failed with status {response.status_code}"
            )
            raise JiraApiError(response.status_code, error_text)

        if not response.content:
            return None

        return response.json()
