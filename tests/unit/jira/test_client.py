"""Tests for the Jira client module."""

import base64
import json
from unittest.mock import patch

import pytest
from requests.exceptions import ConnectionError

from jira_mcp_server.exceptions import JiraApiError
from jira_mcp_server.jira.client import JiraClient
from jira_mcp_server.jira.config import JiraConfig
from tests.fixtures.jira_mocks import mock_response


def test_init_builds_basic_auth_header(mock_config):
    """Test that the client derives the Basic auth header from email and token."""
    with patch("jira_mcp_server.jira.client.Jira"):
        client = JiraClient(config=mock_config)

    expected = base64.b64encode(b"test@example.com:test_token").decode("ascii")
    assert client.auth_header == f"Basic {expected}"


def test_init_creates_atlassian_jira(mock_config):
    """Test that the underlying atlassian Jira client points at the base URL."""
    with patch("jira_mcp_server.jira.client.Jira") as mock_jira_class:
        client = JiraClient(config=mock_config)

    mock_jira_class.assert_called_once()
    kwargs = mock_jira_class.call_args.kwargs
    assert kwargs["url"] == "https://test.atlassian.net"
    assert kwargs["cloud"] is True
    assert kwargs["verify_ssl"] is True
    assert client.jira is mock_jira_class.return_value


def test_init_from_env(mock_env_vars):
    """Test that the client falls back to environment configuration."""
    with patch("jira_mcp_server.jira.client.Jira"):
        client = JiraClient()

    assert client.config.url == "https://test.atlassian.net"
    assert client.config.email == "test@example.com"


def test_init_rejects_invalid_config():
    """Test that construction fails fast on malformed configuration."""
    config = JiraConfig(url="not-a-url", email="test@example.com", api_token="t")
    with patch("jira_mcp_server.jira.client.Jira") as mock_jira_class:
        with pytest.raises(ValueError, match="Invalid Jira base URL"):
            JiraClient(config=config)

    mock_jira_class.assert_not_called()


def test_init_disables_ssl_verification():
    """Test that SSL verification can be turned off."""
    config = JiraConfig(
        url="https://jira.example.com",
        email="test@example.com",
        api_token="token",
        ssl_verify=False,
    )
    with (
        patch("jira_mcp_server.jira.client.Jira") as mock_jira_class,
        patch(
            "jira_mcp_server.jira.client.configure_ssl_verification"
        ) as mock_configure_ssl,
    ):
        JiraClient(config=config)

    mock_configure_ssl.assert_called_once()
    assert mock_configure_ssl.call_args.kwargs["ssl_verify"] is False
    assert mock_jira_class.call_args.kwargs["verify_ssl"] is False


def test_request_injects_headers(jira_client):
    """Test that every request carries auth, accept and content-type headers."""
    jira_client.jira.request.return_value = mock_response(json_data={"ok": True})

    result = jira_client.request("/myself")

    assert result == {"ok": True}
    jira_client.jira.request.assert_called_once_with(
        method="GET",
        path="rest/api/3/myself",
        params=None,
        data=None,
        headers={
            "Authorization": jira_client.auth_header,
            "Accept": "application/json",
            "Content-Type": "application/json",
        },
        advanced_mode=True,
    )


def test_request_caller_headers_override(jira_client):
    """Test that caller-supplied headers override the defaults."""
    jira_client.jira.request.return_value = mock_response(json_data={})

    jira_client.request("/myself", headers={"Accept": "text/plain", "X-Extra": "1"})

    headers = jira_client.jira.request.call_args.kwargs["headers"]
    assert headers["Accept"] == "text/plain"
    assert headers["X-Extra"] == "1"
    assert headers["Authorization"] == jira_client.auth_header


def test_request_passes_method_params_and_body(jira_client):
    """Test that method, query params and body are forwarded."""
    jira_client.jira.request.return_value = mock_response(json_data={"id": "1"})

    jira_client.request(
        "/issue", method="POST", params={"a": "b"}, body={"fields": {}}
    )

    kwargs = jira_client.jira.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["params"] == {"a": "b"}
    assert kwargs["data"] == {"fields": {}}


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 429, 500])
def test_request_non_2xx_raises_with_status_and_body(jira_client, status_code):
    """Test that every non-2xx status surfaces as the same error kind."""
    body = json.dumps({"errorMessages": ["Something went wrong"]})
    jira_client.jira.request.return_value = mock_response(
        status_code=status_code, text=body
    )

    with pytest.raises(JiraApiError) as excinfo:
        jira_client.request("/issue/PROJ-1")

    assert excinfo.value.status_code == status_code
    assert excinfo.value.body == body
    assert str(excinfo.value) == f"Jira API error ({status_code}): {body}"


def test_request_redirect_status_is_an_error(jira_client):
    """Test that 3xx responses are treated as failures too."""
    jira_client.jira.request.return_value = mock_response(
        status_code=302, text="Found"
    )

    with pytest.raises(JiraApiError, match=r"Jira API error \(302\): Found"):
        jira_client.request("/project")


def test_request_empty_body_returns_none(jira_client):
    """Test that 204 No Content decodes to None."""
    jira_client.jira.request.return_value = mock_response(status_code=204)

    assert jira_client.request("/issue/PROJ-1", method="PUT", body={}) is None


def test_request_invalid_json_raises(jira_client):
    """Test that a body that is not JSON propagates the decode error."""
    jira_client.jira.request.return_value = mock_response(text="<html>oops</html>")

    with pytest.raises(ValueError):
        jira_client.request("/project")


def test_request_network_error_propagates(jira_client):
    """Test that transport errors are not swallowed by the client."""
    jira_client.jira.request.side_effect = ConnectionError("Connection refused")

    with pytest.raises(ConnectionError, match="Connection refused"):
        jira_client.request("/project")


def test_request_response_is_not_validated(jira_client):
    """Test that unexpected JSON shapes are returned as-is."""
    jira_client.jira.request.return_value = mock_response(json_data=[1, 2, 3])

    assert jira_client.request("/search") == [1, 2, 3]


def test_request_does_not_retry(jira_client):
    """Test that a failing request is issued exactly once."""
    jira_client.jira.request.return_value = mock_response(
        status_code=503, text="unavailable"
    )

    with pytest.raises(JiraApiError):
        jira_client.request("/project")

    assert jira_client.jira.request.call_count == 1
