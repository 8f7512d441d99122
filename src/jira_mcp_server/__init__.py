import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from jira_mcp_server.utils.logging import setup_logging

__version__ = "1.0.0"

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in _TRUTHY


def _log_level(verbose: int = 0) -> int:
    """-v and -vv win over MCP_VERY_VERBOSE and MCP_VERBOSE; WARNING otherwise."""
    if verbose >= 2 or (not verbose and _env_flag("MCP_VERY_VERBOSE")):
        return logging.DEBUG
    if verbose == 1 or _env_flag("MCP_VERBOSE"):
        return logging.INFO
    return logging.WARNING


logger = setup_logging(logging.INFO if _env_flag("MCP_VERBOSE") else logging.WARNING)


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--jira-url",
    help="Jira base URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-email", help="Jira account email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--story-points-field",
    help="Custom field ID that stores story points (e.g., customfield_10032)",
)
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables all write operations)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
def main(
    verbose: int,
    env_file: str | None,
    jira_url: str | None,
    jira_email: str | None,
    jira_token: str | None,
    story_points_field: str | None,
    jira_ssl_verify: bool,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """Jira MCP Server - Jira issue tracking tools for MCP hosts over stdio.

    Requires JIRA_BASE_URL, JIRA_EMAIL and JIRA_API_TOKEN, from the
    environment, a .env file or the matching options.
    """
    level = _log_level(verbose)

    global logger
    logger = setup_logging(level)
    logger.debug(f"Logging level set to: {logging.getLevelName(level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return ctx.get_parameter_source(param_name) not in (
            click.core.ParameterSource.DEFAULT_MAP,
            click.core.ParameterSource.DEFAULT,
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Command line options take precedence over the environment
    option_env_vars = {
        "jira_url": ("JIRA_BASE_URL", jira_url),
        "jira_email": ("JIRA_EMAIL", jira_email),
        "jira_token": ("JIRA_API_TOKEN", jira_token),
        "story_points_field": ("JIRA_STORY_POINTS_FIELD", story_points_field),
        "jira_ssl_verify": ("JIRA_SSL_VERIFY", str(jira_ssl_verify).lower()),
        "read_only": ("READ_ONLY_MODE", str(read_only).lower()),
        "enabled_tools": ("ENABLED_TOOLS", enabled_tools),
    }
    if click_ctx:
        for param_name, (env_name, value) in option_env_vars.items():
            if value is not None and was_option_provided(click_ctx, param_name):
                os.environ[env_name] = value

    from jira_mcp_server.jira import JiraConfig, JiraFetcher
    from jira_mcp_server.utils.io import is_read_only_mode
    from jira_mcp_server.utils.tools import get_enabled_tools

    try:
        config = JiraConfig.from_env()
        jira = JiraFetcher(config=config)
    except ValueError as e:
        logger.error(f"Failed to initialize Jira client: {e}")
        sys.exit(1)

    from jira_mcp_server.servers import create_server

    server = create_server(
        jira,
        read_only=is_read_only_mode(),
        enabled_tools=get_enabled_tools(),
    )

    logger.info("Jira MCP Server running on stdio")
    asyncio.run(server.run_async(transport="stdio"))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
