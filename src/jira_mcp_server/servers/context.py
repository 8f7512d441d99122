from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jira_mcp_server.jira import JiraFetcher


@dataclass(frozen=True)
class MainAppContext:
    """
    Context holding the single Jira client built at startup.
    It is shared, read-only, by every tool invocation.
    """

    jira: JiraFetcher | None = None
