"""GitHub adapter for issue dependency links.

Provides the ``github.links`` tool:
- Record typed links between issues as comments
- Build the dependency graph around an issue
- Find blockers of an issue
- Detect circular dependencies among open issues

Usage:
    from links_tools.adapters.github import register_github_tools
    from links_tools.registry import ToolRegistry

    registry = ToolRegistry()
    register_github_tools(registry, token="ghp_...")
"""

from links_config import Settings

from .client import GitHubClientWrapper
from .exceptions import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubValidationError,
    IssueFetchError,
    LinkMutationError,
)
from .repository import GitHubIssueRepository, IssueMutation, IssueRepository
from .schemas import (
    BlockerList,
    CycleReport,
    DependencyGraph,
    IssueComment,
    IssueDetails,
    IssueLink,
    IssueNode,
    LinkRecord,
    LinksInput,
    LinksResult,
    LinkType,
    RemoveGuidance,
)
from .tools import LinksTool

__all__ = [
    # Client
    "GitHubClientWrapper",
    "GitHubIssueRepository",
    "IssueRepository",
    "IssueMutation",
    # Exceptions
    "GitHubAPIError",
    "GitHubAuthError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubValidationError",
    "IssueFetchError",
    "LinkMutationError",
    # Schemas
    "BlockerList",
    "CycleReport",
    "DependencyGraph",
    "IssueComment",
    "IssueDetails",
    "IssueLink",
    "IssueNode",
    "LinkRecord",
    "LinksInput",
    "LinksResult",
    "LinkType",
    "RemoveGuidance",
    # Tools
    "LinksTool",
]


def register_github_tools(registry, token: str | None = None, settings: Settings | None = None) -> None:
    """Register all GitHub tools with the tool registry.

    Args:
        registry: ToolRegistry instance
        token: GitHub personal access token, defaults to GITHUB_TOKEN
        settings: Tool settings, loaded from the environment when omitted
    """
    registry.register(LinksTool(token=token, settings=settings))
