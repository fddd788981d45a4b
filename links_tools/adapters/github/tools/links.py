"""GitHub Issue Links Tool.

Dependency tracking between issues: record links, walk the dependency
graph, list blockers and detect circular dependencies.
"""

from typing import Any

from pydantic import ValidationError

from links_config import Settings
from links_obs import get_logger
from links_tools.base import ToolMetadata
from links_tools.adapters.github.client import GitHubClientWrapper
from links_tools.adapters.github.exceptions import GitHubAPIError
from links_tools.adapters.github.links import (
    add_link,
    build_graph,
    find_blockers,
    remove_link,
    scan_repository_cycles,
)
from links_tools.adapters.github.links.formatters import (
    format_blockers,
    format_cycles,
    format_graph,
    format_link_added,
    format_remove_guidance,
)
from links_tools.adapters.github.repository import (
    GitHubIssueRepository,
    IssueMutation,
    IssueRepository,
)
from links_tools.adapters.github.schemas import LINK_ACTIONS, LinksInput, LinksResult

logger = get_logger(__name__)


class LinksTool:
    """Tool for managing relationships between GitHub issues.

    Capabilities:
    - Add a typed link (blocks, blocked_by, relates, duplicates, parent, child)
    - Explain how to remove a link
    - Build the dependency graph around an issue
    - Find the issues blocking an issue
    - Detect circular blocking dependencies across open issues

    Use Cases:
    - "Mark #12 as blocked by #7"
    - "What is blocking #42?"
    - "Are there any dependency cycles in owner/repo?"
    """

    name = "github.links"
    description = (
        "Manage and analyze dependency links between GitHub issues "
        "(add, remove, get_graph, find_blockers, find_cycles)"
    )

    metadata = ToolMetadata(
        requires_approval=False,
        dry_run_supported=True,
        idempotent=False,  # "add" posts a new comment every time
        capabilities=["github.read", "github.write", "github.links"],
        risk_level="medium",
    )

    def __init__(
        self,
        token: str | None = None,
        settings: Settings | None = None,
        repository: IssueRepository | None = None,
        mutation: IssueMutation | None = None,
        **kwargs,
    ):
        """Initialize LinksTool.

        Args:
            token: GitHub API token, defaults to GITHUB_TOKEN from settings
            settings: Tool settings, loaded from the environment when omitted
            repository: Issue source, defaults to the GitHub REST adapter
            mutation: Comment sink, defaults to the GitHub REST adapter
            **kwargs: Additional client configuration
        """
        self.settings = settings or Settings()

        github = None
        if repository is None or mutation is None:
            client_config = {
                "rate_limit_per_second": self.settings.GITHUB_RATE_LIMIT_PER_SECOND,
                "timeout_seconds": self.settings.GITHUB_TIMEOUT_SECONDS,
                "base_url": self.settings.GITHUB_API_URL,
                **kwargs,
            }
            client = GitHubClientWrapper(
                token=token if token is not None else self.settings.GITHUB_TOKEN,
                **client_config,
            )
            github = GitHubIssueRepository(client)

        self.repository = repository or github
        self.mutation = mutation or github

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute a links action.

        Never raises: validation and GitHub failures come back as an
        envelope with ``success=False`` and an ``error`` message.

        Args:
            ctx: Execution context (actor, trace_id, etc.)
            input_data: Tool input matching LinksInput schema

        Returns:
            LinksResult envelope as a dict
        """
        action = input_data.get("action")
        repo = input_data.get("repo")
        envelope = {
            "action": None if action is None else str(action),
            "repo": repo if isinstance(repo, str) else None,
        }
        log = logger.bind(trace_id=(ctx or {}).get("trace_id"), **envelope)

        if action is not None and action not in LINK_ACTIONS:
            return LinksResult(
                success=False, error=f"Unknown action: {action}", **envelope
            ).model_dump()

        try:
            input_obj = LinksInput(**input_data)
        except ValidationError as e:
            log.info("links_validation_failed", errors=e.error_count())
            return LinksResult(
                success=False, error=f"Validation error: {e}", **envelope
            ).model_dump()

        handlers = {
            "add": self._handle_add,
            "remove": self._handle_remove,
            "get_graph": self._handle_get_graph,
            "find_blockers": self._handle_find_blockers,
            "find_cycles": self._handle_find_cycles,
        }

        try:
            data, formatted = await handlers[input_obj.action](input_obj)
        except GitHubAPIError as e:
            log.warning("links_action_failed", error=str(e))
            return LinksResult(success=False, error=str(e), **envelope).model_dump()

        return LinksResult(
            success=True,
            action=input_obj.action,
            repo=input_obj.repo,
            data=data,
            formatted=formatted,
        ).model_dump()

    async def _handle_add(self, input_obj: LinksInput) -> tuple[dict[str, Any], str]:
        record = await add_link(
            self.mutation,
            input_obj.repo,
            input_obj.source,
            input_obj.target,
            input_obj.type,
            dry_run=input_obj.dry_run,
        )
        return record.model_dump(), format_link_added(record)

    async def _handle_remove(self, input_obj: LinksInput) -> tuple[dict[str, Any], str]:
        guidance = remove_link(input_obj.repo, input_obj.source, input_obj.target, input_obj.type)
        return guidance.model_dump(), format_remove_guidance(guidance)

    async def _handle_get_graph(self, input_obj: LinksInput) -> tuple[dict[str, Any], str]:
        depth = input_obj.depth
        if "depth" not in input_obj.model_fields_set:
            depth = self.settings.LINKS_DEFAULT_DEPTH

        graph = await build_graph(self.repository, input_obj.repo, input_obj.issue, depth)
        return graph.model_dump(), format_graph(graph, input_obj.issue)

    async def _handle_find_blockers(self, input_obj: LinksInput) -> tuple[dict[str, Any], str]:
        blockers = await find_blockers(
            self.repository,
            input_obj.repo,
            input_obj.issue,
            search_limit=self.settings.LINKS_BLOCKER_SEARCH_LIMIT,
        )
        return blockers.model_dump(), format_blockers(blockers)

    async def _handle_find_cycles(self, input_obj: LinksInput) -> tuple[dict[str, Any], str]:
        report = await scan_repository_cycles(
            self.repository, input_obj.repo, limit=self.settings.LINKS_CYCLE_SCAN_LIMIT
        )
        return report.model_dump(), format_cycles(report)
