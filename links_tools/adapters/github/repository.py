"""Issue repository and mutation capabilities.

The links core only talks to these two protocols. ``GitHubIssueRepository``
implements both on top of the REST client and converts every client
failure into ``IssueFetchError`` (reads) or ``LinkMutationError`` (writes).
"""

from typing import Any, Protocol

import httpx

from links_obs import get_logger

from .client import GitHubClientWrapper
from .exceptions import GitHubAPIError, IssueFetchError, LinkMutationError
from .schemas import IssueComment, IssueDetails

logger = get_logger(__name__)


class IssueRepository(Protocol):
    """Read access to issues."""

    async def get(self, repo: str, number: int) -> IssueDetails:
        ...

    async def search(self, repo: str, query: str, limit: int) -> list[int]:
        ...

    async def list_open(self, repo: str, limit: int) -> list[IssueDetails]:
        ...


class IssueMutation(Protocol):
    """Write access used to record links."""

    async def comment(self, repo: str, number: int, body: str) -> None:
        ...


def split_repo(repo: str) -> tuple[str, str]:
    """Split ``owner/name`` into its two parts."""
    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise IssueFetchError(f"Invalid repository '{repo}', expected owner/repo", repo=repo)
    return owner, name


def _to_details(issue: dict[str, Any], comments: list[dict[str, Any]]) -> IssueDetails:
    return IssueDetails(
        number=issue["number"],
        title=issue.get("title") or "",
        state=issue.get("state", "open"),
        labels=[label["name"] for label in issue.get("labels", [])],
        body=issue.get("body"),
        comments=[IssueComment(body=c.get("body") or "") for c in comments],
    )


class GitHubIssueRepository:
    """GitHub REST implementation of ``IssueRepository`` and ``IssueMutation``."""

    def __init__(self, client: GitHubClientWrapper):
        self.client = client

    async def get(self, repo: str, number: int) -> IssueDetails:
        owner, name = split_repo(repo)
        try:
            issue = await self.client.get_issue(owner, name, number)
            comments = []
            if issue.get("comments", 0):
                comments = await self.client.list_issue_comments(owner, name, number)
        except (GitHubAPIError, httpx.HTTPError) as e:
            raise IssueFetchError(
                f"Failed to fetch {repo}#{number}: {e}", repo=repo, issue=number
            ) from e
        return _to_details(issue, comments)

    async def search(self, repo: str, query: str, limit: int) -> list[int]:
        split_repo(repo)
        q = f'"{query}" repo:{repo} is:issue'
        try:
            response = await self.client.search_issues(query=q, per_page=limit)
        except (GitHubAPIError, httpx.HTTPError) as e:
            raise IssueFetchError(f"Search failed in {repo}: {e}", repo=repo) from e
        return [item["number"] for item in response.get("items", [])][:limit]

    async def list_open(self, repo: str, limit: int) -> list[IssueDetails]:
        owner, name = split_repo(repo)
        issues: list[IssueDetails] = []
        try:
            listed = await self.client.list_issues(owner, name, state="open", per_page=limit)
            for item in listed:
                if "pull_request" in item:
                    continue
                comments = []
                if item.get("comments", 0):
                    comments = await self.client.list_issue_comments(owner, name, item["number"])
                issues.append(_to_details(item, comments))
        except (GitHubAPIError, httpx.HTTPError) as e:
            raise IssueFetchError(f"Failed to list open issues in {repo}: {e}", repo=repo) from e

        logger.debug("listed_open_issues", repo=repo, count=len(issues))
        return issues[:limit]

    async def comment(self, repo: str, number: int, body: str) -> None:
        try:
            owner, name = split_repo(repo)
            await self.client.add_comment(owner, name, number, body)
        except (GitHubAPIError, httpx.HTTPError) as e:
            raise LinkMutationError(
                f"Failed to comment on {repo}#{number}: {e}", repo=repo, issue=number
            ) from e
