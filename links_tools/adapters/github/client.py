"""GitHub API client wrapper.

Centralized GitHub REST client with error mapping and client-side rate
limiting. Retries are left to the caller.
"""

import asyncio
from typing import Any

import httpx

from links_obs import get_logger

from .exceptions import (
    GitHubAPIError,
    GitHubAuthError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubValidationError,
)

logger = get_logger(__name__)


class GitHubClientWrapper:
    """GitHub API client for the issue links tool.

    Provides:
    - Error handling and exception mapping
    - Rate limiting (requests per second, client side)
    - Paginated comment retrieval
    """

    BASE_URL = "https://api.github.com"
    PAGE_SIZE = 100
    MAX_COMMENT_PAGES = 10

    def __init__(
        self,
        token: str,
        rate_limit_per_second: int = 10,
        timeout_seconds: int = 30,
        base_url: str | None = None,
    ):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token
            rate_limit_per_second: Max requests per second
            timeout_seconds: Request timeout
            base_url: API root, for GitHub Enterprise installs
        """
        self.token = token
        self.rate_limit_per_second = rate_limit_per_second
        self.timeout_seconds = timeout_seconds
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._last_request_time = 0.0

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authentication."""
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def _rate_limit(self) -> None:
        """Enforce rate limiting."""
        loop = asyncio.get_running_loop()
        time_since_last_request = loop.time() - self._last_request_time
        min_interval = 1.0 / self.rate_limit_per_second

        if time_since_last_request < min_interval:
            await asyncio.sleep(min_interval - time_since_last_request)

        self._last_request_time = loop.time()

    def _handle_error(self, response: httpx.Response) -> None:
        """Map GitHub API errors to custom exceptions."""
        status = response.status_code

        try:
            error_data = response.json()
            message = error_data.get("message", str(response.text))
        except ValueError:
            message = str(response.text)

        if status == 401:
            raise GitHubAuthError(f"Authentication failed: {message}")
        elif status == 403:
            if "rate limit" in message.lower():
                raise GitHubRateLimitError(f"Rate limit exceeded: {message}")
            raise GitHubAuthError(f"Forbidden: {message}")
        elif status == 404:
            raise GitHubNotFoundError(f"Resource not found: {message}")
        elif status == 422:
            raise GitHubValidationError(f"Validation failed: {message}")
        else:
            raise GitHubAPIError(f"GitHub API error ({status}): {message}")

    async def _request(
        self,
        method: str,
        path: str,
        expected_status: int = 200,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        await self._rate_limit()

        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.request(
                method,
                f"{self.base_url}{path}",
                headers=self._get_headers(),
                params=params,
                json=json,
            )

            if response.status_code != expected_status:
                self._handle_error(response)

            return response.json()

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> dict[str, Any]:
        """Get a single issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number

        Returns:
            Issue data from GitHub API

        Raises:
            GitHubNotFoundError: Issue or repository does not exist
            GitHubAPIError: Other API errors
        """
        return await self._request("GET", f"/repos/{owner}/{repo}/issues/{issue_number}")

    async def list_issue_comments(
        self, owner: str, repo: str, issue_number: int
    ) -> list[dict[str, Any]]:
        """List comments on an issue, oldest first, following pagination.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number

        Returns:
            Comment objects in creation order
        """
        comments: list[dict[str, Any]] = []
        for page in range(1, self.MAX_COMMENT_PAGES + 1):
            batch = await self._request(
                "GET",
                f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
                params={"per_page": self.PAGE_SIZE, "page": page},
            )
            comments.extend(batch)
            if len(batch) < self.PAGE_SIZE:
                break
        else:
            logger.debug(
                "comment_page_cap_reached",
                owner=owner,
                repo=repo,
                issue=issue_number,
                pages=self.MAX_COMMENT_PAGES,
                comments=len(comments),
            )
        return comments

    async def list_issues(
        self,
        owner: str,
        repo: str,
        state: str = "open",
        per_page: int = 30,
    ) -> list[dict[str, Any]]:
        """List issues in a repository, most recently created first.

        The issues endpoint also returns pull requests; callers filter them.

        Args:
            owner: Repository owner
            repo: Repository name
            state: open, closed or all
            per_page: Number of results (max 100)
        """
        return await self._request(
            "GET",
            f"/repos/{owner}/{repo}/issues",
            params={"state": state, "per_page": per_page},
        )

    async def search_issues(self, query: str, per_page: int = 10) -> dict[str, Any]:
        """Search for issues and pull requests.

        Args:
            query: Search query string
            per_page: Number of results per page

        Returns:
            Search results from GitHub API
        """
        return await self._request(
            "GET", "/search/issues", params={"q": query, "per_page": per_page}
        )

    async def add_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        comment: str,
    ) -> dict[str, Any]:
        """Add a comment to an issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number
            comment: Comment text

        Returns:
            Created comment data
        """
        return await self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            expected_status=201,
            json={"body": comment},
        )
