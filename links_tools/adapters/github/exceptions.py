"""GitHub adapter exceptions.

Custom exception hierarchy for GitHub API errors and the two collaborator
failures the links core distinguishes (reads vs. comment posts).
"""


class GitHubAPIError(Exception):
    """Base exception for GitHub adapter."""

    pass


class GitHubAuthError(GitHubAPIError):
    """Invalid API token or insufficient permissions."""

    pass


class GitHubNotFoundError(GitHubAPIError):
    """Repository or issue not found (404 response)."""

    pass


class GitHubRateLimitError(GitHubAPIError):
    """Rate limit exceeded (403 with rate limit headers)."""

    pass


class GitHubValidationError(GitHubAPIError):
    """Invalid input parameters."""

    pass


class IssueFetchError(GitHubAPIError):
    """An issue lookup, search or listing could not be completed.

    Missing issues surface as this error too; the links core cannot tell a
    404 apart from any other failed read.
    """

    def __init__(self, message: str, repo: str | None = None, issue: int | None = None):
        super().__init__(message)
        self.repo = repo
        self.issue = issue


class LinkMutationError(GitHubAPIError):
    """Posting the comment that records a link failed."""

    def __init__(self, message: str, repo: str | None = None, issue: int | None = None):
        super().__init__(message)
        self.repo = repo
        self.issue = issue
