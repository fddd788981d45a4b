"""Pytest fixtures.

In-memory issue repository standing in for GitHub.
"""

import pytest

from links_config import Settings
from links_tools.adapters.github.exceptions import IssueFetchError, LinkMutationError
from links_tools.adapters.github.schemas import IssueComment, IssueDetails


class FakeIssueRepository:
    """Issue repository + mutation backed by a dict, recording every call."""

    def __init__(self):
        self.issues: dict[int, IssueDetails] = {}
        self.search_results: dict[str, list[int]] = {}
        self.failing: set[int] = set()
        self.fail_search = False
        self.fail_list = False
        self.fail_comment = False
        self.fetched: list[int] = []
        self.searches: list[tuple[str, str, int]] = []
        self.comments: list[tuple[str, int, str]] = []

    def add(self, number, body="", comments=(), title=None, state="open", labels=()):
        self.issues[number] = IssueDetails(
            number=number,
            title=title or f"Issue {number}",
            state=state,
            labels=list(labels),
            body=body,
            comments=[IssueComment(body=c) for c in comments],
        )
        return self.issues[number]

    async def get(self, repo, number):
        self.fetched.append(number)
        if number in self.failing or number not in self.issues:
            raise IssueFetchError(f"Failed to fetch {repo}#{number}", repo=repo, issue=number)
        return self.issues[number]

    async def search(self, repo, query, limit):
        self.searches.append((repo, query, limit))
        if self.fail_search:
            raise IssueFetchError(f"Search failed in {repo}", repo=repo)
        return self.search_results.get(query, [])[:limit]

    async def list_open(self, repo, limit):
        if self.fail_list:
            raise IssueFetchError(f"Failed to list open issues in {repo}", repo=repo)
        open_issues = [i for i in self.issues.values() if i.state == "open"]
        return open_issues[:limit]

    async def comment(self, repo, number, body):
        if self.fail_comment:
            raise LinkMutationError(f"Failed to comment on {repo}#{number}", repo=repo, issue=number)
        self.comments.append((repo, number, body))
        # The comment becomes part of the issue history, like on GitHub.
        if number in self.issues:
            issue = self.issues[number]
            self.issues[number] = issue.model_copy(
                update={"comments": [*issue.comments, IssueComment(body=body)]}
            )


@pytest.fixture
def fake_repo():
    """Empty in-memory issue repository."""
    return FakeIssueRepository()


@pytest.fixture
def settings():
    """Settings with defaults, independent of the developer's environment."""
    return Settings(_env_file=None, GITHUB_TOKEN="ghp_mock_token_12345")


@pytest.fixture
def mock_ctx():
    """Mock execution context."""
    return {"actor": "test_user", "trace_id": "test_trace"}
