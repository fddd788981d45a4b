"""Blocker resolution for a single issue."""

from links_obs import get_logger

from ..repository import IssueRepository
from ..schemas import BlockerList
from .patterns import extract_references

logger = get_logger(__name__)

DEFAULT_SEARCH_LIMIT = 50


async def find_blockers(
    repository: IssueRepository,
    repo: str,
    issue: int,
    search_limit: int = DEFAULT_SEARCH_LIMIT,
) -> BlockerList:
    """Collect the issues blocking ``issue``.

    Combines the issue's own "blocked by" mentions with a search for other
    issues saying "blocks #<issue>". Unlike graph building this is all or
    nothing: any ``IssueFetchError`` from the lookup or the search
    propagates to the caller.
    """
    details = await repository.get(repo, issue)

    blockers: list[int] = []
    for number in extract_references(details.text(), "blocked_by"):
        if number not in blockers:
            blockers.append(number)

    hits = await repository.search(repo, f"blocks #{issue}", search_limit)
    for number in hits:
        if number != issue and number not in blockers:
            blockers.append(number)

    logger.info("blockers_resolved", repo=repo, issue=issue, count=len(blockers))
    return BlockerList(issue=issue, blocked_by=blockers)
