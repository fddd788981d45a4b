"""Recording and removing links.

A link is persisted only as a comment on the source issue; later graph
queries pick it up again through the pattern table.
"""

from links_obs import get_logger

from ..repository import IssueMutation
from ..schemas import LinkRecord, LinkType, RemoveGuidance

logger = get_logger(__name__)

LINK_EMOJI = "\U0001F517"

_PHRASES: dict[str, str] = {
    "blocks": "Blocks #{target}",
    "blocked_by": "Blocked by #{target}",
    "relates": "Related to #{target}",
    "duplicates": "Duplicate of #{target}",
    "parent": "Parent: #{target}",
    "child": "Child of #{target}",
}


def link_phrase(link_type: LinkType, target: int) -> str:
    """Human-readable phrase that the pattern table recognises as ``link_type``."""
    return _PHRASES.get(link_type, "Links to #{target}").format(target=target)


async def add_link(
    mutation: IssueMutation,
    repo: str,
    source: int,
    target: int,
    link_type: LinkType,
    dry_run: bool = False,
) -> LinkRecord:
    """Comment on ``source`` so that it links to ``target``.

    Raises:
        LinkMutationError: The comment could not be posted
    """
    comment = f"{LINK_EMOJI} {link_phrase(link_type, target)}"

    if dry_run:
        return LinkRecord(
            source=source, target=target, type=link_type, comment=comment, status="dry_run"
        )

    await mutation.comment(repo, source, comment)
    logger.info("link_added", repo=repo, source=source, target=target, type=link_type)
    return LinkRecord(source=source, target=target, type=link_type, comment=comment)


def remove_link(
    repo: str,
    source: int,
    target: int | None = None,
    link_type: LinkType | None = None,
) -> RemoveGuidance:
    """Explain how to remove a link by hand.

    Links are historical comments, so nothing is deleted here.
    """
    return RemoveGuidance(
        source=source,
        target=target,
        type=link_type,
        note=(
            "Link removal requires editing the issue body or deleting the "
            "comment containing the link."
        ),
        url=f"https://github.com/{repo}/issues/{source}",
    )
