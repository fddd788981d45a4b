"""Relationship pattern table and link extraction.

Links live as plain text in issue bodies and comments ("Blocked by #12").
The table maps each link type to the phrases recognised for it; it is built
once at import and never mutated.
"""

import re
from collections.abc import Iterable
from types import MappingProxyType

from ..schemas import LINK_TYPES, IssueLink, LinkType


def _phrase(keyword: str) -> re.Pattern[str]:
    # Spaces only between keyword and "#N", no tabs or newlines.
    return re.compile(rf"{keyword} +#(\d+)", re.IGNORECASE)


LINK_PATTERNS: MappingProxyType[str, tuple[re.Pattern[str], ...]] = MappingProxyType(
    {
        "blocks": (_phrase("blocks"), _phrase("blocking")),
        "blocked_by": (_phrase("blocked +by"), _phrase("depends +on"), _phrase("waiting +on")),
        "relates": (_phrase("relates +to"), _phrase("related +to"), _phrase("see +also")),
        "duplicates": (_phrase("duplicates"), _phrase("duplicate +of")),
        "parent": (_phrase("parent:"), _phrase("epic:")),
        "child": (_phrase("child:"), _phrase("subtask:")),
    }
)

BLOCKING_TYPES: tuple[str, ...] = ("blocks", "blocked_by")


def extract_references(text: str, link_type: LinkType) -> list[int]:
    """Return every issue number referenced by ``link_type`` phrases in ``text``.

    Numbers come out in pattern order, then in order of appearance. Repeated
    mentions are kept.
    """
    numbers: list[int] = []
    for pattern in LINK_PATTERNS[link_type]:
        for match in pattern.finditer(text):
            try:
                number = int(match.group(1), 10)
            except (TypeError, ValueError):
                continue
            if number > 0:
                numbers.append(number)
    return numbers


def extract_links(
    source: int, text: str, types: Iterable[LinkType] = LINK_TYPES
) -> list[IssueLink]:
    """Scan ``text`` written on issue ``source`` and emit one edge per match."""
    return [
        IssueLink(source=source, target=target, type=link_type)
        for link_type in types
        for target in extract_references(text, link_type)
    ]


def blocking_edges(edges: Iterable[IssueLink]) -> list[IssueLink]:
    """Keep only ``blocks`` and ``blocked_by`` edges, direction as extracted.

    Both types are followed source -> target during cycle detection, so
    "#1 blocks #2" together with "#2 blocked by #1" closes a cycle.
    """
    return [edge for edge in edges if edge.type in BLOCKING_TYPES]
