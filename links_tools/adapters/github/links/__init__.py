"""Issue dependency links.

Links are typed phrases ("Blocks #12", "Depends on #3") in issue bodies and
comments. This package extracts them, walks them into a dependency graph,
finds circular blocking chains and records new links as comments.
"""

from .blockers import find_blockers
from .cycles import find_cycles, scan_repository_cycles
from .graph import build_graph
from .patterns import LINK_PATTERNS, blocking_edges, extract_links, extract_references
from .recorder import add_link, link_phrase, remove_link

__all__ = [
    "LINK_PATTERNS",
    "add_link",
    "blocking_edges",
    "build_graph",
    "extract_links",
    "extract_references",
    "find_blockers",
    "find_cycles",
    "link_phrase",
    "remove_link",
    "scan_repository_cycles",
]
