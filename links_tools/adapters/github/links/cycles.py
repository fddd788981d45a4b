"""Circular dependency detection."""

from collections.abc import Iterable

from links_obs import get_logger

from ..repository import IssueRepository
from ..schemas import CycleReport, IssueLink
from .patterns import BLOCKING_TYPES, extract_links

logger = get_logger(__name__)

DEFAULT_SCAN_LIMIT = 100


def build_adjacency(edges: Iterable[IssueLink]) -> dict[int, list[int]]:
    """Source -> targets, keys in edge arrival order, duplicates kept."""
    adjacency: dict[int, list[int]] = {}
    for edge in edges:
        adjacency.setdefault(edge.source, []).append(edge.target)
    return adjacency


def find_cycles(edges: Iterable[IssueLink]) -> list[list[int]]:
    """Report every cycle closed by a back edge during depth-first search.

    Each cycle lists issue numbers along the path and repeats its first
    entry at the end; a self loop on ``n`` is ``[n, n]``. Cycles are not
    canonicalised, so the same loop may show up once per back edge that
    closes it.

    The traversal keeps an explicit stack of ``(node, neighbour iterator)``
    frames instead of recursing, so long dependency chains cannot exhaust
    the interpreter's recursion limit.
    """
    adjacency = build_adjacency(edges)
    cycles: list[list[int]] = []
    visited: set[int] = set()

    for start in adjacency:
        if start in visited:
            continue

        path: list[int] = [start]
        on_stack: set[int] = {start}
        visited.add(start)
        frames = [(start, iter(adjacency.get(start, ())))]

        while frames:
            node, neighbours = frames[-1]
            advanced = False
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    on_stack.add(neighbour)
                    path.append(neighbour)
                    frames.append((neighbour, iter(adjacency.get(neighbour, ()))))
                    advanced = True
                    break
                if neighbour in on_stack:
                    cycles.append(path[path.index(neighbour):] + [neighbour])

            if not advanced:
                frames.pop()
                path.pop()
                on_stack.discard(node)

    return cycles


async def scan_repository_cycles(
    repository: IssueRepository,
    repo: str,
    limit: int = DEFAULT_SCAN_LIMIT,
) -> CycleReport:
    """Check the most recent open issues for circular blocking dependencies.

    Raises:
        IssueFetchError: The open issues could not be listed
    """
    issues = await repository.list_open(repo, limit)

    edges: list[IssueLink] = []
    for details in issues:
        edges.extend(extract_links(details.number, details.text(), BLOCKING_TYPES))

    cycles = find_cycles(edges)
    logger.info(
        "cycle_scan_finished",
        repo=repo,
        issues=len(issues),
        edges=len(edges),
        cycles=len(cycles),
    )
    return CycleReport(cycles=cycles, edge_count=len(edges), issues_scanned=len(issues))
