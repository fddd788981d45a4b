"""Dependency graph construction by bounded breadth-first traversal."""

from collections import deque

from links_obs import get_logger

from ..exceptions import IssueFetchError
from ..repository import IssueRepository
from ..schemas import DependencyGraph, IssueLink, IssueNode
from .cycles import find_cycles
from .patterns import blocking_edges, extract_links

logger = get_logger(__name__)

DEFAULT_DEPTH = 2
MAX_DEPTH = 5


async def build_graph(
    repository: IssueRepository,
    repo: str,
    root_issue: int,
    max_depth: int = DEFAULT_DEPTH,
) -> DependencyGraph:
    """Walk link references outward from ``root_issue`` up to ``max_depth`` hops.

    Traversal is best effort: an issue that cannot be fetched is left out of
    the graph and the walk carries on. Edges pointing past the depth bound
    are recorded, but their targets are never fetched.

    Args:
        repository: Issue source
        repo: Repository in owner/repo format
        root_issue: Issue to start from
        max_depth: Hop bound, 1..5

    Returns:
        Graph with nodes in visitation order, edges in extraction order and
        the blocking cycles found among those edges
    """
    if not 1 <= max_depth <= MAX_DEPTH:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH}, got {max_depth}")

    visited: set[int] = set()
    nodes: list[IssueNode] = []
    edges: list[IssueLink] = []
    queue: deque[tuple[int, int]] = deque([(root_issue, 0)])

    while queue:
        issue, depth = queue.popleft()
        if issue in visited or depth > max_depth:
            continue
        visited.add(issue)

        try:
            details = await repository.get(repo, issue)
        except IssueFetchError as e:
            logger.debug("graph_issue_skipped", repo=repo, issue=issue, error=str(e))
            continue

        nodes.append(
            IssueNode(
                number=details.number,
                title=details.title,
                state=details.state,
                labels=details.labels,
            )
        )

        for link in extract_links(issue, details.text()):
            edges.append(link)
            if depth < max_depth and link.target not in visited:
                queue.append((link.target, depth + 1))

    graph = DependencyGraph(nodes=nodes, edges=edges, cycles=find_cycles(blocking_edges(edges)))
    logger.info(
        "graph_built",
        repo=repo,
        issue=root_issue,
        depth=max_depth,
        nodes=len(graph.nodes),
        edges=len(graph.edges),
        cycles=len(graph.cycles),
    )
    return graph
