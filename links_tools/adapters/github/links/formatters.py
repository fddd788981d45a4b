"""Agent-readable renderings of links results."""

from ..schemas import (
    BlockerList,
    CycleReport,
    DependencyGraph,
    LinkRecord,
    RemoveGuidance,
)

ARROW = "→"
CYCLE = "\U0001F504"


def _chain(cycle: list[int]) -> str:
    return f" {ARROW} ".join(f"#{n}" for n in cycle)


def format_graph(graph: DependencyGraph, root_issue: int) -> str:
    lines = [f"\U0001F5FA️ Dependency Graph for #{root_issue}", "─" * 40]

    lines.append("\nNodes:")
    for node in graph.nodes:
        state = "\U0001F7E2" if node.state == "open" else "\U0001F534"
        lines.append(f"  {state} #{node.number} {node.title[:40]}")

    if graph.edges:
        lines.append("\nRelationships:")
        for edge in graph.edges:
            lines.append(f"  #{edge.source} {ARROW} {edge.type} {ARROW} #{edge.target}")

    if graph.cycles:
        lines.append("\n⚠️ Cycles detected:")
        for cycle in graph.cycles:
            lines.append(f"  {CYCLE} {_chain(cycle)}")

    return "\n".join(lines)


def format_blockers(blockers: BlockerList) -> str:
    if not blockers.blocked_by:
        return f"✅ #{blockers.issue} has no blockers!"
    listed = ", ".join(f"#{n}" for n in blockers.blocked_by)
    return f"\U0001F6A7 #{blockers.issue} is blocked by: {listed}"


def format_cycles(report: CycleReport) -> str:
    if not report.cycles:
        return f"✅ No dependency cycles found (checked {report.edge_count} relationships)"
    lines = [f"\U0001F6A8 Found {len(report.cycles)} dependency cycles:"]
    lines.extend(f"  {CYCLE} {_chain(cycle)}" for cycle in report.cycles)
    return "\n".join(lines)


def format_link_added(record: LinkRecord) -> str:
    prefix = "Would add link" if record.status == "dry_run" else "Added link"
    return f"\U0001F517 {prefix}: #{record.source} {record.type} #{record.target}"


def format_remove_guidance(guidance: RemoveGuidance) -> str:
    return (
        "\U0001F517 To remove link:\n"
        f"1. Edit issue #{guidance.source} body to remove link reference\n"
        "2. Or delete the comment containing the link\n"
        f"3. Visit: {guidance.url}"
    )
