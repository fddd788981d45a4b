"""Tool Adapters.

Available adapters:
- github: issue dependency links (graph, blockers, cycles, add/remove)
"""

__all__ = ["github"]
