"""Issue-links tool system.

Tool interface, metadata and registry.
"""

from links_tools.base import Tool, ToolMetadata
from links_tools.registry import ToolRegistry

__all__ = ["Tool", "ToolMetadata", "ToolRegistry"]
