"""Tool Registry Tests."""

from links_tools.adapters.github import LinksTool, register_github_tools
from links_tools.base import ToolMetadata
from links_tools.registry import ToolRegistry


class MockTool:
    name = "mock_tool"
    description = "Mock tool"
    metadata = ToolMetadata(capabilities=["test.mock"])


def test_register_and_retrieve_tool():
    """Test tool registration and retrieval."""
    registry = ToolRegistry()
    registry.register(MockTool())

    retrieved = registry.get("mock_tool")

    assert retrieved is not None
    assert retrieved.name == "mock_tool"
    assert registry.get("missing") is None


def test_register_github_tools(settings):
    """Test the links tool is registered under its name."""
    registry = ToolRegistry()
    register_github_tools(registry, settings=settings)

    assert registry.names() == ["github.links"]
    assert isinstance(registry.get("github.links"), LinksTool)
    assert registry.filter_by_capability("github.links")[0].name == "github.links"
    assert registry.filter_by_capability("test.mock") == []
