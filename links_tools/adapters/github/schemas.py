"""GitHub adapter Pydantic schemas.

Input, graph and result schemas for the issue links tool, plus the issue
payload exchanged with the issue repository collaborator.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


LinkType = Literal["blocks", "blocked_by", "relates", "duplicates", "parent", "child"]

LinkAction = Literal["add", "remove", "get_graph", "find_blockers", "find_cycles"]

LINK_TYPES: tuple[str, ...] = ("blocks", "blocked_by", "relates", "duplicates", "parent", "child")

LINK_ACTIONS: tuple[str, ...] = ("add", "remove", "get_graph", "find_blockers", "find_cycles")

REPO_PATTERN = r"^[A-Za-z0-9._-]+/[A-Za-z0-9._-]+$"


# ============================================================================
# ISSUE REPOSITORY PAYLOADS
# ============================================================================


class IssueComment(BaseModel):
    """Single issue comment; only the body matters for link extraction."""

    body: str = ""


class IssueDetails(BaseModel):
    """Issue as returned by the issue repository."""

    number: int
    title: str = ""
    state: Literal["open", "closed"] = "open"
    labels: list[str] = Field(default_factory=list)
    body: str | None = None
    comments: list[IssueComment] = Field(default_factory=list)

    @field_validator("state", mode="before")
    @classmethod
    def _lowercase_state(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    def text(self) -> str:
        """Body and comment bodies joined with newlines."""
        return "\n".join([self.body or "", *(c.body for c in self.comments)])


# ============================================================================
# GRAPH SCHEMAS
# ============================================================================


class IssueNode(BaseModel):
    """An issue visited while building a dependency graph."""

    model_config = {"frozen": True}

    number: int = Field(..., ge=1)
    title: str
    state: Literal["open", "closed"]
    labels: list[str] = Field(default_factory=list)


class IssueLink(BaseModel):
    """Directed, typed relationship between two issues."""

    model_config = {"frozen": True}

    source: int
    target: int
    type: LinkType


class DependencyGraph(BaseModel):
    """Nodes in BFS visitation order, edges in extraction order."""

    nodes: list[IssueNode] = Field(default_factory=list)
    edges: list[IssueLink] = Field(default_factory=list)
    cycles: list[list[int]] = Field(default_factory=list)


class BlockerList(BaseModel):
    """Issues blocking a single target issue, first-seen order."""

    issue: int
    blocked_by: list[int] = Field(default_factory=list)


class CycleReport(BaseModel):
    """Repository-wide circular dependency scan."""

    cycles: list[list[int]] = Field(default_factory=list)
    edge_count: int = 0
    issues_scanned: int = 0


class LinkRecord(BaseModel):
    """A link written as a comment on the source issue."""

    source: int
    target: int
    type: LinkType
    comment: str
    status: Literal["created", "dry_run"] = "created"


class RemoveGuidance(BaseModel):
    """Manual steps for removing a link; nothing is mutated."""

    source: int
    target: int | None = None
    type: LinkType | None = None
    note: str
    url: str


# ============================================================================
# LINKS TOOL SCHEMAS
# ============================================================================


class LinksInput(BaseModel):
    """Input schema for LinksTool.

    Required fields per action:
    - add: source, target, type
    - remove: source only; target and type are echoed back when given.
      Removal never mutates anything and only needs the source issue to
      point at, so it accepts partial input and always succeeds.
    - get_graph, find_blockers: issue
    - find_cycles: repo only
    """

    action: LinkAction = Field(..., description="Action to perform")
    repo: str = Field(..., pattern=REPO_PATTERN, description="Repository in owner/repo format")

    # add / remove
    source: int | None = Field(None, ge=1, description="Source issue number")
    target: int | None = Field(None, ge=1, description="Target issue number")
    type: LinkType | None = Field(None, description="Type of relationship")

    # get_graph / find_blockers
    issue: int | None = Field(None, ge=1, description="Issue to get graph or blockers for")
    depth: int = Field(2, ge=1, le=5, description="How deep to traverse relationships")

    dry_run: bool = False

    @model_validator(mode="after")
    def _check_required_for_action(self) -> "LinksInput":
        if self.action == "add":
            missing = [
                name for name in ("source", "target", "type") if getattr(self, name) is None
            ]
            if missing:
                raise ValueError(f"add requires {', '.join(missing)}")
        elif self.action == "remove":
            if self.source is None:
                raise ValueError("remove requires source")
        elif self.action in ("get_graph", "find_blockers"):
            if self.issue is None:
                raise ValueError(f"{self.action} requires issue")
        return self


class LinksResult(BaseModel):
    """Uniform result envelope for every links action."""

    success: bool
    action: str | None = None
    repo: str | None = None
    data: dict[str, Any] | None = None
    formatted: str | None = None
    error: str | None = None
