from __future__ import annotations

from typing import Annotated, List, Tuple

from pydantic import BaseModel, Field

ItemId = Annotated[str, Field(min_length=1)]


class GraphSnapshot(BaseModel):
    """Serialized form of a constraint graph."""

    nodes: List[ItemId] = Field(default_factory=list, description="Every item identifier in insertion order.")
    edges: List[Tuple[ItemId, ItemId]] = Field(
        default_factory=list,
        description="(blocker, blocked) pairs; the blocker is ordered first.",
    )


class DependencyEdge(BaseModel):
    blocker: ItemId = Field(..., description="Item that must come first.")
    blocked: ItemId = Field(..., description="Item that must come after the blocker.")


class ItemRelations(BaseModel):
    """Direct neighbours of a single item."""

    item_id: str
    dependencies: List[str]
    dependents: List[str]


class OrderResponse(BaseModel):
    order: List[str] = Field(..., description="Every item, each blocker before what it blocks.")


class MoveCheckRequest(BaseModel):
    item_id: ItemId
    target_index: int = Field(..., description="Zero-based position proposed for the item.")
    candidate_order: List[str] = Field(
        ..., description="Current arrangement of items the move is checked against."
    )


class MoveCheckResponse(BaseModel):
    allowed: bool


class GraphReplaceResponse(GraphSnapshot):
    """Graph state after a replay, plus any edges the replay had to drop."""

    dropped_edges: List[Tuple[str, str]] = Field(default_factory=list)


class GraphValidationResponse(BaseModel):
    """What replacing the graph with a snapshot would keep and drop."""

    lossless: bool = Field(..., description="True when every edge of the snapshot would be kept.")
    dropped_edges: List[Tuple[str, str]] = Field(
        default_factory=list, description="Edges a replace would drop, in snapshot order."
    )
    cycles: List[List[str]] = Field(
        default_factory=list,
        description="Dependency cycles in the snapshot, each listed from its earliest item.",
    )
