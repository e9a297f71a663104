from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..domain.dag import ConstraintGraph, MutationResult
from ..models.graph import (
    DependencyEdge,
    GraphReplaceResponse,
    GraphSnapshot,
    GraphValidationResponse,
    ItemRelations,
    MoveCheckRequest,
    MoveCheckResponse,
    OrderResponse,
)
from ..models.responses import OperationStatus
from ..services.graph_io import find_cycles, find_dropped_edges, snapshot_from_graph

logger = logging.getLogger(__name__)


def _status(result: MutationResult, applied: str) -> OperationStatus:
    if result:
        return OperationStatus(status=applied)
    return OperationStatus(status="unchanged", reason=result.reason)


@dataclass
class AddItemUseCase:
    """Register an item so it takes part in ordering."""

    graph: ConstraintGraph

    async def __call__(self, item_id: str) -> OperationStatus:
        self.graph.add_node(item_id)
        return OperationStatus(status="ok")


@dataclass
class RemoveItemUseCase:
    """Remove an item and every dependency that mentions it."""

    graph: ConstraintGraph

    async def __call__(self, item_id: str) -> OperationStatus:
        return _status(self.graph.remove_node(item_id), "removed")


@dataclass
class AddDependencyUseCase:
    """Record that one item blocks another, logging rejected attempts."""

    graph: ConstraintGraph

    async def __call__(self, edge: DependencyEdge) -> OperationStatus:
        result = self.graph.add_edge(edge.blocker, edge.blocked)
        if not result:
            logger.warning(
                "Cannot add dependency %s -> %s: %s",
                edge.blocker,
                edge.blocked,
                result.reason.value if result.reason else "rejected",
            )
            return OperationStatus(status="rejected", reason=result.reason)
        return OperationStatus(status="ok")


@dataclass
class RemoveDependencyUseCase:
    graph: ConstraintGraph

    async def __call__(self, edge: DependencyEdge) -> OperationStatus:
        return _status(self.graph.remove_edge(edge.blocker, edge.blocked), "removed")


@dataclass
class GetItemRelationsUseCase:
    """Return the direct blockers and dependents of an item."""

    graph: ConstraintGraph

    async def __call__(self, item_id: str) -> ItemRelations:
        order = {node: index for index, node in enumerate(self.graph.nodes)}
        return ItemRelations(
            item_id=item_id,
            dependencies=sorted(self.graph.get_dependencies(item_id), key=order.__getitem__),
            dependents=sorted(self.graph.get_dependents(item_id), key=order.__getitem__),
        )


@dataclass
class ListDependenciesUseCase:
    graph: ConstraintGraph

    async def __call__(self) -> List[DependencyEdge]:
        return [
            DependencyEdge(blocker=blocker, blocked=blocked)
            for blocker, blocked in self.graph.get_all_edges()
        ]


@dataclass
class GetOrderUseCase:
    """Return every item in an order that honours all dependencies."""

    graph: ConstraintGraph

    async def __call__(self) -> OrderResponse:
        return OrderResponse(order=self.graph.topological_sort())


@dataclass
class CheckMoveUseCase:
    """Decide whether an item may be dropped at a proposed position."""

    graph: ConstraintGraph

    async def __call__(self, request: MoveCheckRequest) -> MoveCheckResponse:
        allowed = self.graph.can_move_to(
            request.item_id, request.target_index, request.candidate_order
        )
        return MoveCheckResponse(allowed=allowed)


@dataclass
class ExportGraphUseCase:
    graph: ConstraintGraph

    async def __call__(self) -> GraphSnapshot:
        return snapshot_from_graph(self.graph)


@dataclass
class ReplaceGraphUseCase:
    """Discard the current graph contents and replay a snapshot into it."""

    graph: ConstraintGraph

    async def __call__(self, snapshot: GraphSnapshot) -> GraphReplaceResponse:
        self.graph.clear()
        dropped: Sequence[tuple[str, str]] = self.graph.replay(snapshot.nodes, snapshot.edges)
        if dropped:
            logger.warning("Replay dropped %d edge(s): %s", len(dropped), list(dropped))
        current = snapshot_from_graph(self.graph)
        return GraphReplaceResponse(
            nodes=current.nodes, edges=current.edges, dropped_edges=list(dropped)
        )


@dataclass
class ValidateGraphUseCase:
    """Report what replacing the graph with a snapshot would drop, without applying it."""

    async def __call__(self, snapshot: GraphSnapshot) -> GraphValidationResponse:
        dropped = find_dropped_edges(snapshot)
        return GraphValidationResponse(
            lossless=not dropped, dropped_edges=dropped, cycles=find_cycles(snapshot)
        )


__all__ = [
    "AddDependencyUseCase",
    "AddItemUseCase",
    "CheckMoveUseCase",
    "ExportGraphUseCase",
    "GetItemRelationsUseCase",
    "GetOrderUseCase",
    "ListDependenciesUseCase",
    "RemoveDependencyUseCase",
    "RemoveItemUseCase",
    "ReplaceGraphUseCase",
    "ValidateGraphUseCase",
]
