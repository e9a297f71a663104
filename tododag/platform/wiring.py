"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends, Request

from ..application.graph import (
    AddDependencyUseCase,
    AddItemUseCase,
    CheckMoveUseCase,
    ExportGraphUseCase,
    GetItemRelationsUseCase,
    GetOrderUseCase,
    ListDependenciesUseCase,
    RemoveDependencyUseCase,
    RemoveItemUseCase,
    ReplaceGraphUseCase,
    ValidateGraphUseCase,
)
from ..domain.dag import ConstraintGraph


def get_graph(request: Request) -> ConstraintGraph:
    """Return the graph owned by the running application."""

    graph = getattr(request.app.state, "graph", None)
    if graph is None:
        graph = ConstraintGraph()
        request.app.state.graph = graph
    return graph


def get_add_item_use_case(graph: ConstraintGraph = Depends(get_graph)) -> AddItemUseCase:
    return AddItemUseCase(graph)


def get_remove_item_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> RemoveItemUseCase:
    return RemoveItemUseCase(graph)


def get_item_relations_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> GetItemRelationsUseCase:
    return GetItemRelationsUseCase(graph)


def get_add_dependency_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> AddDependencyUseCase:
    return AddDependencyUseCase(graph)


def get_remove_dependency_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> RemoveDependencyUseCase:
    return RemoveDependencyUseCase(graph)


def get_list_dependencies_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> ListDependenciesUseCase:
    return ListDependenciesUseCase(graph)


def get_order_use_case(graph: ConstraintGraph = Depends(get_graph)) -> GetOrderUseCase:
    return GetOrderUseCase(graph)


def get_check_move_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> CheckMoveUseCase:
    return CheckMoveUseCase(graph)


def get_export_graph_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> ExportGraphUseCase:
    return ExportGraphUseCase(graph)


def get_replace_graph_use_case(
    graph: ConstraintGraph = Depends(get_graph),
) -> ReplaceGraphUseCase:
    return ReplaceGraphUseCase(graph)


def get_validate_graph_use_case() -> ValidateGraphUseCase:
    return ValidateGraphUseCase()


__all__ = [
    "get_graph",
    "get_add_item_use_case",
    "get_remove_item_use_case",
    "get_item_relations_use_case",
    "get_add_dependency_use_case",
    "get_remove_dependency_use_case",
    "get_list_dependencies_use_case",
    "get_order_use_case",
    "get_check_move_use_case",
    "get_export_graph_use_case",
    "get_replace_graph_use_case",
    "get_validate_graph_use_case",
]
