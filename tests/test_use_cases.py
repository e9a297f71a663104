"""Tests for the application use cases around the constraint graph."""

from __future__ import annotations

import logging

import pytest

from tododag.application.graph import (
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
from tododag.domain.dag import ConstraintGraph, Rejection
from tododag.models.graph import DependencyEdge, GraphSnapshot, MoveCheckRequest

pytestmark = pytest.mark.asyncio


async def test_add_and_remove_item(graph: ConstraintGraph) -> None:
    assert (await AddItemUseCase(graph)("todo-1")).status == "ok"
    assert graph.nodes == ("todo-1",)

    removed = await RemoveItemUseCase(graph)("todo-1")
    again = await RemoveItemUseCase(graph)("todo-1")

    assert removed.model_dump() == {"status": "removed"}
    assert again.model_dump() == {"status": "unchanged", "reason": Rejection.UNKNOWN}


async def test_add_dependency_logs_and_reports_cycle(
    chain: ConstraintGraph, caplog: pytest.LogCaptureFixture
) -> None:
    use_case = AddDependencyUseCase(chain)

    with caplog.at_level(logging.WARNING, logger="tododag.application.graph"):
        status = await use_case(DependencyEdge(blocker="T3", blocked="T1"))

    assert status.model_dump() == {"status": "rejected", "reason": Rejection.CYCLE}
    assert "Cannot add dependency T3 -> T1: cycle" in caplog.text
    assert chain.get_all_edges() == [("T1", "T2"), ("T2", "T3")]


async def test_add_and_remove_dependency(graph: ConstraintGraph) -> None:
    edge = DependencyEdge(blocker="a", blocked="b")

    assert (await AddDependencyUseCase(graph)(edge)).status == "ok"
    assert await ListDependenciesUseCase(graph)() == [edge]

    assert (await RemoveDependencyUseCase(graph)(edge)).status == "removed"
    missing = await RemoveDependencyUseCase(graph)(edge)
    assert missing.status == "unchanged"
    assert missing.reason is Rejection.UNKNOWN


async def test_item_relations_follow_insertion_order() -> None:
    graph = ConstraintGraph()
    for node in ["c", "a", "hub", "z", "b"]:
        graph.add_node(node)
    for blocker in ["a", "c"]:
        graph.add_edge(blocker, "hub")
    for blocked in ["b", "z"]:
        graph.add_edge("hub", blocked)

    relations = await GetItemRelationsUseCase(graph)("hub")

    assert relations.dependencies == ["c", "a"]
    assert relations.dependents == ["z", "b"]


async def test_order_and_move_check(chain: ConstraintGraph) -> None:
    order = await GetOrderUseCase(chain)()
    assert order.order == ["T1", "T2", "T3"]

    check = CheckMoveUseCase(chain)
    allowed = await check(
        MoveCheckRequest(item_id="T1", target_index=0, candidate_order=["T2", "T1", "T3"])
    )
    refused = await check(
        MoveCheckRequest(item_id="T3", target_index=0, candidate_order=["T3", "T1", "T2"])
    )

    assert allowed.allowed is True
    assert refused.allowed is False


async def test_export_and_replace_graph(chain: ConstraintGraph) -> None:
    exported = await ExportGraphUseCase(chain)()
    assert exported.nodes == ["T1", "T2", "T3"]

    replaced = await ReplaceGraphUseCase(chain)(
        GraphSnapshot(nodes=["x", "y"], edges=[("x", "y"), ("y", "x")])
    )

    assert replaced.nodes == ["x", "y"]
    assert replaced.edges == [("x", "y")]
    assert replaced.dropped_edges == [("y", "x")]
    assert chain.nodes == ("x", "y")


async def test_validate_graph_leaves_graph_untouched(chain: ConstraintGraph) -> None:
    report = await ValidateGraphUseCase()(
        GraphSnapshot(nodes=["x", "y"], edges=[("x", "y"), ("y", "x")])
    )

    assert report.lossless is False
    assert report.dropped_edges == [("y", "x")]
    assert report.cycles == [["x", "y"]]
    assert chain.nodes == ("T1", "T2", "T3")
