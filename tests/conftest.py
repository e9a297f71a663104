"""Shared test fixtures and builders."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Iterable

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from tododag import main
from tododag.domain.dag import ConstraintGraph
from tododag.platform.wiring import get_graph


def make_graph(
    nodes: Iterable[str] = (), edges: Iterable[tuple[str, str]] = ()
) -> ConstraintGraph:
    """Return a graph with ``nodes`` added first, then ``edges`` in order."""

    graph = ConstraintGraph()
    for node in nodes:
        graph.add_node(node)
    for blocker, blocked in edges:
        assert graph.add_edge(blocker, blocked), f"fixture edge {blocker}->{blocked} rejected"
    return graph


@pytest.fixture
def graph() -> ConstraintGraph:
    return ConstraintGraph()


@pytest.fixture
def chain() -> ConstraintGraph:
    """``T1 -> T2 -> T3`` with the nodes registered up front."""

    return make_graph(["T1", "T2", "T3"], [("T1", "T2"), ("T2", "T3")])


@pytest.fixture
def app(graph: ConstraintGraph) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_graph: lambda: graph,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
