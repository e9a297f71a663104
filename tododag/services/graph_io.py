"""Convert constraint graphs to and from their serialized form."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

import networkx as nx

from ..domain.dag import ConstraintGraph
from ..models.graph import GraphSnapshot


def snapshot_from_graph(graph: ConstraintGraph) -> GraphSnapshot:
    """Capture the nodes and edges of ``graph`` as a ``GraphSnapshot``."""

    return GraphSnapshot(nodes=list(graph.nodes), edges=graph.get_all_edges())


def load_graph_definitions(inputs_dir: Path) -> ConstraintGraph:
    """Read every JSON file in ``inputs_dir`` and replay them into one graph."""

    graph = ConstraintGraph()
    if not inputs_dir.is_dir():
        return graph

    for json_file in sorted(inputs_dir.glob("*.json")):
        _merge_definition(graph, json_file)
    return graph


def _merge_definition(graph: ConstraintGraph, json_file: Path) -> None:
    """Replay a single serialized graph file into ``graph``."""

    if not json_file.is_file():
        return

    with json_file.open("r", encoding="utf-8") as stream:
        payload = json.load(stream)

    if not isinstance(payload, Mapping):
        raise ValueError(f"Graph definition {json_file.name} must be a JSON object.")

    nodes = _extract_list(payload, "nodes")
    edges = _extract_list(payload, "edges")
    graph.replay(
        (_extract_name(node) for node in nodes),
        (_extract_pair(edge) for edge in edges),
    )


def _extract_list(payload: Mapping[str, object], key: str) -> Iterable[object]:
    """Return a list-like field from a mapping or an empty list when missing."""

    value = payload.get(key, [])
    if value is None:
        return []
    if isinstance(value, list):
        return value

    raise ValueError(f"Expected list for '{key}' but received {type(value)}")


def _extract_name(value: object) -> str:
    """Return an item identifier from a bare string or ``{"id": ...}`` mapping."""

    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        identifier = value.get("id")
        if isinstance(identifier, str):
            return identifier

    raise ValueError(f"Unable to extract item id from value: {value!r}")


def _extract_pair(value: object) -> tuple[str, str]:
    """Return ``(blocker, blocked)`` from a two item list or a mapping."""

    if isinstance(value, Mapping):
        value = [value.get("blocker"), value.get("blocked")]

    if isinstance(value, list) and len(value) == 2:
        blocker, blocked = value
        if isinstance(blocker, str) and isinstance(blocked, str):
            return blocker, blocked

    raise ValueError(f"Unable to extract (blocker, blocked) edge from value: {value!r}")


def build_graph(snapshot: GraphSnapshot) -> nx.DiGraph:
    """Create a NetworkX digraph with an edge from each blocker to what it blocks.

    The snapshot is exported verbatim, so the digraph may hold cycles that a
    replay would reject. Nodes that only appear in edges follow the listed
    ones, and every node carries its ``position``.
    """

    digraph = nx.DiGraph()
    for node in snapshot.nodes:
        digraph.add_node(node)

    for blocker, blocked in snapshot.edges:
        digraph.add_edge(blocker, blocked)

    for position, node in enumerate(digraph.nodes):
        digraph.nodes[node]["position"] = position

    return digraph


def find_dropped_edges(snapshot: GraphSnapshot) -> list[tuple[str, str]]:
    """Edges of ``snapshot`` that replaying it through the checks would drop."""

    return ConstraintGraph().replay(snapshot.nodes, snapshot.edges)


def find_cycles(snapshot: GraphSnapshot) -> list[list[str]]:
    """Dependency cycles in ``snapshot``, each starting at its earliest item."""

    digraph = build_graph(snapshot)
    position = nx.get_node_attributes(digraph, "position")

    cycles: list[list[str]] = []
    for cycle in nx.simple_cycles(digraph):
        start = min(range(len(cycle)), key=lambda index: position[cycle[index]])
        cycles.append(cycle[start:] + cycle[:start])

    return sorted(cycles, key=lambda cycle: [position[node] for node in cycle])


__all__ = [
    "build_graph",
    "find_cycles",
    "find_dropped_edges",
    "load_graph_definitions",
    "snapshot_from_graph",
]
