"""Mutable directed acyclic graph of "blocks" constraints between items."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)


class Rejection(str, Enum):
    """Reason codes for mutations the graph declined to apply."""

    SELF_LOOP = "self_loop"
    DUPLICATE = "duplicate"
    CYCLE = "cycle"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class MutationResult:
    """Outcome of a graph mutation; truthy only when the graph changed."""

    ok: bool
    reason: Rejection | None = None

    def __bool__(self) -> bool:
        return self.ok


APPLIED = MutationResult(ok=True)


def _rejected(reason: Rejection) -> MutationResult:
    return MutationResult(ok=False, reason=reason)


class InvariantViolationError(RuntimeError):
    """Raised when a topological sort cannot cover every node.

    This only happens if an edge bypassed the cycle check, so it signals a
    bug in the mutation layer rather than bad caller input.
    """

    def __init__(self, ordered: Sequence[str], unsorted: Sequence[str]) -> None:
        self.ordered = list(ordered)
        self.unsorted = list(unsorted)
        super().__init__(
            f"Topological sort covered {len(self.ordered)} of "
            f"{len(self.ordered) + len(self.unsorted)} nodes; "
            f"cycle among {self.unsorted!r}"
        )


class ConstraintGraph:
    """Items plus "blocker must come before blocked" edges, kept acyclic.

    Each node maps to the ordered set of its direct blockers. Dependents are
    derived by scanning that map. Node insertion order is preserved and used
    to break ties, so every query is deterministic for a given history.
    """

    def __init__(self) -> None:
        self._blockers: dict[str, dict[str, None]] = {}

    # -- membership -------------------------------------------------------

    @property
    def nodes(self) -> tuple[str, ...]:
        """All node identifiers in insertion order."""

        return tuple(self._blockers)

    @property
    def edge_count(self) -> int:
        return sum(len(blockers) for blockers in self._blockers.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._blockers

    def __len__(self) -> int:
        return len(self._blockers)

    def add_node(self, node_id: str) -> None:
        """Register ``node_id`` with no blockers; repeated calls are no-ops."""

        if node_id not in self._blockers:
            self._blockers[node_id] = {}

    def remove_node(self, node_id: str) -> MutationResult:
        """Drop ``node_id`` together with every edge that touches it."""

        if node_id not in self._blockers:
            return _rejected(Rejection.UNKNOWN)

        del self._blockers[node_id]
        for blockers in self._blockers.values():
            blockers.pop(node_id, None)
        return APPLIED

    # -- edges ------------------------------------------------------------

    def add_edge(self, blocker: str, blocked: str) -> MutationResult:
        """Record that ``blocker`` must be ordered before ``blocked``.

        Self loops, duplicates and edges that would close a cycle are
        rejected without touching the graph. Unknown endpoints are created
        only once the edge is accepted.
        """

        if blocker == blocked:
            return _rejected(Rejection.SELF_LOOP)
        if blocker in self._blockers.get(blocked, ()):
            return _rejected(Rejection.DUPLICATE)
        if self.would_create_cycle(blocker, blocked):
            return _rejected(Rejection.CYCLE)

        self.add_node(blocker)
        self.add_node(blocked)
        self._blockers[blocked][blocker] = None
        return APPLIED

    def remove_edge(self, blocker: str, blocked: str) -> MutationResult:
        blockers = self._blockers.get(blocked)
        if blockers is None or blocker not in blockers:
            return _rejected(Rejection.UNKNOWN)
        del blockers[blocker]
        return APPLIED

    def would_create_cycle(self, blocker: str, blocked: str) -> bool:
        """Return ``True`` if ``blocked`` already reaches ``blocker`` forward."""

        return self.can_reach_forward(blocked, blocker)

    # -- queries ----------------------------------------------------------

    def get_dependencies(self, node_id: str) -> set[str]:
        """Direct blockers of ``node_id`` (empty for unknown nodes)."""

        return set(self._blockers.get(node_id, ()))

    def get_dependents(self, node_id: str) -> set[str]:
        """Nodes that list ``node_id`` as a direct blocker."""

        return set(self._iter_dependents(node_id))

    def get_all_edges(self) -> list[tuple[str, str]]:
        """Every ``(blocker, blocked)`` pair currently stored."""

        return [
            (blocker, blocked)
            for blocked, blockers in self._blockers.items()
            for blocker in blockers
        ]

    def can_reach_forward(self, start: str, target: str) -> bool:
        """Whether ``target`` is reachable from ``start`` through dependents."""

        return self._reachable(start, target, self._iter_dependents)

    def can_reach(self, start: str, target: str) -> bool:
        """Whether ``target`` is reachable from ``start`` through blockers."""

        return self._reachable(start, target, lambda node: self._blockers.get(node, ()))

    def _iter_dependents(self, node_id: str) -> Iterable[str]:
        for candidate, blockers in self._blockers.items():
            if node_id in blockers:
                yield candidate

    @staticmethod
    def _reachable(
        start: str, target: str, neighbours: Callable[[str], Iterable[str]]
    ) -> bool:
        if start == target:
            return True

        visited: set[str] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            for neighbour in neighbours(current):
                if neighbour == target:
                    return True
                if neighbour not in visited:
                    stack.append(neighbour)
        return False

    # -- ordering ---------------------------------------------------------

    def topological_sort(self) -> list[str]:
        """Order every node so each blocker precedes the nodes it blocks.

        Kahn's algorithm with insertion-order tie breaking. Raises
        :class:`InvariantViolationError` instead of returning a partial
        ordering if a cycle slipped into the graph.
        """

        in_degree = {node: len(blockers) for node, blockers in self._blockers.items()}
        dependents: dict[str, list[str]] = {node: [] for node in self._blockers}
        for node, blockers in self._blockers.items():
            for blocker in blockers:
                dependents[blocker].append(node)

        queue = deque(node for node, degree in in_degree.items() if degree == 0)
        ordered: list[str] = []
        while queue:
            node = queue.popleft()
            ordered.append(node)
            for dependent in dependents[node]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    queue.append(dependent)

        if len(ordered) != len(self._blockers):
            emitted = set(ordered)
            unsorted = [node for node in self._blockers if node not in emitted]
            logger.error(
                "Cycle detected in constraint graph; %d node(s) cannot be ordered: %s",
                len(unsorted),
                unsorted,
            )
            raise InvariantViolationError(ordered, unsorted)

        return ordered

    def can_move_to(
        self, node_id: str, target_index: int, candidate_order: Sequence[str]
    ) -> bool:
        """Check whether ``node_id`` may sit at ``target_index``.

        Blockers found in ``candidate_order`` must sit strictly before the
        target index, dependents at or after it. Items missing from the
        candidate order are ignored. Positions are read from the order as
        given, before the moved item is taken out of it.
        """

        positions: dict[str, int] = {}
        for index, item in enumerate(candidate_order):
            positions.setdefault(item, index)

        for blocker in self._blockers.get(node_id, ()):
            position = positions.get(blocker)
            if position is not None and position >= target_index:
                return False

        for dependent in self._iter_dependents(node_id):
            position = positions.get(dependent)
            if position is not None and position < target_index:
                return False

        return True

    # -- serialized form --------------------------------------------------

    def to_dict(self) -> dict[str, list[Any]]:
        """Plain ``{"nodes": [...], "edges": [[blocker, blocked], ...]}`` form."""

        return {
            "nodes": list(self._blockers),
            "edges": [[blocker, blocked] for blocker, blocked in self.get_all_edges()],
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Iterable[Any]]) -> "ConstraintGraph":
        """Rebuild a graph by replaying ``add_node`` then ``add_edge``.

        Edges rejected during replay are dropped, so a hand-edited payload
        that closes a cycle loses that edge.
        """

        graph = cls()
        graph.replay(payload.get("nodes", ()), payload.get("edges", ()))
        return graph

    def replay(
        self, nodes: Iterable[str], edges: Iterable[Sequence[str]]
    ) -> list[tuple[str, str]]:
        """Apply nodes and edges in order, returning the edges that were dropped."""

        for node_id in nodes:
            self.add_node(node_id)

        dropped: list[tuple[str, str]] = []
        for blocker, blocked in edges:
            result = self.add_edge(blocker, blocked)
            if not result:
                logger.debug(
                    "Dropped edge %s -> %s during replay: %s",
                    blocker,
                    blocked,
                    result.reason.value if result.reason else "rejected",
                )
                dropped.append((blocker, blocked))
        return dropped

    def clear(self) -> None:
        self._blockers.clear()


__all__ = [
    "APPLIED",
    "ConstraintGraph",
    "InvariantViolationError",
    "MutationResult",
    "Rejection",
]
