"""Graph abstraction: nodes expose edges, a state and a heuristic estimate.

Nodes are shared references, so a graph may contain cycles and diamonds.
``StaticNode.add_edge`` mutates the node in place; a search that is running
will see the new edge the next time it expands that node. Build the graph
before searching, or serialize mutation against searches yourself.
"""
from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from .core.types import HeuristicFn, S as State

_StateCo = TypeVar("_StateCo", covariant=True)
_K = TypeVar("_K", bound=Hashable)


class Node(Protocol[_StateCo]):
    def children(self) -> Sequence[Edge]: ...

    def state(self) -> _StateCo: ...

    def heuristic(self) -> float: ...


@dataclass(frozen=True, eq=False)
class Edge(Generic[State]):
    """Directed weighted transition to ``end``; ``label`` is for reporting only."""

    cost: float
    end: Node[State] = field(repr=False)
    label: str | None = None


class StaticNode(Generic[State]):
    """Node with an explicit, appendable edge list and a shared heuristic."""

    def __init__(
        self,
        state: State,
        h: HeuristicFn[State],
        children: list[Edge[State]] | None = None,
    ) -> None:
        self._state = state
        self.h = h
        self._children: list[Edge[State]] = children if children is not None else []

    def children(self) -> list[Edge[State]]:
        return self._children

    def state(self) -> State:
        return self._state

    def heuristic(self) -> float:
        return float(self.h(self._state))

    def add_edge(self, edge: Edge[State]) -> None:
        self._children.append(edge)

    def connect(self, end: Node[State], cost: float, label: str | None = None) -> Edge[State]:
        edge = Edge(cost, end, label)
        self.add_edge(edge)
        return edge

    def __repr__(self) -> str:
        return f"StaticNode({self._state!r}, edges={len(self._children)})"


class CachedHeuristic(Generic[_K]):
    """Memoizing heuristic capability; ``calls`` counts evaluations of ``fn``."""

    def __init__(self, fn: Callable[[_K], float]) -> None:
        self.fn = fn
        self.cache: dict[_K, float] = {}
        self.calls = 0

    def __call__(self, state: _K) -> float:
        if state not in self.cache:
            self.calls += 1
            self.cache[state] = float(self.fn(state))
        return self.cache[state]


def zero_heuristic(_state: object) -> float:
    return 0.0
