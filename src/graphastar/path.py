from __future__ import annotations

from collections.abc import Iterable
from typing import Generic

from .core.types import S as State
from .errors import InvalidStateError
from .graph import Edge, Node


class Path(Generic[State]):
    """Immutable route from the search root, with accumulated cost and labels.

    ``labels`` holds one entry per traversed edge; an edge without a label
    contributes ``""``.
    """

    __slots__ = ("_nodes", "_labels", "_cost")

    def __init__(
        self,
        nodes: Iterable[Node[State]],
        cost: float = 0.0,
        labels: Iterable[str] = (),
    ) -> None:
        self._nodes: tuple[Node[State], ...] = tuple(nodes)
        self._labels: tuple[str, ...] = tuple(labels)
        self._cost = float(cost)
        if self._nodes and len(self._labels) != len(self._nodes) - 1:
            raise ValueError(
                f"expected {len(self._nodes) - 1} labels, got {len(self._labels)}"
            )

    @classmethod
    def root(cls, node: Node[State]) -> Path[State]:
        return cls((node,))

    def push(self, edge: Edge[State]) -> Path[State]:
        label = edge.label if edge.label is not None else ""
        return Path(
            self._nodes + (edge.end,),
            self._cost + float(edge.cost),
            self._labels + (label,),
        )

    def weight(self) -> float:
        return self._cost

    @property
    def cost(self) -> float:
        return self._cost

    def peek(self) -> Node[State]:
        if not self._nodes:
            raise InvalidStateError()
        return self._nodes[-1]

    def get_path(self) -> tuple[Node[State], ...]:
        return self._nodes

    def get_label_path(self) -> tuple[str, ...]:
        return self._labels

    def states(self) -> list[State]:
        return [n.state() for n in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Path(states={self.states()!r}, cost={self._cost})"
