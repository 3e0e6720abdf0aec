"""Error types raised by the search engine.

Every error shares the ``AStar.Error`` category and renders as
``"AStar.Error: <message>"``.
"""
from __future__ import annotations


class AStarError(Exception):
    name = "AStar.Error"
    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


class SearchTimeout(AStarError):
    """The deadline elapsed before a goal state was dequeued."""

    default_message = "Request timeout"


class NoPathFound(AStarError):
    """The frontier was exhausted without satisfying the goal."""

    default_message = "No path found"


class ExpansionLimitReached(AStarError):
    default_message = "Expansion limit reached"


class EmptyQueueError(AStarError, IndexError):
    default_message = "dequeue from an empty priority queue"


class InvalidStateError(AStarError):
    default_message = "peek on an empty path"
