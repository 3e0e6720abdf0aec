"""graphastar: A* best-first search over caller-built state graphs.

Public API:
- astar_search / AStarSearch with SearchParams, SearchResult, SearchOutcome
- Node, Edge, StaticNode, CachedHeuristic
- Path, PriorityQueue
- AStarError and its subclasses
"""
from .errors import (
    AStarError,
    EmptyQueueError,
    ExpansionLimitReached,
    InvalidStateError,
    NoPathFound,
    SearchTimeout,
)
from .frontier import PriorityQueue
from .graph import CachedHeuristic, Edge, Node, StaticNode, zero_heuristic
from .path import Path
from .search import (
    AStarSearch,
    SearchOutcome,
    SearchParams,
    SearchResult,
    SearchStats,
    astar_search,
)
from . import scenarios

__all__ = [
    "astar_search", "AStarSearch", "SearchParams", "SearchResult", "SearchOutcome",
    "SearchStats", "Node", "Edge", "StaticNode", "CachedHeuristic", "zero_heuristic",
    "Path", "PriorityQueue", "AStarError", "SearchTimeout", "NoPathFound",
    "ExpansionLimitReached", "EmptyQueueError", "InvalidStateError", "scenarios",
]

__version__ = "0.1.0"
