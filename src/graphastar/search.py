from __future__ import annotations

from dataclasses import dataclass, field
import enum
import time
from typing import Any, Generic

from .core.types import GoalTest, S as State
from .errors import AStarError, ExpansionLimitReached, NoPathFound, SearchTimeout
from .frontier import PriorityQueue
from .graph import Node
from .logging import get_logger as _get_logger
from .path import Path

DEFAULT_TIMEOUT_MS = 4000.0


class SearchOutcome(enum.Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    EXPANSION_LIMIT = "expansion_limit"


@dataclass
class SearchStats:
    iterations: int = 0
    expansions: int = 0
    generated: int = 0
    max_frontier: int = 0
    runtime_ms: float = 0.0


@dataclass
class SearchParams:
    """Knobs for a single search.

    timeout_ms: wall-clock deadline polled once per dequeue; ``None`` disables it.
    max_expansions: stop after this many expansions.
    closed_set: skip states that were already expanded (states must be hashable).
      Off by default, so cyclic graphs are re-expanded until the deadline.
    log_every: log progress every N expansions.
    """

    timeout_ms: float | None = DEFAULT_TIMEOUT_MS
    max_expansions: int | None = None
    closed_set: bool = False
    log_every: int | None = None


@dataclass
class SearchResult(Generic[State]):
    outcome: SearchOutcome
    path: Path[State] | None = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    def unwrap(self) -> Path[State]:
        """Return the goal path or raise the error matching the outcome."""
        if self.outcome is SearchOutcome.FOUND:
            assert self.path is not None
            return self.path
        raise _OUTCOME_ERRORS[self.outcome]()


_OUTCOME_ERRORS: dict[SearchOutcome, type[AStarError]] = {
    SearchOutcome.NOT_FOUND: NoPathFound,
    SearchOutcome.TIMEOUT: SearchTimeout,
    SearchOutcome.EXPANSION_LIMIT: ExpansionLimitReached,
}


def _estimate(p: Path[Any]) -> float:
    return p.weight() + p.peek().heuristic()


def _compare(a: Path[Any], b: Path[Any]) -> float:
    return _estimate(a) - _estimate(b)


class AStarSearch(Generic[State]):
    """Best-first search over ``Node`` graphs ranked by ``cost + heuristic``.

    The frontier holds whole paths. Without ``closed_set`` no visited set is
    kept: a state reachable along several routes is expanded once per route,
    and a cycle without a goal only ends at the deadline.
    """

    def __init__(
        self,
        root: Node[State],
        goal: GoalTest[State],
        *,
        params: SearchParams | None = None,
        logger: Any | None = None,
    ) -> None:
        cfg = params or SearchParams()
        assert cfg.timeout_ms is None or cfg.timeout_ms >= 0, "timeout_ms must be >= 0"
        assert cfg.max_expansions is None or cfg.max_expansions > 0, "max_expansions must be > 0"
        self.root = root
        self.goal = goal
        self.timeout_ms = cfg.timeout_ms
        self.max_expansions = cfg.max_expansions
        self.closed_set = cfg.closed_set
        self.log_every = cfg.log_every
        self.logger = logger or _get_logger(__name__)
        self.stats = SearchStats()

    def _finish(
        self, outcome: SearchOutcome, t0: float, path: Path[State] | None = None
    ) -> SearchResult[State]:
        self.stats.runtime_ms = (time.perf_counter() - t0) * 1000.0
        return SearchResult(outcome, path, self.stats)

    def run(self) -> SearchResult[State]:
        self.stats = SearchStats()
        frontier: PriorityQueue[Path[State]] = PriorityQueue(_compare)
        frontier.add(Path.root(self.root))
        closed: set[Any] = set()
        t0 = time.perf_counter()
        while not frontier.is_empty():
            self.stats.max_frontier = max(self.stats.max_frontier, len(frontier))
            p = frontier.dequeue()
            self.stats.iterations += 1
            node = p.peek()
            state = node.state()
            if self.goal(state):
                result = self._finish(SearchOutcome.FOUND, t0, p)
                self.logger.info(
                    "goal reached: iterations=%(it)d, cost=%(cost)s, time=%(ms).1fms",
                    {"it": self.stats.iterations, "cost": p.weight(), "ms": self.stats.runtime_ms},
                )
                return result
            if self.timeout_ms is not None:
                if (time.perf_counter() - t0) * 1000.0 > self.timeout_ms:
                    self.logger.info(
                        "timeout_ms=%s reached after %d iterations; stopping search",
                        self.timeout_ms,
                        self.stats.iterations,
                    )
                    return self._finish(SearchOutcome.TIMEOUT, t0)
            if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
                self.logger.info("max_expansions reached; stopping search")
                return self._finish(SearchOutcome.EXPANSION_LIMIT, t0)
            if self.closed_set:
                if state in closed:
                    continue
                closed.add(state)
            self.stats.expansions += 1
            if self.log_every and (self.stats.expansions % self.log_every == 0):
                self.logger.info(
                    "expansions=%(exp)d, generated=%(gen)d, frontier=%(fr)d",
                    {
                        "exp": self.stats.expansions,
                        "gen": self.stats.generated,
                        "fr": len(frontier),
                    },
                )
            for edge in node.children():
                self.stats.generated += 1
                frontier.add(p.push(edge))
        self.logger.info("frontier exhausted after %d iterations; no path", self.stats.iterations)
        return self._finish(SearchOutcome.NOT_FOUND, t0)


def astar_search(
    root: Node[State],
    goal: GoalTest[State],
    *,
    timeout_ms: float | None = DEFAULT_TIMEOUT_MS,
    params: SearchParams | None = None,
    logger: Any | None = None,
) -> Path[State]:
    """Return the first goal-satisfying path dequeued.

    Raises ``SearchTimeout`` when the deadline passes, ``NoPathFound`` when the
    frontier runs dry and ``ExpansionLimitReached`` when the expansion cap is hit.
    ``params`` takes precedence over ``timeout_ms``.
    """
    cfg = params or SearchParams(timeout_ms=timeout_ms)
    return AStarSearch(root, goal, params=cfg, logger=logger).run().unwrap()
