from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, cast

from .core.types import GoalTest, HeuristicFn
from .graph import StaticNode, zero_heuristic


@dataclass
class Scenario:
    name: str
    root: StaticNode[Any]
    is_goal: GoalTest[Any]
    meta: dict[str, Any]


def scenario_triangle() -> Scenario:
    """States 0 -> {4, 3} at cost 1 with a back edge 4 -> 0; goal is 3."""
    h = cast(HeuristicFn[int], zero_heuristic)
    n4 = StaticNode(4, h)
    n3 = StaticNode(3, h)
    root = StaticNode(0, h)
    root.connect(n4, 1)
    root.connect(n3, 1)
    n4.connect(root, 1)
    return Scenario(
        name="triangle",
        root=root,
        is_goal=cast(GoalTest[Any], lambda s: s == 3),
        meta={"kind": "numeric", "expected_cost": 1.0},
    )


# Straight-line estimates to stockholm.
CITY_HEURISTIC: dict[str, float] = {
    "gothenburg": math.sqrt(4 * 4 + 15 * 15),
    "malmo": math.sqrt(16 * 16 + 15 * 15),
    "varnamo": 32.0,
    "mellerud": 42.0 - 16.0,
    "boras": 14.0,
    "jonkoping": 15.0,
    "stockholm": 0.0,
}

CITY_ROADS: list[tuple[str, str, float]] = [
    ("gothenburg", "boras", 4),
    ("boras", "jonkoping", 8),
    ("stockholm", "boras", 15),
    ("jonkoping", "stockholm", 16),
    ("jonkoping", "gothenburg", 23),
    ("boras", "stockholm", 42),
    ("gothenburg", "malmo", 4),
    ("gothenburg", "varnamo", 8),
    ("jonkoping", "mellerud", 15),
    ("malmo", "boras", 16),
    ("varnamo", "jonkoping", 23),
    ("mellerud", "jonkoping", 42),
]


def build_city_graph() -> dict[str, StaticNode[str]]:
    def h(city: str) -> float:
        return CITY_HEURISTIC[city]

    heuristic = cast(HeuristicFn[str], h)
    nodes = {city: StaticNode(city, heuristic) for city in CITY_HEURISTIC}
    for src, dst, cost in CITY_ROADS:
        nodes[src].connect(nodes[dst], cost, label=f"{src}->{dst}")
    return nodes


def scenario_cities(start: str = "gothenburg", goal: str = "stockholm") -> Scenario:
    nodes = build_city_graph()
    return Scenario(
        name=f"cities_{start}_{goal}",
        root=nodes[start],
        is_goal=cast(GoalTest[Any], lambda s: s == goal),
        meta={"kind": "geo", "start": start, "goal": goal},
    )


def scenario_cycle() -> Scenario:
    """A <-> B with a goal that no state satisfies; only a deadline ends it."""
    h = cast(HeuristicFn[str], zero_heuristic)
    a = StaticNode("A", h)
    b = StaticNode("B", h)
    a.connect(b, 1, "a-b")
    b.connect(a, 1, "b-a")
    return Scenario(
        name="cycle",
        root=a,
        is_goal=cast(GoalTest[Any], lambda s: s == "Z"),
        meta={"kind": "cyclic"},
    )


def scenario_dead_end() -> Scenario:
    root = StaticNode("root", cast(HeuristicFn[str], zero_heuristic))
    return Scenario(
        name="dead_end",
        root=root,
        is_goal=cast(GoalTest[Any], lambda s: s == "elsewhere"),
        meta={"kind": "disconnected"},
    )


ALL_SCENARIOS = {
    "triangle": scenario_triangle,
    "cities": scenario_cities,
    "cycle": scenario_cycle,
    "dead_end": scenario_dead_end,
}
