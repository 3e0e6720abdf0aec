import contextlib
import heapq
import io
import logging
import math
import random
import unittest

from graphastar.cli.compare import main as compare_main
from graphastar.errors import ExpansionLimitReached, NoPathFound, SearchTimeout
from graphastar.graph import CachedHeuristic, StaticNode, zero_heuristic
from graphastar.logging import get_logger
from graphastar.scenarios import (
    CITY_HEURISTIC,
    build_city_graph,
    scenario_cities,
    scenario_cycle,
    scenario_dead_end,
    scenario_triangle,
)
from graphastar.search import AStarSearch, SearchOutcome, SearchParams, astar_search

QUIET = get_logger("graphastar.tests", level=logging.WARNING)


def random_dag(n, seed):
    """Forward-only random graph with a guaranteed 0 -> n-1 chain."""
    rng = random.Random(seed)
    nodes = [StaticNode(i, zero_heuristic) for i in range(n)]
    adj = {i: [] for i in range(n)}
    for i in range(n - 1):
        targets = {i + 1} | {rng.randrange(i + 1, n) for _ in range(2)}
        for j in sorted(targets):
            cost = float(rng.randint(1, 9))
            nodes[i].connect(nodes[j], cost)
            adj[i].append((j, cost))
    return nodes, adj


def dijkstra(adj, src, dst):
    dist = {src: 0.0}
    pq = [(0.0, src)]
    while pq:
        d, u = heapq.heappop(pq)
        if u == dst:
            return d
        if d > dist.get(u, math.inf):
            continue
        for v, c in adj[u]:
            if d + c < dist.get(v, math.inf):
                dist[v] = d + c
                heapq.heappush(pq, (d + c, v))
    return math.inf


class TestScenarios(unittest.TestCase):
    def test_triangle(self):
        sc = scenario_triangle()
        path = astar_search(sc.root, sc.is_goal, logger=QUIET)
        self.assertEqual(path.states(), [0, 3])
        self.assertEqual(path.weight(), 1.0)

    def test_dead_end_reports_no_path(self):
        sc = scenario_dead_end()
        with self.assertRaises(NoPathFound):
            astar_search(sc.root, sc.is_goal, logger=QUIET)
        result = AStarSearch(sc.root, sc.is_goal, logger=QUIET).run()
        self.assertEqual(result.outcome, SearchOutcome.NOT_FOUND)
        self.assertIsNone(result.path)
        self.assertFalse(result.found)
        self.assertEqual(result.stats.iterations, 1)

    def test_cycle_stops_at_deadline(self):
        sc = scenario_cycle()
        with self.assertRaises(SearchTimeout) as ctx:
            astar_search(sc.root, sc.is_goal, timeout_ms=30, logger=QUIET)
        self.assertEqual(str(ctx.exception), "AStar.Error: Request timeout")
        result = AStarSearch(
            sc.root, sc.is_goal, params=SearchParams(timeout_ms=30), logger=QUIET
        ).run()
        self.assertEqual(result.outcome, SearchOutcome.TIMEOUT)
        self.assertIsNone(result.path)
        self.assertGreater(result.stats.iterations, 1)
        self.assertGreaterEqual(result.stats.runtime_ms, 30)

    def test_cycle_with_closed_set_exhausts(self):
        sc = scenario_cycle()
        result = AStarSearch(
            sc.root, sc.is_goal, params=SearchParams(closed_set=True), logger=QUIET
        ).run()
        self.assertEqual(result.outcome, SearchOutcome.NOT_FOUND)
        self.assertEqual(result.stats.expansions, 2)

    def test_cities_optimal_route(self):
        sc = scenario_cities()
        path = astar_search(sc.root, sc.is_goal, logger=QUIET)
        self.assertEqual(path.states(), ["gothenburg", "boras", "jonkoping", "stockholm"])
        self.assertEqual(path.weight(), 28.0)
        self.assertEqual(
            path.get_label_path(),
            ("gothenburg->boras", "boras->jonkoping", "jonkoping->stockholm"),
        )

    def test_cities_from_every_start(self):
        nodes = build_city_graph()
        for city, node in nodes.items():
            path = astar_search(node, lambda s: s == "stockholm", logger=QUIET)
            self.assertEqual(path.states()[-1], "stockholm")
            self.assertGreaterEqual(path.weight(), CITY_HEURISTIC[city])

    def test_root_satisfying_goal(self):
        sc = scenario_cycle()
        path = astar_search(sc.root, lambda s: s == "A", logger=QUIET)
        self.assertEqual(path.states(), ["A"])
        self.assertEqual(path.weight(), 0.0)
        self.assertEqual(path.get_label_path(), ())


class TestSearchDriver(unittest.TestCase):
    def test_matches_dijkstra_on_random_dags(self):
        for seed in range(5):
            nodes, adj = random_dag(10, seed)
            goal = len(nodes) - 1
            expected = dijkstra(adj, 0, goal)
            for closed in (False, True):
                path = astar_search(
                    nodes[0],
                    lambda s, g=goal: s == g,
                    params=SearchParams(closed_set=closed),
                    logger=QUIET,
                )
                self.assertAlmostEqual(path.weight(), expected)
                self.assertEqual(path.states()[0], 0)
                self.assertEqual(path.states()[-1], goal)

    def test_heuristic_guides_expansion(self):
        # line 0 - 1 - ... - 9 with a costly branch off the root
        h = CachedHeuristic(lambda s: 0.0 if isinstance(s, str) else float(9 - s))
        line = [StaticNode(i, h) for i in range(10)]
        for a, b in zip(line, line[1:]):
            a.connect(b, 1)
        decoy = StaticNode("decoy", h)
        line[0].connect(decoy, 50)
        path = astar_search(line[0], lambda s: s == 9, logger=QUIET)
        self.assertEqual(path.weight(), 9.0)
        self.assertNotIn("decoy", path.states())

    def test_expansion_limit(self):
        sc = scenario_cycle()
        params = SearchParams(timeout_ms=None, max_expansions=5)
        result = AStarSearch(sc.root, sc.is_goal, params=params, logger=QUIET).run()
        self.assertEqual(result.outcome, SearchOutcome.EXPANSION_LIMIT)
        self.assertEqual(result.stats.expansions, 5)
        with self.assertRaises(ExpansionLimitReached):
            result.unwrap()

    def test_graph_mutation_is_visible(self):
        a = StaticNode("a", zero_heuristic)
        b = StaticNode("b", zero_heuristic)
        a.connect(b, 1)
        with self.assertRaises(NoPathFound):
            astar_search(a, lambda s: s == "c", logger=QUIET)
        b.connect(StaticNode("c", zero_heuristic), 2)
        path = astar_search(a, lambda s: s == "c", logger=QUIET)
        self.assertEqual(path.states(), ["a", "b", "c"])
        self.assertEqual(path.weight(), 3.0)

    def test_equal_cost_goals_only_cost_is_asserted(self):
        h = zero_heuristic
        root = StaticNode("r", h)
        for name in ("g1", "g2"):
            root.connect(StaticNode(name, h), 2)
        path = astar_search(root, lambda s: s.startswith("g"), logger=QUIET)
        self.assertEqual(path.weight(), 2.0)

    def test_logs_goal(self):
        sc = scenario_triangle()
        logger = logging.getLogger("graphastar.tests.capture")
        with self.assertLogs(logger, level="INFO") as cm:
            AStarSearch(sc.root, sc.is_goal, logger=logger).run()
        self.assertTrue(any("goal reached" in line for line in cm.output))


class TestCompareCli(unittest.TestCase):
    def test_csv_output(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            compare_main(["triangle", "dead_end", "cities", "--timeout_ms", "100"])
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(
            lines[0], "scenario,outcome,cost,iterations,expansions,runtime_ms,states"
        )
        rows = [line.split(",") for line in lines[1:]]
        self.assertEqual(rows[0][:3], ["triangle", "found", "1.0"])
        self.assertEqual(rows[0][-1], "0/3")
        self.assertEqual(rows[1][:3], ["dead_end", "not_found", ""])
        self.assertEqual(rows[2][-1], "gothenburg/boras/jonkoping/stockholm")

    def test_unknown_scenario(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                compare_main(["nope"])


if __name__ == "__main__":
    unittest.main()
