import argparse
import logging

from graphastar.logging import get_logger
from graphastar.scenarios import ALL_SCENARIOS
from graphastar.search import AStarSearch, SearchParams


def run_scenario(name, params):
    sc = ALL_SCENARIOS[name]()
    logger = get_logger("graphastar.cli", level=logging.WARNING)
    result = AStarSearch(sc.root, sc.is_goal, params=params, logger=logger).run()
    st = result.stats
    return {
        "scenario": sc.name,
        "outcome": result.outcome.value,
        "cost": (result.path.weight() if result.path else None),
        "iterations": st.iterations,
        "expansions": st.expansions,
        "runtime_ms": round(st.runtime_ms, 3),
        "states": ("/".join(str(s) for s in result.path.states()) if result.path else ""),
    }


def main(argv=None):
    p = argparse.ArgumentParser(description="Run A* on the bundled sample graphs")
    p.add_argument('scenarios', nargs='*', help='any of: ' + ', '.join(sorted(ALL_SCENARIOS)))
    p.add_argument('--timeout_ms', type=float, default=4000.0)
    p.add_argument('--max_expansions', type=int, default=None)
    p.add_argument('--closed_set', action='store_true')
    args = p.parse_args(argv)
    names = args.scenarios or sorted(ALL_SCENARIOS)
    unknown = [n for n in names if n not in ALL_SCENARIOS]
    if unknown:
        p.error(f"unknown scenario(s): {', '.join(unknown)}")
    params = SearchParams(
        timeout_ms=args.timeout_ms, max_expansions=args.max_expansions, closed_set=args.closed_set
    )
    keys = ['scenario', 'outcome', 'cost', 'iterations', 'expansions', 'runtime_ms', 'states']
    print(','.join(keys))
    for name in names:
        row = run_scenario(name, params)
        print(','.join('' if row[k] is None else str(row[k]) for k in keys))

if __name__ == "__main__":
    main()
