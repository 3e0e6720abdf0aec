from graphastar import NoPathFound, SearchParams, SearchTimeout, astar_search
from graphastar.scenarios import scenario_cities, scenario_cycle, scenario_dead_end

if __name__ == "__main__":
    sc = scenario_cities()
    path = astar_search(sc.root, sc.is_goal)
    print(f"{sc.name}: cost={path.weight()}, route={' -> '.join(path.states())}")
    print(f"  via {list(path.get_label_path())}")

    for sc in (scenario_dead_end(), scenario_cycle()):
        try:
            astar_search(sc.root, sc.is_goal, params=SearchParams(timeout_ms=200))
        except (NoPathFound, SearchTimeout) as exc:
            print(f"{sc.name}: {exc}")
