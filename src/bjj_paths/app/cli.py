# bjj_paths/app/cli.py
import argparse
import sys

from bjj_paths.app.build import build
from bjj_paths.app.controllers.pathfinder import MIN_WAYPOINTS
from bjj_paths.config.models import GraphByPath, PlannerModel, ScenarioModel
from bjj_paths.io.config import load_scenario


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="bjj-paths",
        description="Plan a route through selected positions of a BJJ position graph.",
    )
    p.add_argument("waypoints", nargs="+", help="Position ids or names to visit")
    p.add_argument("--graph", help="Graph-data JSON file (nodes + edges)")
    p.add_argument("--config", help="Scenario JSON file")
    p.add_argument("--category", help="Only use positions in this category")
    p.add_argument("--difficulty", help="Only use positions with this difficulty")
    p.add_argument("--order", choices=["nearest_neighbor", "as_given"])
    p.add_argument("--log", action="store_true", help="Emit JSON planner logs on stdout")
    return p.parse_args(argv)


def _scenario(args: argparse.Namespace) -> ScenarioModel:
    model = load_scenario(args.config) if args.config else ScenarioModel()
    update = {}
    if args.graph:
        update["graph"] = GraphByPath(file=args.graph)
    filters = {
        k: v
        for k, v in (("category", args.category), ("difficulty", args.difficulty))
        if v is not None
    }
    if filters:
        update["filters"] = model.filters.model_copy(update=filters)
    if args.order:
        update["planner"] = PlannerModel.model_validate(
            {**model.planner.model_dump(), "order": {"kind": args.order}}
        )
    return model.model_copy(update=update)


def _resolve(graph, token: str):
    node = graph.node(token)
    if node is not None:
        return node
    wanted = token.lower()
    return next((n for n in graph.nodes if n.name.lower() == wanted), None)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        app = build(_scenario(args), use_logging=args.log)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    pf = app.pathfinder
    for token in args.waypoints:
        node = _resolve(app.graph, token)
        if node is None:
            print(f"error: unknown position {token!r}", file=sys.stderr)
            return 2
        pf.select(node.id)
    if len(pf.selected) < MIN_WAYPOINTS:
        print(f"error: {pf.find_path().message}", file=sys.stderr)
        return 2

    outcome = pf.find_path()
    if not outcome.ok:
        print(outcome.message, file=sys.stderr)
        return 1

    for i, node in enumerate(outcome.path, start=1):
        print(f"{i:>3}. {node.name}")
    print(outcome.message)
    print(f"Estimated time: {outcome.stats.estimated_time:g} min")
    return 0


if __name__ == "__main__":
    sys.exit(main())
