# bjj_paths/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from bjj_paths.app.controllers.pathfinder import PathFinderHandler
from bjj_paths.app.protocols import PlannerHooks
from bjj_paths.config.models import ScenarioModel
from bjj_paths.domain.entities.graph import GraphData
from bjj_paths.domain.pathing.pathing_core import PathPlanner
from bjj_paths.domain.pathing.pathing_factory import build_planner
from bjj_paths.io.hooks import NoopHooks
from bjj_paths.io.planner_logging import PlannerLogging  # JSON logs
from bjj_paths.runtime.resources import resolve_graph


@dataclass
class App:
    config: ScenarioModel
    graph: GraphData  # after filters
    hooks: PlannerHooks
    planner: PathPlanner
    pathfinder: PathFinderHandler


def build(
    cfg: ScenarioModel | Mapping | None = None,
    *,
    graph: GraphData | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = ScenarioModel()
    else:
        model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph: explicit argument wins over the configured source
    full = graph if graph is not None else resolve_graph(model.graph, deps={})
    filtered = full.filtered(model.filters.category, model.filters.difficulty)

    # 2) Hooks
    hooks = (
        PlannerLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopHooks()
    )

    # 3) Planner & handler
    planner = build_planner(model.planner, hooks=hooks)
    pathfinder = PathFinderHandler(filtered, planner)

    return App(model, filtered, hooks, planner, pathfinder)
