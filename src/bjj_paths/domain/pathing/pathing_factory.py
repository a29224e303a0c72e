# bjj_paths/domain/pathing/pathing_factory.py

from bjj_paths.app.protocols import PlannerHooks
from bjj_paths.config.models import PlannerModel
from bjj_paths.domain.pathing.pathing_core import PathPlanner
from bjj_paths.io.hooks import NoopHooks
from bjj_paths.runtime.registries import make_order, make_segment_finder


def build_planner(cfg: PlannerModel | None = None, *, hooks: PlannerHooks | None = None) -> PathPlanner:
    cfg = cfg or PlannerModel()
    return PathPlanner(
        segment_finder=make_segment_finder(cfg.segment_finder),
        order_heuristic=make_order(cfg.order),
        minutes_per_transition=cfg.minutes_per_transition,
        placeholder_label=cfg.placeholder_label,
        hooks=hooks or NoopHooks(),
    )
