# io/planner_logging.py
import json
import logging
import sys

from bjj_paths.io.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="bjj_paths", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class PlannerLogging(NoopHooks):
    """
    Structured logs for planner calls. Per-node chatter (placeholders) only goes
    out in debug mode.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        # the shared logger keeps its first level; each instance filters on its own
        self.level = logging.DEBUG if debug else logging.getLevelName(level)
        self.log = logger or _default_json_logger(level=self.level)

    def _emit(self, level: str, msg: str, **extra):
        if getattr(logging, level) < self.level:
            return
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def plan_start(self, *, waypoints: int, graph_nodes: int):
        self._emit("INFO", "plan_start", waypoints=waypoints, graph_nodes=graph_nodes)

    def plan_order(self, *, order):
        if self.debug:
            self._emit("DEBUG", "plan_order", order=list(order))

    def segment_missing(self, *, start, end):
        self._emit("WARNING", "segment_missing", start=start, end=end)

    def placeholder_node(self, *, node_id):
        if self.debug:
            self._emit("DEBUG", "placeholder_node", node_id=node_id)

    def plan_end(self, *, found: bool, nodes: int, wall_ms: float):
        self._emit("INFO", "plan_end", found=found, nodes=nodes, wall_ms=round(wall_ms, 3))

    def path_invalid(self, *, start, end):
        self._emit("WARNING", "path_invalid", start=start, end=end)
