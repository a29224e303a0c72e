# bjj_paths/app/controllers/pathfinder.py
from dataclasses import dataclass, field

from bjj_paths.domain.entities.graph import GraphData, Node, PathStats
from bjj_paths.domain.pathing.pathing_core import PathPlanner

MIN_WAYPOINTS = 2


@dataclass(frozen=True)
class PathOutcome:
    ok: bool
    message: str
    path: list[Node] = field(default_factory=list)
    stats: PathStats = field(default_factory=PathStats)


class PathFinderHandler:
    """Waypoint selection and route lookup over a (filtered) position graph."""

    def __init__(self, graph: GraphData, planner: PathPlanner):
        self.graph = graph
        self.planner = planner
        self.selected: list[Node] = []
        self.path: list[Node] = []

    def select(self, node_id: str) -> Node | None:
        node = self.graph.node(node_id)
        if node is None or any(n.id == node_id for n in self.selected):
            return None
        self.selected.append(node)
        return node

    def deselect(self, node_id: str):
        self.selected = [n for n in self.selected if n.id != node_id]

    def clear_selection(self):
        self.selected = []
        self.path = []

    def clear_path(self):
        self.path = []

    def find_path(self) -> PathOutcome:
        if len(self.selected) < MIN_WAYPOINTS:
            return PathOutcome(False, "Please select at least 2 positions to find a path")

        adjacency = self.graph.adjacency()
        path = self.planner.find_detailed_path(adjacency, self.selected, self.graph.nodes)
        if not path:
            return PathOutcome(False, "No valid path found between selected positions")

        self.path = path
        stats = self.planner.calculate_path_stats(path)
        return PathOutcome(
            True,
            f"Path found! {stats.total_nodes} positions, {stats.total_transitions} transitions",
            path,
            stats,
        )

    def describe(self) -> str:
        if not self.path:
            return ""
        return f"{len(self.path)} positions, {len(self.path) - 1} transitions"
