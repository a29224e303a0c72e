# bjj_paths/domain/pathing/pathing_core.py
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from bjj_paths.app.protocols import PlannerHooks, SegmentFinder, VisitOrderHeuristic
from bjj_paths.domain.entities.graph import Adjacency, Node, PathStats
from bjj_paths.domain.pathing.pathing_order import NearestNeighborOrder
from bjj_paths.domain.pathing.pathing_segments import DijkstraSegmentFinder
from bjj_paths.io.hooks import NoopHooks

MINUTES_PER_TRANSITION = 2
PLACEHOLDER_LABEL = "Node {id}"


@dataclass
class PathPlanner:
    """
    Plans a route through user-selected positions.

    The visiting order comes from `order_heuristic`; consecutive waypoints are
    joined by the shortest segments `segment_finder` returns. Holds no state
    between calls beyond its configured components.
    """

    segment_finder: SegmentFinder = field(default_factory=DijkstraSegmentFinder)
    order_heuristic: VisitOrderHeuristic = field(default_factory=NearestNeighborOrder)
    minutes_per_transition: float = MINUTES_PER_TRANSITION
    placeholder_label: str = PLACEHOLDER_LABEL
    hooks: PlannerHooks = field(default_factory=NoopHooks)

    def find_optimal_path(self, graph: Adjacency, selected_nodes: Sequence[Node]) -> list[Node]:
        # graph is unused by the heuristic; kept for a uniform call shape
        if len(selected_nodes) < 2:
            return list(selected_nodes)
        return self.order_heuristic.order(selected_nodes)

    def find_detailed_path(
        self, graph: Adjacency, selected_nodes: Sequence[Node], all_nodes: Sequence[Node]
    ) -> list[Node]:
        t0 = time.perf_counter()
        self.hooks.plan_start(waypoints=len(selected_nodes), graph_nodes=len(graph))
        order = self.find_optimal_path(graph, selected_nodes)
        self.hooks.plan_order(order=[n.id for n in order])

        lookup: dict[str, Node] = {}
        for n in all_nodes:
            lookup.setdefault(n.id, n)

        path: list[Node] = []
        for a, b in zip(order[:-1], order[1:]):
            if a.id == b.id:
                continue
            segment = self.segment_finder.shortest(graph, a.id, b.id)
            if segment is None:
                self.hooks.segment_missing(start=a.id, end=b.id)
                self._finish(t0, [])
                return []
            nodes = [self._hydrate(nid, lookup) for nid in segment]
            if path and nodes[0].id == path[-1].id:
                nodes = nodes[1:]
            path.extend(nodes)

        if not path and len(order) >= 2:
            # every waypoint was the same position
            path = [self._hydrate(order[0].id, lookup)]
        self._finish(t0, path)
        return path

    def calculate_path_stats(self, path: Sequence[Node] | None) -> PathStats:
        if not path or len(path) < 2:
            return PathStats()
        transitions = len(path) - 1
        return PathStats(
            total_nodes=len(path),
            total_transitions=transitions,
            estimated_time=transitions * self.minutes_per_transition,
        )

    def validate_path(self, path: Sequence[Node] | None, graph: Adjacency) -> bool:
        if not path or len(path) < 2:
            return True
        for cur, nxt in zip(path[:-1], path[1:]):
            if nxt.id in graph.get(cur.id, ()):
                continue
            if self.segment_finder.shortest(graph, cur.id, nxt.id) is None:
                self.hooks.path_invalid(start=cur.id, end=nxt.id)
                return False
        return True

    # --------------- Helpers -----------------------------

    def _hydrate(self, node_id: str, lookup: dict[str, Node]) -> Node:
        node = lookup.get(node_id)
        if node is None:
            self.hooks.placeholder_node(node_id=node_id)
            node = Node(id=node_id, name=self.placeholder_label.format(id=node_id))
        return node

    def _finish(self, t0: float, path: list[Node]):
        self.hooks.plan_end(
            found=bool(path), nodes=len(path), wall_ms=(time.perf_counter() - t0) * 1000
        )


_default = PathPlanner()


def find_optimal_path(graph: Adjacency, selected_nodes: Sequence[Node]) -> list[Node]:
    """Nearest-neighbour visiting order for the selected nodes."""
    return _default.find_optimal_path(graph, selected_nodes)


def find_detailed_path(
    graph: Adjacency, selected_nodes: Sequence[Node], all_nodes: Sequence[Node]
) -> list[Node]:
    """Full route through the selected nodes; [] when some pair is not connected."""
    return _default.find_detailed_path(graph, selected_nodes, all_nodes)


def calculate_path_stats(path: Sequence[Node] | None) -> PathStats:
    return _default.calculate_path_stats(path)


def validate_path(path: Sequence[Node] | None, graph: Adjacency) -> bool:
    return _default.validate_path(path, graph)
