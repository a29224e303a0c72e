from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bjj_paths.domain.entities.graph import Adjacency, Node, NodeId


# ------------- Pathing --------------------
@runtime_checkable
class SegmentFinder(Protocol):
    """
    Responsibilities:
      • Find a minimum-hop path between two node ids over unit-weight edges.
      • Return None when no path exists (unknown ids, disconnected, start == end).
    """

    def shortest(self, graph: Adjacency, start: NodeId, end: NodeId) -> list[NodeId] | None: ...


@runtime_checkable
class VisitOrderHeuristic(Protocol):
    """
    Responsibilities:
      • Reorder waypoints into a visiting order.
      • Return a permutation of the same node objects; never drop or add nodes.
    """

    def order(self, nodes: Sequence[Node]) -> list[Node]: ...


# ------------- Hooks --------------------
class PlannerHooks(Protocol):
    def plan_start(self, *, waypoints: int, graph_nodes: int): ...
    def plan_order(self, *, order: list[NodeId]): ...
    def segment_missing(self, *, start: NodeId, end: NodeId): ...
    def placeholder_node(self, *, node_id: NodeId): ...
    def plan_end(self, *, found: bool, nodes: int, wall_ms: float): ...
    def path_invalid(self, *, start: NodeId, end: NodeId): ...
