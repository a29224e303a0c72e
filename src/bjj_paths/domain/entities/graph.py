from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

NodeId = str
Adjacency = Mapping[NodeId, Sequence[NodeId]]


# Core graph types used by the planner
@dataclass(frozen=True)
class Node:
    id: NodeId
    name: str
    x: float | None = None  # layout coordinates, heuristic only
    y: float | None = None
    category: str | None = None
    difficulty: str | None = None


@dataclass(frozen=True)
class Edge:
    id: str
    source: NodeId
    target: NodeId
    name: str = ""


@dataclass(frozen=True)
class PathStats:
    total_nodes: int = 0
    total_transitions: int = 0
    estimated_time: float = 0  # minutes


def build_adjacency(edges: Iterable[Edge]) -> dict[NodeId, list[NodeId]]:
    """Undirected adjacency: every edge is added in both directions."""
    graph: dict[NodeId, list[NodeId]] = {}
    for e in edges:
        graph.setdefault(e.source, []).append(e.target)
        graph.setdefault(e.target, []).append(e.source)
    return graph


@dataclass(frozen=True)
class GraphData:
    """Positions and transitions as served by the graph-data endpoint."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    _by_id: dict[NodeId, Node] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        for n in self.nodes:
            self._by_id.setdefault(n.id, n)

    def node(self, node_id: NodeId) -> Node | None:
        return self._by_id.get(node_id)

    def edge(self, edge_id: str) -> Edge | None:
        return next((e for e in self.edges if e.id == edge_id), None)

    def filtered(self, category: str = "all", difficulty: str = "all") -> "GraphData":
        nodes = tuple(
            n
            for n in self.nodes
            if (category == "all" or n.category == category)
            and (difficulty == "all" or n.difficulty == difficulty)
        )
        keep = {n.id for n in nodes}
        edges = tuple(e for e in self.edges if e.source in keep and e.target in keep)
        return GraphData(nodes, edges)

    def connected_nodes(self, node_id: NodeId) -> list[Node]:
        ids = set()
        for e in self.edges:
            if e.source == node_id and e.target != node_id:
                ids.add(e.target)
            elif e.target == node_id and e.source != node_id:
                ids.add(e.source)
        return [n for n in self.nodes if n.id in ids]

    def edges_between(self, a: NodeId, b: NodeId) -> list[Edge]:
        return [
            e
            for e in self.edges
            if (e.source == a and e.target == b) or (e.source == b and e.target == a)
        ]

    def search(self, term: str) -> list[Node]:
        needle = term.lower()
        return [n for n in self.nodes if needle in n.name.lower()]

    def adjacency(self) -> dict[NodeId, list[NodeId]]:
        return build_adjacency(self.edges)
