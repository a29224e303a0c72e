# bjj_paths/runtime/resources.py
import json
from functools import lru_cache

from bjj_paths.config.models import GraphByPath, GraphPayload
from bjj_paths.domain.entities.graph import Edge, GraphData, Node


def graph_from_payload(payload: GraphPayload | dict) -> GraphData:
    p = payload if isinstance(payload, GraphPayload) else GraphPayload.model_validate(payload)
    nodes = tuple(
        Node(
            id=n.id,
            name=n.name,
            x=n.x,
            y=n.y,
            category=n.category,
            difficulty=n.difficulty,
        )
        for n in p.nodes
    )
    edges = tuple(Edge(id=e.id, source=e.source, target=e.target, name=e.name) for e in p.edges)
    return GraphData(nodes, edges)


@lru_cache(maxsize=8)
def load_graph_from_path(file: str, fmt: str = "json") -> GraphData:
    if fmt == "json":
        with open(file, encoding="utf-8") as f:
            return graph_from_payload(json.load(f))
    raise ValueError(f"Unsupported graph fmt {fmt!r}")


def resolve_graph(ref: GraphByPath | None, *, deps: dict) -> GraphData:
    """
    deps can include:
      - 'graph': GraphData  # a prebuilt graph, used when no ref is configured
    """
    if ref is None:
        if "graph" in deps:
            return deps["graph"]
        raise ValueError("No graph provided")
    try:
        return load_graph_from_path(ref.file, ref.fmt)
    except FileNotFoundError:
        if ref.must_exist:
            raise
        return GraphData()
