import heapq
import math

from bjj_paths.app.protocols import SegmentFinder
from bjj_paths.domain.entities.graph import Adjacency, NodeId


def _known_ids(graph: Adjacency) -> dict[NodeId, None]:
    # keys first, then neighbours that only appear on the right-hand side
    ids = dict.fromkeys(graph)
    for nbrs in graph.values():
        ids.update(dict.fromkeys(nbrs))
    return ids


def _walk_back(previous: dict[NodeId, NodeId], start: NodeId, end: NodeId) -> list[NodeId] | None:
    path = [end]
    while path[-1] != start:
        prev = previous.get(path[-1])
        if prev is None:
            return None
        path.append(prev)
    path.reverse()
    return path if len(path) > 1 else None


class DijkstraSegmentFinder(SegmentFinder):
    """Dijkstra with a binary heap; every edge costs one hop."""

    def shortest(self, graph, start, end):
        if start == end:
            return None
        ids = _known_ids(graph)
        if start not in ids or end not in ids:
            return None

        dist: dict[NodeId, float] = {start: 0}
        previous: dict[NodeId, NodeId] = {}
        settled: set[NodeId] = set()
        q: list[tuple[float, int, NodeId]] = [(0, 0, start)]
        seq = 0
        while q:
            d, _, u = heapq.heappop(q)
            if u in settled:
                continue
            if u == end:
                break
            settled.add(u)
            for v in graph.get(u, ()):
                if v in settled:
                    continue
                nd = d + 1
                if nd < dist.get(v, math.inf):
                    dist[v], previous[v] = nd, u
                    seq += 1
                    heapq.heappush(q, (nd, seq, v))

        if end not in dist:
            return None
        return _walk_back(previous, start, end)


class LinearScanSegmentFinder(SegmentFinder):
    """Dijkstra picking the next node by a linear scan of the unvisited set.

    Quadratic in the node count; fine for the few hundred positions a
    position graph holds.
    """

    def shortest(self, graph, start, end):
        if start == end:
            return None
        ids = _known_ids(graph)
        if start not in ids or end not in ids:
            return None

        dist = dict.fromkeys(ids, math.inf)
        dist[start] = 0
        previous: dict[NodeId, NodeId] = {}
        unvisited = dict.fromkeys(ids)
        while unvisited:
            current, best = None, math.inf
            for nid in unvisited:
                if dist[nid] < best:
                    current, best = nid, dist[nid]
            if current is None or current == end:
                break
            del unvisited[current]
            for v in graph.get(current, ()):
                if v in unvisited and best + 1 < dist[v]:
                    dist[v], previous[v] = best + 1, current

        if math.isinf(dist[end]):
            return None
        return _walk_back(previous, start, end)
