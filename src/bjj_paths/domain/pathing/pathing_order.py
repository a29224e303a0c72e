import numpy as np

from bjj_paths.app.protocols import VisitOrderHeuristic


def _coords(nodes) -> np.ndarray:
    return np.array([(n.x or 0.0, n.y or 0.0) for n in nodes], dtype=float).reshape(-1, 2)


class NearestNeighborOrder(VisitOrderHeuristic):
    """
    Greedy TSP approximation: start at the first waypoint, then always hop to the
    closest remaining one (Euclidean on layout coordinates, missing ones at 0).
    No backtracking and no 2-opt pass, so long selections can produce detours.
    """

    def order(self, nodes):
        if len(nodes) < 2:
            return list(nodes)

        xy = _coords(nodes)
        remaining = list(range(1, len(nodes)))
        tour = [0]
        while remaining:
            cx, cy = xy[tour[-1]]
            rest = xy[remaining]
            d = np.hypot(rest[:, 0] - cx, rest[:, 1] - cy)
            # argmin returns the first minimum, so ties keep input order
            tour.append(remaining.pop(int(np.argmin(d))))
        return [nodes[i] for i in tour]


class AsGivenOrder(VisitOrderHeuristic):
    def order(self, nodes):
        return list(nodes)
