# runtime/registries.py
from collections.abc import Callable
from typing import Any

from bjj_paths.app.protocols import SegmentFinder, VisitOrderHeuristic
from bjj_paths.config.models import (
    OrderAsGivenModel,
    OrderNearestNeighborModel,
    OrderUnion,
    SegmentFinderDijkstraModel,
    SegmentFinderLinearScanModel,
    SegmentFinderUnion,
)
from bjj_paths.domain.pathing.pathing_order import AsGivenOrder, NearestNeighborOrder
from bjj_paths.domain.pathing.pathing_segments import (
    DijkstraSegmentFinder,
    LinearScanSegmentFinder,
)

SegmentFinderFactory = Callable[[SegmentFinderUnion, dict[str, Any]], SegmentFinder]
OrderFactory = Callable[[OrderUnion, dict[str, Any]], VisitOrderHeuristic]

_segment_finder_registry: dict[str, SegmentFinderFactory] = {}
_order_registry: dict[str, OrderFactory] = {}


# ------------------- Segment finders ---------------------------


def register_segment_finder(kind: str):
    def deco(fn: SegmentFinderFactory):
        _segment_finder_registry[kind] = fn
        return fn

    return deco


def make_segment_finder(cfg: SegmentFinderUnion, *, deps: dict | None = None) -> SegmentFinder:
    try:
        factory = _segment_finder_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown segment finder kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_segment_finder("dijkstra")
def _make_dijkstra(cfg: SegmentFinderDijkstraModel, deps):
    return DijkstraSegmentFinder()


@register_segment_finder("linear_scan")
def _make_linear_scan(cfg: SegmentFinderLinearScanModel, deps):
    return LinearScanSegmentFinder()


# ------------------- Visit order ---------------------------


def register_order(kind: str):
    def deco(fn: OrderFactory):
        _order_registry[kind] = fn
        return fn

    return deco


def make_order(cfg: OrderUnion, *, deps: dict | None = None) -> VisitOrderHeuristic:
    try:
        factory = _order_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown order kind {cfg.kind!r}") from None
    return factory(cfg, deps or {})


@register_order("nearest_neighbor")
def _make_nearest_neighbor(cfg: OrderNearestNeighborModel, deps):
    return NearestNeighborOrder()


@register_order("as_given")
def _make_as_given(cfg: OrderAsGivenModel, deps):
    return AsGivenOrder()
