# tests/config/test_config_models.py
import json

import pytest
from pydantic import ValidationError

from bjj_paths.config.models import (
    GraphByPath,
    GraphPayload,
    OrderAsGivenModel,
    PlannerModel,
    ScenarioModel,
    SegmentFinderLinearScanModel,
)
from bjj_paths.domain.pathing.pathing_factory import build_planner
from bjj_paths.domain.pathing.pathing_order import AsGivenOrder, NearestNeighborOrder
from bjj_paths.domain.pathing.pathing_segments import (
    DijkstraSegmentFinder,
    LinearScanSegmentFinder,
)
from bjj_paths.io.config import load_scenario
from bjj_paths.runtime.registries import make_order, make_segment_finder


def test_defaults():
    cfg = ScenarioModel()
    assert cfg.planner.segment_finder.kind == "dijkstra"
    assert cfg.planner.order.kind == "nearest_neighbor"
    assert cfg.planner.minutes_per_transition == 2.0
    assert cfg.filters.category == "all"
    assert cfg.graph is None


def test_discriminated_components():
    cfg = PlannerModel.model_validate(
        {"segment_finder": {"kind": "linear_scan"}, "order": {"kind": "as_given"}}
    )
    assert isinstance(cfg.segment_finder, SegmentFinderLinearScanModel)
    assert isinstance(cfg.order, OrderAsGivenModel)


def test_rejects_unknown_kind_and_extra_fields():
    with pytest.raises(ValidationError):
        PlannerModel.model_validate({"segment_finder": {"kind": "a_star"}})
    with pytest.raises(ValidationError):
        ScenarioModel.model_validate({"planner": {"speed": 3}})


def test_planner_field_checks():
    with pytest.raises(ValidationError):
        PlannerModel(minutes_per_transition=-1)
    with pytest.raises(ValidationError):
        PlannerModel(placeholder_label="Unknown")


def test_graph_path_expands_user(monkeypatch):
    monkeypatch.setenv("HOME", "/home/tester")
    assert GraphByPath(file="~/graph.json").file == "/home/tester/graph.json"


def test_payload_lifts_nested_coordinates(graph_payload):
    p = GraphPayload.model_validate(graph_payload)
    cg = p.nodes[0]
    assert (cg.x, cg.y) == (0.0, 0.0)
    hg = p.nodes[1]
    assert (hg.x, hg.y) == (1.0, 0.0)


def test_payload_coerces_ids():
    p = GraphPayload.model_validate(
        {"nodes": [{"id": 7, "name": "Seven"}], "edges": [{"id": 1, "source": 7, "target": 8}]}
    )
    assert p.nodes[0].id == "7"
    assert (p.edges[0].source, p.edges[0].target) == ("7", "8")


def test_payload_requires_edge_endpoints():
    with pytest.raises(ValidationError):
        GraphPayload.model_validate({"edges": [{"id": "e", "source": None, "target": "b"}]})


def test_registries_build_components():
    assert isinstance(make_segment_finder(PlannerModel().segment_finder), DijkstraSegmentFinder)
    assert isinstance(make_order(PlannerModel().order), NearestNeighborOrder)


def test_registries_reject_unregistered_kind():
    class Bogus:
        kind = "bogus"

    with pytest.raises(ValueError, match="bogus"):
        make_segment_finder(Bogus())
    with pytest.raises(ValueError, match="bogus"):
        make_order(Bogus())


def test_build_planner_from_config():
    planner = build_planner(
        PlannerModel.model_validate(
            {
                "segment_finder": {"kind": "linear_scan"},
                "order": {"kind": "as_given"},
                "minutes_per_transition": 1.5,
                "placeholder_label": "? {id}",
            }
        )
    )
    assert isinstance(planner.segment_finder, LinearScanSegmentFinder)
    assert isinstance(planner.order_heuristic, AsGivenOrder)
    assert planner.minutes_per_transition == 1.5
    assert planner.placeholder_label == "? {id}"


def test_load_scenario(tmp_path):
    p = tmp_path / "scenario.json"
    p.write_text(
        json.dumps({"name": "guards", "filters": {"category": "guard"}, "log": {"level": "DEBUG"}}),
        encoding="utf-8",
    )
    cfg = load_scenario(str(p))
    assert cfg.name == "guards"
    assert cfg.filters.category == "guard"
    assert cfg.log.level == "DEBUG"


@pytest.mark.parametrize("label", ["{id} ({name})", "{id} {0}", "{id} {id:d}"])
def test_placeholder_label_rejects_other_fields(label):
    with pytest.raises(ValidationError):
        PlannerModel(placeholder_label=label)


def test_placeholder_label_allows_escaped_braces():
    assert PlannerModel(placeholder_label="{{?}} {id}").placeholder_label == "{{?}} {id}"
