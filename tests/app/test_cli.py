# tests/app/test_cli.py
import json

import pytest

from bjj_paths.app.cli import main


def test_cli_prints_route(graph_file, capsys):
    rc = main(["--graph", str(graph_file), "cg", "mt"])
    out = capsys.readouterr().out.splitlines()
    assert rc == 0
    assert out[:4] == ["  1. Closed Guard", "  2. Half Guard", "  3. Side Control", "  4. Mount"]
    assert out[4] == "Path found! 4 positions, 3 transitions"
    assert out[5] == "Estimated time: 6 min"


def test_cli_accepts_names(graph_file, capsys):
    assert main(["--graph", str(graph_file), "closed guard", "Side Control"]) == 0
    assert "Path found! 3 positions, 2 transitions" in capsys.readouterr().out


def test_cli_no_path(graph_file, capsys):
    assert main(["--graph", str(graph_file), "cg", "tt"]) == 1
    assert "No valid path found" in capsys.readouterr().err


def test_cli_filters_hide_positions(graph_file, capsys):
    rc = main(["--graph", str(graph_file), "--category", "guard", "cg", "mt"])
    assert rc == 2
    assert "unknown position 'mt'" in capsys.readouterr().err


def test_cli_order_as_given(graph_file, capsys):
    # nearest-neighbour would go cg -> hg -> mt; as_given keeps cg -> mt -> hg
    assert main(["--graph", str(graph_file), "--order", "as_given", "cg", "mt", "hg"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert [line.split(". ", 1)[1] for line in out[:6]] == [
        "Closed Guard",
        "Half Guard",
        "Side Control",
        "Mount",
        "Side Control",
        "Half Guard",
    ]


def test_cli_config_file(graph_file, tmp_path, capsys):
    cfg = tmp_path / "scenario.json"
    cfg.write_text(
        json.dumps({"graph": {"file": str(graph_file)}, "planner": {"minutes_per_transition": 1.5}}),
        encoding="utf-8",
    )
    assert main(["--config", str(cfg), "cg", "sc"]) == 0
    assert "Estimated time: 3 min" in capsys.readouterr().out


def test_cli_missing_graph(tmp_path, capsys):
    assert main(["--graph", str(tmp_path / "missing.json"), "a", "b"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_cli_requires_waypoints():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_cli_single_distinct_waypoint_is_usage_error(graph_file, capsys):
    assert main(["--graph", str(graph_file), "cg", "closed guard"]) == 2
    assert "at least 2 positions" in capsys.readouterr().err
