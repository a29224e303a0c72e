import json

import pytest

# Shape follows the graph-data endpoint; extra fields are ignored by the loader.
PAYLOAD = {
    "nodes": [
        {
            "id": "cg",
            "name": "Closed Guard",
            "category": "guard",
            "difficulty": "beginner",
            "coordinates": {"x": 0, "y": 0},
            "advantage": "bottom",
        },
        {"id": "hg", "name": "Half Guard", "category": "guard", "difficulty": "beginner", "x": 1, "y": 0},
        {
            "id": "sc",
            "name": "Side Control",
            "category": "side-control",
            "difficulty": "beginner",
            "coordinates": {"x": 2, "y": 0},
        },
        {"id": "mt", "name": "Mount", "category": "mount", "difficulty": "advanced", "x": 3, "y": 0},
        {"id": "tt", "name": "Turtle", "category": "turtle", "difficulty": "beginner", "x": 9, "y": 9},
    ],
    "edges": [
        {"id": "e1", "source": "cg", "target": "hg", "name": "Knee shield pass", "voteScore": 3},
        {"id": "e2", "source": "hg", "target": "sc", "name": "Knee slice"},
        {"id": "e3", "source": "sc", "target": "mt", "name": "Mount step-over"},
    ],
}


@pytest.fixture
def graph_payload() -> dict:
    return json.loads(json.dumps(PAYLOAD))


@pytest.fixture
def graph_file(tmp_path, graph_payload):
    p = tmp_path / "graph.json"
    p.write_text(json.dumps(graph_payload), encoding="utf-8")
    return p
