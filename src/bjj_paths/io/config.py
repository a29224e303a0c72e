# src/bjj_paths/io/config.py
import json

from bjj_paths.config.models import ScenarioModel


def load_scenario(path: str) -> ScenarioModel:
    with open(path, encoding="utf-8") as f:
        return ScenarioModel.model_validate(json.load(f))
