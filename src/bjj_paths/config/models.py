import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class FilterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    category: str = "all"
    difficulty: str = "all"


# ----------------- SEGMENT FINDERS ---------------------


class SegmentFinderDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class SegmentFinderLinearScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["linear_scan"] = "linear_scan"


SegmentFinderUnion = Annotated[
    SegmentFinderDijkstraModel | SegmentFinderLinearScanModel,
    Field(discriminator="kind"),
]

# ----------------- VISIT ORDER ---------------------


class OrderNearestNeighborModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["nearest_neighbor"] = "nearest_neighbor"


class OrderAsGivenModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["as_given"] = "as_given"


OrderUnion = Annotated[
    OrderNearestNeighborModel | OrderAsGivenModel,
    Field(discriminator="kind"),
]

# ----------------- GRAPH SOURCES ---------------------


class GraphByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json"] = "json"
    must_exist: bool = True

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


# ----------------- GRAPH PAYLOAD ---------------------
# Shape of the graph-data endpoint; payloads carry many more fields than we use.


class CoordinatesModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    x: float | None = None
    y: float | None = None


class NodePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    name: str
    x: float | None = None
    y: float | None = None
    coordinates: CoordinatesModel | None = None
    category: str | None = None
    difficulty: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v):
        # Mongo ids and integer fixtures both show up here
        return v if isinstance(v, str) else str(v)

    @model_validator(mode="after")
    def _lift_coordinates(self):
        if self.coordinates is not None:
            if self.x is None:
                self.x = self.coordinates.x
            if self.y is None:
                self.y = self.coordinates.y
        return self


class EdgePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    source: str
    target: str
    name: str = ""

    @field_validator("id", "source", "target", mode="before")
    @classmethod
    def _to_str(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} is required")
        return v if isinstance(v, str) else str(v)


class GraphPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")
    nodes: list[NodePayload] = Field(default_factory=list)
    edges: list[EdgePayload] = Field(default_factory=list)


# ------------------------------------------------------------------


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    segment_finder: SegmentFinderUnion = Field(default_factory=SegmentFinderDijkstraModel)
    order: OrderUnion = Field(default_factory=OrderNearestNeighborModel)
    minutes_per_transition: float = 2.0
    placeholder_label: str = "Node {id}"

    @field_validator("minutes_per_transition")
    @classmethod
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v

    @field_validator("placeholder_label")
    @classmethod
    def _has_id(cls, v: str) -> str:
        if "{id}" not in v:
            raise ValueError("placeholder_label must contain '{id}'")
        try:
            v.format(id="x")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"placeholder_label only accepts the {{id}} field: {exc!r}") from None
        return v


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "default"
    run_id: str = "local"
    log: LogModel = LogModel()
    planner: PlannerModel = PlannerModel()
    filters: FilterModel = FilterModel()
    graph: GraphByPath | None = None
