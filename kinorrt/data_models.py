import typing as t

import yaml
from pydantic import BaseModel, Field, PositiveFloat, PositiveInt

from kinorrt.exceptions import ConfigurationError


class State(t.NamedTuple):
    """Pose and speed of an agent. `x` and `z` span the board plane, `y` is the elevation,
    `degrees` is the heading (0 faces +z, 90 faces +x)."""

    x: float
    y: float
    z: float
    degrees: float
    speed: float


class RRTConfigModel(BaseModel):
    max_nodes: PositiveInt
    """Maximum number of non-goal nodes added before the planner gives up."""

    board_width: PositiveFloat
    """Width of the sampling rectangle, centered on the origin, along x."""

    board_height: PositiveFloat
    """Height of the sampling rectangle, centered on the origin, along z."""

    goal_bias: float = Field(default=0.04, ge=0.0, le=1.0)
    """Probability of sampling the goal state verbatim."""

    max_tries: PositiveInt = 10000
    """Number of failed extensions tolerated within a single step."""

    time_to_simulate: PositiveFloat = 8.0
    num_points: PositiveInt = 22
    random_seed: int | None = None


class CarActorConfigModel(BaseModel):
    cruise_speed: PositiveFloat
    max_turn_rate: PositiveFloat = 90.0
    """Degrees per time unit."""

    acceleration: PositiveFloat = 5.0
    radius: float = Field(default=0.5, ge=0.0)
    goal_tolerance: PositiveFloat = 1.0
    heading_weight: float = Field(default=1.0, ge=0.0)


class BoardYamlModel(BaseModel):
    width: PositiveFloat
    height: PositiveFloat


class PolygonObstacleYamlModel(BaseModel):
    type: t.Literal["polygon"] = "polygon"
    vertices: t.List[t.Tuple[float, float]] = Field(min_length=3)
    """Vertices as (x, z) pairs."""


class CircleObstacleYamlModel(BaseModel):
    type: t.Literal["circle"] = "circle"
    center: t.Tuple[float, float]
    radius: PositiveFloat


ObstacleYamlModel = t.Annotated[
    t.Union[PolygonObstacleYamlModel, CircleObstacleYamlModel],
    Field(discriminator="type"),
]


class PlannerYamlModel(BaseModel):
    max_nodes: PositiveInt = 1000
    goal_bias: float = Field(default=0.04, ge=0.0, le=1.0)
    max_tries: PositiveInt = 10000
    time_to_simulate: PositiveFloat = 8.0
    num_points: PositiveInt = 22
    random_seed: int | None = 10


class ScenarioYamlModel(BaseModel):
    board: BoardYamlModel
    start: t.List[float] = Field(min_length=5, max_length=5)
    """x, y, z, degrees, speed"""

    goal: t.List[float] = Field(min_length=5, max_length=5)
    planner: PlannerYamlModel = PlannerYamlModel()
    actor: CarActorConfigModel
    obstacles: t.List[ObstacleYamlModel] = []

    def start_state(self) -> State:
        return State(*self.start)

    def goal_state(self) -> State:
        return State(*self.goal)


def scenario_from_yaml(file_path: str) -> ScenarioYamlModel:
    with open(file_path, "r") as stream:
        config = yaml.safe_load(stream)
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Scenario file {file_path} must contain a mapping, got {type(config).__name__}"
        )
    return ScenarioYamlModel(**config)
