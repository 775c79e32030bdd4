import typing as t

import yaml
from pydantic import ValidationError

from kinorrt.agents.car_actor import CarActor
from kinorrt.algorithms.rrt import RRT, EdgeCallback
from kinorrt.data_models import RRTConfigModel, ScenarioYamlModel, scenario_from_yaml
from kinorrt.exceptions import ConfigurationError
from kinorrt.utils import utils
from kinorrt.world.obstacle_map import ObstacleMap


class Scenario:
    """A planning problem loaded from a YAML file: the board, the car and its obstacles."""

    def __init__(self, model: ScenarioYamlModel):
        for name, state in (("start", model.start_state()), ("goal", model.goal_state())):
            if not utils.is_finite_state(state):
                raise ConfigurationError(f"Invalid {name} state: {state!r}")
        self.model = model
        self.obstacle_map = ObstacleMap.from_models(
            model.board.width, model.board.height, model.obstacles
        )
        self.actor = CarActor.from_config(self.obstacle_map, model.actor)

    @classmethod
    def load(cls, file_path: str) -> "Scenario":
        try:
            model = scenario_from_yaml(file_path)
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Malformed scenario file {file_path}: {e}") from e
        return cls(model)

    def rrt_config(self, seed: t.Optional[int] = None) -> RRTConfigModel:
        planner = self.model.planner
        return RRTConfigModel(
            max_nodes=planner.max_nodes,
            board_width=self.model.board.width,
            board_height=self.model.board.height,
            goal_bias=planner.goal_bias,
            max_tries=planner.max_tries,
            time_to_simulate=planner.time_to_simulate,
            num_points=planner.num_points,
            random_seed=seed if seed is not None else planner.random_seed,
        )

    def create_planner(
        self,
        *,
        seed: t.Optional[int] = None,
        logger: t.Optional[utils.PlannerLogger] = None,
        edge_callbacks: t.Iterable[EdgeCallback] = (),
    ) -> RRT:
        return RRT.from_config(
            self.model.start_state(),
            self.model.goal_state(),
            self.actor,
            self.rrt_config(seed),
            logger=logger,
            edge_callbacks=edge_callbacks,
        )
