import math

import numpy as np

from kinorrt.agents.actor import Actor
from kinorrt.data_models import CarActorConfigModel, State
from kinorrt.utils import utils
from kinorrt.world.obstacle_map import ObstacleMap


class CarActor(Actor):
    """Forward-only car with a bounded turn rate and acceleration, driving on an
    `ObstacleMap` with a circular footprint."""

    def __init__(
        self,
        obstacle_map: ObstacleMap,
        *,
        cruise_speed: float,
        max_turn_rate: float = 90.0,
        acceleration: float = 5.0,
        radius: float = 0.5,
        goal_tolerance: float = 1.0,
        heading_weight: float = 1.0,
    ):
        self.obstacle_map = obstacle_map
        self._cruise_speed = cruise_speed
        self.max_turn_rate = max_turn_rate
        self.acceleration = acceleration
        self.radius = radius
        self.goal_tolerance = goal_tolerance
        self.heading_weight = heading_weight

    @classmethod
    def from_config(
        cls, obstacle_map: ObstacleMap, config: CarActorConfigModel
    ) -> "CarActor":
        return cls(
            obstacle_map,
            cruise_speed=config.cruise_speed,
            max_turn_rate=config.max_turn_rate,
            acceleration=config.acceleration,
            radius=config.radius,
            goal_tolerance=config.goal_tolerance,
            heading_weight=config.heading_weight,
        )

    def cruise_speed(self) -> float:
        return self._cruise_speed

    def closeness_measure(self, a: State, b: State) -> float:
        return utils.distance_between_states(a, b, self.heading_weight)

    def step_towards(self, current: State, target: State, dt: float) -> State:
        if utils.planar_distance(current, target) > 1e-9:
            desired = utils.heading_towards(current, target)
        else:
            desired = current.degrees

        max_turn = self.max_turn_rate * dt
        turn = float(
            np.clip(utils.angle_diff_degrees(current.degrees, desired), -max_turn, max_turn)
        )
        heading = utils.normalize_angle_degrees(current.degrees + turn)

        target_speed = target.speed if target.speed > 0 else self._cruise_speed
        max_dv = self.acceleration * dt
        speed = current.speed + float(
            np.clip(target_speed - current.speed, -max_dv, max_dv)
        )

        heading_rad = math.radians(heading)
        return State(
            x=current.x + speed * dt * math.sin(heading_rad),
            y=current.y,
            z=current.z + speed * dt * math.cos(heading_rad),
            degrees=heading,
            speed=speed,
        )

    def would_hit_obstacle(self, state: State) -> bool:
        return self.obstacle_map.collides(state.x, state.z, self.radius)

    def reached_waypoint(self, state: State, target: State) -> bool:
        return utils.planar_distance(state, target) <= self.goal_tolerance
