import math
import numbers
import typing as t
from datetime import datetime

from kinorrt.data_models import State
from kinorrt.log import logger


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class PlannerLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp if timestamp else timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)


class PlannerLogger(list[PlannerLog]):
    """Keeps every planner event in memory and forwards it to the `kinorrt` logger."""

    def __init__(self, printout: bool = False):
        super(PlannerLogger, self).__init__()
        self.printout = printout

    def append(self, log: PlannerLog):
        super(PlannerLogger, self).append(log)
        if self.printout:
            print(log)
        logger.info(f"[kinorrt]:[step={log.step}]: {log.message}")

    def messages(self) -> t.List[str]:
        return [x.message for x in self]


def normalize_angle_radians(radians: float):
    """Normalize angle to [-pi, pi]"""
    return math.atan2(math.sin(radians), math.cos(radians))


def normalize_angle_degrees(degrees: float):
    """Normalize angle to [-180, 180]"""
    radians = math.radians(degrees)
    return math.degrees(normalize_angle_radians(radians))


def angle_diff_degrees(a: float, b: float) -> float:
    """Signed smallest rotation, in degrees, that takes heading `a` to heading `b`."""
    return normalize_angle_degrees(b - a)


def heading_towards(a: State, b: State) -> float:
    """Heading in degrees of the direction from `a` to `b` on the board plane."""
    return math.degrees(math.atan2(b.x - a.x, b.z - a.z))


def planar_distance(a: State, b: State) -> float:
    return math.sqrt((b.x - a.x) ** 2 + (b.z - a.z) ** 2)


def distance_between_states(a: State, b: State, heading_weight: float = 1.0) -> float:
    """
    Calculate the distance between two states, considering position and heading.

    Args:
        a: first state, heading in degrees
        b: second state, heading in degrees
        heading_weight: weight applied to the heading difference in radians

    Returns:
        float: planar distance plus the weighted heading difference
    """
    position_distance = planar_distance(a, b)

    theta1_rad = math.radians(a.degrees)
    theta2_rad = math.radians(b.degrees)
    angle_diff = abs((theta1_rad - theta2_rad + math.pi) % (2 * math.pi) - math.pi)

    return position_distance + heading_weight * angle_diff


def path_length(path: t.Sequence[State]) -> float:
    if len(path) < 2:
        return 0.0

    total = 0.0
    prev = path[0]
    for cur in path[1:]:
        total += planar_distance(prev, cur)
        prev = cur

    return total


def is_finite_state(state: t.Any) -> bool:
    return isinstance(state, State) and all(
        isinstance(v, numbers.Real) and math.isfinite(float(v)) for v in state
    )
