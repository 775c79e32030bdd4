import typing as t

from kinorrt.data_models import State

DEFAULT_GOAL_BIAS = 0.04


class RandomSource(t.Protocol):
    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...


def sample_state(
    goal: State,
    board_width: float,
    board_height: float,
    cruise_speed: float,
    rng: RandomSource,
    goal_bias: float = DEFAULT_GOAL_BIAS,
) -> State:
    """Returns the goal itself with probability `goal_bias`, otherwise a uniformly random
    state on the board at the goal's elevation, moving at cruise speed."""
    if rng.random() < goal_bias:
        return goal

    x = rng.uniform(-board_width / 2.0, board_width / 2.0)
    z = rng.uniform(-board_height / 2.0, board_height / 2.0)
    degrees = rng.uniform(-180.0, 180.0)
    return State(x, goal.y, z, degrees, cruise_speed)
