import typing as t

from kinorrt.agents.actor import Actor
from kinorrt.data_models import State

DEFAULT_TIME_TO_SIMULATE = 8.0
DEFAULT_NUM_POINTS = 22


def extend(
    from_state: State,
    toward: State,
    goal: State,
    actor: Actor,
    time_to_simulate: float = DEFAULT_TIME_TO_SIMULATE,
    num_points: int = DEFAULT_NUM_POINTS,
    trajectory: t.Optional[t.List[State]] = None,
) -> t.Tuple[bool, t.Optional[State]]:
    """
    Simulates the actor driving from `from_state` towards `toward` for `time_to_simulate`
    time units, split into `num_points` increments.

    The attempt fails as a whole, returning (False, None), as soon as one increment hits an
    obstacle. It stops early with success when an increment reaches `goal`. Otherwise the
    state after the last increment is returned.

    Every simulated increment is appended to `trajectory` when one is given.
    """
    dt = time_to_simulate / num_points
    new_state = from_state
    for _ in range(num_points):
        new_state = actor.step_towards(new_state, toward, dt)
        if actor.would_hit_obstacle(new_state):
            return False, None
        if trajectory is not None:
            trajectory.append(new_state)
        if actor.reached_waypoint(new_state, goal):
            break

    return True, new_state
