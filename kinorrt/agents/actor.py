import abc

from kinorrt.data_models import State


class Actor(abc.ABC):
    """Capabilities the planner needs from the agent it plans for.

    The planner never inspects states itself: sampling speed, closeness, motion, collision
    and arrival are all delegated to the actor.
    """

    @abc.abstractmethod
    def cruise_speed(self) -> float:
        """Nominal speed given to randomly sampled states."""
        raise NotImplementedError

    @abc.abstractmethod
    def closeness_measure(self, a: State, b: State) -> float:
        """Non-negative distance between two states, used to pick the nearest tree node.

        Must return the same value for the same inputs during a planning run.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def step_towards(self, current: State, target: State, dt: float) -> State:
        """Advance `current` by `dt` time units towards `target` within the actor's
        kinematic limits."""
        raise NotImplementedError

    @abc.abstractmethod
    def would_hit_obstacle(self, state: State) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def reached_waypoint(self, state: State, target: State) -> bool:
        raise NotImplementedError
