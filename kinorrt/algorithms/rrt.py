import random
import time
import typing as t
from enum import Enum

from pydantic import ValidationError

from kinorrt.agents.actor import Actor
from kinorrt.algorithms.nearest import nearest_node
from kinorrt.algorithms.rrt_node import RRTNode, RRTTree
from kinorrt.algorithms.sampler import DEFAULT_GOAL_BIAS, RandomSource, sample_state
from kinorrt.algorithms.steering import (
    DEFAULT_NUM_POINTS,
    DEFAULT_TIME_TO_SIMULATE,
    extend,
)
from kinorrt.data_models import RRTConfigModel, State
from kinorrt.exceptions import ConfigurationError
from kinorrt.log import logger
from kinorrt.report import PlanningReport
from kinorrt.utils import utils

DEFAULT_MAX_TRIES = 10000

EdgeCallback = t.Callable[[RRTNode, RRTNode, t.List[State]], None]


class PlannerStatus(str, Enum):
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED_NODE_LIMIT = "FAILED_NODE_LIMIT"
    FAILED_RETRY_LIMIT = "FAILED_RETRY_LIMIT"

    @property
    def is_terminal(self) -> bool:
        return self is not PlannerStatus.RUNNING


class RRT:
    """Rapidly-exploring random tree from a start state to a goal region.

    The planner is driven one `step()` at a time by the caller. Each step either inserts
    exactly one node in the tree or ends the run. Call `step()` until `is_finished()`,
    or use `iter_steps()` / `plan()`.
    """

    def __init__(
        self,
        start: State,
        goal: State,
        actor: Actor,
        max_nodes: int,
        board_width: float,
        board_height: float,
        *,
        goal_bias: float = DEFAULT_GOAL_BIAS,
        max_tries: int = DEFAULT_MAX_TRIES,
        time_to_simulate: float = DEFAULT_TIME_TO_SIMULATE,
        num_points: int = DEFAULT_NUM_POINTS,
        rng: t.Optional[RandomSource] = None,
        seed: t.Optional[int] = None,
        logger: t.Optional[utils.PlannerLogger] = None,
        edge_callbacks: t.Iterable[EdgeCallback] = (),
    ):
        try:
            self.config = RRTConfigModel(
                max_nodes=max_nodes,
                board_width=board_width,
                board_height=board_height,
                goal_bias=goal_bias,
                max_tries=max_tries,
                time_to_simulate=time_to_simulate,
                num_points=num_points,
                random_seed=seed,
            )
        except ValidationError as e:
            raise ConfigurationError.from_validation_error(e) from e
        if not utils.is_finite_state(start):
            raise ConfigurationError(f"Invalid start state: {start!r}")
        if not utils.is_finite_state(goal):
            raise ConfigurationError(f"Invalid goal state: {goal!r}")
        if not isinstance(actor, Actor):
            raise ConfigurationError(f"Actor must implement {Actor.__name__}")

        self.start = start
        self.goal = goal
        self.actor = actor
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.logger = logger if logger is not None else utils.PlannerLogger()
        self.edge_callbacks: t.List[EdgeCallback] = list(edge_callbacks)

        self.tree = RRTTree(start)
        self.nodes_added = 0
        self.steps_taken = 0
        self.failed_extensions = 0
        self.planning_time = 0.0
        self._status = PlannerStatus.RUNNING
        self._end_node: t.Optional[RRTNode] = None

        self.logger.append(
            utils.PlannerLog(
                f"Planner created from {tuple(start)} to {tuple(goal)} "
                f"with a budget of {self.config.max_nodes} nodes.",
                0,
            )
        )

    @classmethod
    def from_config(
        cls, start: State, goal: State, actor: Actor, config: RRTConfigModel, **kwargs
    ) -> "RRT":
        return cls(
            start,
            goal,
            actor,
            config.max_nodes,
            config.board_width,
            config.board_height,
            goal_bias=config.goal_bias,
            max_tries=config.max_tries,
            time_to_simulate=config.time_to_simulate,
            num_points=config.num_points,
            seed=config.random_seed,
            **kwargs,
        )

    @property
    def status(self) -> PlannerStatus:
        return self._status

    @property
    def end_node(self) -> t.Optional[RRTNode]:
        return self._end_node

    def is_finished(self) -> bool:
        return self._status.is_terminal

    def is_successful(self) -> bool:
        return self._status is PlannerStatus.SUCCEEDED

    def step(self) -> PlannerStatus:
        if self.is_finished():
            logger.debug("step() called on a finished planner (%s)", self._status.value)
            return self._status

        t0 = time.time()
        try:
            self._step()
        finally:
            self.planning_time += time.time() - t0
        return self._status

    def _step(self):
        self.steps_taken += 1
        tries = 0
        while True:
            target = sample_state(
                self.goal,
                self.config.board_width,
                self.config.board_height,
                self.actor.cruise_speed(),
                self.rng,
                self.config.goal_bias,
            )
            nearest = nearest_node(target, self.tree, self.actor.closeness_measure)
            trajectory: t.List[State] = []
            success, new_state = extend(
                nearest.state,
                target,
                self.goal,
                self.actor,
                time_to_simulate=self.config.time_to_simulate,
                num_points=self.config.num_points,
                trajectory=trajectory,
            )

            if success and new_state is not None:
                new_node = self.tree.add_child(nearest, new_state)
                for callback in self.edge_callbacks:
                    callback(nearest, new_node, trajectory)
                if self.actor.reached_waypoint(new_node.state, self.goal):
                    self._end_node = new_node
                    self._finish(
                        PlannerStatus.SUCCEEDED,
                        f"Goal reached with a tree of {len(self.tree)} nodes.",
                    )
                    return
                break

            tries += 1
            self.failed_extensions += 1
            if tries > self.config.max_tries:
                self._finish(
                    PlannerStatus.FAILED_RETRY_LIMIT,
                    f"Failed to extend the tree after {tries} attempts.",
                )
                return

        self.nodes_added += 1
        logger.debug(
            "Step %d added node %d (%d/%d)",
            self.steps_taken,
            new_node.index,
            self.nodes_added,
            self.config.max_nodes,
        )
        if self.nodes_added >= self.config.max_nodes:
            self._finish(
                PlannerStatus.FAILED_NODE_LIMIT,
                f"Node budget of {self.config.max_nodes} exhausted without reaching the goal.",
            )

    def _finish(self, status: PlannerStatus, message: str):
        self._status = status
        self.logger.append(utils.PlannerLog(message, self.steps_taken))

    def iter_steps(self) -> t.Iterator[PlannerStatus]:
        """Yields the planner status after each step until the planner finishes."""
        while not self.is_finished():
            yield self.step()

    def plan(self, max_steps: t.Optional[int] = None) -> t.Optional[t.List[State]]:
        steps = 0
        while not self.is_finished():
            if max_steps is not None and steps >= max_steps:
                break
            self.step()
            steps += 1
        return self.get_path()

    def get_path(self) -> t.Optional[t.List[State]]:
        if not self.is_successful() or self._end_node is None:
            return None
        return [node.state for node in reversed(self.tree.path_to_root(self._end_node))]

    def report(self) -> PlanningReport:
        path = self.get_path()
        return PlanningReport(
            status=self._status.value,
            succeeded=self.is_successful(),
            steps=self.steps_taken,
            nodes_added=self.nodes_added,
            tree_size=len(self.tree),
            failed_extensions=self.failed_extensions,
            planning_time=self.planning_time,
            path=path,
            path_length=utils.path_length(path) if path is not None else None,
        )
