import math

import numpy as np
import pytest

from kinorrt.data_models import State
from kinorrt.utils import utils


class TestUtils:
    def test_normalize_angle_degrees(self):
        assert utils.normalize_angle_degrees(190) == pytest.approx(-170)
        assert utils.normalize_angle_degrees(-190) == pytest.approx(170)
        assert utils.normalize_angle_degrees(45) == pytest.approx(45)

    def test_angle_diff_degrees(self):
        assert utils.angle_diff_degrees(170, -170) == pytest.approx(20)
        assert utils.angle_diff_degrees(-170, 170) == pytest.approx(-20)

    def test_heading_towards(self):
        origin = State(0, 0, 0, 0, 0)
        assert utils.heading_towards(origin, State(0, 0, 5, 0, 0)) == pytest.approx(0)
        assert utils.heading_towards(origin, State(5, 0, 0, 0, 0)) == pytest.approx(90)
        assert utils.heading_towards(origin, State(-5, 0, 0, 0, 0)) == pytest.approx(-90)

    def test_path_length(self):
        path = [State(0, 0, 0, 0, 0), State(3, 0, 4, 0, 0), State(3, 0, 10, 0, 0)]
        assert utils.path_length(path) == pytest.approx(11.0)
        assert utils.path_length(path[:1]) == 0.0

    def test_is_finite_state(self):
        assert utils.is_finite_state(State(0, 0, 0, 0, 0))
        assert not utils.is_finite_state((0, 0, 0, 0, 0))
        assert not utils.is_finite_state(State(0, 0, math.nan, 0, 0))
        assert utils.is_finite_state(State(np.float32(1.5), 0, np.int64(3), 0, 0))
        assert not utils.is_finite_state(State(np.float64(np.inf), 0, 0, 0, 0))

    def test_planner_logger(self):
        logger = utils.PlannerLogger()
        logger.append(utils.PlannerLog("hello", 3))
        assert logger.messages() == ["hello"]
        assert str(logger[0]) == "At step 3: 'hello'"
