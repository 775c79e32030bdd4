import json
import os

import pytest
from typer.testing import CliRunner

from kinorrt.algorithms.rrt import PlannerStatus
from kinorrt.display.plot import EdgeRecorder
from kinorrt.main import app
from kinorrt.scenario import Scenario

runner = CliRunner()


class TestE2E:
    def setup_method(self):
        self.scenarios_folder = os.path.join(os.path.dirname(__file__), "../scenarios")

    def scenario(self, name: str) -> str:
        return os.path.abspath(os.path.join(self.scenarios_folder, name))

    def test_open_board(self):
        """A car facing the goal on an empty board finds a path"""
        sc = Scenario.load(self.scenario("open_board.yaml"))
        rrt = sc.create_planner()
        path = rrt.plan()

        assert rrt.status is PlannerStatus.SUCCEEDED
        assert path is not None
        assert path[0] == sc.model.start_state()
        assert sc.actor.reached_waypoint(path[-1], sc.model.goal_state())
        assert any(m.startswith("Goal reached") for m in rrt.logger.messages())

    def test_wall(self):
        """The car drives around a wall between start and goal"""
        sc = Scenario.load(self.scenario("wall.yaml"))
        recorder = EdgeRecorder()
        rrt = sc.create_planner(edge_callbacks=[recorder])
        path = rrt.plan()

        assert rrt.is_successful(), rrt.logger.messages()
        assert len(recorder) == len(rrt.tree) - 1
        assert not any(sc.actor.would_hit_obstacle(s) for s in path)
        assert sc.actor.reached_waypoint(path[-1], sc.model.goal_state())

    def test_blocked(self):
        """A car starting inside an obstacle fails on the first step"""
        sc = Scenario.load(self.scenario("blocked.yaml"))
        rrt = sc.create_planner()
        assert rrt.step() is PlannerStatus.FAILED_RETRY_LIMIT
        assert rrt.get_path() is None


class TestCLI:
    def setup_method(self):
        self.scenarios_folder = os.path.join(os.path.dirname(__file__), "../scenarios")

    def scenario(self, name: str) -> str:
        return os.path.abspath(os.path.join(self.scenarios_folder, name))

    def test_plan(self, tmp_path):
        plot_file = str(tmp_path / "tree.png")
        result = runner.invoke(
            app, ["plan", self.scenario("open_board.yaml"), "--plot", plot_file]
        )
        assert result.exit_code == 0, result.output
        report = json.loads(result.stdout)
        assert report["status"] == "SUCCEEDED"
        assert report["succeeded"]
        assert report["path"][0] == [0.0, 0.0, 0.0, 0.0, 0.0]
        assert os.path.exists(plot_file)

    def test_plan_failure(self):
        result = runner.invoke(app, ["plan", self.scenario("blocked.yaml")])
        assert result.exit_code == 1
        assert json.loads(result.stdout)["status"] == "FAILED_RETRY_LIMIT"

    def test_plan_invalid_scenario(self):
        result = runner.invoke(app, ["plan", self.scenario("invalid.yaml")])
        assert result.exit_code == 2

    def test_plan_missing_scenario(self):
        result = runner.invoke(app, ["plan", self.scenario("missing.yaml")])
        assert result.exit_code == 2

    @pytest.mark.parametrize("command", ["plan", "benchmark"])
    @pytest.mark.parametrize(
        "name", ["empty.yaml", "malformed.yaml", "nan_start.yaml", "invalid.yaml"]
    )
    def test_bad_scenario_exits_cleanly(self, command, name):
        result = runner.invoke(app, [command, self.scenario(name)])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_benchmark(self):
        result = runner.invoke(
            app, ["benchmark", self.scenario("blocked.yaml"), "--runs", "2"]
        )
        assert result.exit_code == 0, result.output
        report = json.loads(result.stdout)
        assert report["runs"] == 2
        assert report["successes"] == 0
        assert report["success_rate"] == 0.0
        assert report["mean_path_length"] is None
