from kinorrt.display.plot import EdgeRecorder, save_plot
from kinorrt.scenario import Scenario

scenario = Scenario.load("tests/scenarios/wall.yaml")
recorder = EdgeRecorder()
rrt = scenario.create_planner(edge_callbacks=[recorder])

for status in rrt.iter_steps():
    pass

path = rrt.get_path()
assert path is not None
print(rrt.report().model_dump_json(indent=2))
save_plot(rrt, "wall.png", recorder=recorder, obstacle_map=scenario.obstacle_map)
