import random
import typing as t

import matplotlib.pyplot as plt
from matplotlib import patches
from matplotlib.axes import Axes

from kinorrt.algorithms.rrt import RRT
from kinorrt.algorithms.rrt_node import RRTNode
from kinorrt.data_models import State
from kinorrt.world.obstacle_map import ObstacleMap


class EdgeRecorder:
    """Edge callback that keeps the simulated trajectory of every accepted extension,
    so explored branches can be drawn as curves rather than straight segments."""

    def __init__(self, trace_interval: int = 7):
        self.trace_interval = trace_interval
        self.edges: t.List[t.List[State]] = []

    def __call__(self, parent: RRTNode, child: RRTNode, trajectory: t.List[State]):
        points = [parent.state]
        points.extend(
            s for i, s in enumerate(trajectory) if i % self.trace_interval == 0
        )
        if points[-1] != child.state:
            points.append(child.state)
        self.edges.append(points)

    def __len__(self):
        return len(self.edges)


def plot_rrt(
    rrt: RRT,
    *,
    recorder: EdgeRecorder | None = None,
    obstacle_map: ObstacleMap | None = None,
    ax: Axes | None = None,
    random_colors: bool = False,
) -> Axes:
    """Draws the explored tree, the obstacles and, when the planner succeeded, the path."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    if obstacle_map is not None:
        minx, minz, maxx, maxz = obstacle_map.board.bounds
        ax.add_patch(
            patches.Rectangle(
                (minx, minz), maxx - minx, maxz - minz, fill=False, edgecolor="k"
            )
        )
        for obstacle in obstacle_map.obstacles:
            xs, zs = obstacle.exterior.xy
            ax.fill(xs, zs, color="0.3", alpha=0.8)

    rand = random.Random(0)
    if recorder is not None:
        for points in recorder.edges:
            color = (rand.random(), rand.random(), rand.random()) if random_colors else "b"
            ax.plot([p.x for p in points], [p.z for p in points], "-", color=color, alpha=0.3)
    else:
        for parent, child in rrt.tree.edges():
            ax.plot(
                [parent.state.x, child.state.x],
                [parent.state.z, child.state.z],
                "b-",
                alpha=0.2,
            )

    path = rrt.get_path()
    if path:
        ax.plot([s.x for s in path], [s.z for s in path], "g-", linewidth=2)

    ax.plot(rrt.start.x, rrt.start.z, "ro")
    ax.plot(rrt.goal.x, rrt.goal.z, "go", markersize=10)
    ax.set_aspect("equal")
    ax.grid(True)
    ax.set_title(
        f"RRT ({rrt.status.value})\n"
        f"tree size: {len(rrt.tree)}, time: {rrt.planning_time:.2f}s"
    )
    return ax


def save_plot(
    rrt: RRT,
    path: str,
    *,
    recorder: EdgeRecorder | None = None,
    obstacle_map: ObstacleMap | None = None,
):
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_rrt(rrt, recorder=recorder, obstacle_map=obstacle_map, ax=ax)
    fig.savefig(path)
    plt.close(fig)
