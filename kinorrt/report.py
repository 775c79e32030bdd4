import typing as t

import numpy as np
from pydantic import BaseModel

from kinorrt.data_models import State


class PlanningReport(BaseModel):
    status: str
    """Final (or current) planner status"""

    succeeded: bool = False

    steps: int = 0
    """Number of calls to `step()` that did work"""

    nodes_added: int = 0
    """Non-goal nodes inserted in the tree"""

    tree_size: int = 1
    """Total number of nodes in the tree, root included"""

    failed_extensions: int = 0
    """Extension attempts discarded because of a collision"""

    planning_time: float = 0.0
    """Wall-clock seconds spent inside `step()`"""

    path: t.List[State] | None = None
    path_length: float | None = None


class BenchmarkReport(BaseModel):
    runs: int = 0
    successes: int = 0
    success_rate: float = 0.0
    mean_nodes_added: float = 0.0
    mean_planning_time: float = 0.0
    mean_path_length: float | None = None

    @classmethod
    def from_reports(cls, reports: t.List[PlanningReport]) -> "BenchmarkReport":
        if not reports:
            return cls()
        successes = [r for r in reports if r.succeeded]
        lengths = [r.path_length for r in successes if r.path_length is not None]
        return cls(
            runs=len(reports),
            successes=len(successes),
            success_rate=len(successes) / len(reports),
            mean_nodes_added=float(np.mean([r.nodes_added for r in reports])),
            mean_planning_time=float(np.mean([r.planning_time for r in reports])),
            mean_path_length=float(np.mean(lengths)) if lengths else None,
        )
