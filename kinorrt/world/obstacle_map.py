import typing as t

from shapely.geometry import Point, Polygon, box
from shapely.ops import unary_union

from kinorrt.data_models import (
    CircleObstacleYamlModel,
    ObstacleYamlModel,
    PolygonObstacleYamlModel,
)


class ObstacleMap:
    """Static obstacles on a board centered on the origin.

    Geometry lives in the (x, z) plane. Anything outside the board counts as an obstacle.
    """

    def __init__(
        self,
        board_width: float,
        board_height: float,
        obstacles: t.Iterable[Polygon] = (),
    ):
        self.board_width = board_width
        self.board_height = board_height
        self.board = box(
            -board_width / 2.0, -board_height / 2.0, board_width / 2.0, board_height / 2.0
        )
        self.obstacles: t.List[Polygon] = list(obstacles)
        self._union = unary_union(self.obstacles) if self.obstacles else None

    @classmethod
    def from_models(
        cls,
        board_width: float,
        board_height: float,
        models: t.Iterable[ObstacleYamlModel],
    ) -> "ObstacleMap":
        return cls(board_width, board_height, [obstacle_to_polygon(m) for m in models])

    def collides(self, x: float, z: float, radius: float = 0.0) -> bool:
        footprint = Point(x, z).buffer(radius) if radius > 0 else Point(x, z)
        if not self.board.contains(footprint):
            return True
        if self._union is None:
            return False
        return self._union.intersects(footprint)


def obstacle_to_polygon(model: ObstacleYamlModel) -> Polygon:
    if isinstance(model, PolygonObstacleYamlModel):
        return Polygon(model.vertices)
    if isinstance(model, CircleObstacleYamlModel):
        return Point(*model.center).buffer(model.radius)
    raise TypeError(f"Unsupported obstacle model: {type(model).__name__}")
