import numpy as np

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    id: int = field(default=-1)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        # id is a handle, not a coordinate
        return self.x == other.x and self.y == other.y

    def __lt__(self, other):
        return self.x < other.x or self.x == other.x and self.y < other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __str__(self):
        return f"({self.x}, {self.y})"


class PointSet:
    """
    Ordered collection of points.

    Points created through `add_new_point` get consecutive ids starting from 0,
    points added through `add_point` keep the id they already have.
    """
    def __init__(self):
        self.points: list[Point] = []
        self.next_id: int = 0

    @classmethod
    def from_coords(cls, xs, ys) -> "PointSet":
        ps = cls()
        for x, y in zip(xs, ys):
            ps.add_new_point(float(x), float(y))
        return ps

    def add_new_point(self, x: float, y: float) -> Point:
        point = Point(x, y, self.next_id)
        self.points.append(point)
        self.next_id += 1
        return point

    def add_point(self, point: Point):
        self.points.append(point)

    def sort(self):
        self.points.sort()

    def reverse(self):
        self.points.reverse()

    def reset(self):
        self.points = []
        self.next_id = 0

    def x_coords(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=float)

    def y_coords(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=float)

    def size(self) -> int:
        return len(self.points)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, idx):
        return self.points[idx]

    def __str__(self):
        return "[" + ", ".join(str(p) for p in self.points) + "]"


def cross(o: Point, a: Point, b: Point) -> float:
    """
    Cross product of segments oa and ob.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(a: Point, b: Point, c: Point) -> int:
    """
    Orientation of the turn a -> b -> c in screen coordinates (y axis points down).
    Returns 1 for a clockwise (right) turn, -1 for a counter-clockwise (left) turn
    and 0 if the points are collinear.
    """
    value = cross(a, b, c)
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def is_right_turn(a: Point, b: Point, c: Point, strict: bool = False) -> bool:
    """
    Right turn test for a -> b -> c in screen coordinates.
    Collinear points count as a right turn unless `strict` is set.
    """
    value = cross(a, b, c)
    if strict:
        return value > 0
    return value >= 0


def extends_chain(a: Point, b: Point, c: Point, keep_collinear: bool = False) -> bool:
    """
    Whether c may follow the segment a -> b on a convex chain.

    A right turn always does. A collinear c does only when collinear points are
    kept and c lies strictly past b in the direction of a -> b, so that
    coincident points and steps back along the segment are rejected.
    """
    value = cross(a, b, c)
    if value > 0:
        return True
    if not keep_collinear or value != 0:
        return False
    return (b.x - a.x) * (c.x - b.x) + (b.y - a.y) * (c.y - b.y) > 0


def convex_hull_andrew(points: list[Point], keep_collinear=False) -> list[Point]:
    """
    Andrew's monotone chain algorithm for convex hull, computed in one go.
    Assumes input is sorted by (x, y). Time complexity: O(n).

    Vertices are returned clockwise on screen starting from the first point.
    """
    if len(points) <= 2:
        return list(points)

    upper = []  # left to right
    for p in points:
        while len(upper) >= 2 and not extends_chain(upper[-2], upper[-1], p, keep_collinear):
            upper.pop()
        upper.append(p)

    lower = []  # right to left
    for p in reversed(points):
        while len(lower) >= 2 and not extends_chain(lower[-2], lower[-1], p, keep_collinear):
            lower.pop()
        lower.append(p)

    # chain ends are shared
    return upper[:-1] + lower[:-1]
