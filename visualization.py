import matplotlib.pyplot as plt
from collections import Counter
from matplotlib.axes import Axes

from geometry import Point
from hull_builder import HullObserver

POINT_COLOR = 'b'
HULL_COLOR = 'g'
HIGHLIGHT_COLOR = 'r'
UPPER_EDGE_COLOR = 'g'
LOWER_EDGE_COLOR = 'm'


def setup_screen_axes(ax: Axes, width: float, height: float):
    """
    Make axes look like a screen: origin in the top left corner, y axis points down.
    """
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)


def plot_points(points: list[Point], ax: Axes | None = None):
    x = [p.x for p in points]
    y = [p.y for p in points]
    if ax is None:
        plt.scatter(x, y, c=POINT_COLOR)
    else:
        ax.scatter(x, y, c=POINT_COLOR)


def plot_hull(hull: list[Point], ax: Axes | None = None, clr: str = HULL_COLOR):
    """
    Draw a finished hull as a closed polygon.
    """
    if ax is None:
        ax = plt.gca()
    hull = list(hull)
    if len(hull) > 1:
        hull.append(hull[0])
    xs = [p.x for p in hull]
    ys = [p.y for p in hull]
    ax.plot(xs, ys, c=clr)
    ax.scatter(xs, ys, c=clr, s=12)


class HullPlotter(HullObserver):
    """
    Draws hull construction on matplotlib axes.

    Each point gets its own marker, looked up by point id. Edges of the chain
    built by the first pass are drawn separately from the second pass ones,
    the caller tells where the first chain ends via `upper_chain_size`.
    """
    def __init__(self, ax: Axes):
        self.ax = ax
        self.markers = {}
        self.membership = Counter()
        self.highlighted: int | None = None
        self.upper_chain_size: int | None = None

        self.upper_edges, = ax.plot([], [], c=UPPER_EDGE_COLOR, lw=1.5)
        self.lower_edges, = ax.plot([], [], c=LOWER_EDGE_COLOR, lw=1.5)

    def add_vertex(self, point: Point):
        marker, = self.ax.plot([point.x], [point.y], 'o', c=POINT_COLOR, ms=5)
        self.markers[point.id] = marker

    def clear(self):
        for marker in self.markers.values():
            marker.remove()
        self.markers = {}
        self.reset()

    def reset(self):
        """
        Forget the state of previous hull construction, keep the vertices.
        """
        self.membership.clear()
        self.highlighted = None
        self.upper_chain_size = None
        self.upper_edges.set_data([], [])
        self.lower_edges.set_data([], [])
        for point_id in self.markers:
            self._restyle(point_id)

    def _restyle(self, point_id: int):
        marker = self.markers.get(point_id)
        if marker is None:
            return
        if point_id == self.highlighted:
            marker.set_color(HIGHLIGHT_COLOR)
            marker.set_markersize(8)
        elif self.membership[point_id] > 0:
            marker.set_color(HULL_COLOR)
            marker.set_markersize(6)
        else:
            marker.set_color(POINT_COLOR)
            marker.set_markersize(5)

    def on_hull_changed(self, hull: list[Point]):
        if len(hull) < 2:
            self.upper_edges.set_data([], [])
            self.lower_edges.set_data([], [])
            return

        split = len(hull)
        if self.upper_chain_size is not None:
            split = min(self.upper_chain_size, len(hull))
        upper, lower = hull[:split], hull[split - 1:]
        self.upper_edges.set_data([p.x for p in upper], [p.y for p in upper])
        if len(lower) > 1:
            self.lower_edges.set_data([p.x for p in lower], [p.y for p in lower])
        else:
            self.lower_edges.set_data([], [])

    def on_vertex_joined_hull(self, point_id: int):
        self.membership[point_id] += 1
        self._restyle(point_id)

    def on_vertex_left_hull(self, point_id: int):
        self.membership[point_id] -= 1
        self._restyle(point_id)

    def on_vertex_highlighted(self, point_id: int):
        self.highlighted = point_id
        self._restyle(point_id)

    def on_vertex_unhighlighted(self, point_id: int):
        if self.highlighted == point_id:
            self.highlighted = None
        self._restyle(point_id)
