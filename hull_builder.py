import logging

from enum import Enum
from geometry import Point, PointSet, extends_chain

logger = logging.getLogger(__name__)


class HullError(Exception):
    pass


class EmptyInputError(HullError):
    pass


class InvalidStateError(HullError):
    pass


class Phase(Enum):
    UPPER_CHAIN = "upper"
    LOWER_CHAIN = "lower"
    DONE = "done"


class HullObserver:
    """
    Receives notifications about hull construction.
    All methods do nothing by default, override the ones you need.
    """
    def on_hull_changed(self, hull: list[Point]):
        pass

    def on_vertex_joined_hull(self, point_id: int):
        pass

    def on_vertex_left_hull(self, point_id: int):
        pass

    def on_vertex_highlighted(self, point_id: int):
        pass

    def on_vertex_unhighlighted(self, point_id: int):
        pass


class HullBuilder:
    """
    Step-by-step version of Andrew's monotone chain algorithm.

    The first pass goes over the sorted points from left to right, the second one
    goes back from right to left over the reversed point set. Both passes push
    candidates on the same hull stack and pop its top when the turn is wrong.
    The resulting boundary goes clockwise on screen (y axis points down),
    starting from the leftmost point.

    The point set is sorted and reversed in place. It is left sorted
    in ascending order once the computation is done.
    """
    def __init__(self, point_set: PointSet, observer: HullObserver | None = None, keep_collinear: bool = False):
        self.ps = point_set
        self.observer = observer
        self.keep_collinear = keep_collinear

        self.hull: list[Point] = []
        self.cursor: int = 0
        self.upper_chain_snapshot: list[Point] = []
        self.steps: int = 0
        self._phase: Phase | None = None
        self._candidate: Point | None = None
        self._silent: bool = False

    @property
    def phase(self) -> Phase | None:
        return self._phase

    def is_done(self) -> bool:
        return self._phase == Phase.DONE

    def _notify(self, event: str, *args):
        if self.observer is None or self._silent:
            return
        getattr(self.observer, event)(*args)

    def _push(self, point: Point):
        self.hull.append(point)
        self._notify("on_vertex_joined_hull", point.id)

    def _pop(self) -> Point:
        point = self.hull.pop()
        self._notify("on_vertex_left_hull", point.id)
        return point

    def _update_candidate(self):
        """
        Move highlighting to the point under the cursor.
        """
        candidate = None
        if self._phase in (Phase.UPPER_CHAIN, Phase.LOWER_CHAIN) and self.cursor < self.ps.size():
            candidate = self.ps[self.cursor]
        if candidate is self._candidate:
            return
        if self._candidate is not None:
            self._notify("on_vertex_unhighlighted", self._candidate.id)
        if candidate is not None:
            self._notify("on_vertex_highlighted", candidate.id)
        self._candidate = candidate

    def _chain_base(self) -> int:
        """
        Index in the hull stack where the chain of the current pass starts.
        The second pass starts from the last point of the first one
        and never pops below it.
        """
        if self._phase == Phase.LOWER_CHAIN:
            return len(self.upper_chain_snapshot) - 2
        return 0

    def _accepts(self, a: Point, b: Point, c: Point) -> bool:
        if a.id == c.id:
            # the chain came back to its own start
            return True
        return extends_chain(a, b, c, self.keep_collinear)

    def _restore_order(self):
        # the second pass runs over the reversed point set
        if self._phase == Phase.LOWER_CHAIN:
            self.ps.reverse()

    def cancel(self):
        """
        Abandon the computation in progress. The point set is left
        in ascending order, like after a finished one.
        """
        self._restore_order()
        self._phase = None
        self._update_candidate()

    def start(self):
        if self.ps.size() == 0:
            raise EmptyInputError("Cannot build convex hull of an empty point set")

        self._restore_order()
        self._candidate = None
        self.hull = []
        self.upper_chain_snapshot = []
        self.steps = 0
        self.ps.sort()

        if self.ps.size() == 1:
            self._phase = Phase.DONE
            self._push(self.ps[0])
            self.cursor = 1
            self._notify("on_hull_changed", list(self.hull))
            return

        self._phase = Phase.UPPER_CHAIN
        self._push(self.ps[0])
        self._push(self.ps[1])
        self.cursor = 2
        logger.debug("Started hull construction on %d points", self.ps.size())

        self._notify("on_hull_changed", list(self.hull))
        self._update_candidate()

    def step(self) -> bool:
        """
        Perform a single step of the algorithm.
        Returns True if construction is finished.
        """
        if self._phase is None:
            raise InvalidStateError("step() called before start()")
        if self._phase == Phase.DONE:
            return True

        self.steps += 1
        n = self.ps.size()

        if len(self.hull) - self._chain_base() < 2:
            self._push(self.ps[self.cursor])
            self.cursor += 1
        elif self.cursor == n and self._phase == Phase.UPPER_CHAIN:
            self._phase = Phase.LOWER_CHAIN
            self.ps.reverse()
            self._push(self.ps[1])
            self.upper_chain_snapshot = list(self.hull)
            self.cursor = 2
            logger.debug("Upper chain finished with %d vertices", len(self.hull) - 1)
        elif self.cursor == n:
            self._phase = Phase.DONE
            self.ps.reverse()
            self._update_candidate()
            logger.debug("Hull construction finished in %d steps", self.steps)
            return True
        else:
            a, b = self.hull[-2], self.hull[-1]
            c = self.ps[self.cursor]
            if self._accepts(a, b, c):
                self._push(c)
                self.cursor += 1
            else:
                self._pop()

        self._notify("on_hull_changed", list(self.hull))
        self._update_candidate()
        return False

    def run(self) -> PointSet:
        """
        Compute the whole hull at once. Observer only gets the final hull.
        """
        self._silent = True
        try:
            self.start()
            while not self.step():
                pass
        finally:
            self._silent = False

        self._notify("on_hull_changed", list(self.hull))
        return self.result()

    def result(self) -> PointSet:
        """
        Hull vertices clockwise on screen, starting from the leftmost point
        (ties broken by minimum y).
        """
        if self._phase != Phase.DONE:
            raise InvalidStateError("Hull construction is not finished")

        vertices = self.hull
        if len(vertices) > 1 and vertices[-1].id == vertices[0].id:
            vertices = vertices[:-1]

        convex_hull = PointSet()
        for p in vertices:
            convex_hull.add_point(p)
        return convex_hull


def convex_hull(point_set: PointSet, keep_collinear: bool = False) -> PointSet:
    """
    Convex hull of a point set computed without visualization.
    """
    if point_set.size() == 0:
        raise EmptyInputError("Cannot build convex hull of an empty point set")
    if point_set.size() == 1:
        single = PointSet()
        single.add_point(point_set[0])
        return single
    return HullBuilder(point_set, keep_collinear=keep_collinear).run()
