"""Axis-aligned bounding boxes."""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Tuple

from cubegeom.coordinate import Coordinate
from cubegeom.errors import invalid
from cubegeom.geom import epsilon

logger = logging.getLogger(__name__)


class BoundingBox(NamedTuple):
    """Box spanning ``(minx, miny, minz)`` to ``(maxx, maxy, maxz)``.

    Unpacks as the 6-tuple ``(minx, miny, minz, maxx, maxy, maxz)``.
    """

    minx: float
    miny: float
    minz: float
    maxx: float
    maxy: float
    maxz: float

    @classmethod
    def from_points(cls, points: Iterable) -> "BoundingBox":
        pts = list(points)
        if not pts:
            raise invalid(logger, "cannot bound an empty set of points")
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        zs = [p[2] for p in pts]
        return cls(min(xs), min(ys), min(zs), max(xs), max(ys), max(zs))

    @property
    def min_corner(self) -> Coordinate:
        return Coordinate(self.minx, self.miny, self.minz)

    @property
    def max_corner(self) -> Coordinate:
        return Coordinate(self.maxx, self.maxy, self.maxz)

    @property
    def size(self) -> Tuple[float, float, float]:
        return (self.maxx - self.minx, self.maxy - self.miny, self.maxz - self.minz)

    def overlaps(self, other: "BoundingBox") -> bool:
        """Inclusive overlap on all three axes; touching boxes overlap."""

        if not isinstance(other, BoundingBox):
            raise invalid(logger, "cannot test overlap with %r", other)
        return (self.maxx >= other.minx and self.minx <= other.maxx and
                self.maxy >= other.miny and self.miny <= other.maxy and
                self.maxz >= other.minz and self.minz <= other.maxz)

    def contains(self, p) -> bool:
        """Does point ``p`` lie inside the box, within epsilon?"""

        if p is None:
            raise invalid(logger, "cannot test containment of None")
        return (self.minx - epsilon <= p[0] <= self.maxx + epsilon and
                self.miny - epsilon <= p[1] <= self.maxy + epsilon and
                self.minz - epsilon <= p[2] <= self.maxz + epsilon)


__all__ = ["BoundingBox"]
