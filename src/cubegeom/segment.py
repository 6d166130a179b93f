"""Immutable line segments in 3D space.

A ``Segment`` is parameterised over ``0 <= t <= 1`` where ``t=0`` is
``start`` and ``t=1`` is ``end``.  Parameters outside that interval
are still on the line, but not inside the segment.

Two distance queries are provided:

- ``shortest_distance_to`` measures between the *infinite lines*
  through each segment.  For skew lines this is ``|w . (d1 x d2)| /
  |d1 x d2|``; for parallel lines it is the perpendicular distance from
  the other segment's start to this line.  Segment extents are ignored.

- ``segment_distance_to`` measures between the bounded segments, by
  clamping both closest-point parameters to ``[0, 1]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import mpmath as mpm

from cubegeom.coordinate import Coordinate
from cubegeom.errors import invalid
from cubegeom.geom import add, cross, dot, epsilon, mag, scale3, sub, vstr

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]


def _clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


@dataclass(frozen=True)
class Segment:
    """A line segment between two distinct Coordinates."""

    start: Coordinate
    end: Coordinate

    def __post_init__(self) -> None:
        if not isinstance(self.start, Coordinate) or not isinstance(self.end, Coordinate):
            raise invalid(logger, "segment endpoints must be Coordinates, got %r and %r",
                          self.start, self.end)
        if self.start == self.end:
            raise invalid(logger, "segment endpoints must be distinct, both are %s", self.start)
        d = self.direction()
        if dot(d, d) == 0.0:
            raise invalid(logger, "segment %s -> %s is too short to have a direction",
                          self.start, self.end)
        logger.debug("created segment %s -> %s", self.start, self.end)

    def _require(self, other, kind, what: str):
        if not isinstance(other, kind):
            raise invalid(logger, "cannot %s %r", what, other)
        return other

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Vec3:
        """Return ``end - start``."""

        return sub(self.end, self.start)

    def midpoint(self) -> Coordinate:
        return Coordinate((self.start.x + self.end.x) / 2.0,
                          (self.start.y + self.end.y) / 2.0,
                          (self.start.z + self.end.z) / 2.0)

    def point_at(self, t: float) -> Coordinate:
        """Sample the line at parameter ``t``, without clamping."""

        return Coordinate.of(add(self.start, scale3(self.direction(), t)))

    def reversed(self) -> "Segment":
        return Segment(self.end, self.start)

    def is_parallel(self, other: "Segment") -> bool:
        """True if the direction cross product is zero within epsilon per component."""

        self._require(other, Segment, "test parallelism with")
        c = cross(self.direction(), other.direction())
        return abs(c[0]) < epsilon and abs(c[1]) < epsilon and abs(c[2]) < epsilon

    def contains_point(self, p: Coordinate) -> bool:
        self._require(p, Coordinate, "test containment of")
        v = sub(p, self.start)
        d = self.direction()
        if mag(cross(v, d)) > epsilon:
            return False
        s = dot(v, d)
        return -epsilon <= s <= dot(d, d) + epsilon

    def closest_point_to(self, p: Coordinate) -> Coordinate:
        """Return the point on the segment nearest ``p``."""

        self._require(p, Coordinate, "find the closest point to")
        d = self.direction()
        t = _clamp01(dot(sub(p, self.start), d) / dot(d, d))
        return Coordinate.of(add(self.start, scale3(d, t)))

    def shortest_distance_to(self, other: "Segment") -> float:
        """Distance between the infinite lines containing the two segments.

        This is not the bounded segment distance when the closest
        approach falls outside either segment; see
        ``segment_distance_to`` for that.
        """

        self._require(other, Segment, "measure distance to")
        d1 = self.direction()
        d2 = other.direction()
        w = sub(other.start, self.start)
        c = cross(d1, d2)
        m = mag(c)

        if m < epsilon:
            distance = mag(cross(w, d1)) / mag(d1)
            logger.debug("parallel lines, perpendicular distance %.6g", distance)
            return distance

        # the scalar triple product loses precision for nearly
        # coplanar lines, so accumulate it in extended precision
        triple = mpm.fdot(list(w), list(c))
        distance = float(mpm.fabs(triple) / m)
        if distance < epsilon:
            logger.debug("lines intersect")
        else:
            logger.debug("skew lines, distance %.6g", distance)
        return distance

    def closest_points_to(self, other: "Segment") -> Tuple[Coordinate, Coordinate]:
        """Return the closest pair of points ``(on self, on other)``
        between the two bounded segments."""

        self._require(other, Segment, "find the closest points to")
        d1 = self.direction()
        d2 = other.direction()
        r = sub(self.start, other.start)
        a = dot(d1, d1)
        e = dot(d2, d2)
        f = dot(d2, r)
        c = dot(d1, r)
        b = dot(d1, d2)
        denom = a * e - b * b

        if denom > epsilon * a * e:
            s = _clamp01((b * f - c * e) / denom)
        else:
            # parallel: any s works, start from this segment's start
            s = 0.0

        t = (b * s + f) / e
        if t < 0.0:
            t = 0.0
            s = _clamp01(-c / a)
        elif t > 1.0:
            t = 1.0
            s = _clamp01((b - c) / a)

        return (Coordinate.of(add(self.start, scale3(d1, s))),
                Coordinate.of(add(other.start, scale3(d2, t))))

    def segment_distance_to(self, other: "Segment") -> float:
        """Minimum distance between the two bounded segments."""

        p, q = self.closest_points_to(other)
        return p.distance_to(q)

    def __str__(self) -> str:
        return "Segment[{} -> {}, length={:.2f}]".format(
            vstr(self.start), vstr(self.end), self.length())


__all__ = ["Segment"]
