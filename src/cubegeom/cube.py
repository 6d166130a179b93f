"""Immutable, rotatable cubes.

A ``Cube`` is a center, a side length and three rotation angles in
radians about the x, y and z axes.  The angles accumulate: rotating by
``2*pi`` leaves a cube that is geometrically unchanged but stores a
different angle.  The combined rotation applies Z, then Y, then X (see
``cubegeom.xform.rotate_euler``).

Nothing derived is stored.  Vertices, edges, face normals and the
bounding box are recomputed from the five fields on every call, and
every transform returns a new Cube.

Vertex numbering
================

Vertex ``i`` sits at ``center + R * (sx, sy, sz) * side/2`` where the
signs come from the bits of ``i = 4*bx + 2*by + bz``, bit 0 meaning
``-1`` and bit 1 meaning ``+1``::

    0 (-,-,-)  1 (-,-,+)  2 (-,+,-)  3 (-,+,+)
    4 (+,-,-)  5 (+,-,+)  6 (+,+,-)  7 (+,+,+)

``edges()`` depends on this order.

Intersection
============

``intersects`` compares axis-aligned bounding boxes.  For rotated
cubes this can report an intersection where none exists, but never
misses one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Tuple

from cubegeom import xform
from cubegeom.bbox import BoundingBox
from cubegeom.coordinate import Coordinate
from cubegeom.errors import invalid
from cubegeom.geom import add, epsilon, isfinitenum, mag, sub, vstr
from cubegeom.segment import Segment

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

# vertex index pairs, in edges() order
EDGE_INDICES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (2, 3), (0, 2), (1, 3),
    (4, 5), (6, 7), (4, 6), (5, 7),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

# unrotated face normals, in face_normals() order
FACE_NORMALS: Tuple[Vec3, ...] = (
    (0.0, 1.0, 0.0), (0.0, -1.0, 0.0),
    (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0), (0.0, 0.0, -1.0),
)


def _finite(value, what: str) -> float:
    if not isfinitenum(value):
        raise invalid(logger, "%s must be a finite number, got %r", what, value)
    return float(value)


@dataclass(frozen=True)
class Cube:
    """A cube with the given ``center`` and ``side_length``.

    ``Cube(center, side)`` is unrotated; the rotation angles are set by
    the transform methods.
    """

    center: Coordinate
    side_length: float
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.center, Coordinate):
            raise invalid(logger, "cube center must be a Coordinate, got %r", self.center)
        side = _finite(self.side_length, "side length")
        if side <= 0.0:
            raise invalid(logger, "side length must be positive, got %r", side)
        object.__setattr__(self, "side_length", side)
        for name in ("rotation_x", "rotation_y", "rotation_z"):
            object.__setattr__(self, name, _finite(getattr(self, name), name))
        logger.debug("created cube center=%s side=%.6g rotation=(%.6g, %.6g, %.6g)",
                     self.center, side, self.rotation_x, self.rotation_y, self.rotation_z)

    @classmethod
    def from_corners(cls, corner1: Coordinate, corner2: Coordinate) -> "Cube":
        """Build a cube from two opposite corners.

        The side length is the mean of the three extents.  If the
        extents differ the corners do not describe a cube; a warning is
        logged and the mean is used anyway.
        """

        if not isinstance(corner1, Coordinate) or not isinstance(corner2, Coordinate):
            raise invalid(logger, "cube corners must be Coordinates, got %r and %r",
                          corner1, corner2)
        center = Coordinate((corner1.x + corner2.x) / 2.0,
                            (corner1.y + corner2.y) / 2.0,
                            (corner1.z + corner2.z) / 2.0)
        dx = abs(corner2.x - corner1.x)
        dy = abs(corner2.y - corner1.y)
        dz = abs(corner2.z - corner1.z)
        if abs(dx - dy) > epsilon or abs(dy - dz) > epsilon:
            logger.warning("corners %s and %s do not form a cube (dx=%.6g, dy=%.6g, dz=%.6g), "
                           "using the mean extent", corner1, corner2, dx, dy, dz)
        return cls(center, (dx + dy + dz) / 3.0)

    ## measurements

    def volume(self) -> float:
        return self.side_length ** 3

    def surface_area(self) -> float:
        return 6.0 * self.side_length ** 2

    def total_edge_length(self) -> float:
        return 12.0 * self.side_length

    def space_diagonal(self) -> float:
        return self.side_length * math.sqrt(3.0)

    def distance_from_center(self, p: Coordinate) -> float:
        return self.center.distance_to(p)

    ## rotation

    def is_rotated(self) -> bool:
        return not xform.isunrotated(self.rotation_x, self.rotation_y, self.rotation_z)

    def _rotate(self, v: Vec3, inverse: bool = False) -> Vec3:
        if not self.is_rotated():
            return (float(v[0]), float(v[1]), float(v[2]))
        return xform.rotate_euler(v, self.rotation_x, self.rotation_y, self.rotation_z,
                                  inverse=inverse)

    def rotation_matrix(self) -> xform.Matrix:
        """The combined rotation ``Rx * Ry * Rz`` as a matrix."""

        return xform.euler_rotation(self.rotation_x, self.rotation_y, self.rotation_z)

    def to_local(self, p: Coordinate) -> Vec3:
        """Express ``p`` in the cube's own frame, centered and unrotated."""

        if not isinstance(p, Coordinate):
            raise invalid(logger, "cannot map %r into the cube frame", p)
        return self._rotate(sub(p, self.center), inverse=True)

    ## derived geometry

    def vertices(self) -> Tuple[Coordinate, ...]:
        half = self.side_length / 2.0
        verts = []
        for bx in (-half, half):
            for by in (-half, half):
                for bz in (-half, half):
                    verts.append(Coordinate.of(add(self.center, self._rotate((bx, by, bz)))))
        return tuple(verts)

    def edges(self) -> Tuple[Segment, ...]:
        verts = self.vertices()
        return tuple(Segment(verts[i], verts[j]) for i, j in EDGE_INDICES)

    def face_normals(self) -> Tuple[Vec3, ...]:
        """Unit outward normals ordered +y, -y, +x, -x, +z, -z."""

        return tuple(self._rotate(n) for n in FACE_NORMALS)

    def axis_aligned_bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(self.vertices())

    ## transforms

    def translate(self, dx: float, dy: float, dz: float) -> "Cube":
        delta = (_finite(dx, "dx"), _finite(dy, "dy"), _finite(dz, "dz"))
        return replace(self, center=self.center.translate(*delta))

    def rotate_x(self, angle: float) -> "Cube":
        return replace(self, rotation_x=self.rotation_x + _finite(angle, "rotation angle"))

    def rotate_y(self, angle: float) -> "Cube":
        return replace(self, rotation_y=self.rotation_y + _finite(angle, "rotation angle"))

    def rotate_z(self, angle: float) -> "Cube":
        return replace(self, rotation_z=self.rotation_z + _finite(angle, "rotation angle"))

    def rotate_around_axis(self, axis_x: float, axis_y: float, axis_z: float,
                           angle: float) -> "Cube":
        """Rotate by ``angle`` radians about an axis through the center.

        The rotation is composed exactly with the current orientation and
        folded back into the three stored angles, so the stored angles
        after this call are the decomposition of the combined rotation
        rather than an accumulation.
        """

        axis = (_finite(axis_x, "axis x"), _finite(axis_y, "axis y"), _finite(axis_z, "axis z"))
        angle = _finite(angle, "rotation angle")
        if mag(axis) < epsilon:
            raise invalid(logger, "rotation axis cannot be zero-length: %s", vstr(axis))
        combined = xform.Rotation(axis, angle).mul(self.rotation_matrix())
        rx, ry, rz = xform.euler_angles(combined)
        logger.debug("rotated about axis %s by %.6g, angles now (%.6g, %.6g, %.6g)",
                     vstr(axis), angle, rx, ry, rz)
        return replace(self, rotation_x=rx, rotation_y=ry, rotation_z=rz)

    def scale(self, factor: float) -> "Cube":
        factor = _finite(factor, "scale factor")
        if factor <= 0.0:
            raise invalid(logger, "scale factor must be positive, got %r", factor)
        return replace(self, side_length=self.side_length * factor)

    ## queries

    def contains_point(self, p: Coordinate) -> bool:
        """Is ``p`` inside or on the cube, within epsilon?"""

        local = self.to_local(p)
        half = self.side_length / 2.0 + epsilon
        return abs(local[0]) <= half and abs(local[1]) <= half and abs(local[2]) <= half

    def intersects(self, other: "Cube") -> bool:
        if not isinstance(other, Cube):
            raise invalid(logger, "cannot test intersection with %r", other)
        return self.axis_aligned_bounding_box().overlaps(other.axis_aligned_bounding_box())

    def __str__(self) -> str:
        return "Cube[center={}, side={:.2f}, rotation=({:.2f}°, {:.2f}°, {:.2f}°), volume={:.2f}]".format(
            self.center, self.side_length,
            math.degrees(self.rotation_x), math.degrees(self.rotation_y),
            math.degrees(self.rotation_z), self.volume())


__all__ = ["Cube", "EDGE_INDICES", "FACE_NORMALS"]
