"""Immutable points in 3D space."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from cubegeom.errors import invalid
from cubegeom.geom import dist, isfinitenum, vstr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A point in 3D space with finite ``x``, ``y`` and ``z`` components.

    Coordinates index and iterate like the 3-tuple ``(x, y, z)``, so they
    can be handed to any of the vector functions in ``cubegeom.geom``.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            value = getattr(self, name)
            if not isfinitenum(value):
                raise invalid(logger, "coordinate %s must be a finite number, got %r", name, value)
            object.__setattr__(self, name, float(value))

    @classmethod
    def of(cls, xyz) -> "Coordinate":
        """Build a Coordinate from any indexable ``(x, y, z)``."""

        return cls(xyz[0], xyz[1], xyz[2])

    def distance_to(self, other: "Coordinate") -> float:
        if not isinstance(other, Coordinate):
            raise invalid(logger, "cannot measure distance to %r", other)
        return dist(self, other)

    def translate(self, dx: float, dy: float, dz: float) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy, self.z + dz)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __str__(self) -> str:
        return vstr(self)


ORIGIN = Coordinate(0.0, 0.0, 0.0)


__all__ = ["Coordinate", "ORIGIN"]
