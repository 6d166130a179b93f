# -*- coding: utf-8 -*-
import logging

from importlib.metadata import PackageNotFoundError, version

from cubegeom.bbox import BoundingBox
from cubegeom.coordinate import ORIGIN, Coordinate
from cubegeom.cube import Cube
from cubegeom.errors import InvalidArgument
from cubegeom.geom import epsilon
from cubegeom.segment import Segment

try:
    __version__ = version("cubegeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BoundingBox",
    "Coordinate",
    "Cube",
    "InvalidArgument",
    "ORIGIN",
    "Segment",
    "epsilon",
]
