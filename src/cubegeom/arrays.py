"""numpy views of cube geometry for renderers and spatial indexes."""

from __future__ import annotations

import numpy as np

from cubegeom.cube import EDGE_INDICES, Cube


def vertex_array(cube: Cube) -> np.ndarray:
    """Return the ``(8, 3)`` vertex positions in ``Cube.vertices()`` order."""

    return np.array([v.to_tuple() for v in cube.vertices()], dtype=np.float64)


def edge_index_array() -> np.ndarray:
    """Return the ``(12, 2)`` vertex index pairs in ``Cube.edges()`` order."""

    return np.array(EDGE_INDICES, dtype=np.intp)


def edge_array(cube: Cube) -> np.ndarray:
    """Return the ``(12, 2, 3)`` edge endpoints of ``cube``."""

    return vertex_array(cube)[edge_index_array()]


def normal_array(cube: Cube) -> np.ndarray:
    """Return the ``(6, 3)`` unit face normals in ``Cube.face_normals()`` order."""

    return np.array(cube.face_normals(), dtype=np.float64)


def bbox_array(cube: Cube) -> np.ndarray:
    """Return the bounding box as ``[[minx, miny, minz], [maxx, maxy, maxz]]``."""

    return np.array(cube.axis_aligned_bounding_box(), dtype=np.float64).reshape(2, 3)


__all__ = [
    "vertex_array",
    "edge_index_array",
    "edge_array",
    "normal_array",
    "bbox_array",
]
