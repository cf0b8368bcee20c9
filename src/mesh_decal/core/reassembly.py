"""Flatten clipped triangles into renderable decal mesh buffers."""

from collections.abc import Sequence

import numpy as np

from .models import DecalMeshResult
from .vertex import Triangle


def projection_uvs(positions: np.ndarray) -> np.ndarray:
    """Planar projection along decal Z: local X/Y in [-1, 1] map onto [0, 1]."""
    return positions[:, :2] * 0.5 + 0.5


def reassemble_mesh(triangles: Sequence[Triangle], offset: float = 0.0) -> DecalMeshResult:
    """Build unindexed buffers from ``triangles``.

    Projection uvs are taken from the clipped positions before each vertex is
    pushed ``offset`` along its own normal.
    """
    if not triangles:
        return DecalMeshResult.empty()

    vertices = [v for tri in triangles for v in tri.vertices]
    positions = np.array([v.position for v in vertices], dtype=np.float64)
    normals = np.array([v.normal for v in vertices], dtype=np.float64)

    uvs = projection_uvs(positions)
    positions = positions + normals * offset

    return DecalMeshResult(
        positions=positions,
        normals=normals,
        tangents=np.array([v.tangent for v in vertices], dtype=np.float64),
        uvs=uvs,
        original_uvs=np.array([v.uv for v in vertices], dtype=np.float64),
        triangles=np.arange(len(vertices), dtype=np.int64),
    )
