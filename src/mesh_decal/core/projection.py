"""Bring source triangles into decal space, cull them, and clip the rest."""

import logging

import numpy as np

from ..models import SourceMesh
from .clipper import CLIP_AXES, clip_to_cube
from .transform import SourceToDecalTransform
from .vertex import Triangle, Vertex

logger = logging.getLogger(__name__)


def _outside_any_face(tri_positions: np.ndarray) -> np.ndarray:
    """Mask of triangles whose three vertices all lie beyond one cube face.

    Args:
        tri_positions: (T, 3, 3) array of triangle vertex positions.
    """
    outside = np.zeros(len(tri_positions), dtype=bool)
    for axis in CLIP_AXES:
        outside |= np.all(tri_positions @ axis > 1, axis=1)
    return outside


def project_source_triangles(
    source: SourceMesh,
    transform: SourceToDecalTransform,
    remove_backfaces: bool = True,
) -> list[Triangle]:
    """Transform, cull and clip every triangle of ``source``.

    Triangles entirely beyond one face of the unit cube are dropped before
    clipping. With ``remove_backfaces``, triangles whose summed vertex normal
    points along +Z of the decal (away from the projection) are dropped too.
    Triangles already inside the cube are kept as they are.

    Returns:
        Triangles in decal-local space, in source index order.
    """
    tris = source.indices.reshape(-1, 3)
    if len(tris) == 0:
        logger.warning("Source mesh %r has no triangles", source.name)
        return []

    positions = transform.transform_points(source.positions)
    normals = transform.transform_directions(source.normals)
    tangents = transform.transform_tangents(source.tangents)
    uvs = source.uvs

    tri_positions = positions[tris]
    rejected = _outside_any_face(tri_positions)
    if remove_backfaces:
        facing_away = normals[tris].sum(axis=1)[:, 2] > 0
        backfaces = int(np.count_nonzero(facing_away & ~rejected))
        rejected |= facing_away
    else:
        backfaces = 0
    contained = np.all(np.abs(tri_positions) <= 1, axis=(1, 2))

    result: list[Triangle] = []
    clipped = 0
    for t in np.flatnonzero(~rejected):
        triangle = Triangle(*(
            Vertex(positions[i], normals[i], tangents[i], uvs[i]) for i in tris[t]
        ))
        if contained[t]:
            result.append(triangle)
        else:
            clipped += 1
            result.extend(clip_to_cube(triangle))

    logger.debug(
        "Projected %d source triangles: %d outside volume, %d backfaces, "
        "%d clipped, %d output",
        len(tris), int(np.count_nonzero(rejected)) - backfaces, backfaces,
        clipped, len(result),
    )
    return result
