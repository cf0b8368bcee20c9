"""Decal mesh generation: one full recomputation from current inputs."""

import logging

from ..models import SourceMesh, Transform
from .models import DecalMeshResult
from .projection import project_source_triangles
from .reassembly import reassemble_mesh
from .transform import SourceToDecalTransform

logger = logging.getLogger(__name__)


def generate_decal_mesh(
    source: SourceMesh,
    source_transform: Transform,
    decal_transform: Transform,
    offset: float = 0.01,
    remove_backfaces: bool = True,
) -> DecalMeshResult:
    """Project ``source`` into the decal volume and build the decal mesh.

    Args:
        source: Geometry to project onto, in its own local space.
        source_transform: Source object-to-world transform.
        decal_transform: Decal object-to-world transform. The decal volume is
            [-1, 1]^3 in its local space.
        offset: Distance each output vertex is pushed along its normal.
        remove_backfaces: Drop triangles facing away from the projection.

    Returns:
        DecalMeshResult; ``is_empty`` when nothing lies inside the volume.
    """
    transform = SourceToDecalTransform(source_transform, decal_transform)
    triangles = project_source_triangles(source, transform, remove_backfaces)
    result = reassemble_mesh(triangles, offset)
    logger.debug(
        "Decal mesh from %r: %d triangles, %d vertices",
        source.name, result.triangle_count, result.vertex_count,
    )
    return result
