"""Source-mesh to decal-local coordinate transforms."""

import numpy as np

from ..models import Transform


class SourceToDecalTransform:
    """Maps source-mesh local coordinates into the decal's local frame.

    Points go through both full affine transforms (source to world, then
    world to decal). Directions only go through the rotations, so normals
    and tangents ignore translation and scale.
    """

    def __init__(self, source: Transform, decal: Transform):
        self.point_matrix = decal.inverse_matrix() @ source.matrix()
        self.direction_matrix = decal.rotation_matrix().T @ source.rotation_matrix()

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Transform (N, 3) points."""
        points = np.asarray(points, dtype=np.float64)
        return points @ self.point_matrix[:3, :3].T + self.point_matrix[:3, 3]

    def transform_directions(self, directions: np.ndarray) -> np.ndarray:
        """Rotate (N, 3) directions."""
        return np.asarray(directions, dtype=np.float64) @ self.direction_matrix.T

    def transform_tangents(self, tangents: np.ndarray) -> np.ndarray:
        """Rotate the xyz part of (N, 4) tangents; w handedness is kept."""
        tangents = np.asarray(tangents, dtype=np.float64)
        out = tangents.copy()
        out[:, :3] = self.transform_directions(tangents[:, :3])
        return out
