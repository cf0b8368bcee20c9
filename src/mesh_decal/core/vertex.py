"""Vertex and triangle value types used by the clipping kernel.

A vertex carries every attribute the decal mesh needs (position, normal,
tangent, uv). Attributes are never interpolated independently: ``lerp``
blends all four with one factor.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Vertex:
    """One vertex in decal-local space.

    Attributes:
        position: (3,) point.
        normal: (3,) direction, not necessarily unit length.
        tangent: (4,) xyz direction plus w handedness sign.
        uv: (2,) texture coordinate of the source mesh.
    """

    position: np.ndarray
    normal: np.ndarray
    tangent: np.ndarray
    uv: np.ndarray


@dataclass(frozen=True, slots=True, eq=False)
class Triangle:
    """An ordered triple of vertices. Winding order is significant."""

    a: Vertex
    b: Vertex
    c: Vertex

    @property
    def vertices(self) -> tuple[Vertex, Vertex, Vertex]:
        return (self.a, self.b, self.c)

    def positions(self) -> np.ndarray:
        """Return a (3, 3) array of the vertex positions."""
        return np.array([self.a.position, self.b.position, self.c.position])


def lerp(a: Vertex, b: Vertex, d: float) -> Vertex:
    """Linearly interpolate every attribute of two vertices.

    ``d`` is not clamped and normals/tangents are not renormalized.
    """
    return Vertex(
        position=a.position + (b.position - a.position) * d,
        normal=a.normal + (b.normal - a.normal) * d,
        tangent=a.tangent + (b.tangent - a.tangent) * d,
        uv=a.uv + (b.uv - a.uv) * d,
    )
