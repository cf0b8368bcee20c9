"""Triangle clipping against the decal volume.

The decal volume is the cube [-1, 1]^3 in decal-local space. Each of its six
faces is a half-space test along one axis: a point is outside the face when
its dot product with the axis exceeds 1. Clipping a triangle against the
cube is six successive half-space clips.
"""

from dataclasses import replace

import numpy as np

from .vertex import Triangle, Vertex, lerp

LEFT = np.array([-1.0, 0.0, 0.0])
UP = np.array([0.0, 1.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])
DOWN = np.array([0.0, -1.0, 0.0])
BACK = np.array([0.0, 0.0, -1.0])
FORWARD = np.array([0.0, 0.0, 1.0])

# Fixed face order. Any order gives the same region; this one is kept so
# output triangle order stays stable between runs.
CLIP_AXES = (LEFT, UP, RIGHT, DOWN, BACK, FORWARD)


def plane_distances(triangle: Triangle, axis: np.ndarray) -> tuple[float, float, float]:
    """Signed coordinates of the triangle's vertices along ``axis``."""
    return (
        float(np.dot(triangle.a.position, axis)),
        float(np.dot(triangle.b.position, axis)),
        float(np.dot(triangle.c.position, axis)),
    )


def is_outside_face(positions: np.ndarray, axis: np.ndarray) -> bool:
    """True if every point in ``positions`` (N, 3) lies beyond the face of ``axis``."""
    return bool(np.all(positions @ axis > 1))


def is_inside_unit_cube(positions) -> bool:
    """True if every point in ``positions`` lies within [-1, 1]^3 (inclusive)."""
    return bool(np.all(np.abs(np.asarray(positions)) <= 1))


def _on_plane(a: Vertex, b: Vertex, d: float, axis: np.ndarray) -> Vertex:
    """Interpolate between ``a`` and ``b`` onto the face plane of ``axis``.

    The coordinate along ``axis`` is exactly the plane value and every other
    coordinate stays within the bounds of the edge, whatever the rounding.
    """
    v = lerp(a, b, d)
    position = np.clip(
        v.position,
        np.minimum(a.position, b.position),
        np.maximum(a.position, b.position),
    )
    k = int(np.argmax(np.abs(axis)))
    position[k] = axis[k]
    return replace(v, position=position)


def _cut_to_triangle(
    inside: Vertex, out1: Vertex, out2: Vertex,
    f_in: float, f_out1: float, f_out2: float,
    axis: np.ndarray,
) -> Triangle:
    """Keep the corner around the lone inside vertex."""
    d1 = (1 - f_in) / (f_out1 - f_in)
    d2 = (1 - f_in) / (f_out2 - f_in)
    return Triangle(
        inside,
        _on_plane(inside, out1, d1, axis),
        _on_plane(inside, out2, d2, axis),
    )


def _cut_to_quad(
    outside: Vertex, in1: Vertex, in2: Vertex,
    f_out: float, f_in1: float, f_in2: float,
    axis: np.ndarray,
) -> list[Triangle]:
    """Keep the quad left after cutting off the lone outside vertex.

    The two triangles share the edge in1-q2.
    """
    d1 = (1 - f_out) / (f_in1 - f_out)
    d2 = (1 - f_out) / (f_in2 - f_out)
    q1 = _on_plane(outside, in1, d1, axis)
    q2 = _on_plane(outside, in2, d2, axis)
    return [Triangle(in1, in2, q2), Triangle(in1, q2, q1)]


def clip_triangle(triangle: Triangle, axis: np.ndarray) -> list[Triangle] | None:
    """Clip a triangle against the half-space ``dot(p, axis) <= 1``.

    Args:
        triangle: Triangle in decal-local space.
        axis: One of the six entries of ``CLIP_AXES``.

    Returns:
        None if the triangle passes the face unchanged, otherwise the list of
        replacement triangles (empty when the triangle is fully outside).

    A vertex lying exactly on the plane is neither inside nor outside: any
    such tie leaves the triangle unchanged unless all three are outside.
    """
    a, b, c = triangle.vertices
    fa, fb, fc = plane_distances(triangle, axis)

    if fa > 1 and fb > 1 and fc > 1:
        return []

    # One vertex inside: a single smaller triangle survives
    if fa < 1 and fb > 1 and fc > 1:
        return [_cut_to_triangle(a, b, c, fa, fb, fc, axis)]
    if fa > 1 and fb < 1 and fc > 1:
        return [_cut_to_triangle(b, c, a, fb, fc, fa, axis)]
    if fa > 1 and fb > 1 and fc < 1:
        return [_cut_to_triangle(c, a, b, fc, fa, fb, axis)]

    # One vertex outside: a quad survives
    if fa > 1 and fb < 1 and fc < 1:
        return _cut_to_quad(a, b, c, fa, fb, fc, axis)
    if fa < 1 and fb > 1 and fc < 1:
        return _cut_to_quad(b, c, a, fb, fc, fa, axis)
    if fa < 1 and fb < 1 and fc > 1:
        return _cut_to_quad(c, a, b, fc, fa, fb, axis)

    return None


def clip_to_cube(triangle: Triangle) -> list[Triangle]:
    """Clip a triangle against all six faces of the unit cube.

    Returns the surviving pieces in a fresh list; empty if nothing is inside.
    """
    positions = triangle.positions()
    if is_inside_unit_cube(positions):
        return [triangle]
    if any(is_outside_face(positions, axis) for axis in CLIP_AXES):
        return []

    current = [triangle]
    for axis in CLIP_AXES:
        clipped: list[Triangle] = []
        for tri in current:
            replacement = clip_triangle(tri, axis)
            if replacement is None:
                clipped.append(tri)
            else:
                clipped.extend(replacement)
        current = clipped
        if not current:
            break
    return current
