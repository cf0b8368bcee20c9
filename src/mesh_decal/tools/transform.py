"""Transform tools: set_target_transform, set_decal_transform."""

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..models import Transform
from ..state import state


def _updated(
    current: Transform,
    position: list[float] | None,
    rotation: list[float] | None,
    scale: list[float] | None,
) -> Transform:
    """Return a copy of ``current`` with the given components replaced."""
    data = current.model_dump()
    for key, value in (("position", position), ("rotation", rotation), ("scale", scale)):
        if value is not None:
            data[key] = value
    return Transform(**data)


def _describe(label: str, t: Transform) -> str:
    return (
        f"{label}: position={list(t.position)}, rotation={list(t.rotation)}, "
        f"scale={list(t.scale)}"
    )


def register_transform_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def set_target_transform(
        position: list[float] | None = None,
        rotation: list[float] | None = None,
        scale: list[float] | None = None,
    ) -> str:
        """Set the source mesh object's transform (object to world).

        Omitted components keep their current value.
        **Next:** recalculate_decal (re-run after every transform change).

        Args:
            position: World position [x, y, z].
            rotation: Euler angles in degrees [x, y, z], applied Z, X, then Y.
            scale: Scale [x, y, z], no zero components.
        """
        try:
            state.target_transform = _updated(state.target_transform, position, rotation, scale)
        except ValidationError as e:
            return f"Error: {e}"
        return _describe("Target transform", state.target_transform)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def set_decal_transform(
        position: list[float] | None = None,
        rotation: list[float] | None = None,
        scale: list[float] | None = None,
    ) -> str:
        """Set the decal volume's transform (object to world).

        The decal volume is the cube [-1, 1]^3 in decal space and projects
        along its local Z axis. Omitted components keep their current value.
        **Next:** recalculate_decal.

        Args:
            position: World position [x, y, z].
            rotation: Euler angles in degrees [x, y, z], applied Z, X, then Y.
            scale: Scale [x, y, z], no zero components.
        """
        try:
            state.decal_transform = _updated(state.decal_transform, position, rotation, scale)
        except ValidationError as e:
            return f"Error: {e}"
        return _describe("Decal transform", state.decal_transform)
