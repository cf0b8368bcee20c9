"""Decal configuration tool: set_decal_params."""

from mcp.server.fastmcp import FastMCP

from ..state import state


def register_params_tools(mcp: FastMCP):

    @mcp.tool()
    def set_decal_params(
        offset: float | None = None,
        remove_backfaces: bool | None = None,
        keep_attributes_serialized: bool | None = None,
        name: str | None = None,
    ) -> str:
        """Set decal generation parameters.

        Can be called any time before recalculate_decal.
        **Next:** recalculate_decal (re-run after changing params to update the mesh).

        Args:
            offset: Distance to push decal vertices along their normals to
                avoid z-fighting (default 0.01, typically 0-0.1).
            remove_backfaces: Drop triangles facing away from the projection
                direction (default true).
            keep_attributes_serialized: Store the decal mesh buffers in saved
                sessions so the mesh can be restored without recalculating
                (default true).
            name: Decal name; the mesh is named '<source>_<name>'.
        """
        p = state.params
        for key, value in [
            ("offset", offset), ("remove_backfaces", remove_backfaces),
            ("keep_attributes_serialized", keep_attributes_serialized), ("name", name),
        ]:
            if value is not None:
                try:
                    setattr(p, key, value)
                except ValueError as e:
                    return f"Error: {e}"

        return (
            f"Decal params: name={p.name}, offset={p.offset}, "
            f"remove_backfaces={p.remove_backfaces}, "
            f"keep_attributes_serialized={p.keep_attributes_serialized}"
        )
