"""Generation tool: recalculate_decal."""

import logging

from mcp.server.fastmcp import FastMCP

from ..core.decal import generate_decal_mesh
from ..state import DecalMeshData, state
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def register_generate_tools(mcp: FastMCP):

    @mcp.tool()
    def recalculate_decal() -> str:
        """Rebuild the decal mesh from the current source, transforms and params.

        **Requires:** set_source_mesh or load_source_mesh.
        **Next:** export_obj, or get_status to inspect the result.

        Always recomputes from scratch. Without a source mesh nothing happens
        and the previous decal mesh is kept. If no geometry falls inside the
        decal volume the mesh is empty and rendering is disabled.
        """
        try:
            require_state(state, source=True)
        except ValueError as e:
            return f"Error: {e}"

        p = state.params
        result = generate_decal_mesh(
            source=state.source,
            source_transform=state.target_transform,
            decal_transform=state.decal_transform,
            offset=p.offset,
            remove_backfaces=p.remove_backfaces,
        )

        name = state.mesh_name()
        state.decal_mesh = DecalMeshData.from_result(name, result)
        state.renderer_enabled = not result.is_empty

        if result.is_empty:
            logger.info("Decal %s is empty, renderer disabled", name)
            return (
                f"Decal '{name}' is empty: no source geometry inside the decal volume. "
                "Rendering disabled."
            )
        return (
            f"Decal '{name}' generated: {result.triangle_count} triangles, "
            f"{result.vertex_count} vertices"
        )
