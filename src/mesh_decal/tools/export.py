"""Export tool: export_obj."""

import logging
import os
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from ..exporters.obj import export_obj as do_export_obj
from ..state import state
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _validate_output_path(output_path: str) -> None:
    """Raise ValueError if output_path resolves outside the user's home directory."""
    resolved = Path(output_path).resolve()
    home = Path.home().resolve()
    try:
        resolved.relative_to(home)
    except ValueError:
        raise ValueError(
            f"Output path {output_path!r} is outside the home directory. "
            "Use a path within your home directory."
        )


def register_export_tools(mcp: FastMCP):

    @mcp.tool()
    def export_obj(output_path: str) -> str:
        """Export the decal mesh as a Wavefront OBJ file.

        Writes positions, projection uvs and normals. The source mesh uvs
        (second channel) are not part of the OBJ format and are skipped.

        Args:
            output_path: Where to save the .obj file (absolute path)
        """
        try:
            require_state(state, decal=True)
        except ValueError as e:
            return f"Error: {e}"

        if state.decal_mesh.is_empty:
            return "Error: The decal mesh is empty, nothing to export."

        try:
            _validate_output_path(output_path)
        except ValueError as e:
            return f"Error: {e}"

        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        result = do_export_obj(state.decal_mesh.model_dump(), output_path)
        logger.info("Exported decal %s to %s", state.decal_mesh.name, output_path)
        return f"OBJ exported to {output_path} ({result['faces']} triangles)"
