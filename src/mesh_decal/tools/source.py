"""Source mesh tools: set_source_mesh, load_source_mesh, clear_source_mesh."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..models import SourceMesh
from ..state import state

logger = logging.getLogger(__name__)


def _describe(mesh: SourceMesh) -> str:
    return (
        f"Source mesh '{mesh.name}': {mesh.vertex_count} vertices, "
        f"{mesh.triangle_count} triangles in {len(mesh.submeshes)} submesh(es)"
    )


def register_source_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def set_source_mesh(
        positions: list[list[float]],
        indices: list[int],
        normals: list[list[float]] | None = None,
        tangents: list[list[float]] | None = None,
        uvs: list[list[float]] | None = None,
        name: str = "source",
    ) -> str:
        """Set the mesh the decal is projected onto, in its own local space.

        **Next:** set_target_transform / set_decal_transform, then recalculate_decal.

        Args:
            positions: Vertex positions [[x, y, z], ...].
            indices: Flat triangle index list (length a multiple of 3).
            normals: Per-vertex normals [[x, y, z], ...]. Zeros if omitted.
            tangents: Per-vertex tangents [[x, y, z, w], ...]. Zeros if omitted.
            uvs: Per-vertex uvs [[u, v], ...]. Zeros if omitted.
            name: Mesh name, used to name the decal mesh.
        """
        try:
            mesh = SourceMesh(
                name=name, positions=positions, normals=normals,
                tangents=tangents, uvs=uvs, submeshes=[indices],
            )
        except ValidationError as e:
            return f"Error: Invalid source mesh: {e}"

        state.source = mesh
        state.source_path = None
        return _describe(mesh)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_source_mesh(path: str) -> str:
        """Load the source mesh from a JSON file.

        The file holds 'positions' and either 'submeshes' (a list of index
        lists, merged in order) or 'indices'. 'normals', 'tangents', 'uvs'
        and 'name' are optional.
        **Next:** recalculate_decal.

        Args:
            path: Path to the JSON mesh file.
        """
        load_path = Path(path)
        if not load_path.exists():
            return f"Error: Mesh file not found at {load_path}"

        try:
            with open(load_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return f"Error: Invalid mesh file: {e}"

        if not isinstance(data, dict):
            return "Error: Invalid mesh file: expected a JSON object"

        if "submeshes" not in data:
            data["submeshes"] = [data.pop("indices", [])]
        data.setdefault("name", load_path.stem)

        try:
            mesh = SourceMesh(**data)
        except ValidationError as e:
            return f"Error: Invalid source mesh: {e}"

        if mesh.triangle_count == 0:
            logger.warning("Source mesh %s has no triangles", load_path)

        state.source = mesh
        state.source_path = str(load_path)
        logger.info("Loaded source mesh from %s", load_path)
        return _describe(mesh)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def clear_source_mesh() -> str:
        """Remove the source mesh. The last generated decal mesh is kept."""
        state.source = None
        state.source_path = None
        return "Source mesh cleared"
