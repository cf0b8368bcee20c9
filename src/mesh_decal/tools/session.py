"""Session persistence tools: save_session, load_session."""

import json
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..models import Transform
from ..state import state, DecalMeshData, DecalParams

logger = logging.getLogger(__name__)


def _default_path() -> Path:
    return Path.home() / ".cache" / "mesh-decal" / "session.json"


def register_session_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def save_session(path: str | None = None) -> str:
        """Save the current session to a JSON file for later resumption.

        Saves transforms, decal params and the source mesh path. The decal
        mesh buffers are saved only when keep_attributes_serialized is on.
        The source mesh itself is never saved.
        **Next:** load_session in a future session to restore this configuration.

        Args:
            path: Where to save. Default: ~/.cache/mesh-decal/session.json
        """
        save_path = Path(path) if path else _default_path()
        save_path.parent.mkdir(parents=True, exist_ok=True)

        data: dict = {
            "target_transform": state.target_transform.model_dump(),
            "decal_transform": state.decal_transform.model_dump(),
            "params": state.params.model_dump(),
            "source_path": state.source_path,
            "decal_mesh": None,
        }

        if state.params.keep_attributes_serialized and state.decal_mesh is not None:
            data["decal_mesh"] = state.decal_mesh.model_dump()

        with open(save_path, "w") as f:
            json.dump(data, f, indent=2)

        logger.info("Session saved to %s", save_path)
        return f"Session saved to {save_path}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_session(path: str | None = None) -> str:
        """Load a previously saved session from a JSON file.

        Restores transforms, decal params and, if it was saved, the decal
        mesh. Clears the source mesh; load it again before recalculating.
        **Next:** load_source_mesh, then recalculate_decal.

        Args:
            path: Path to load from. Default: ~/.cache/mesh-decal/session.json
        """
        load_path = Path(path) if path else _default_path()

        if not load_path.exists():
            return f"Error: Session file not found at {load_path}"

        try:
            with open(load_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            return f"Error: Invalid session file: {e}"

        if not isinstance(data, dict):
            return "Error: Invalid session file: expected a JSON object"

        try:
            target = Transform(**data.get("target_transform") or {})
            decal = Transform(**data.get("decal_transform") or {})
            params = DecalParams(**data.get("params") or {})
            mesh = DecalMeshData(**data["decal_mesh"]) if data.get("decal_mesh") else None
        except ValidationError as e:
            return f"Error: Invalid session file: {e}"

        state.target_transform = target
        state.decal_transform = decal
        state.params = params
        state.decal_mesh = mesh
        state.renderer_enabled = mesh is not None and not mesh.is_empty

        # The source snapshot is not persisted
        state.source = None
        state.source_path = data.get("source_path")

        restored = ["transforms", "params"]
        if mesh is not None:
            restored.append(f"decal mesh '{mesh.name}'")

        needed = "load_source_mesh"
        if state.source_path:
            needed += f" ({state.source_path})"
        logger.info("Session loaded from %s", load_path)
        return (
            f"Session restored from {load_path}. "
            f"Restored: {', '.join(restored)}. "
            f"Still needed before recalculating: {needed}."
        )
