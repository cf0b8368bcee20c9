"""Prerequisite checking helpers for MCP tools."""


def require_state(state, *, source: bool = False, decal: bool = False) -> None:
    """Raise ValueError with a descriptive message if required state is not set.

    Usage in a tool:
        try:
            require_state(state, source=True)
        except ValueError as e:
            return f"Error: {e}"
    """
    if source and state.source is None:
        raise ValueError(
            "No source mesh to project onto. Load one with set_source_mesh or load_source_mesh."
        )
    if decal and state.decal_mesh is None:
        raise ValueError(
            "Generate a decal first with recalculate_decal."
        )
