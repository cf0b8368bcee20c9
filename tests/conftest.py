"""Shared pytest fixtures for mesh-decal tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_session_state():
    """Reset the global session state so tool tests do not leak into each other."""
    from mesh_decal.state import SessionState, state

    fresh = SessionState()
    for name in SessionState.model_fields:
        setattr(state, name, getattr(fresh, name))
    yield state


@pytest.fixture
def floor_quad() -> dict:
    """A 5x5 quad in the XY plane, larger than the decal volume, facing -Z."""
    return {
        "name": "floor",
        "positions": [
            [-2.5, -2.0, 0.0],
            [2.0, -2.5, 0.0],
            [2.5, 2.2, 0.0],
            [-2.0, 2.5, 0.0],
        ],
        "normals": [[0.0, 0.0, -1.0]] * 4,
        "tangents": [[1.0, 0.0, 0.0, -1.0]] * 4,
        "uvs": [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]],
        "indices": [0, 1, 2, 0, 2, 3],
    }


@pytest.fixture
def floor_quad_file(tmp_path: Path, floor_quad: dict) -> Path:
    path = tmp_path / "floor.json"
    with open(path, "w") as f:
        json.dump(floor_quad, f)
    return path


@pytest.fixture
def anyio_backend():
    return "asyncio"
