"""Tests for core return models."""
import numpy as np
import pytest
from pydantic import ValidationError


def _buffers(n_verts: int) -> dict:
    return {
        "positions": np.zeros((n_verts, 3)),
        "normals": np.zeros((n_verts, 3)),
        "tangents": np.zeros((n_verts, 4)),
        "uvs": np.zeros((n_verts, 2)),
        "original_uvs": np.zeros((n_verts, 2)),
        "triangles": np.arange(n_verts),
    }


class TestDecalMeshResult:
    def test_valid_result(self):
        from mesh_decal.core.models import DecalMeshResult
        r = DecalMeshResult(**_buffers(6))
        assert r.vertex_count == 6
        assert r.triangle_count == 2
        assert not r.is_empty
        np.testing.assert_array_equal(r.faces, [[0, 1, 2], [3, 4, 5]])

    def test_empty_result(self):
        from mesh_decal.core.models import DecalMeshResult
        r = DecalMeshResult.empty()
        assert r.is_empty
        assert r.positions.shape == (0, 3)
        assert r.tangents.shape == (0, 4)
        assert r.faces.shape == (0, 3)

    def test_tangents_must_be_4d(self):
        from mesh_decal.core.models import DecalMeshResult
        data = _buffers(3)
        data["tangents"] = np.zeros((3, 3))
        with pytest.raises(ValidationError):
            DecalMeshResult(**data)

    def test_buffers_must_be_parallel(self):
        from mesh_decal.core.models import DecalMeshResult
        data = _buffers(3)
        data["normals"] = np.zeros((6, 3))
        with pytest.raises(ValidationError, match="normals"):
            DecalMeshResult(**data)

    def test_vertex_count_must_be_multiple_of_three(self):
        from mesh_decal.core.models import DecalMeshResult
        with pytest.raises(ValidationError):
            DecalMeshResult(**_buffers(4))

    def test_every_vertex_indexed_once(self):
        from mesh_decal.core.models import DecalMeshResult
        data = _buffers(3)
        data["triangles"] = np.arange(6)
        with pytest.raises(ValidationError):
            DecalMeshResult(**data)
