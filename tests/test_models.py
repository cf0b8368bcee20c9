"""Tests for the SourceMesh domain model."""

import numpy as np
import pytest
from pydantic import ValidationError

from mesh_decal.models import SourceMesh

TRI_POSITIONS = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]]


class TestSourceMesh:
    def test_valid_mesh(self):
        m = SourceMesh(positions=TRI_POSITIONS, submeshes=[[0, 1, 2]])
        assert m.vertex_count == 3
        assert m.triangle_count == 1
        assert m.positions.dtype == np.float64

    def test_missing_attributes_are_zero_filled(self):
        m = SourceMesh(positions=TRI_POSITIONS, submeshes=[[0, 1, 2]])
        assert m.normals.shape == (3, 3)
        assert m.tangents.shape == (3, 4)
        assert m.uvs.shape == (3, 2)
        assert not m.normals.any()

    def test_submeshes_are_merged_in_order(self):
        m = SourceMesh(
            positions=TRI_POSITIONS + [[1.0, 1.0, 0.0]],
            submeshes=[[0, 1, 2], [1, 3, 2]],
        )
        np.testing.assert_array_equal(m.indices, [0, 1, 2, 1, 3, 2])
        assert m.triangle_count == 2

    def test_empty_submesh_is_allowed(self):
        m = SourceMesh(positions=TRI_POSITIONS, submeshes=[[]])
        assert m.triangle_count == 0
        assert len(m.indices) == 0

    def test_at_least_one_submesh_required(self):
        with pytest.raises(ValidationError):
            SourceMesh(positions=TRI_POSITIONS, submeshes=[])

    def test_positions_must_be_3d(self):
        with pytest.raises(ValidationError):
            SourceMesh(positions=[[0.0, 0.0]] * 3, submeshes=[[0, 1, 2]])

    def test_tangents_must_be_4d(self):
        with pytest.raises(ValidationError):
            SourceMesh(
                positions=TRI_POSITIONS, tangents=[[1.0, 0.0, 0.0]] * 3,
                submeshes=[[0, 1, 2]],
            )

    def test_uvs_must_be_2d(self):
        with pytest.raises(ValidationError):
            SourceMesh(positions=TRI_POSITIONS, uvs=[[0.0]] * 3, submeshes=[[0, 1, 2]])

    def test_attribute_count_must_match_positions(self):
        with pytest.raises(ValidationError, match="normals"):
            SourceMesh(
                positions=TRI_POSITIONS, normals=[[0.0, 0.0, 1.0]] * 2,
                submeshes=[[0, 1, 2]],
            )

    def test_index_count_must_be_multiple_of_three(self):
        with pytest.raises(ValidationError, match="multiple of 3"):
            SourceMesh(positions=TRI_POSITIONS, submeshes=[[0, 1]])

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            SourceMesh(positions=TRI_POSITIONS, submeshes=[[0, -1, 2]])

    def test_out_of_range_index_rejected(self):
        with pytest.raises(ValidationError, match="only 3 vertices"):
            SourceMesh(positions=TRI_POSITIONS, submeshes=[[0, 1, 3]])

    def test_degenerate_triangles_are_accepted(self):
        m = SourceMesh(
            positions=TRI_POSITIONS, normals=[[0.0, 0.0, 0.0]] * 3,
            submeshes=[[0, 0, 0]],
        )
        assert m.triangle_count == 1

    def test_non_numeric_positions_rejected(self):
        with pytest.raises(ValidationError, match="positions"):
            SourceMesh(positions={"x": 1}, submeshes=[[0, 1, 2]])

    def test_non_list_submeshes_rejected(self):
        with pytest.raises(ValidationError, match="submeshes"):
            SourceMesh(positions=TRI_POSITIONS, submeshes=5)
