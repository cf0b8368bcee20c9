"""Pydantic return models for core computation functions."""

import numpy as np
from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator, model_validator

_WIDTHS = {
    "positions": 3,
    "normals": 3,
    "tangents": 4,
    "uvs": 2,
    "original_uvs": 2,
}


class DecalMeshResult(BaseModel):
    """Flat, unindexed decal mesh buffers.

    Every triangle owns three vertices of its own, so ``triangles`` is always
    ``0..N-1`` for N vertices. ``uvs`` is the projection channel and
    ``original_uvs`` the source mesh's uv, carried as a second channel.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    positions: np.ndarray
    normals: np.ndarray
    tangents: np.ndarray
    uvs: np.ndarray
    original_uvs: np.ndarray
    triangles: np.ndarray

    @field_validator("positions", "normals", "tangents", "uvs", "original_uvs")
    @classmethod
    def buffers_must_have_expected_width(cls, v: np.ndarray, info: ValidationInfo) -> np.ndarray:
        width = _WIDTHS[info.field_name]
        if v.ndim != 2 or v.shape[1] != width:
            raise ValueError(f"{info.field_name} must have shape (N, {width}), got {v.shape}")
        return v

    @model_validator(mode="after")
    def buffers_must_be_parallel(self) -> "DecalMeshResult":
        n_verts = len(self.positions)
        for name in _WIDTHS:
            if len(getattr(self, name)) != n_verts:
                raise ValueError(
                    f"{name} has {len(getattr(self, name))} entries, expected {n_verts}"
                )
        if len(self.triangles) != n_verts or n_verts % 3 != 0:
            raise ValueError(
                f"triangles must list each of the {n_verts} vertices once, "
                f"got {len(self.triangles)} indices"
            )
        return self

    @classmethod
    def empty(cls) -> "DecalMeshResult":
        return cls(**{name: np.zeros((0, w)) for name, w in _WIDTHS.items()},
                   triangles=np.zeros(0, dtype=np.int64))

    @property
    def is_empty(self) -> bool:
        return len(self.triangles) == 0

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    @property
    def faces(self) -> np.ndarray:
        """Triangle indices as an (N/3, 3) array."""
        return self.triangles.reshape(-1, 3)
