"""Pydantic domain models for source meshes and object transforms."""

from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from scipy.spatial.transform import Rotation


def _as_float_rows(value, width: int, label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=np.float64)
    except TypeError as e:
        raise ValueError(f"{label} must be a list of numeric rows: {e}") from e
    if arr.size == 0:
        return arr.reshape(0, width)
    if arr.ndim != 2 or arr.shape[1] != width:
        raise ValueError(f"{label} must have shape (N, {width}), got {arr.shape}")
    return arr


class SourceMesh(BaseModel):
    """Snapshot of the geometry a decal is projected onto.

    ``submeshes`` holds one flat triangle index list per sub-range; they are
    merged in order by ``indices``. Missing normals, tangents or uvs are
    filled with zeros.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = "source"
    positions: np.ndarray
    normals: Optional[np.ndarray] = None
    tangents: Optional[np.ndarray] = None
    uvs: Optional[np.ndarray] = None
    submeshes: list[np.ndarray] = Field(min_length=1)

    @field_validator("positions", mode="before")
    @classmethod
    def positions_must_be_3d(cls, v) -> np.ndarray:
        return _as_float_rows(v, 3, "positions")

    @field_validator("normals", mode="before")
    @classmethod
    def normals_must_be_3d(cls, v) -> Optional[np.ndarray]:
        return None if v is None else _as_float_rows(v, 3, "normals")

    @field_validator("tangents", mode="before")
    @classmethod
    def tangents_must_be_4d(cls, v) -> Optional[np.ndarray]:
        return None if v is None else _as_float_rows(v, 4, "tangents")

    @field_validator("uvs", mode="before")
    @classmethod
    def uvs_must_be_2d(cls, v) -> Optional[np.ndarray]:
        return None if v is None else _as_float_rows(v, 2, "uvs")

    @field_validator("submeshes", mode="before")
    @classmethod
    def submeshes_must_be_triangle_lists(cls, v) -> list[np.ndarray]:
        if not isinstance(v, (list, tuple)):
            raise ValueError(f"submeshes must be a list of index lists, got {type(v).__name__}")
        result = []
        for i, sub in enumerate(v):
            try:
                arr = np.asarray(sub, dtype=np.int64).reshape(-1)
            except TypeError as e:
                raise ValueError(f"Submesh {i} must be a list of integer indices: {e}") from e
            if len(arr) % 3 != 0:
                raise ValueError(
                    f"Submesh {i} has {len(arr)} indices, which is not a multiple of 3"
                )
            if arr.size and arr.min() < 0:
                raise ValueError(f"Submesh {i} has negative index {int(arr.min())}")
            result.append(arr)
        return result

    @model_validator(mode="after")
    def attributes_must_match_vertices(self) -> "SourceMesh":
        n_verts = len(self.positions)
        if self.normals is None:
            self.normals = np.zeros((n_verts, 3))
        if self.tangents is None:
            self.tangents = np.zeros((n_verts, 4))
        if self.uvs is None:
            self.uvs = np.zeros((n_verts, 2))
        for label in ("normals", "tangents", "uvs"):
            count = len(getattr(self, label))
            if count != n_verts:
                raise ValueError(
                    f"{label} has {count} entries but there are {n_verts} positions"
                )
        for i, sub in enumerate(self.submeshes):
            if sub.size and sub.max() >= n_verts:
                raise ValueError(
                    f"Submesh {i} references vertex {int(sub.max())} "
                    f"but only {n_verts} vertices exist"
                )
        return self

    @property
    def indices(self) -> np.ndarray:
        return np.concatenate(self.submeshes)

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def triangle_count(self) -> int:
        return sum(len(sub) for sub in self.submeshes) // 3


class Transform(BaseModel):
    """Object-to-world transform: translation, Euler rotation and scale.

    Rotation is in degrees, applied about Z, then X, then Y.
    """
    model_config = ConfigDict(validate_assignment=True)

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)

    @field_validator("scale")
    @classmethod
    def scale_must_be_non_zero(cls, v: tuple[float, float, float]) -> tuple[float, float, float]:
        if any(s == 0 for s in v):
            raise ValueError(f"Scale components must be non-zero, got {v}")
        return v

    def rotation_matrix(self) -> np.ndarray:
        x, y, z = self.rotation
        return Rotation.from_euler("zxy", [z, x, y], degrees=True).as_matrix()

    def matrix(self) -> np.ndarray:
        """4x4 local-to-world matrix."""
        m = np.eye(4)
        m[:3, :3] = self.rotation_matrix() @ np.diag(self.scale)
        m[:3, 3] = self.position
        return m

    def inverse_matrix(self) -> np.ndarray:
        """4x4 world-to-local matrix."""
        return np.linalg.inv(self.matrix())
