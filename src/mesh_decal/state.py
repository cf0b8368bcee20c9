"""Session state for the mesh-decal MCP server.

Holds everything the surrounding component owns: the source mesh snapshot,
the target and decal transforms, decal parameters and the last generated
decal mesh buffers.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mesh_decal.core.models import DecalMeshResult
from mesh_decal.models import SourceMesh, Transform


class DecalParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(default="decal", min_length=1)
    offset: float = Field(default=0.01, ge=0)
    remove_backfaces: bool = True
    keep_attributes_serialized: bool = True


class DecalMeshData(BaseModel):
    name: str = ""
    positions: list[list[float]] = Field(default_factory=list)
    normals: list[list[float]] = Field(default_factory=list)
    tangents: list[list[float]] = Field(default_factory=list)
    uvs: list[list[float]] = Field(default_factory=list)
    original_uvs: list[list[float]] = Field(default_factory=list)
    triangles: list[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def buffers_must_match_positions(self) -> "DecalMeshData":
        n_verts = len(self.positions)
        widths = {"positions": 3, "normals": 3, "tangents": 4, "uvs": 2, "original_uvs": 2}
        for label, width in widths.items():
            rows = getattr(self, label)
            # Attribute buffers may be absent, but never partial
            if rows and len(rows) != n_verts:
                raise ValueError(f"{label} has {len(rows)} entries, expected {n_verts}")
            if any(len(row) != width for row in rows):
                raise ValueError(f"{label} rows must have {width} components")
        if len(self.triangles) % 3 != 0:
            raise ValueError(
                f"triangles has {len(self.triangles)} indices, which is not a multiple of 3"
            )
        if any(i < 0 or i >= n_verts for i in self.triangles):
            raise ValueError(f"triangles reference vertices outside 0..{n_verts - 1}")
        return self

    @classmethod
    def from_result(cls, name: str, result: DecalMeshResult) -> "DecalMeshData":
        return cls(
            name=name,
            positions=result.positions.tolist(),
            normals=result.normals.tolist(),
            tangents=result.tangents.tolist(),
            uvs=result.uvs.tolist(),
            original_uvs=result.original_uvs.tolist(),
            triangles=result.triangles.tolist(),
        )

    @property
    def is_empty(self) -> bool:
        return not self.positions or not self.triangles

    @property
    def faces(self) -> list[list[int]]:
        t = self.triangles
        return [t[i:i + 3] for i in range(0, len(t), 3)]


class SessionState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: Optional[SourceMesh] = None
    source_path: Optional[str] = None
    target_transform: Transform = Field(default_factory=Transform)
    decal_transform: Transform = Field(default_factory=Transform)
    params: DecalParams = Field(default_factory=DecalParams)
    decal_mesh: Optional[DecalMeshData] = None
    renderer_enabled: bool = False

    def mesh_name(self) -> str:
        source_name = self.source.name if self.source else "source"
        return f"{source_name}_{self.params.name}"

    def summary(self) -> dict:
        return {
            "source": {
                "loaded": True,
                "name": self.source.name,
                "vertices": self.source.vertex_count,
                "triangles": self.source.triangle_count,
                "submeshes": len(self.source.submeshes),
                "path": self.source_path,
            } if self.source else {"loaded": False, "path": self.source_path},
            "transforms": {
                "target": self.target_transform.model_dump(),
                "decal": self.decal_transform.model_dump(),
            },
            "params": self.params.model_dump(),
            "decal": {
                "generated": self.decal_mesh is not None,
                "name": self.decal_mesh.name if self.decal_mesh else None,
                "vertices": len(self.decal_mesh.positions) if self.decal_mesh else 0,
                "triangles": len(self.decal_mesh.triangles) // 3 if self.decal_mesh else 0,
                "renderer_enabled": self.renderer_enabled,
            },
        }


# Global session state, one per MCP server process
state = SessionState()
