"""Wavefront OBJ export of a decal mesh."""


def export_obj(mesh: dict, output_path: str) -> dict:
    """Export a decal mesh as an OBJ file.

    The mesh dict has: name, positions, normals, uvs, triangles (flat list).
    Projection uvs are written as ``vt``. Since every triangle owns its
    vertices, position, uv and normal share one index per corner.
    """
    positions = mesh.get("positions") or []
    triangles = mesh.get("triangles") or []
    if not positions or not triangles:
        raise ValueError("No mesh data to export")

    lines = [
        "# mesh-decal",
        f"o {_safe_name(mesh.get('name') or 'decal')}",
    ]
    for x, y, z in positions:
        lines.append(f"v {x:.6f} {y:.6f} {z:.6f}")
    for u, v in mesh.get("uvs") or []:
        lines.append(f"vt {u:.6f} {v:.6f}")
    for x, y, z in mesh.get("normals") or []:
        lines.append(f"vn {x:.6f} {y:.6f} {z:.6f}")

    # OBJ indices are 1-based
    has_uvs = bool(mesh.get("uvs"))
    has_normals = bool(mesh.get("normals"))
    for i in range(0, len(triangles), 3):
        corners = [_corner(idx + 1, has_uvs, has_normals) for idx in triangles[i:i + 3]]
        lines.append("f " + " ".join(corners))

    with open(output_path, "w") as f:
        f.write("\n".join(lines) + "\n")

    return {
        "success": True,
        "filepath": output_path,
        "vertices": len(positions),
        "faces": len(triangles) // 3,
    }


def _corner(index: int, has_uvs: bool, has_normals: bool) -> str:
    if has_uvs and has_normals:
        return f"{index}/{index}/{index}"
    if has_normals:
        return f"{index}//{index}"
    if has_uvs:
        return f"{index}/{index}"
    return str(index)


def _safe_name(name: str) -> str:
    return "_".join(name.split())
