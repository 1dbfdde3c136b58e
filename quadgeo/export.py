"""Writers that hand a built MeshBuffer to other tools."""
from __future__ import annotations

import logging

from .builder import MeshBuffer

logger = logging.getLogger(__name__)


def save_obj(path: str, mesh: MeshBuffer) -> None:
    """
    Save Wavefront OBJ with vt/vn records aligned 1:1 with the vertices.
    Normals are written as stored (un-normalized).
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {mesh.name}\n")
        for x, y, z in mesh.vertices:
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        for u, v in mesh.uvs:
            f.write(f"vt {u:.6f} {v:.6f}\n")
        for nx, ny, nz in mesh.normals:
            f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
        for a, b, c in mesh.faces:
            f.write(f"f {a + 1}/{a + 1}/{a + 1} {b + 1}/{b + 1}/{b + 1} {c + 1}/{c + 1}/{c + 1}\n")
    logger.info(f"Wrote {mesh.vertex_count} vertices, {mesh.triangle_count} triangles to {path}")
