"""
quadgeo: build textured triangle meshes from quads.

    from quadgeo import GeometryBuilder, Quad, UVMode

    builder = GeometryBuilder(uv_mode=UVMode.SIZE_TO_WORLD_UNITS_XY)
    builder.add_quad(Quad((1, 1, 0), (0, 1, 0), (0, 0, 0), (1, 0, 0)))
    mesh = builder.build()   # mesh.vertices, mesh.normals, mesh.uvs, mesh.faces
"""
from .builder import DEFAULT_UV_MODE, STRIDE, GeometryBuilder, MeshBuffer, UVMode
from .errors import DegenerateQuadError, QuadGeoError, UnsupportedUVModeError
from .quad import Quad, face_normal

__all__ = [
    "DEFAULT_UV_MODE",
    "STRIDE",
    "DegenerateQuadError",
    "GeometryBuilder",
    "MeshBuffer",
    "Quad",
    "QuadGeoError",
    "UVMode",
    "UnsupportedUVModeError",
    "face_normal",
]
