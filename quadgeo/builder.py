"""
GeometryBuilder: turn an ordered list of quads into a triangle mesh buffer.

Usage:
    builder = GeometryBuilder(uv_mode=UVMode.SIZE_TO_WORLD_UNITS_XY)
    builder.add_quad(Quad(v0, v1, v2, v3))
    mesh = builder.build()

Each quad contributes 4 vertices, 4 normals, 4 uvs and 2 triangles. Vertices
are never shared between quads, so every face keeps its own normals and
texture coordinates even where two quads meet.
"""
from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

import numpy as np

from .errors import DegenerateQuadError, UnsupportedUVModeError
from .quad import Quad, face_normal
from .vector import Vec2, Vec3, v_add, v_angle, v_len, v_sub

logger = logging.getLogger(__name__)

Tri = Tuple[int, int, int]

STRIDE = 8  # position(3) + normal(3) + uv(2)


class UVMode(enum.Enum):
    """How texture coordinates are laid over each quad."""

    STRETCH_TO_FIT_XY = "stretch-xy"
    STRETCH_TO_FIT_X = "stretch-x"
    STRETCH_TO_FIT_Y = "stretch-y"
    SIZE_TO_WORLD_UNITS_XY = "world-xy"
    SIZE_TO_WORLD_UNITS_X = "world-x"


DEFAULT_UV_MODE = UVMode.STRETCH_TO_FIT_XY


# --------------
# Mesh container
# --------------

@dataclass
class MeshBuffer:
    vertices: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)  # aligned 1:1 with vertices
    uvs: List[Vec2] = field(default_factory=list)      # aligned 1:1 with vertices
    faces: List[Tri] = field(default_factory=list)
    name: str = "geometry"

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.faces)

    @property
    def indices(self) -> List[int]:
        out: List[int] = []
        for a, b, c in self.faces:
            out += [a, b, c]
        return out

    def to_arrays(self) -> Dict[str, np.ndarray]:
        """Positions, normals, uvs and flat triangle indices as numpy arrays."""
        return {
            "positions": np.asarray(self.vertices, np.float32).reshape(-1, 3),
            "normals": np.asarray(self.normals, np.float32).reshape(-1, 3),
            "uvs": np.asarray(self.uvs, np.float32).reshape(-1, 2),
            "indices": np.asarray(self.indices, np.uint32),
        }

    def interleaved(self) -> np.ndarray:
        """(N x 8) float32 array: position(3) + normal(3) + uv(2) per vertex."""
        arrays = self.to_arrays()
        return np.hstack((arrays["positions"], arrays["normals"], arrays["uvs"])).reshape(-1, STRIDE)


# ------------------
# Per-quad UV layout
# ------------------

def _stretch_uvs(quad: Quad, index: int) -> List[Vec2]:
    # one texture tile per quad, whatever its shape
    return [(1.0, 1.0), (0.0, 1.0), (0.0, 0.0), (1.0, 0.0)]


def _world_unit_uvs(quad: Quad, index: int) -> List[Vec2]:
    """
    Lay the quad flat in texture space with v2 at the origin and the v2 -> v3
    edge along +u, so one world unit spans one texture tile. Only right for
    planar quads.
    """
    e0 = v_sub(quad.v0, quad.v2)  # v2 to v0 edge
    e1 = v_sub(quad.v1, quad.v2)  # v2 to v1 edge
    e3 = v_sub(quad.v3, quad.v2)  # v2 to v3 edge

    e0_len = v_len(e0)
    e1_len = v_len(e1)
    e3_len = v_len(e3)

    a0 = v_angle(e3, e0)
    a1 = v_angle(e3, e1)

    if e3_len == 0.0:
        raise DegenerateQuadError(index, "v2 -> v3 edge has zero length")
    if a0 is None:
        raise DegenerateQuadError(index, "no angle between v2 -> v3 and the v2 -> v0 diagonal")
    if a1 is None:
        raise DegenerateQuadError(index, "no angle between v2 -> v3 and the v2 -> v1 edge")

    uvs: List[Vec2] = [
        (math.cos(a0) * e0_len, math.sin(a0) * e0_len),
        (math.cos(a1) * e1_len, math.sin(a1) * e1_len),
        (0.0, 0.0),
        (e3_len, 0.0),
    ]
    for u, v in uvs:
        if not (math.isfinite(u) and math.isfinite(v)):
            raise DegenerateQuadError(index, "texture coordinates are not finite")
    return uvs


_UV_LAYOUTS = {
    UVMode.STRETCH_TO_FIT_XY: _stretch_uvs,
    UVMode.SIZE_TO_WORLD_UNITS_XY: _world_unit_uvs,
}


# -------
# Builder
# -------

class GeometryBuilder:
    """
    Collects quads, then produces a MeshBuffer via build().

    List quad corners counter-clockwise as seen from the outside of the
    surface. Not safe for concurrent add_quad() calls; build() only reads.
    """

    def __init__(self, uv_mode: UVMode = DEFAULT_UV_MODE, name: str = "geometry") -> None:
        self.uv_mode = UVMode(uv_mode)
        self.name = name
        self._quads: List[Quad] = []

    def __len__(self) -> int:
        return len(self._quads)

    @property
    def quads(self) -> Tuple[Quad, ...]:
        return tuple(self._quads)

    def add_quad(self, quad: Quad) -> None:
        self._quads.append(quad)

    def add_quads(self, quads: Iterable[Quad]) -> None:
        for quad in quads:
            self.add_quad(quad)

    def build(self) -> MeshBuffer:
        """
        Walk the quads in insertion order, emitting per quad:

            v1 --------------v0
            |             __/ |
            | face     __/    |
            | 1     __/       |
            |    __/     face |
            | __/           2 |
            v2 ------------- v3

        - vertices v0, v1, v2, v3
        - faces (v0, v1, v2) and (v0, v2, v3)
        - normals: v0 and v2 sit on the shared diagonal and get the sum of
          both face normals; v1 and v3 get their own face's normal. Normals
          are left un-normalized.
        - uvs according to the builder's uv_mode

        Raises UnsupportedUVModeError for modes without a layout and
        DegenerateQuadError when SIZE_TO_WORLD_UNITS_XY meets a quad with a
        zero-length edge. Nothing is returned on failure.
        """
        layout = _UV_LAYOUTS.get(self.uv_mode)
        if layout is None:
            logger.error(f"No texture layout for uv mode {self.uv_mode.name}")
            raise UnsupportedUVModeError(self.uv_mode)

        verts: List[Vec3] = []
        faces: List[Tri] = []
        normals: List[Vec3] = []
        uvs: List[Vec2] = []

        for i, quad in enumerate(self._quads):
            base = len(verts)
            verts.extend(quad.corners)

            faces.append((base, base + 1, base + 2))      # face 1
            faces.append((base, base + 2, base + 3))      # face 2

            n1 = face_normal(quad.v0, quad.v1, quad.v2)
            n2 = face_normal(quad.v0, quad.v2, quad.v3)
            shared = v_add(n1, n2)
            normals.extend([shared, n1, shared, n2])

            try:
                uvs.extend(layout(quad, i))
            except DegenerateQuadError as e:
                logger.error(f"Cannot lay out texture for quad {i}: {e.reason}")
                raise

        logger.debug(
            f"Built '{self.name}': {len(self._quads)} quads, {len(verts)} vertices, "
            f"{len(faces)} triangles ({self.uv_mode.name})"
        )
        return MeshBuffer(verts, normals, uvs, faces, name=self.name)
