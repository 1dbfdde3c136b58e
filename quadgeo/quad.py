"""
Quad: four corner points sharing (ideally) one plane.

The corners are listed counter-clockwise when looking at the outward side, and
the quad is split along the v0 -> v2 diagonal:

    v1 --------v0
    |        _/ |
    |      _/   |
    |    _/     |
    |  _/       |
    | /         |
    v2 ------- v3

    face 1 = (v0, v1, v2)
    face 2 = (v0, v2, v3)

Planarity and winding are the caller's job; nothing here checks them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .vector import Vec3, v_cross, v_sub


def _as_vec3(p: Sequence[float]) -> Vec3:
    if len(p) != 3:
        raise ValueError(f"Expected 3 coordinates per point, got {len(p)}")
    return (float(p[0]), float(p[1]), float(p[2]))


@dataclass(frozen=True)
class Quad:
    v0: Vec3
    v1: Vec3
    v2: Vec3
    v3: Vec3

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        for attr in ("v0", "v1", "v2", "v3"):
            object.__setattr__(self, attr, _as_vec3(getattr(self, attr)))

    @property
    def corners(self) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
        return (self.v0, self.v1, self.v2, self.v3)

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> "Quad":
        """Build a quad from any 4-item sequence of (x, y, z) points."""
        pts = list(points)
        if len(pts) != 4:
            raise ValueError(f"A quad needs exactly 4 points, got {len(pts)}")
        return cls(pts[0], pts[1], pts[2], pts[3])


def face_normal(p0: Vec3, p1: Vec3, p2: Vec3) -> Vec3:
    """
    Normal of the plane through three points given counter-clockwise.
    Un-normalized: its length is twice the triangle's area.
    """
    return v_cross(v_sub(p1, p0), v_sub(p2, p1))
