"""
Quad-list generators for a few ready-made shapes.

Corner order follows Quad: counter-clockwise seen from outside, thinking of
drawing the letter C (top right, top left, bottom left, bottom right) relative
to the face being viewed.
"""
from __future__ import annotations

from typing import List, Sequence

from .quad import Quad
from .vector import Vec3


def parallelogram() -> Quad:
    """A planar quad with parallel sides; stretched textures show skew on it."""
    return Quad(
        v0=(6.0, 6.0, 6.0),
        v1=(1.0, 4.0, 1.0),
        v2=(0.0, 0.0, 0.0),
        v3=(5.0, 2.0, 5.0),
    )


def irregular_quad() -> Quad:
    """A planar quad whose sides are not parallel."""
    return Quad(
        v0=(6.0, 6.0, 6.0),
        v1=(1.0, 4.0, 1.0),
        v2=(2.0, 0.0, 2.0),
        v3=(5.0, -2.0, 5.0),
    )


def prism(front: Sequence[Sequence[float]], back: Sequence[Sequence[float]]) -> List[Quad]:
    """
    Six quads closing the solid between two corner rings.

    ``front`` and ``back`` each hold 4 points in quad corner order (v0..v3),
    with ``front`` wound counter-clockwise as seen from its outside. Returns
    the front, back, top, left, right and bottom quads, in that order.
    Raises ValueError unless both rings hold 4 points of 3 coordinates.
    """
    f0, f1, f2, f3 = Quad.from_points(front).corners
    b0, b1, b2, b3 = Quad.from_points(back).corners
    return [
        Quad(f0, f1, f2, f3),  # front
        Quad(b1, b0, b3, b2),  # back
        Quad(b0, b1, f1, f0),  # top
        Quad(f1, b1, b2, f2),  # left
        Quad(b0, f0, f3, b3),  # right
        Quad(f3, f2, b2, b3),  # bottom
    ]


def box(width: float = 1.0, height: float = 1.0, depth: float = 1.0) -> List[Quad]:
    """Axis-aligned box centered at the origin, front face towards +Z."""
    x, y, z = width / 2, height / 2, depth / 2
    front: List[Vec3] = [(x, y, z), (-x, y, z), (-x, -y, z), (x, -y, z)]
    back: List[Vec3] = [(x, y, -z), (-x, y, -z), (-x, -y, -z), (x, -y, -z)]
    return prism(front, back)


def demo_prism() -> List[Quad]:
    """The irregular six-sided solid used by the CLI's ``prism`` shape."""
    front = [(6.0, 6.0, 2.0), (1.0, 4.0, 2.0), (2.0, 0.0, 2.0), (5.0, -2.0, 2.0)]
    back = [(6.0, 6.0, 0.0), (1.0, 4.0, 0.0), (2.0, 0.0, 0.0), (5.0, -2.0, 0.0)]
    return prism(front, back)
