"""
Small vector utilities over plain tuples.

Every function returns a new tuple. Operations that are undefined for some
inputs (normalizing or measuring the angle of a zero-length vector, projecting
onto the zero vector) return ``None`` instead of NaN or a silent zero vector.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

Vec3 = Tuple[float, float, float]
Vec2 = Tuple[float, float]


def v_add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_mul(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


def v_div(a: Vec3, b: Vec3) -> Vec3:
    """Component-wise quotient. A zero component in ``b`` raises ZeroDivisionError."""
    return (a[0] / b[0], a[1] / b[1], a[2] / b[2])


def v_scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def v_div_scalar(a: Vec3, s: float) -> Vec3:
    return (a[0] / s, a[1] / s, a[2] / s)


def v_neg(a: Vec3) -> Vec3:
    return (-a[0], -a[1], -a[2])


def v_dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a: Vec3) -> float:
    # hypot keeps huge and tiny components from overflowing/underflowing
    return math.hypot(a[0], a[1], a[2])


def v_distance(a: Vec3, b: Vec3) -> float:
    return v_len(v_sub(a, b))


def v_norm(a: Vec3) -> Optional[Vec3]:
    """Unit vector along ``a``, or None when ``a`` has zero length."""
    l = v_len(a)
    if l == 0.0:
        return None
    return (a[0] / l, a[1] / l, a[2] / l)


def v_angle(a: Vec3, b: Vec3) -> Optional[float]:
    """
    Angle in radians between ``a`` and ``b``, i.e. acos( (a . b) / (|a| |b|) ).

    Both vectors are scaled to unit length first, then

        theta = atan2( |a' x b'|, a' . b' )

    which needs no clamping and stays exact for parallel vectors. Returns None
    when either vector has zero length or the result is not finite.
    """
    na = v_norm(a)
    nb = v_norm(b)
    if na is None or nb is None:
        return None
    c = v_dot(na, nb)
    s = v_len(v_cross(na, nb))
    if not (math.isfinite(c) and math.isfinite(s)):
        return None
    return math.atan2(s, c)


def v_lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    """Linear interpolation from ``a`` to ``b``. ``t`` is not clamped."""
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


def v_project(a: Vec3, b: Vec3) -> Optional[Vec3]:
    """Projection of ``a`` onto ``b``; None when ``b`` is the zero vector."""
    bb = v_dot(b, b)
    if bb == 0.0:
        return None
    return v_scale(b, v_dot(a, b) / bb)


def v_constrain(a: Vec3, vmin: Vec3, vmax: Vec3) -> Vec3:
    """
    Clamp ``a`` into the axis-aligned box [vmin, vmax].
    Assumes vmin <= vmax on every axis; this is not checked.
    """
    out = []
    for c, lo, hi in zip(a, vmin, vmax):
        if c < lo:
            c = lo
        if c > hi:
            c = hi
        out.append(c)
    return (out[0], out[1], out[2])
