"""Tests for the tuple vector helpers."""

import math

import pytest

from quadgeo.vector import (
    v_add,
    v_angle,
    v_constrain,
    v_cross,
    v_distance,
    v_div,
    v_div_scalar,
    v_dot,
    v_len,
    v_lerp,
    v_mul,
    v_neg,
    v_norm,
    v_project,
    v_scale,
    v_sub,
)

SAMPLES = [
    (1.0, 2.0, 3.0),
    (-4.5, 0.25, 7.0),
    (0.0, 0.0, 1.0),
    (3.0, -3.0, 0.5),
]


# ═══════════════════════════════════════════════════════════════
# ARITHMETIC
# ═══════════════════════════════════════════════════════════════

def test_componentwise_arithmetic():
    a, b = (1.0, 2.0, 3.0), (4.0, -2.0, 0.5)
    assert v_add(a, b) == (5.0, 0.0, 3.5)
    assert v_sub(a, b) == (-3.0, 4.0, 2.5)
    assert v_mul(a, b) == (4.0, -4.0, 1.5)
    assert v_div(a, b) == (0.25, -1.0, 6.0)
    assert v_scale(a, 2.0) == (2.0, 4.0, 6.0)
    assert v_div_scalar(a, 2.0) == (0.5, 1.0, 1.5)
    assert v_neg(a) == (-1.0, -2.0, -3.0)


def test_component_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        v_div((1.0, 1.0, 1.0), (1.0, 0.0, 1.0))


def test_length_and_distance():
    assert v_len((3.0, 4.0, 0.0)) == 5.0
    assert v_distance((1.0, 1.0, 1.0), (1.0, 1.0, 3.0)) == 2.0
    assert v_len((0.0, 0.0, 0.0)) == 0.0


# ═══════════════════════════════════════════════════════════════
# PRODUCTS
# ═══════════════════════════════════════════════════════════════

def test_cross_right_hand_rule():
    assert v_cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)
    assert v_cross((0.0, 1.0, 0.0), (1.0, 0.0, 0.0)) == (0.0, 0.0, -1.0)


@pytest.mark.parametrize("a", SAMPLES)
@pytest.mark.parametrize("b", SAMPLES)
def test_cross_is_perpendicular_to_inputs(a, b):
    c = v_cross(a, b)
    assert v_dot(c, a) == pytest.approx(0.0, abs=1e-9)
    assert v_dot(c, b) == pytest.approx(0.0, abs=1e-9)


def test_cross_with_zero_vector():
    assert v_cross((0.0, 0.0, 0.0), (1.0, 2.0, 3.0)) == (0.0, 0.0, 0.0)
    assert v_dot((0.0, 0.0, 0.0), (1.0, 2.0, 3.0)) == 0.0


# ═══════════════════════════════════════════════════════════════
# UNDEFINED RESULTS
# ═══════════════════════════════════════════════════════════════

@pytest.mark.parametrize("a", SAMPLES)
def test_normalize_gives_unit_length(a):
    n = v_norm(a)
    assert n is not None
    assert v_len(n) == pytest.approx(1.0)


def test_normalize_zero_vector_is_none():
    assert v_norm((0.0, 0.0, 0.0)) is None


@pytest.mark.parametrize("a", SAMPLES)
def test_angle_with_itself_is_zero(a):
    assert v_angle(a, a) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("a", SAMPLES)
def test_angle_with_opposite_is_pi(a):
    assert v_angle(a, v_neg(a)) == pytest.approx(math.pi, abs=1e-6)


def test_angle_right_angle():
    assert v_angle((2.0, 0.0, 0.0), (0.0, 0.0, 5.0)) == pytest.approx(math.pi / 2)


@pytest.mark.parametrize("s", [1e155, 1e-170])
def test_length_and_angle_at_extreme_scales(s):
    assert v_len((3 * s, 4 * s, 0.0)) == pytest.approx(5 * s)
    assert v_norm((s, 0.0, 0.0)) == (1.0, 0.0, 0.0)
    assert v_angle((s, 0.0, 0.0), (s, s, 0.0)) == pytest.approx(math.pi / 4)


def test_angle_of_non_finite_vector_is_none():
    assert v_angle((math.inf, 1.0, 0.0), (1.0, 0.0, 0.0)) is None
    assert v_angle((math.nan, 0.0, 0.0), (1.0, 0.0, 0.0)) is None


def test_angle_with_zero_vector_is_none():
    assert v_angle((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) is None
    assert v_angle((1.0, 0.0, 0.0), (0.0, 0.0, 0.0)) is None


def test_project():
    assert v_project((3.0, 4.0, 0.0), (2.0, 0.0, 0.0)) == (3.0, 0.0, 0.0)
    p = v_project((1.0, 2.0, 3.0), (1.0, 1.0, 0.0))
    assert p == pytest.approx((1.5, 1.5, 0.0))


def test_project_onto_zero_vector_is_none():
    assert v_project((1.0, 2.0, 3.0), (0.0, 0.0, 0.0)) is None


# ═══════════════════════════════════════════════════════════════
# INTERPOLATION / CLAMPING
# ═══════════════════════════════════════════════════════════════

def test_lerp_endpoints_and_midpoint():
    a, b = (0.0, 0.0, 0.0), (2.0, 4.0, -6.0)
    assert v_lerp(a, b, 0.0) == a
    assert v_lerp(a, b, 1.0) == b
    assert v_lerp(a, b, 0.5) == (1.0, 2.0, -3.0)


def test_lerp_extrapolates():
    assert v_lerp((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 2.0) == (2.0, 2.0, 2.0)
    assert v_lerp((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), -1.0) == (-1.0, -1.0, -1.0)


def test_constrain_clamps_each_axis():
    lo, hi = (-1.0, 0.0, 2.0), (1.0, 5.0, 3.0)
    assert v_constrain((-3.0, 2.0, 9.0), lo, hi) == (-1.0, 2.0, 3.0)
    assert v_constrain((0.5, -1.0, 2.5), lo, hi) == (0.5, 0.0, 2.5)


def test_constrain_inverted_bounds_does_not_crash():
    out = v_constrain((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (-1.0, -1.0, -1.0))
    assert len(out) == 3
