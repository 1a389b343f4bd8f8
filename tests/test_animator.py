"""Tests for joint-driven motions."""

import pytest

from sketchanimate.config import WalkSettings
from sketchanimate.models import Drawing, Motion
from sketchanimate.pipeline.animator import (
    animate,
    hierarchy_order,
    walk_phase,
    walk_swings,
)
from sketchanimate.pipeline.diagnostics import bone_drift
from sketchanimate.pipeline.skeleton import build_skeleton


@pytest.fixture
def skeleton(human: Drawing):
    return build_skeleton(human)


def _assert_point(actual, expected):
    assert actual.x == pytest.approx(expected[0], abs=1e-9)
    assert actual.y == pytest.approx(expected[1], abs=1e-9)


def test_frame_count_and_timestamps(skeleton):
    frames = animate(skeleton, Motion.WALK, 12, frame_rate=10.0)
    assert len(frames) == 12
    for i, frame in enumerate(frames):
        assert frame.frame_number == i
        assert frame.timestamp == pytest.approx(i / 10.0)


def test_first_walk_frame_is_rest_pose(skeleton):
    frame = animate(skeleton, Motion.WALK, 60)[0]
    for name, original in skeleton.original_positions().items():
        _assert_point(frame.joints[name], original)


def test_walk_quarter_phase(skeleton):
    # Frame 1 of 8: progress 0.125, walk phase 0.25.
    frame = animate(skeleton, Motion.WALK, 8)[1]
    w = WalkSettings()
    _assert_point(frame.joints["hip"], (100 + 25, 140 + w.bob))
    _assert_point(frame.joints["shoulder"], (125, 146 - 75))
    # Left leg at full forward swing, lifted; right leg at full back swing.
    _assert_point(frame.joints["foot_left"], (125 - 20 + 25, 146 + 60 - 5))
    _assert_point(frame.joints["foot_right"], (125 + 20 - 25, 146 + 60))
    # Arms swing opposite to the same-side leg.
    _assert_point(frame.joints["hand_left"], (125 - 40 - 15, 71 + 15))
    _assert_point(frame.joints["hand_right"], (125 + 40 + 15, 71 + 15))


def test_walk_swings_alternate():
    w = WalkSettings()
    swings = walk_swings(0.25, w)
    assert swings["leg_left"] == pytest.approx(w.leg_swing)
    assert swings["leg_right"] == pytest.approx(-w.leg_swing)
    for phase in (0.1, 0.3, 0.6, 0.85):
        s = walk_swings(phase, w)
        assert s["leg_left"] == pytest.approx(-s["leg_right"])
        assert s["arm_left"] / w.arm_swing == pytest.approx(s["leg_right"] / w.leg_swing)


def test_walk_phase_wraps():
    assert walk_phase(0.0) == 0.0
    assert walk_phase(0.25) == pytest.approx(0.5)
    assert walk_phase(0.5) == pytest.approx(0.0)
    assert walk_phase(0.75) == pytest.approx(0.5)


@pytest.mark.parametrize("motion", [Motion.WALK, Motion.JUMP])
def test_torso_length_preserved(skeleton, motion):
    for frame in animate(skeleton, motion, 30):
        length = frame.joints["hip"].distance_to(frame.joints["shoulder"])
        assert length == pytest.approx(75, abs=1e-9)


def test_neck_length_preserved(human_with_neck):
    skeleton = build_skeleton(human_with_neck)
    for frame in animate(skeleton, Motion.WALK, 30):
        length = frame.joints["neck_start"].distance_to(frame.joints["neck_end"])
        assert length == pytest.approx(10, abs=1e-9)


def test_walk_travels_forward(skeleton):
    frames = animate(skeleton, Motion.WALK, 20)
    xs = [f.joints["hip"].x for f in frames]
    assert xs[-1] > xs[0] + 150


def test_jump_apex(skeleton):
    frames = animate(skeleton, Motion.JUMP, 10)
    _assert_point(frames[5].joints["hip"], (100, 40))
    assert frames[5].joints["foot_left"].y < 200 - 100
    for name, original in skeleton.original_positions().items():
        _assert_point(frames[0].joints[name], original)


def test_skeleton_reset_after_animation(skeleton):
    animate(skeleton, Motion.WALK, 10)
    assert skeleton.positions() == skeleton.original_positions()
    assert bone_drift(skeleton)["torso"] == pytest.approx(0)


def test_rejects_non_joint_motion(skeleton):
    with pytest.raises(ValueError, match="not a joint-driven motion"):
        animate(skeleton, Motion.SPIN, 10)


@pytest.mark.parametrize("count", [0, -3])
def test_rejects_non_positive_frame_count(skeleton, count):
    with pytest.raises(ValueError, match="positive"):
        animate(skeleton, Motion.WALK, count)


def test_hierarchy_order_parents_first(human_with_neck):
    skeleton = build_skeleton(human_with_neck)
    order = hierarchy_order(skeleton)
    assert order[0] == "hip"
    assert sorted(order) == sorted(skeleton.joints)
    for name, joint in skeleton.joints.items():
        if joint.parent is not None:
            assert order.index(joint.parent) < order.index(name)
