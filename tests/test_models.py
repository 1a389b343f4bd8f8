"""Tests for drawing, skeleton and frame models."""

import json

import pytest
from pydantic import ValidationError

from sketchanimate.models import (
    AnimationFrame,
    Bone,
    Category,
    Drawing,
    DrawingLoadError,
    Joint,
    JointRole,
    Motion,
    Point,
    PoseFrame,
    RealJoint,
    Rect,
    Skeleton,
    SkeletonError,
    Stroke,
    VirtualJoint,
)


def test_point_translate_and_distance():
    p = Point(3.0, 4.0)
    assert p.translate(1, -1) == Point(4.0, 3.0)
    assert p.distance_to(Point(0.0, 0.0)) == pytest.approx(5.0)


def test_rect_derived_values():
    r = Rect(x=10, y=20, width=40, height=20)
    assert r.max_x == 50
    assert r.max_y == 40
    assert r.center == Point(30, 30)
    assert r.aspect_ratio == pytest.approx(2.0)


def test_rect_aspect_ratio_without_height():
    assert Rect(width=50).aspect_ratio == 1.0


def test_stroke_requires_a_point():
    with pytest.raises(ValidationError):
        Stroke(points=())


def test_stroke_is_immutable():
    stroke = Stroke.from_xy((0, 0), (1, 1))
    with pytest.raises(ValidationError):
        stroke.points = ()  # type: ignore[misc]


def test_stroke_translated_leaves_original():
    stroke = Stroke.from_xy((0, 0), (10, 0))
    moved = stroke.translated(5, 5)
    assert moved.points == (Point(5, 5), Point(15, 5))
    assert stroke.start == Point(0, 0)


def test_drawing_indexing(human: Drawing):
    assert len(human) == 5
    assert human[0].end == Point(100, 150)
    assert human.point_count == 10
    assert not human.is_empty
    assert Drawing().is_empty


def test_drawing_save_load_round_trip(tmp_path, human_with_head: Drawing):
    path = human_with_head.save(tmp_path / "sub" / "drawing.json")
    assert Drawing.load(path) == human_with_head


def test_drawing_file_format(tmp_path):
    path = Drawing(strokes=(Stroke.from_xy((1, 2), (3, 4)),)).save(tmp_path / "d.json")
    assert json.loads(path.read_text()) == {"strokes": [{"points": [[1.0, 2.0], [3.0, 4.0]]}]}


def test_drawing_load_missing_file(tmp_path):
    with pytest.raises(DrawingLoadError, match="not found"):
        Drawing.load(tmp_path / "missing.json")


def test_drawing_load_directory(tmp_path):
    with pytest.raises(DrawingLoadError, match="directory"):
        Drawing.load(tmp_path)


def test_drawing_load_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(DrawingLoadError, match="invalid JSON"):
        Drawing.load(path)


def test_drawing_load_schema_violation(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"strokes": [{"points": []}]}))
    with pytest.raises(DrawingLoadError, match="schema"):
        Drawing.load(path)


def test_drawing_load_error_is_value_error():
    assert issubclass(DrawingLoadError, ValueError)


# --- enums ---


def test_every_category_motion_has_positive_duration():
    for category in Category:
        assert category.motions
        for motion in category.motions:
            assert isinstance(motion, Motion)
            assert motion.duration > 0


def test_labels():
    assert Category.HUMAN.label == "Person"
    assert Category.UNKNOWN.label == "Drawing"
    assert Motion.WAG.label == "Wag Tail"


def test_unknown_category_has_fallback_motions():
    assert set(Category.UNKNOWN.motions) == {Motion.FLOAT, Motion.SPIN, Motion.SHAKE}


# --- skeleton ---


def _joint(name: str, x: float, y: float, parent: str | None = None, index: int = 0) -> Joint:
    return Joint(name, JointRole.HIP, Point(x, y), RealJoint(index), parent=parent)


def test_joint_move_and_reset():
    joint = _joint("hip", 0, 0)
    joint.move_to(Point(3, 4))
    assert joint.displacement == (3, 4)
    joint.reset()
    assert joint.current == joint.original


def test_virtual_joint_flag():
    joint = Joint("neck", JointRole.NECK, Point(0, 0), VirtualJoint(anchor="shoulder"))
    assert joint.is_virtual


def test_skeleton_rejects_missing_root():
    with pytest.raises(SkeletonError, match="root"):
        Skeleton(joints={"a": _joint("a", 0, 0)}, root="hip")


def test_skeleton_rejects_bone_to_missing_joint():
    joints = {"hip": _joint("hip", 0, 0)}
    with pytest.raises(SkeletonError, match="missing joint"):
        Skeleton(joints=joints, bones=[Bone("b", "hip", "nowhere", 1.0, 0)])


def test_skeleton_rejects_shared_stroke():
    joints = {"hip": _joint("hip", 0, 0), "a": _joint("a", 1, 0, "hip"), "b": _joint("b", 2, 0, "hip")}
    bones = [Bone("one", "hip", "a", 1.0, 3), Bone("two", "hip", "b", 2.0, 3)]
    with pytest.raises(SkeletonError, match="more than one bone"):
        Skeleton(joints=joints, bones=bones)


def test_skeleton_rejects_missing_parent():
    joints = {"hip": _joint("hip", 0, 0), "a": _joint("a", 1, 0, "ghost")}
    with pytest.raises(SkeletonError, match="missing parent"):
        Skeleton(joints=joints)


# --- frames ---


def test_pose_frame_timestamp():
    frame = PoseFrame.at(5, {"hip": Point(0, 0)}, 10.0)
    assert frame.timestamp == pytest.approx(0.5)


def test_animation_frame_describe():
    frame = AnimationFrame.at(3, [Stroke.from_xy((0, 0), (1, 1))], 10.0)
    assert frame.strokes[0].end == Point(1, 1)
    assert frame.describe() == "Frame 3: 1 strokes at 0.3s"
