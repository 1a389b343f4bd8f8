"""Application configuration with pydantic-settings + TOML.

Every geometric threshold and motion amplitude used by the pipeline lives
here as a named field, so variants of the heuristics are configuration,
not code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from sketchanimate.models.enums import Motion, Side


def _default_config_dir() -> Path:
    return Path.home() / ".sketchanimate"


def _default_durations() -> dict[Motion, float]:
    return {motion: motion.duration for motion in Motion}


class GeometrySettings(BaseSettings):
    """Stroke orientation and circularity defaults."""

    vertical_ratio: float = Field(default=1.5, gt=0)
    vertical_min_length: float = Field(default=30.0, ge=0)
    horizontal_ratio: float = Field(default=1.5, gt=0)
    horizontal_min_length: float = Field(default=20.0, ge=0)
    circle_min_points: int = Field(default=10, ge=2)
    circle_min_radius: float = Field(default=15.0, ge=0)
    circle_tolerance: float = Field(default=0.3, gt=0)


class ClassifierSettings(BaseSettings):
    """Thresholds for the heuristic shape classifier.

    Defaults are the ``"strict"`` preset.  Use :meth:`from_preset` for the
    looser ``"relaxed"`` variant.
    """

    # Human: a tall body stroke plus limbs near it.
    human_min_verticalness: float = 1.5
    human_min_body_height: float = 40.0
    human_limb_band: float = 50.0
    human_limb_min_size: float = 20.0
    human_min_limbs: int = 2
    human_min_strokes: int = 3
    human_max_strokes: int = 8
    human_limbs_without_head: int = 3
    head_min_points: int = 8
    head_min_radius: float = 15.0
    head_tolerance: float = 0.4
    head_top_margin: float = 0.0

    # Ball: few strokes, square-ish bounds, circular main stroke.
    ball_max_strokes: int = 3
    ball_min_aspect: float = 0.6
    ball_max_aspect: float = 1.5
    ball_min_points: int = 15
    ball_min_radius: float = 25.0
    ball_tolerance: float = 0.25

    # Box: accumulated evidence score.
    box_min_strokes: int = 1
    box_max_strokes: int = 8
    box_min_size: float = 20.0
    box_square_low: float = 0.8
    box_square_high: float = 1.2
    box_min_straight: int = 3
    box_edge_tolerance: float = 8.0
    box_edge_tolerance_fraction: float = 0.1
    box_edge_span: float = 0.7
    box_corner_tolerance: float = 30.0
    box_corner_stride: int = Field(default=3, ge=1)
    box_score_threshold: float = 4.0

    # Animal: wide drawing, a horizontal body and low legs/tail.
    animal_min_aspect: float = 1.2
    animal_min_strokes: int = 4
    animal_max_strokes: int = 12
    animal_body_min_width: float = 30.0
    animal_leg_depth: float = 0.5
    animal_min_legs: int = 2

    @classmethod
    def from_preset(cls, name: str) -> ClassifierSettings:
        """Build settings from a named preset (``"strict"`` or ``"relaxed"``)."""
        try:
            overrides = CLASSIFIER_PRESETS[name]
        except KeyError:
            known = ", ".join(sorted(CLASSIFIER_PRESETS))
            msg = f"unknown classifier preset '{name}' (expected one of: {known})"
            raise ValueError(msg) from None
        return cls(**overrides)


CLASSIFIER_PRESETS: dict[str, dict[str, Any]] = {
    "strict": {},
    "relaxed": {
        "human_min_verticalness": 1.2,
        "human_max_strokes": 12,
        "head_top_margin": 30.0,
        "ball_min_aspect": 0.7,
        "ball_max_aspect": 1.6,
        "ball_min_points": 10,
        "ball_min_radius": 15.0,
        "ball_tolerance": 0.3,
        "box_max_strokes": 6,
    },
}


class SkeletonSettings(BaseSettings):
    """Role inference and joint synthesis parameters."""

    body_min_verticalness: float = 1.2
    body_min_height: float = 40.0
    hip_inset: float = Field(default=0.10, ge=0, lt=0.5)
    shoulder_inset: float = Field(default=0.15, ge=0, lt=0.5)
    head_min_points: int = 8
    head_min_radius: float = 15.0
    head_tolerance: float = 0.4
    neck_min_verticalness: float = 1.0
    neck_max_height_fraction: float = 0.3
    neck_center_tolerance: float = 30.0
    arm_band: float = Field(default=5.0, ge=0)
    virtual_neck_length: float = 10.0
    virtual_head_offset: float = 20.0


class WalkSettings(BaseSettings):
    """Walk cycle amplitudes (pixels) and frequency."""

    travel_distance: float = 200.0
    cycles: float = Field(default=2.0, gt=0)
    bob: float = 6.0
    sway: float = 2.0
    leg_swing: float = 25.0
    arm_swing: float = 15.0
    leg_lift: float = 0.2
    head_nod: float = 2.0
    head_sway: float = 1.0
    drift_warning: float = 15.0


class MotionSettings(BaseSettings):
    """Amplitudes and frequencies of the simpler motions."""

    jump_height: float = 100.0
    jump_stretch: float = 1.1
    jump_squash: float = 0.9
    jump_tuck: float = 0.2
    jump_arm_raise: float = 20.0
    wave_angle: float = 35.0
    wave_cycles: float = 2.0
    wave_dominant_side: Side = Side.RIGHT
    wave_fallback_amount: float = 20.0
    bounce_count: float = 3.0
    bounce_height: float = 150.0
    bounce_squash: float = 0.4
    bounce_stretch: float = 0.3
    bounce_contact: float = Field(default=0.1, gt=0, lt=1)
    roll_distance: float = 200.0
    roll_turns: float = 1.0
    open_lift: float = 50.0
    open_angle: float = 30.0
    open_lid_fraction: float = 0.35
    shake_cycles: float = 10.0
    shake_x: float = 10.0
    shake_y: float = 5.0
    wag_cycles: float = 4.0
    wag_amount: float = 15.0
    float_x: float = 30.0
    float_y: float = 20.0
    float_tilt: float = 0.1
    spin_turns: float = 2.0


class AnimationSettings(BaseSettings):
    """Frame rate and per-motion durations."""

    frame_rate: float = Field(default=10.0, gt=0)
    durations: dict[Motion, Annotated[float, Field(gt=0)]] = Field(
        default_factory=_default_durations,
    )

    def duration_for(self, motion: Motion) -> float:
        return self.durations.get(motion, motion.duration)

    def frame_count(self, motion: Motion) -> int:
        """Number of frames for *motion*: duration x frame rate rounded, at least one."""
        return max(round(self.duration_for(motion) * self.frame_rate), 1)


class AppConfig(BaseSettings):
    """Root application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SKETCHANIMATE_",
        env_nested_delimiter="__",
    )

    config_dir: Path = Field(default_factory=_default_config_dir)
    output_dir: Path = Path("output")
    geometry: GeometrySettings = Field(default_factory=GeometrySettings)
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)
    skeleton: SkeletonSettings = Field(default_factory=SkeletonSettings)
    walk: WalkSettings = Field(default_factory=WalkSettings)
    motions: MotionSettings = Field(default_factory=MotionSettings)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)

    @classmethod
    def settings_customise_sources(cls, settings_cls, **kwargs):  # type: ignore[override]
        toml_path = _default_config_dir() / "config.toml"
        sources = (
            kwargs.get("init_settings"),
            kwargs.get("env_settings"),
        )
        if toml_path.exists():
            sources = (*sources, TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return (*sources, kwargs.get("dotenv_settings"), kwargs.get("file_secret_settings"))


def load_config() -> AppConfig:
    """Load application config from the environment and the optional TOML file."""
    return AppConfig()
