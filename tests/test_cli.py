"""Tests for the CLI entry point."""

import json

from typer.testing import CliRunner

from sketchanimate import __version__
from sketchanimate.cli import app

runner = CliRunner()


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"sketchanimate {__version__}"


def test_classify(human_file):
    result = runner.invoke(app, ["classify", str(human_file)])
    assert result.exit_code == 0
    assert "Category: Person (human)" in result.output
    assert "Motions: walk, jump, wave" in result.output


def test_classify_with_preset(human_file):
    result = runner.invoke(app, ["classify", str(human_file), "--preset", "relaxed"])
    assert result.exit_code == 0
    assert "Person" in result.output


def test_classify_unknown_preset(human_file):
    result = runner.invoke(app, ["classify", str(human_file), "--preset", "loose"])
    assert result.exit_code == 1
    assert "unknown classifier preset" in result.output


def test_classify_missing_file(tmp_path):
    result = runner.invoke(app, ["classify", str(tmp_path / "nope.json")])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_inspect(human_file):
    result = runner.invoke(app, ["inspect", str(human_file)])
    assert result.exit_code == 0
    assert "Vertical strokes: 3" in result.output
    assert "Body: stroke 0" in result.output
    assert "Head: none (virtual)" in result.output


def test_animate_writes_outputs(tmp_path, human_file):
    out = tmp_path / "out"
    result = runner.invoke(
        app, ["animate", str(human_file), "--motion", "walk", "--frames", "4", "--output", str(out)],
    )
    assert result.exit_code == 0, result.output
    assert "Walk: 4 frames for a person" in result.output
    assert (out / "animation.gif").exists()
    assert (out / "sprite_sheet.png").exists()
    frames = json.loads((out / "frames.json").read_text())["frames"]
    assert len(frames) == 4


def test_animate_warns_on_unusual_motion(tmp_path, human_file):
    result = runner.invoke(
        app,
        [
            "animate", str(human_file), "-m", "bounce", "-n", "3",
            "-o", str(tmp_path), "--no-gif", "--no-sheet",
        ],
    )
    assert result.exit_code == 0
    assert "Warning: bounce is not a usual motion" in result.output
    assert not (tmp_path / "animation.gif").exists()


def test_animate_rejects_unknown_motion(human_file):
    result = runner.invoke(app, ["animate", str(human_file), "--motion", "moonwalk"])
    assert result.exit_code != 0


def test_motions_table():
    result = runner.invoke(app, ["motions"])
    assert result.exit_code == 0
    assert "Person (human): Walk (6s), Jump (3s), Wave (4s)" in result.output
    assert "Animal (animal): Walk (6s), Wag Tail (4s), Jump (3s)" in result.output
