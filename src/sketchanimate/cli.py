"""CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from sketchanimate.models.enums import Motion

if TYPE_CHECKING:
    from sketchanimate.config import ClassifierSettings
    from sketchanimate.models.drawing import Drawing

app = typer.Typer(
    name="sketchanimate",
    help="Turn freehand stroke drawings into skeletal animations.",
    no_args_is_help=False,
)

DrawingArg = Annotated[Path, typer.Argument(help="Path to a drawing JSON file")]
PresetOption = Annotated[
    str | None,
    typer.Option("--preset", "-p", help="Classifier thresholds: strict or relaxed"),
]


def _load_drawing(path: Path) -> Drawing:
    from sketchanimate.models.drawing import Drawing, DrawingLoadError

    try:
        return Drawing.load(path)
    except DrawingLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _classifier_settings(preset: str | None) -> ClassifierSettings:
    from sketchanimate.config import ClassifierSettings, load_config

    if preset is None:
        return load_config().classifier
    try:
        return ClassifierSettings.from_preset(preset)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.command()
def classify(
    drawing_path: DrawingArg,
    preset: PresetOption = None,
    latency: Annotated[
        float,
        typer.Option("--latency", help="Simulated analysis time in seconds"),
    ] = 0.0,
) -> None:
    """Classify a drawing and list the motions it supports."""
    import asyncio

    from sketchanimate.backend import LocalBackend, classify_with_fallback
    from sketchanimate.config import load_config

    geometry = load_config().geometry
    drawing = _load_drawing(drawing_path)
    settings = _classifier_settings(preset)
    backend = LocalBackend(settings, geometry_settings=geometry, simulated_latency=latency)
    result = asyncio.run(
        classify_with_fallback(drawing, backend, settings=settings, geometry_settings=geometry),
    )

    category = result.category
    typer.echo(f"Category: {category.label} ({category})")
    typer.echo(f"Motions: {', '.join(str(m) for m in category.motions)}")


@app.command()
def inspect(
    drawing_path: DrawingArg,
    preset: PresetOption = None,
) -> None:
    """Show what the classifier and skeleton builder see in a drawing."""
    from sketchanimate.config import load_config
    from sketchanimate.pipeline.diagnostics import describe_skeleton, detection_info

    config = load_config()
    drawing = _load_drawing(drawing_path)
    info = detection_info(
        drawing,
        classifier_settings=_classifier_settings(preset),
        geometry_settings=config.geometry,
    )
    typer.echo(info.describe())
    typer.echo("")
    typer.echo(describe_skeleton(drawing, config.skeleton))


@app.command()
def animate(
    drawing_path: DrawingArg,
    motion: Annotated[Motion, typer.Option("--motion", "-m", help="Motion to generate")],
    frames: Annotated[
        int | None,
        typer.Option("--frames", "-n", min=1, help="Frame count (default: duration x frame rate)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output directory"),
    ] = None,
    gif: Annotated[bool, typer.Option("--gif/--no-gif", help="Write animation.gif")] = True,
    sheet: Annotated[
        bool, typer.Option("--sheet/--no-sheet", help="Write sprite_sheet.png"),
    ] = True,
    pngs: Annotated[bool, typer.Option("--pngs", help="Write one PNG per frame")] = False,
) -> None:
    """Generate an animation and write it to a directory."""
    from sketchanimate.config import load_config
    from sketchanimate.pipeline.assembly import export_animation
    from sketchanimate.pipeline.classifier import ShapeClassifier
    from sketchanimate.pipeline.diagnostics import analyze_animation
    from sketchanimate.pipeline.generator import generate_animation

    config = load_config()
    drawing = _load_drawing(drawing_path)
    category = ShapeClassifier(config.classifier, config.geometry).classify(drawing)
    if motion not in category.motions:
        typer.echo(
            f"Warning: {motion} is not a usual motion for a {category.label.lower()} "
            f"(expected one of: {', '.join(str(m) for m in category.motions)})",
            err=True,
        )

    result = generate_animation(drawing, motion, config=config, frame_count=frames)
    out_dir = output or config.output_dir
    written = export_animation(
        result, out_dir,
        frame_rate=config.animation.frame_rate, pngs=pngs, sheet=sheet, gif=gif,
    )

    typer.echo(f"{motion.label}: {len(result)} frames for a {category.label.lower()}")
    report = analyze_animation(result, drawing)
    for check in report.checks:
        symbol = "✓" if check.passed else "✗"
        typer.echo(f"  {symbol} {check.label}")
        if not check.passed and check.message:
            typer.echo(f"    {check.message}")
    if report.static_strokes:
        typer.echo(f"  Static strokes: {', '.join(str(i) for i in report.static_strokes)}")
    for path in written:
        typer.echo(f"Saved: {path}")


@app.command()
def motions() -> None:
    """List each category with its motions and durations."""
    from sketchanimate.config import load_config
    from sketchanimate.models.enums import Category

    animation = load_config().animation
    for category in Category:
        entries = ", ".join(
            f"{m.label} ({animation.duration_for(m):g}s)" for m in category.motions
        )
        typer.echo(f"{category.label} ({category}): {entries}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool, typer.Option("--version", "-v", help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log pipeline decisions to stderr")
    ] = False,
) -> None:
    """SketchAnimate - turn freehand stroke drawings into skeletal animations."""
    if version:
        from sketchanimate import __version__

        typer.echo(f"sketchanimate {__version__}")
        raise typer.Exit()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
