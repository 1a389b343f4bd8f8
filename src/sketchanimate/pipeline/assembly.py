"""Rasterize animation frames with Pillow: PNGs, sprite sheets and GIFs."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from PIL import Image, ImageDraw

from sketchanimate.models.drawing import Rect
from sketchanimate.pipeline import geometry

if TYPE_CHECKING:
    from pathlib import Path

    from sketchanimate.models.frame import AnimationFrame

logger = logging.getLogger(__name__)

FRAMES_FILENAME = "frames.json"


def frames_bounds(frames: list[AnimationFrame]) -> Rect:
    """Bounds enclosing every stroke of every frame."""
    return geometry.bounding_box(stroke for frame in frames for stroke in frame.strokes)


def render_frame(
    frame: AnimationFrame,
    size: tuple[int, int],
    *,
    origin: tuple[float, float] = (0.0, 0.0),
    line_width: int = 3,
    color: tuple[int, int, int, int] = (0, 0, 0, 255),
    background: tuple[int, int, int, int] = (255, 255, 255, 255),
) -> Image.Image:
    """Draw one frame's strokes as polylines on a fresh RGBA canvas.

    *origin* is the canvas coordinate that maps to the image's top-left
    pixel.  Single-point strokes are drawn as dots.
    """
    img = Image.new("RGBA", size, background)
    draw = ImageDraw.Draw(img)
    ox, oy = origin
    for stroke in frame.strokes:
        pts = [(p.x - ox, p.y - oy) for p in stroke.points]
        if len(pts) == 1:
            x, y = pts[0]
            r = line_width / 2
            draw.ellipse([(x - r, y - r), (x + r, y + r)], fill=color)
        else:
            draw.line(pts, fill=color, width=line_width, joint="curve")
    return img


def render_frames(
    frames: list[AnimationFrame],
    *,
    padding: int = 20,
    line_width: int = 3,
) -> list[Image.Image]:
    """Render all frames onto same-sized canvases that fit the whole motion."""
    if not frames:
        msg = "No frames provided for rendering"
        raise ValueError(msg)

    bounds = frames_bounds(frames)
    size = (
        max(int(bounds.width) + 2 * padding, 1),
        max(int(bounds.height) + 2 * padding, 1),
    )
    origin = (bounds.x - padding, bounds.y - padding)
    return [render_frame(f, size, origin=origin, line_width=line_width) for f in frames]


def assemble_sprite_sheet(
    images: list[Image.Image],
    output: Path,
    *,
    direction: str = "horizontal",
    padding: int = 0,
) -> Path:
    """Combine rendered frames into a single sprite sheet.

    Parameters
    ----------
    images:
        Ordered frame images, all the size of the first.
    output:
        Path where the assembled sheet will be saved.
    direction:
        ``"horizontal"`` for a single-row strip (default) or ``"vertical"``
        for a single-column strip.
    padding:
        Extra transparent pixels between each frame.

    Returns
    -------
    Path
        The *output* path, for chaining convenience.
    """
    if not images:
        msg = "No frames provided for sprite sheet assembly"
        raise ValueError(msg)

    fw, fh = images[0].size
    n = len(images)

    if direction == "horizontal":
        sheet_w = fw * n + padding * max(n - 1, 0)
        sheet_h = fh
    else:
        sheet_w = fw
        sheet_h = fh * n + padding * max(n - 1, 0)

    sheet = Image.new("RGBA", (sheet_w, sheet_h), (0, 0, 0, 0))

    for idx, img in enumerate(images):
        if img.size != (fw, fh):
            img = img.resize((fw, fh), Image.LANCZOS)
        if direction == "horizontal":
            x, y = idx * (fw + padding), 0
        else:
            x, y = 0, idx * (fh + padding)
        sheet.paste(img, (x, y))

    output.parent.mkdir(parents=True, exist_ok=True)
    sheet.save(output, "PNG")
    logger.info("Assembled sprite sheet: %s (%d frames, %dx%d)", output, n, sheet_w, sheet_h)
    return output


def save_gif(images: list[Image.Image], output: Path, *, frame_rate: float = 10.0) -> Path:
    """Write a looping animated GIF played at *frame_rate*."""
    if not images:
        msg = "No frames provided for GIF export"
        raise ValueError(msg)

    output.parent.mkdir(parents=True, exist_ok=True)
    rgb = [img.convert("RGB") for img in images]
    rgb[0].save(
        output,
        "GIF",
        save_all=True,
        append_images=rgb[1:],
        duration=int(1000 / frame_rate),
        loop=0,
    )
    logger.info("Saved GIF: %s (%d frames at %.1f fps)", output, len(rgb), frame_rate)
    return output


def export_animation(
    frames: list[AnimationFrame],
    output_dir: Path,
    *,
    frame_rate: float = 10.0,
    pngs: bool = False,
    sheet: bool = True,
    gif: bool = True,
) -> list[Path]:
    """Write ``frames.json`` and optional raster outputs into *output_dir*.

    Returns the written paths in creation order.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    frames_path = output_dir / FRAMES_FILENAME
    payload = {
        "frame_rate": frame_rate,
        "frames": [frame.model_dump(mode="json") for frame in frames],
    }
    frames_path.write_text(json.dumps(payload, indent=2))
    written = [frames_path]

    if not (pngs or sheet or gif) or not frames:
        return written

    images = render_frames(frames)
    if pngs:
        for frame, img in zip(frames, images):
            path = output_dir / f"frame_{frame.frame_number:03d}.png"
            img.save(path, "PNG")
            written.append(path)
    if sheet:
        written.append(assemble_sprite_sheet(images, output_dir / "sprite_sheet.png"))
    if gif:
        written.append(save_gif(images, output_dir / "animation.gif", frame_rate=frame_rate))
    return written
