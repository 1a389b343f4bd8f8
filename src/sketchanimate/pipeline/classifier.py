"""Heuristic shape classifier: strokes in, coarse object category out.

Checks run in a fixed priority order and the first match wins.  The human
check runs first because misreading a stick figure as something else costs
more than the reverse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sketchanimate.config import ClassifierSettings, GeometrySettings
from sketchanimate.models.drawing import Drawing, Rect, Stroke
from sketchanimate.models.enums import Category
from sketchanimate.pipeline import geometry

logger = logging.getLogger(__name__)


@dataclass
class BoxEvidence:
    """Breakdown of the box score, kept for diagnostics."""

    non_square: bool = False
    straight_strokes: int = 0
    edges: tuple[str, ...] = ()
    four_strokes: bool = False
    right_angle: bool = False
    score: float = 0.0


class ShapeClassifier:
    """Deterministic, total classifier over a :class:`Drawing`.

    ``classify`` never raises; a drawing that matches nothing is
    :attr:`Category.UNKNOWN`.
    """

    def __init__(
        self,
        settings: ClassifierSettings | None = None,
        geometry_settings: GeometrySettings | None = None,
    ) -> None:
        self.settings = settings or ClassifierSettings()
        self.geometry = geometry_settings or GeometrySettings()

    def classify(self, drawing: Drawing) -> Category:
        if drawing.is_empty:
            logger.debug("Empty drawing, category unknown")
            return Category.UNKNOWN

        strokes = drawing.strokes
        bounds = geometry.bounding_box(strokes)

        if self.is_human(strokes):
            category = Category.HUMAN
        elif self.is_ball(strokes, bounds):
            category = Category.BALL
        elif self.is_box(strokes, bounds):
            category = Category.BOX
        elif self.is_animal(strokes, bounds):
            category = Category.ANIMAL
        else:
            category = Category.UNKNOWN

        logger.info(
            "Classified drawing (%d strokes, aspect %.2f) as %s",
            len(strokes), bounds.aspect_ratio, category,
        )
        return category

    # -- human --------------------------------------------------------------

    def is_human(self, strokes: tuple[Stroke, ...]) -> bool:
        s = self.settings
        body_index = geometry.tallest_upright(
            strokes,
            min_verticalness=s.human_min_verticalness,
            min_height=s.human_min_body_height,
        )
        if body_index is None:
            logger.debug("Human: no vertical body stroke")
            return False

        body = geometry.bounding_box(strokes[body_index])
        head_index = self._find_head(strokes, body, exclude=body_index)

        limbs = 0
        for index, stroke in enumerate(strokes):
            if index in (body_index, head_index):
                continue
            bounds = geometry.bounding_box(stroke)
            near_body = abs(bounds.mid_x - body.mid_x) < body.width + s.human_limb_band
            limb_like = bounds.width > s.human_limb_min_size or bounds.height > s.human_limb_min_size
            if near_body and limb_like:
                limbs += 1

        has_head = head_index is not None
        count_ok = s.human_min_strokes <= len(strokes) <= s.human_max_strokes
        result = (
            limbs >= s.human_min_limbs
            and count_ok
            and (limbs >= s.human_limbs_without_head or has_head)
        )
        logger.debug(
            "Human: body=%d limbs=%d head=%s strokes=%d -> %s",
            body_index, limbs, has_head, len(strokes), result,
        )
        return result

    def _find_head(self, strokes: tuple[Stroke, ...], body: Rect, *, exclude: int) -> int | None:
        s = self.settings
        for index, stroke in enumerate(strokes):
            if index == exclude:
                continue
            above = geometry.bounding_box(stroke).mid_y < body.y + s.head_top_margin
            if above and geometry.circularity(
                stroke,
                min_points=s.head_min_points,
                min_radius=s.head_min_radius,
                tolerance=s.head_tolerance,
            ):
                return index
        return None

    # -- ball ---------------------------------------------------------------

    def is_ball(self, strokes: tuple[Stroke, ...], bounds: Rect) -> bool:
        s = self.settings
        aspect = bounds.aspect_ratio
        if len(strokes) > s.ball_max_strokes or not s.ball_min_aspect <= aspect <= s.ball_max_aspect:
            logger.debug("Ball: rejected (%d strokes, aspect %.2f)", len(strokes), aspect)
            return False
        main = max(strokes, key=len)
        result = geometry.circularity(
            main,
            min_points=s.ball_min_points,
            min_radius=s.ball_min_radius,
            tolerance=s.ball_tolerance,
        )
        logger.debug("Ball: main stroke %d points, circular=%s", len(main), result)
        return result

    # -- box ----------------------------------------------------------------

    def is_box(self, strokes: tuple[Stroke, ...], bounds: Rect) -> bool:
        evidence = self.box_evidence(strokes, bounds)
        return evidence is not None and evidence.score >= self.settings.box_score_threshold

    def box_evidence(self, strokes: tuple[Stroke, ...], bounds: Rect) -> BoxEvidence | None:
        """Score box-like features, or ``None`` when the drawing cannot be a box."""
        s = self.settings
        if not s.box_min_strokes <= len(strokes) <= s.box_max_strokes:
            return None
        if bounds.width < s.box_min_size or bounds.height < s.box_min_size:
            return None

        ev = BoxEvidence()
        aspect = bounds.aspect_ratio
        ev.non_square = not s.box_square_low <= aspect <= s.box_square_high
        ev.straight_strokes = sum(1 for st in strokes if geometry.is_straight(st, self.geometry))
        ev.edges = self._edges_present(strokes, bounds)
        ev.four_strokes = len(strokes) == 4
        ev.right_angle = any(
            geometry.has_right_angle(
                st, stride=s.box_corner_stride, tolerance=s.box_corner_tolerance,
            )
            for st in strokes
        )

        score = 0.0
        if ev.non_square:
            score += 1
        if ev.straight_strokes >= s.box_min_straight:
            score += 1
        score += 0.5 * len(ev.edges)
        if "top" in ev.edges and "bottom" in ev.edges:
            score += 1
        if "left" in ev.edges and "right" in ev.edges:
            score += 1
        if ev.four_strokes:
            score += 1
        if ev.right_angle:
            score += 1
        ev.score = score
        logger.debug("Box: %s", ev)
        return ev

    def _edges_present(self, strokes: tuple[Stroke, ...], bounds: Rect) -> tuple[str, ...]:
        """Edges of *bounds* traced along most of their length by a single stroke."""
        s = self.settings
        tol_x = max(s.box_edge_tolerance, s.box_edge_tolerance_fraction * bounds.width)
        tol_y = max(s.box_edge_tolerance, s.box_edge_tolerance_fraction * bounds.height)
        need_x = s.box_edge_span * bounds.width
        need_y = s.box_edge_span * bounds.height

        def spans(values: list[float], needed: float) -> bool:
            return len(values) >= 2 and max(values) - min(values) >= needed

        found: list[str] = []
        checks = (
            ("top", lambda p: p.y - bounds.y <= tol_y, lambda p: p.x, need_x),
            ("bottom", lambda p: bounds.max_y - p.y <= tol_y, lambda p: p.x, need_x),
            ("left", lambda p: p.x - bounds.x <= tol_x, lambda p: p.y, need_y),
            ("right", lambda p: bounds.max_x - p.x <= tol_x, lambda p: p.y, need_y),
        )
        for name, near, along, needed in checks:
            for stroke in strokes:
                values = [along(p) for p in stroke.points if near(p)]
                if spans(values, needed):
                    found.append(name)
                    break
        return tuple(found)

    # -- animal -------------------------------------------------------------

    def is_animal(self, strokes: tuple[Stroke, ...], bounds: Rect) -> bool:
        s = self.settings
        if bounds.aspect_ratio <= s.animal_min_aspect:
            return False
        if not s.animal_min_strokes <= len(strokes) <= s.animal_max_strokes:
            return False

        body_index: int | None = None
        body_width = 0.0
        for index, stroke in enumerate(strokes):
            b = geometry.bounding_box(stroke)
            if b.width > b.height and b.width > s.animal_body_min_width and b.width > body_width:
                body_index = index
                body_width = b.width
        if body_index is None:
            logger.debug("Animal: no horizontal body stroke")
            return False

        leg_line = bounds.y + s.animal_leg_depth * bounds.height
        legs = sum(
            1
            for index, stroke in enumerate(strokes)
            if index != body_index and geometry.bounding_box(stroke).mid_y >= leg_line
        )
        logger.debug("Animal: body=%d low strokes=%d", body_index, legs)
        return legs >= s.animal_min_legs


def classify(
    drawing: Drawing,
    settings: ClassifierSettings | None = None,
    geometry_settings: GeometrySettings | None = None,
) -> Category:
    """Classify *drawing* with a fresh :class:`ShapeClassifier`."""
    return ShapeClassifier(settings, geometry_settings).classify(drawing)
