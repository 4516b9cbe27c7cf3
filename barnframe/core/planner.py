"""Beam layout planner — spaces beams across each wall and cuts them."""

from __future__ import annotations
import logging
import math

from barnframe.core.bounds import feature_bounds, wall_openings, wall_span
from barnframe.core.cutter import cut_horizontal_beam, cut_vertical_beam
from barnframe.models import (
    BeamLayout, BeamOrientation, BeamPass, BeamStats, BuildingDimensions,
    HorizontalBeamParams, Opening, VerticalBeamParams, WallBeamLayout, WallPosition,
)

logger = logging.getLogger(__name__)

POSITION_TOLERANCE = 1e-9


class BeamPlanner:
    """
    Stateless beam layout planner.

    Vertical beams are evenly spaced between the wall margins; horizontal
    beams sit at fixed fractions of the wall height. Every beam is cut
    around the openings on its own wall.
    """

    def __init__(
        self,
        vertical: VerticalBeamParams | None = None,
        horizontal: HorizontalBeamParams | None = None,
    ) -> None:
        self.vertical = vertical or VerticalBeamParams()
        self.horizontal = horizontal or HorizontalBeamParams()

    def beam_positions(self, wall_width: float) -> list[float]:
        """Center-origin x positions of the vertical beams."""
        p = self.vertical
        available = wall_width - 2 * p.margin
        if available <= 0:
            return []

        count = max(p.min_beams, math.ceil(available / p.max_spacing) + 1)
        spacing = available / max(1, count - 1)

        if spacing < p.min_spacing and count > p.min_beams:
            count = max(p.min_beams, math.floor(available / p.min_spacing) + 1)
            spacing = available / max(1, count - 1)

        start = -wall_width / 2 + p.margin
        limit = wall_width / 2 - p.margin + POSITION_TOLERANCE
        positions: list[float] = []
        for i in range(count):
            pos = start + i * spacing
            if pos > limit:
                break
            positions.append(pos)
        return positions

    def plan_vertical(
        self, wall_width: float, wall_height: float, openings: list[Opening],
    ) -> BeamPass:
        bounds = [feature_bounds(o, wall_width, wall_height) for o in openings]
        positions = self.beam_positions(wall_width)

        segments = []
        for x in positions:
            segments.extend(cut_vertical_beam(x, wall_height, bounds, self.vertical))

        total = sum(s.length for s in segments)
        coverage = _ratio(total, len(positions) * wall_height)
        if positions and coverage < self.vertical.coverage_warning:
            logger.warning(
                "Low vertical structural coverage %.1f%% on %.1fx%.1f wall",
                coverage * 100, wall_width, wall_height,
            )

        return BeamPass(
            orientation=BeamOrientation.VERTICAL,
            segments=segments,
            beam_count=len(positions),
            coverage=coverage,
        )

    def plan_horizontal(
        self, wall_width: float, wall_height: float, openings: list[Opening],
    ) -> BeamPass:
        p = self.horizontal
        bounds = [feature_bounds(o, wall_width, wall_height) for o in openings]

        segments = []
        for ratio in p.height_ratios:
            beam_y = -wall_height / 2 + wall_height * ratio
            segments.extend(cut_horizontal_beam(beam_y, wall_width, bounds, p))

        span = wall_width - 2 * p.margin
        total = sum(s.width for s in segments)
        coverage = _ratio(total, len(p.height_ratios) * span)
        if p.height_ratios and span > 0 and coverage < p.coverage_warning:
            logger.warning(
                "Low horizontal structural coverage %.1f%% on %.1fx%.1f wall",
                coverage * 100, wall_width, wall_height,
            )

        return BeamPass(
            orientation=BeamOrientation.HORIZONTAL,
            segments=segments,
            beam_count=len(p.height_ratios),
            coverage=coverage,
        )

    def plan_wall(
        self,
        dimensions: BuildingDimensions,
        openings: list[Opening],
        wall: WallPosition,
    ) -> WallBeamLayout:
        """Both beam passes for one wall, using only that wall's openings."""
        width, height = wall_span(dimensions, wall)
        hosted = wall_openings(openings, wall)
        logger.debug("Planning %s wall %.1fx%.1f with %d opening(s)",
                     wall.value, width, height, len(hosted))
        return WallBeamLayout(
            wall=wall,
            wall_width=width,
            wall_height=height,
            vertical=self.plan_vertical(width, height, hosted),
            horizontal=self.plan_horizontal(width, height, hosted),
        )

    def plan_building(
        self, dimensions: BuildingDimensions, openings: list[Opening],
    ) -> BeamLayout:
        walls = {w: self.plan_wall(dimensions, openings, w) for w in WallPosition}
        stats = BeamStats.from_walls(
            list(walls.values()),
            vertical_threshold=self.vertical.coverage_warning,
            horizontal_threshold=self.horizontal.coverage_warning,
        )
        return BeamLayout(walls=walls, stats=stats)


def _ratio(actual: float, possible: float) -> float:
    if possible <= 0:
        return 0.0
    return max(0.0, min(1.0, actual / possible))
