"""Opening placement on a wall's local plane."""

from __future__ import annotations

from barnframe.models import Alignment, Bounds, BuildingDimensions, Opening, WallPosition


def wall_span(dimensions: BuildingDimensions, wall: WallPosition) -> tuple[float, float]:
    """(width, height) of the given wall."""
    width = dimensions.width if wall.is_gable_end else dimensions.length
    return width, dimensions.height


def wall_openings(openings: list[Opening], wall: WallPosition) -> list[Opening]:
    return [o for o in openings if o.wall == wall]


def feature_bounds(opening: Opening, wall_width: float, wall_height: float) -> Bounds:
    """
    Absolute bounds of an opening in center-origin wall coordinates.

    The wall spans -W/2..W/2 horizontally and -H/2..H/2 vertically.
    """
    bottom = -wall_height / 2 + opening.y_offset
    top = bottom + opening.height

    if opening.alignment == Alignment.LEFT:
        left = -wall_width / 2 + opening.x_offset
        right = left + opening.width
    elif opening.alignment == Alignment.RIGHT:
        right = wall_width / 2 - opening.x_offset
        left = right - opening.width
    else:
        left = opening.x_offset - opening.width / 2
        right = opening.x_offset + opening.width / 2

    return Bounds(left=left, right=right, bottom=bottom, top=top)


def edge_bounds(opening: Opening, wall_width: float, wall_height: float) -> Bounds:
    """Same as `feature_bounds` but measured from the wall's left edge and floor."""
    return feature_bounds(opening, wall_width, wall_height).translated(
        wall_width / 2, wall_height / 2,
    )


def beam_overlaps(x: float, beam_width: float, bounds: Bounds, buffer: float = 0.05) -> bool:
    """True if a vertical beam centered on `x` touches the opening horizontally."""
    beam_left = x - beam_width / 2
    beam_right = x + beam_width / 2
    return not (beam_right + buffer <= bounds.left or beam_left - buffer >= bounds.right)


def band_overlaps(y: float, bounds: Bounds, buffer: float) -> bool:
    """True if a horizontal beam centered on `y` touches the opening vertically."""
    return bounds.bottom - buffer <= y <= bounds.top + buffer
