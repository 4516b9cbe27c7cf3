"""Placement check for a single opening on its wall."""

from __future__ import annotations

from barnframe.core.bounds import feature_bounds
from barnframe.models import Opening, PlacementCheck

# (upper ratio bound, description)
IMPACT_BANDS: list[tuple[float, str]] = [
    (0.10, "Minimal structural impact - beams will be cleanly segmented"),
    (0.25, "Moderate structural impact - adequate beam segments will remain"),
    (0.40, "Significant structural impact - review beam placement"),
]
HIGH_IMPACT = "High structural impact - additional reinforcement may be required"


def validate_opening_placement(
    opening: Opening, wall_width: float, wall_height: float,
) -> PlacementCheck:
    """Check that an opening fits on its wall and grade its structural impact."""
    errors: list[str] = []
    b = feature_bounds(opening, wall_width, wall_height)

    if b.left < -wall_width / 2:
        errors.append("Opening extends beyond left edge of wall")
    if b.right > wall_width / 2:
        errors.append("Opening extends beyond right edge of wall")
    if b.bottom < -wall_height / 2:
        errors.append("Opening extends below wall bottom")
    if b.top > wall_height / 2:
        errors.append("Opening extends above wall top")

    ratio = opening.area / (wall_width * wall_height)
    for limit, text in IMPACT_BANDS:
        if ratio < limit:
            impact = text
            break
    else:
        impact = HIGH_IMPACT
        errors.append("Opening may compromise structural integrity")

    return PlacementCheck(
        valid=not errors,
        errors=errors,
        impact_ratio=ratio,
        structural_impact=impact,
    )
