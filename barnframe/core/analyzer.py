"""Opening analysis — clearances, functional zones, access and structural impact."""

from __future__ import annotations
import logging

from barnframe.core.bounds import edge_bounds, wall_span
from barnframe.models import (
    AccessRequirements, BuildingDimensions, ClearanceRequirements, DetectedOpening,
    FunctionalZone, LayoutContext, LayoutPolicy, Opening, OpeningKind,
    StructuralImpact, ZoneBounds, ZoneKind,
)

logger = logging.getLogger(__name__)


_DOOR_CLEARANCE = ClearanceRequirements(front=3.0, sides=1.5, above=1.0, swing=3.0, emergency=4.0)

CLEARANCES: dict[OpeningKind, ClearanceRequirements] = {
    OpeningKind.DOOR: _DOOR_CLEARANCE,
    OpeningKind.WALK_DOOR: _DOOR_CLEARANCE,
    OpeningKind.ROLLUP_DOOR: ClearanceRequirements(front=4.0, sides=2.0, above=2.0, swing=0.0, emergency=6.0),
    OpeningKind.WINDOW: ClearanceRequirements(front=1.0, sides=1.0, above=0.5, swing=2.0, emergency=3.0),
    OpeningKind.OTHER: ClearanceRequirements(front=2.0, sides=1.0, above=1.0, swing=2.0, emergency=3.0),
}

# (width margin, height margin)
ACCESS_MARGINS: dict[OpeningKind, tuple[float, float]] = {
    OpeningKind.DOOR: (2.0, 1.0),
    OpeningKind.WALK_DOOR: (2.0, 1.0),
    OpeningKind.ROLLUP_DOOR: (4.0, 2.0),
    OpeningKind.WINDOW: (1.0, 0.5),
    OpeningKind.OTHER: (1.0, 1.0),
}

_DOOR_ZONE = (
    ZoneKind.ENTRY,
    "Primary access point requiring clear approach and egress paths",
    ["Maintain clear path for daily access",
     "Ensure door swing clearance",
     "Preserve emergency egress capability"],
)

ZONES: dict[OpeningKind, tuple[ZoneKind, str, list[str]]] = {
    OpeningKind.DOOR: _DOOR_ZONE,
    OpeningKind.WALK_DOOR: _DOOR_ZONE,
    OpeningKind.ROLLUP_DOOR: (
        ZoneKind.ENTRY,
        "Vehicle and equipment access requiring a large clearance area",
        ["Maintain vehicle approach clearance",
         "Ensure overhead clearance for operation",
         "Preserve emergency vehicle access"],
    ),
    OpeningKind.WINDOW: (
        ZoneKind.WINDOW,
        "Natural light and ventilation source requiring unobstructed operation",
        ["Maintain natural light penetration",
         "Ensure window operation clearance",
         "Preserve ventilation airflow"],
    ),
    OpeningKind.OTHER: (
        ZoneKind.ACCESS,
        "General access feature requiring basic clearances",
        ["Maintain basic clearance requirements"],
    ),
}

_DOOR_ACCESS_RESTRICTIONS = [
    "Must maintain clear approach path",
    "Required for emergency egress",
    "Daily access route - cannot be obstructed",
]

ACCESS_RESTRICTIONS: dict[OpeningKind, list[str]] = {
    OpeningKind.DOOR: _DOOR_ACCESS_RESTRICTIONS,
    OpeningKind.WALK_DOOR: _DOOR_ACCESS_RESTRICTIONS,
    OpeningKind.ROLLUP_DOOR: [
        "Must maintain vehicle approach clearance",
        "Required for emergency vehicle access",
        "Primary equipment access - cannot be blocked",
    ],
    OpeningKind.WINDOW: [
        "Must maintain operation clearance",
        "Cannot obstruct natural light",
        "Required for ventilation",
    ],
    OpeningKind.OTHER: ["Basic clearance requirements"],
}

LOAD_BEARING_LIMIT = "Load-bearing considerations limit wall modifications"
WALL_INTEGRITY_LIMIT = "Wall integrity requires dimensional stability"
REINFORCEMENT_LIMIT = "Structural reinforcement required for modifications"
ENGINEERING_LIMIT = "Professional engineering review required"


def clearance_requirements(opening: Opening) -> ClearanceRequirements:
    return CLEARANCES[opening.kind].model_copy()


def functional_zone(
    opening: Opening,
    dimensions: BuildingDimensions,
    policy: LayoutPolicy | None = None,
) -> FunctionalZone:
    """
    Zone around an opening in edge-origin wall coordinates.

    Widened by the side clearance and clamped to the wall; reaches from just
    below the opening up to the above-clearance, and `front` feet into the room.
    """
    if policy is None:
        policy = LayoutPolicy()
    clearances = CLEARANCES[opening.kind]
    wall_width, wall_height = wall_span(dimensions, opening.wall)
    b = edge_bounds(opening, wall_width, wall_height)

    bounds = ZoneBounds(
        left=max(0.0, b.left - clearances.sides),
        right=min(wall_width, b.right + clearances.sides),
        bottom=max(0.0, opening.y_offset - policy.zone_floor_allowance),
        top=min(dimensions.height, opening.y_offset + opening.height + clearances.above),
        front=clearances.front,
        back=0.0,
    )
    kind, purpose, restrictions = ZONES[opening.kind]
    return FunctionalZone(
        kind=kind,
        bounds=bounds,
        purpose=purpose,
        restrictions=list(restrictions),
        can_modify=False,
    )


def access_requirements(
    opening: Opening, policy: LayoutPolicy | None = None,
) -> AccessRequirements:
    if policy is None:
        policy = LayoutPolicy()
    kind = opening.kind
    width_margin, height_margin = ACCESS_MARGINS[kind]

    if kind.is_entry:
        emergency, daily, clear_path = True, True, True
    elif kind == OpeningKind.WINDOW:
        # Egress window rule
        emergency = (
            opening.height >= policy.egress_window_min_height
            and opening.width >= policy.egress_window_min_width
        )
        daily, clear_path = True, False
    else:
        emergency, daily, clear_path = False, False, False

    return AccessRequirements(
        minimum_width=opening.width + width_margin,
        minimum_height=opening.height + height_margin,
        clear_path=clear_path,
        emergency_access=emergency,
        daily_use=daily,
        restrictions=list(ACCESS_RESTRICTIONS[kind]),
    )


def structural_impact(
    opening: Opening,
    dimensions: BuildingDimensions,
    policy: LayoutPolicy | None = None,
) -> StructuralImpact:
    """Classify an opening by the share of its host wall it removes."""
    if policy is None:
        policy = LayoutPolicy()
    wall_width, wall_height = wall_span(dimensions, opening.wall)
    ratio = opening.area / (wall_width * wall_height)

    load_bearing = ratio > policy.load_bearing_ratio
    integrity = ratio > policy.wall_integrity_ratio
    reinforcement = ratio > policy.reinforcement_ratio
    engineering = ratio > policy.engineering_ratio

    limits: list[str] = []
    if load_bearing:
        limits.append(LOAD_BEARING_LIMIT)
    if integrity:
        limits.append(WALL_INTEGRITY_LIMIT)
    if reinforcement:
        limits.append(REINFORCEMENT_LIMIT)
    if engineering:
        limits.append(ENGINEERING_LIMIT)

    return StructuralImpact(
        opening_ratio=ratio,
        load_bearing=load_bearing,
        affects_wall_integrity=integrity,
        requires_reinforcement=reinforcement,
        engineering_required=engineering,
        modification_limits=limits,
    )


def detect_opening(
    opening: Opening,
    dimensions: BuildingDimensions,
    policy: LayoutPolicy | None = None,
) -> DetectedOpening:
    if policy is None:
        policy = LayoutPolicy()
    detected = DetectedOpening(
        opening=opening,
        clearance_requirements=clearance_requirements(opening),
        functional_zone=functional_zone(opening, dimensions, policy),
        access_requirements=access_requirements(opening, policy),
        structural_impact=structural_impact(opening, dimensions, policy),
        is_protected=True,
        protection_reason=(
            f"{opening.kind.value} requires dimensional stability and clearance maintenance"
        ),
    )
    logger.debug(
        "Detected %s %s on %s wall: ratio=%.3f emergency=%s",
        opening.kind.value, opening.id, opening.wall.value,
        detected.structural_impact.opening_ratio,
        detected.access_requirements.emergency_access,
    )
    return detected


class OpeningAnalyzer:
    """Derives per-opening requirements and stores them on the context."""

    def analyze(self, context: LayoutContext) -> None:
        """Run the analysis pass and populate the context."""
        context.detected_openings = [
            detect_opening(o, context.dimensions, context.policy)
            for o in context.openings
        ]
