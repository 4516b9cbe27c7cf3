"""Clearance zones — protected areas in front of openings."""

from __future__ import annotations

from barnframe.rules.base import LayoutRule
from barnframe.models import (
    ClearanceKind, ClearanceZone, DetectedOpening, LayoutContext, OpeningKind,
)

SWING_RESTRICTIONS = [
    "Door swing area must remain clear",
    "No permanent obstructions allowed",
    "Required for safe door operation",
]

OPERATION_RESTRICTIONS = [
    "Window operation area must remain accessible",
    "Natural light path must be preserved",
    "Ventilation airflow cannot be obstructed",
]

EGRESS_RESTRICTIONS = [
    "Emergency egress path must remain clear",
    "Required by building codes",
    "Cannot be obstructed or reduced",
]


class ClearanceZoneRule(LayoutRule):
    """Door swing, window operation and emergency egress zones per opening."""

    priority = 10
    output = "clearance_zones"

    def get_id(self) -> str:
        return "layout.clearance_zones"

    def get_name(self) -> str:
        return "Clearance Zones"

    def generate(self, context: LayoutContext) -> list[ClearanceZone]:
        zones: list[ClearanceZone] = []
        for detected in context.detected_openings:
            zones.extend(self._zones_for(detected, context))
        return zones

    def _zones_for(
        self, detected: DetectedOpening, context: LayoutContext,
    ) -> list[ClearanceZone]:
        zones: list[ClearanceZone] = []
        kind = detected.opening.kind
        clearances = detected.clearance_requirements
        zone = detected.functional_zone.bounds

        if kind.is_swing_door:
            zones.append(ClearanceZone(
                id=f"swing-{detected.id}",
                opening_id=detected.id,
                kind=ClearanceKind.DOOR_SWING,
                bounds=zone.with_front(clearances.swing),
                restrictions=list(SWING_RESTRICTIONS),
                purpose="Door swing clearance for safe operation",
            ))
        elif kind == OpeningKind.WINDOW:
            zones.append(ClearanceZone(
                id=f"operation-{detected.id}",
                opening_id=detected.id,
                kind=ClearanceKind.WINDOW_OPERATION,
                bounds=zone.with_front(clearances.swing),
                restrictions=list(OPERATION_RESTRICTIONS),
                purpose="Window operation and light/ventilation clearance",
            ))

        if detected.access_requirements.emergency_access:
            zones.append(ClearanceZone(
                id=f"emergency-{detected.id}",
                opening_id=detected.id,
                kind=ClearanceKind.EMERGENCY_EGRESS,
                bounds=zone.widened(context.policy.egress_lateral_extension)
                            .with_front(clearances.emergency),
                restrictions=list(EGRESS_RESTRICTIONS),
                purpose="Emergency egress clearance - code required",
            ))

        return zones
