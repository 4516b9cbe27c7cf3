"""Airflow zones in front of windows."""

from __future__ import annotations

from barnframe.rules.base import LayoutRule
from barnframe.models import DetectedOpening, LayoutContext, OpeningKind, VentilationArea

AIRFLOW_RESTRICTIONS = [
    "Airflow path must remain unobstructed",
    "Natural ventilation requires clear zone",
    "Cross-ventilation patterns must be preserved",
]


class VentilationRule(LayoutRule):
    """One airflow zone per window."""

    priority = 30
    output = "ventilation_areas"

    def get_id(self) -> str:
        return "layout.ventilation"

    def get_name(self) -> str:
        return "Ventilation Areas"

    def applies(self, context: LayoutContext) -> bool:
        return any(d.opening.kind == OpeningKind.WINDOW for d in context.detected_openings)

    def generate(self, context: LayoutContext) -> list[VentilationArea]:
        policy = context.policy
        areas: list[VentilationArea] = []
        for window in context.detected_openings:
            if window.opening.kind != OpeningKind.WINDOW:
                continue
            obstructed = self._is_obstructed(window, context)
            restrictions = list(AIRFLOW_RESTRICTIONS)
            if obstructed:
                restrictions.append("Currently obstructed - ventilation compromised")

            areas.append(VentilationArea(
                id=f"ventilation-{window.id}",
                window_id=window.id,
                airflow_zone=window.functional_zone.bounds.with_front(policy.airflow_depth),
                natural_light=True,
                # Capacity proxy, not a physical airflow model
                ventilation_capacity=window.opening.area * policy.ventilation_factor,
                is_obstructed=obstructed,
                restrictions=restrictions,
            ))
        return areas

    def _is_obstructed(self, window: DetectedOpening, context: LayoutContext) -> bool:
        # TODO: test the airflow zone against interior partitions once they are modelled.
        return False
