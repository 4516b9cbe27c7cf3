"""Layout constraints — severity-tagged rules derived from zones and impact."""

from __future__ import annotations
import logging

from barnframe.rules.base import LayoutRule
from barnframe.models import (
    ClearanceKind, ConstraintKind, LayoutConstraint, LayoutContext, Severity, ZoneBounds,
)

logger = logging.getLogger(__name__)

CLEARANCE_OVERRIDE = [
    "Professional architectural review required",
    "Building code compliance verification",
    "Alternative access provision",
]

EGRESS_OVERRIDE = [
    "Building code official approval required",
    "Alternative egress path provision",
    "Fire safety system upgrades",
]


class LayoutConstraintRule(LayoutRule):
    """
    Turns detected openings and clearance zones into constraints.

    - one clearance constraint per opening
    - one access constraint per emergency egress zone
    - one structural constraint per opening that affects wall integrity
    """

    priority = 90
    dependencies = ["layout.clearance_zones"]
    output = "layout_constraints"

    def get_id(self) -> str:
        return "layout.constraints"

    def get_name(self) -> str:
        return "Layout Constraints"

    def generate(self, context: LayoutContext) -> list[LayoutConstraint]:
        constraints: list[LayoutConstraint] = []
        constraints.extend(self._clearance(context))
        constraints.extend(self._access(context))
        constraints.extend(self._structural(context))

        logger.debug(
            "Generated %d constraint(s), %d critical",
            len(constraints),
            sum(1 for c in constraints if c.severity == Severity.CRITICAL),
        )
        return constraints

    def _clearance(self, context: LayoutContext) -> list[LayoutConstraint]:
        out: list[LayoutConstraint] = []
        for detected in context.detected_openings:
            front = detected.clearance_requirements.front
            out.append(LayoutConstraint(
                id=f"clearance-{detected.id}",
                kind=ConstraintKind.CLEARANCE,
                description=(
                    f"{detected.opening.kind.value} requires {front}ft clearance "
                    f"for proper operation"
                ),
                affected_area=detected.functional_zone.bounds.with_front(front),
                severity=(
                    Severity.CRITICAL
                    if detected.access_requirements.emergency_access
                    else Severity.IMPORTANT
                ),
                can_override=False,
                override_requirements=list(CLEARANCE_OVERRIDE),
            ))
        return out

    def _access(self, context: LayoutContext) -> list[LayoutConstraint]:
        return [
            LayoutConstraint(
                id=f"access-{zone.id}",
                kind=ConstraintKind.ACCESS,
                description="Emergency egress path must remain clear and unobstructed",
                affected_area=zone.bounds.model_copy(),
                severity=Severity.CRITICAL,
                can_override=False,
                override_requirements=list(EGRESS_OVERRIDE),
            )
            for zone in context.clearance_zones
            if zone.kind == ClearanceKind.EMERGENCY_EGRESS
        ]

    def _structural(self, context: LayoutContext) -> list[LayoutConstraint]:
        margin = context.policy.structural_constraint_margin
        out: list[LayoutConstraint] = []
        for detected in context.detected_openings:
            impact = detected.structural_impact
            if not impact.affects_wall_integrity:
                continue
            zone = detected.functional_zone.bounds
            out.append(LayoutConstraint(
                id=f"structural-{detected.id}",
                kind=ConstraintKind.STRUCTURAL,
                description=(
                    f"{detected.opening.kind.value} affects wall structural integrity "
                    f"- modifications restricted"
                ),
                affected_area=ZoneBounds(
                    left=zone.left - margin,
                    right=zone.right + margin,
                    bottom=0.0,
                    top=context.dimensions.height,
                    front=margin,
                    back=margin,
                ),
                severity=Severity.CRITICAL,
                can_override=not impact.engineering_required,
                override_requirements=list(impact.modification_limits),
            ))
        return out
