"""Validation of proposed dimension changes against a layout snapshot."""

from __future__ import annotations
import logging
from collections.abc import Mapping

from barnframe.models import (
    AccessPath, BuildingDimensions, ClearanceZone, ConstraintKind, DimensionChange,
    LayoutConstraint, LayoutPolicy, ModificationResult, PathType, Severity,
    SpaceLayoutSnapshot, VentilationArea,
)
from barnframe.rules.layout.access import estimated_path_width

logger = logging.getLogger(__name__)

VIOLATION_SUGGESTIONS = [
    "Consider relocating or resizing openings to allow space modifications",
    "Review clearance requirements and adjust accordingly",
    "Consult with an architect for alternative layout solutions",
]
CRITICAL_SUGGESTION = "Professional review required for critical constraint modifications"
COMPATIBLE_SUGGESTIONS = [
    "Proposed modifications appear compatible with current layout",
    "Verify final dimensions maintain all clearance requirements",
]


def validate_space_modification(
    snapshot: SpaceLayoutSnapshot,
    proposed: DimensionChange | Mapping[str, float],
    current: BuildingDimensions,
    policy: LayoutPolicy | None = None,
) -> ModificationResult:
    """
    Check a partial dimension change against every constraint in the snapshot.

    Never raises on geometric grounds; `can_modify` is False exactly when
    `violations` is non-empty.
    """
    if policy is None:
        policy = LayoutPolicy()
    if not isinstance(proposed, DimensionChange):
        proposed = DimensionChange.model_validate(dict(proposed))

    new = proposed.apply_to(current)
    violations: list[str] = []

    shrinking_width = proposed.width is not None and new.width < current.width
    shrinking_length = proposed.length is not None and new.length < current.length
    shrinking_height = proposed.height is not None and new.height < current.height

    for constraint in snapshot.layout_constraints:
        if not _gates_dimensions(constraint):
            continue
        area = constraint.affected_area
        if shrinking_width and area.right > new.width:
            violations.append(
                f"CRITICAL: {constraint.description} - width reduction would violate constraint"
            )
        if shrinking_length and area.front > new.length:
            violations.append(
                f"CRITICAL: {constraint.description} - length reduction would violate constraint"
            )
        if shrinking_height and area.top > new.height:
            violations.append(
                f"CRITICAL: {constraint.description} - height reduction would violate constraint"
            )

    for zone in snapshot.clearance_zones:
        if not zone.is_protected:
            continue
        if shrinking_width and zone.bounds.right > new.width:
            violations.append(
                f"Clearance violation: {zone.purpose} would be compromised by width reduction"
            )
        if shrinking_length and zone.bounds.front > new.length:
            violations.append(
                f"Clearance violation: {zone.purpose} would be compromised by length reduction"
            )

    new_path_width = estimated_path_width(new, policy)
    for path in snapshot.access_paths:
        if path.path_type not in (PathType.EMERGENCY, PathType.PRIMARY):
            continue
        if new_path_width < path.minimum_width:
            violations.append(
                f"Access path violation: {path.path_type.value} path would be too narrow "
                f"({new_path_width:.1f}ft < {path.minimum_width:.1f}ft required)"
            )

    if violations:
        suggestions = list(VIOLATION_SUGGESTIONS)
        if any(c.severity == Severity.CRITICAL for c in snapshot.layout_constraints):
            suggestions.append(CRITICAL_SUGGESTION)
    else:
        suggestions = list(COMPATIBLE_SUGGESTIONS)

    can_modify = not violations
    logger.info(
        "Modification %s: %d violation(s)",
        "accepted" if can_modify else "rejected", len(violations),
    )
    return ModificationResult(
        can_modify=can_modify,
        violations=violations,
        suggestions=suggestions,
    )


def _gates_dimensions(constraint: LayoutConstraint) -> bool:
    """
    Critical constraints that cannot be overridden block a shrinking axis.

    Structural constraints block it even when an engineer may override them;
    the override is a sign-off, not a waiver of the check.
    """
    if constraint.severity != Severity.CRITICAL:
        return False
    return not constraint.can_override or constraint.kind == ConstraintKind.STRUCTURAL


def clearance_zones_for(snapshot: SpaceLayoutSnapshot, opening_id: str) -> list[ClearanceZone]:
    return [z for z in snapshot.clearance_zones if z.opening_id == opening_id]


def blocked_access_paths(snapshot: SpaceLayoutSnapshot) -> list[AccessPath]:
    return [p for p in snapshot.access_paths if p.is_blocked]


def obstructed_ventilation(snapshot: SpaceLayoutSnapshot) -> list[VentilationArea]:
    return [a for a in snapshot.ventilation_areas if a.is_obstructed]
