"""Access paths between entry openings."""

from __future__ import annotations
import logging
from itertools import combinations

from barnframe.rules.base import LayoutRule
from barnframe.models import (
    AccessPath, BuildingDimensions, DetectedOpening, LayoutContext, LayoutPolicy, PathType,
)

logger = logging.getLogger(__name__)


def estimated_path_width(dimensions: BuildingDimensions, policy: LayoutPolicy) -> float:
    """
    Clear width available to a path through the building.

    An approximation: the shorter floor dimension less a fixed allowance,
    not the result of routing through the floor plan.
    """
    return min(dimensions.width, dimensions.length) - policy.path_width_allowance


def classify_path(a: DetectedOpening, b: DetectedOpening) -> PathType:
    ra, rb = a.access_requirements, b.access_requirements
    if ra.emergency_access and rb.emergency_access:
        return PathType.EMERGENCY
    if ra.daily_use and rb.daily_use:
        return PathType.PRIMARY
    return PathType.SECONDARY


class AccessPathRule(LayoutRule):
    """One path per unordered pair of doors, walk doors and roll-up doors."""

    priority = 20
    output = "access_paths"

    def get_id(self) -> str:
        return "layout.access_paths"

    def get_name(self) -> str:
        return "Access Paths"

    def applies(self, context: LayoutContext) -> bool:
        entries = [d for d in context.detected_openings if d.opening.kind.is_entry]
        return len(entries) >= 2

    def generate(self, context: LayoutContext) -> list[AccessPath]:
        policy = context.policy
        entries = [d for d in context.detected_openings if d.opening.kind.is_entry]
        current_width = estimated_path_width(context.dimensions, policy)

        paths: list[AccessPath] = []
        for a, b in combinations(entries, 2):
            minimum = policy.path_width_factor * max(
                a.access_requirements.minimum_width,
                b.access_requirements.minimum_width,
            )
            path_type = classify_path(a, b)
            blocked = current_width < minimum

            restrictions: list[str] = []
            if path_type == PathType.EMERGENCY:
                restrictions.append("Emergency egress path - must remain clear")
                restrictions.append("Required by building codes")
            elif path_type == PathType.PRIMARY:
                restrictions.append("Primary circulation path - daily use")
            if blocked:
                restrictions.append("Path currently blocked or too narrow")
                logger.warning(
                    "Access path %s -> %s blocked: %.1fft available < %.1fft required",
                    a.id, b.id, current_width, minimum,
                )

            paths.append(AccessPath(
                id=f"path-{a.id}-{b.id}",
                from_opening=a.id,
                to_opening=b.id,
                path_type=path_type,
                minimum_width=minimum,
                current_width=current_width,
                is_blocked=blocked,
                restrictions=restrictions,
            ))
        return paths
