"""Which stretches of each wall are locked by openings.

Recomputed from the opening list on every call; nothing is cached between
calls.
"""

from __future__ import annotations

from barnframe.core.bounds import edge_bounds, wall_openings, wall_span
from barnframe.models import (
    BuildingDimensions, LayoutPolicy, Opening, ProtectedSegment, WallPosition, WallProtection,
)


def protect_wall(
    openings: list[Opening],
    dimensions: BuildingDimensions,
    wall: WallPosition,
    policy: LayoutPolicy | None = None,
) -> WallProtection:
    if policy is None:
        policy = LayoutPolicy()
    wall_width, wall_height = wall_span(dimensions, wall)
    hosted = wall_openings(openings, wall)
    buffer = policy.protection_buffer

    segments: list[ProtectedSegment] = []
    for opening in hosted:
        b = edge_bounds(opening, wall_width, wall_height)
        segments.append(ProtectedSegment(
            segment_id=f"{wall.value}-lock-{opening.id}",
            start=max(0.0, b.left - buffer),
            end=min(wall_width, b.right + buffer),
            locked_by=[opening.id],
            lock_reason=(
                f"{opening.kind.value} ({opening.width}ft x {opening.height}ft) "
                f"requires dimensional stability"
            ),
        ))

    locked = covered_length([(s.start, s.end) for s in segments])
    available = wall_width - locked

    restrictions: list[str] = []
    if hosted:
        restrictions.append(f"{len(hosted)} opening(s) prevent wall dimension changes")
        restrictions.append(f"{locked:.1f}ft of wall length is protected")
        for opening in hosted:
            restrictions.append(
                f"{opening.kind.value} requires stable {opening.width}ft x {opening.height}ft opening"
            )
        if available < policy.min_available_length:
            restrictions.append(f"CRITICAL: Only {available:.1f}ft unprotected space remaining")

    return WallProtection(
        wall=wall,
        protected_segments=segments,
        total_locked_length=locked,
        available_length=available,
        restrictions=restrictions,
    )


def covered_length(intervals: list[tuple[float, float]]) -> float:
    """Length of the union of `intervals`; overlaps count once."""
    total = 0.0
    run_start = run_end = None
    for start, end in sorted(intervals):
        if end <= start:
            continue
        if run_end is None or start > run_end:
            if run_end is not None:
                total += run_end - run_start
            run_start, run_end = start, end
        else:
            run_end = max(run_end, end)
    if run_end is not None:
        total += run_end - run_start
    return total


def compute_protection(
    openings: list[Opening],
    dimensions: BuildingDimensions,
    policy: LayoutPolicy | None = None,
) -> dict[WallPosition, WallProtection]:
    """Protection for all four walls."""
    return {w: protect_wall(openings, dimensions, w, policy) for w in WallPosition}
