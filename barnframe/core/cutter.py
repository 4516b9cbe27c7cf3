"""Interval cutting — splits a full-span beam around wall openings.

A beam is a 1D span (vertical beams run bottom to top, horizontal beams
left to right). Every opening that touches the beam removes the interval
[start - gap, end + gap] from it. Pieces shorter than the minimum segment
size are dropped. When nothing survives, short emergency pieces are
anchored at the wall edges if they fit clear of the openings.
"""

from __future__ import annotations
import logging

from barnframe.core.bounds import band_overlaps, beam_overlaps
from barnframe.models import Bounds, BeamSegment, HorizontalBeamParams, VerticalBeamParams

logger = logging.getLogger(__name__)


def subtract_intervals(
    start: float,
    end: float,
    cuts: list[tuple[float, float]],
    min_length: float,
) -> list[tuple[float, float]]:
    """
    Remove `cuts` from [start, end], keeping pieces at least `min_length` long.

    `cuts` must be sorted by their lower bound. The result is sorted and
    non-overlapping.
    """
    pieces: list[tuple[float, float]] = []
    current = start
    for cut_lo, cut_hi in cuts:
        hi = min(cut_lo, end)
        if current < hi and hi - current >= min_length:
            pieces.append((current, hi))
        current = max(current, cut_hi)

    if current < end and end - current >= min_length:
        pieces.append((current, end))

    return pieces


def cut_vertical_beam(
    beam_x: float,
    wall_height: float,
    opening_bounds: list[Bounds],
    params: VerticalBeamParams | None = None,
) -> list[BeamSegment]:
    """Cut a floor-to-top beam at `beam_x` around every opening it crosses."""
    if params is None:
        params = VerticalBeamParams()

    wall_bottom = -wall_height / 2
    wall_top = wall_height / 2
    bw = params.beam_width

    hits = sorted(
        (b for b in opening_bounds
         if beam_overlaps(beam_x, bw, b, params.overlap_buffer)),
        key=lambda b: b.bottom,
    )

    if not hits:
        return [BeamSegment(x=beam_x, bottom_y=wall_bottom, top_y=wall_top, width=bw)]

    gap = params.structural_gap
    cuts = [(b.bottom - gap, b.top + gap) for b in hits]
    pieces = subtract_intervals(wall_bottom, wall_top, cuts, params.min_segment)

    segments = [
        BeamSegment(x=beam_x, bottom_y=lo, top_y=hi, width=bw)
        for lo, hi in pieces
    ]

    if not segments:
        logger.debug("No segments survive at x=%.2f; trying emergency support", beam_x)
        segments = _vertical_emergency(beam_x, wall_height, hits, params)

    logger.debug(
        "Beam x=%.2f: %d opening(s), %d segment(s)",
        beam_x, len(hits), len(segments),
    )
    return segments


def _vertical_emergency(
    beam_x: float,
    wall_height: float,
    hits: list[Bounds],
    params: VerticalBeamParams,
) -> list[BeamSegment]:
    wall_bottom = -wall_height / 2
    wall_top = wall_height / 2
    size = min(params.emergency_max, wall_height * params.emergency_ratio)
    lowest = min(b.bottom for b in hits)
    highest = max(b.top for b in hits)

    segments: list[BeamSegment] = []
    # Foundation connection
    if wall_bottom + size < lowest - params.emergency_clearance:
        segments.append(BeamSegment(
            x=beam_x, bottom_y=wall_bottom, top_y=wall_bottom + size,
            width=params.beam_width, emergency=True,
        ))
    # Roof connection
    if highest + params.emergency_clearance + size < wall_top:
        segments.append(BeamSegment(
            x=beam_x, bottom_y=wall_top - size, top_y=wall_top,
            width=params.beam_width, emergency=True,
        ))
    return segments


def cut_horizontal_beam(
    beam_y: float,
    wall_width: float,
    opening_bounds: list[Bounds],
    params: HorizontalBeamParams | None = None,
) -> list[BeamSegment]:
    """Cut a side-to-side beam at height `beam_y` around every opening it crosses."""
    if params is None:
        params = HorizontalBeamParams()

    half = params.beam_height / 2
    start = -wall_width / 2 + params.margin
    end = wall_width / 2 - params.margin
    buffer = half + params.overlap_buffer

    if end <= start:
        return []

    hits = sorted(
        (b for b in opening_bounds if band_overlaps(beam_y, b, buffer)),
        key=lambda b: b.left,
    )

    if not hits:
        return [BeamSegment(
            x=(start + end) / 2,
            bottom_y=beam_y - half,
            top_y=beam_y + half,
            width=end - start,
        )]

    gap = params.structural_gap
    cuts = [(b.left - gap, b.right + gap) for b in hits]
    pieces = subtract_intervals(start, end, cuts, params.min_segment)

    segments = [
        BeamSegment(
            x=(lo + hi) / 2,
            bottom_y=beam_y - half,
            top_y=beam_y + half,
            width=hi - lo,
        )
        for lo, hi in pieces
    ]

    if not segments:
        logger.debug("No segments survive at y=%.2f; trying emergency support", beam_y)
        segments = _horizontal_emergency(beam_y, wall_width, hits, params)

    logger.debug(
        "Horizontal beam y=%.2f: %d opening(s), %d segment(s)",
        beam_y, len(hits), len(segments),
    )
    return segments


def _horizontal_emergency(
    beam_y: float,
    wall_width: float,
    hits: list[Bounds],
    params: HorizontalBeamParams,
) -> list[BeamSegment]:
    half = params.beam_height / 2
    start = -wall_width / 2 + params.margin
    end = wall_width / 2 - params.margin
    size = min(params.emergency_max, wall_width * params.emergency_ratio)
    leftmost = min(b.left for b in hits)
    rightmost = max(b.right for b in hits)

    segments: list[BeamSegment] = []
    if start + size < leftmost - params.emergency_clearance:
        segments.append(BeamSegment(
            x=start + size / 2, bottom_y=beam_y - half, top_y=beam_y + half,
            width=size, emergency=True,
        ))
    if rightmost + params.emergency_clearance + size < end:
        segments.append(BeamSegment(
            x=end - size / 2, bottom_y=beam_y - half, top_y=beam_y + half,
            width=size, emergency=True,
        ))
    return segments
