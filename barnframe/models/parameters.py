"""Beam layout parameters and layout policy constants."""

from __future__ import annotations
from pydantic import BaseModel


class VerticalBeamParams(BaseModel):
    """Policy for the vertical beam pass (feet)."""
    max_spacing: float = 8.0
    min_spacing: float = 4.0
    margin: float = 2.0             # Keep-out from each wall edge
    beam_width: float = 0.3
    min_beams: int = 3
    overlap_buffer: float = 0.01
    structural_gap: float = 0.1     # Installation gap above/below an opening
    min_segment: float = 0.5
    emergency_max: float = 1.5
    emergency_ratio: float = 0.12   # Of wall height
    emergency_clearance: float = 0.2
    coverage_warning: float = 0.4


class HorizontalBeamParams(BaseModel):
    """Policy for the horizontal beam pass (feet)."""
    height_ratios: list[float] = [0.25, 0.5, 0.75]
    beam_height: float = 0.3
    margin: float = 0.5
    overlap_buffer: float = 0.05    # Added to half the beam height
    structural_gap: float = 0.1
    min_segment: float = 1.0
    emergency_max: float = 2.5
    emergency_ratio: float = 0.15   # Of wall width
    emergency_clearance: float = 0.2
    coverage_warning: float = 0.5


class LayoutPolicy(BaseModel):
    """Thresholds and proxies used by the space-layout rules."""
    # Structural impact (opening area / wall area)
    load_bearing_ratio: float = 0.15
    wall_integrity_ratio: float = 0.25
    reinforcement_ratio: float = 0.35
    engineering_ratio: float = 0.50

    # Egress window rule
    egress_window_min_height: float = 5.0
    egress_window_min_width: float = 2.0
    egress_lateral_extension: float = 1.0

    zone_floor_allowance: float = 0.5   # Functional zone starts this far below the opening

    # Access paths
    path_width_factor: float = 0.75
    path_width_allowance: float = 4.0   # min(width, length) - allowance

    # Ventilation
    airflow_depth: float = 6.0
    ventilation_factor: float = 50.0    # Capacity proxy per square foot

    # Structural elements
    header_min_opening_width: float = 4.0
    header_overhang: float = 2.0
    header_height: float = 1.0
    header_depth: float = 0.5
    column_size: float = 0.5

    structural_constraint_margin: float = 2.0

    # Wall protection
    protection_buffer: float = 1.0
    min_available_length: float = 2.0


class GenerationConfig(BaseModel):
    """Controls which layout rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
