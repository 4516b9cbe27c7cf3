"""Layout context — accumulates state during a single space-layout scan."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import BuildingDimensions, Opening
from .layout import (
    AccessPath, ClearanceZone, DetectedOpening, LayoutConstraint,
    StructuralElement, VentilationArea,
)
from .parameters import GenerationConfig, LayoutPolicy


class LayoutContext(BaseModel):
    """
    Holds all state during a single scan.

    The analyzer fills in detected openings.
    Rules append zones, paths, areas, elements and constraints.
    The scanner orchestrates the flow and freezes the result into a snapshot.
    """
    # Input
    openings: list[Opening]
    dimensions: BuildingDimensions
    policy: LayoutPolicy = Field(default_factory=LayoutPolicy)
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Analysis results (populated by the analyzer)
    detected_openings: list[DetectedOpening] = []

    # Output (populated by rules)
    clearance_zones: list[ClearanceZone] = []
    access_paths: list[AccessPath] = []
    ventilation_areas: list[VentilationArea] = []
    structural_elements: list[StructuralElement] = []
    layout_constraints: list[LayoutConstraint] = []

    def get_detected(self, opening_id: str) -> DetectedOpening | None:
        for d in self.detected_openings:
            if d.id == opening_id:
                return d
        return None
