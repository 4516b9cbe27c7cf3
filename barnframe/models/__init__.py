from .geometry import Bounds, ZoneBounds, Point3D, Size3D
from .building import (
    WallPosition, Alignment, OpeningKind, ENTRY_KINDS,
    BuildingDimensions, DimensionChange, Opening,
)
from .framing import BeamOrientation, BeamSegment, BeamPass, WallBeamLayout, BeamLayout, BeamStats
from .layout import (
    ZoneKind, ClearanceKind, PathType, ElementKind, ConstraintKind, Severity,
    ClearanceRequirements, FunctionalZone, AccessRequirements, StructuralImpact,
    DetectedOpening, ClearanceZone, AccessPath, VentilationArea, StructuralElement,
    LayoutConstraint, SpaceLayoutSnapshot, ModificationResult,
    ProtectedSegment, WallProtection, PlacementCheck,
)
from .parameters import VerticalBeamParams, HorizontalBeamParams, LayoutPolicy, GenerationConfig
from .context import LayoutContext

__all__ = [
    "Bounds", "ZoneBounds", "Point3D", "Size3D",
    "WallPosition", "Alignment", "OpeningKind", "ENTRY_KINDS",
    "BuildingDimensions", "DimensionChange", "Opening",
    "BeamOrientation", "BeamSegment", "BeamPass", "WallBeamLayout", "BeamLayout", "BeamStats",
    "ZoneKind", "ClearanceKind", "PathType", "ElementKind", "ConstraintKind", "Severity",
    "ClearanceRequirements", "FunctionalZone", "AccessRequirements", "StructuralImpact",
    "DetectedOpening", "ClearanceZone", "AccessPath", "VentilationArea", "StructuralElement",
    "LayoutConstraint", "SpaceLayoutSnapshot", "ModificationResult",
    "ProtectedSegment", "WallProtection", "PlacementCheck",
    "VerticalBeamParams", "HorizontalBeamParams", "LayoutPolicy", "GenerationConfig",
    "LayoutContext",
]
