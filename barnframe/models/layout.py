"""Space-layout models — detected openings, zones, paths and constraints."""

from __future__ import annotations
from datetime import datetime
from enum import Enum
from pydantic import BaseModel

from .building import Opening, WallPosition
from .geometry import Point3D, Size3D, ZoneBounds


class ZoneKind(str, Enum):
    ENTRY = "entry"
    WINDOW = "window"
    ACCESS = "access"


class ClearanceKind(str, Enum):
    DOOR_SWING = "door_swing"
    WINDOW_OPERATION = "window_operation"
    EMERGENCY_EGRESS = "emergency_egress"


class PathType(str, Enum):
    EMERGENCY = "emergency"
    PRIMARY = "primary"
    SECONDARY = "secondary"


class ElementKind(str, Enum):
    HEADER = "header"
    COLUMN = "column"


class ConstraintKind(str, Enum):
    CLEARANCE = "clearance"
    ACCESS = "access"
    STRUCTURAL = "structural"
    CODE = "code"
    FUNCTIONAL = "functional"


class Severity(str, Enum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    ADVISORY = "advisory"


class ClearanceRequirements(BaseModel):
    """Clearances around an opening (feet)."""
    front: float
    sides: float
    above: float
    swing: float
    emergency: float


class FunctionalZone(BaseModel):
    kind: ZoneKind
    bounds: ZoneBounds
    purpose: str
    restrictions: list[str] = []
    can_modify: bool = False


class AccessRequirements(BaseModel):
    minimum_width: float
    minimum_height: float
    clear_path: bool
    emergency_access: bool
    daily_use: bool
    restrictions: list[str] = []


class StructuralImpact(BaseModel):
    opening_ratio: float
    load_bearing: bool
    affects_wall_integrity: bool
    requires_reinforcement: bool
    engineering_required: bool
    modification_limits: list[str] = []


class DetectedOpening(BaseModel):
    """An opening together with everything derived from it."""
    opening: Opening
    clearance_requirements: ClearanceRequirements
    functional_zone: FunctionalZone
    access_requirements: AccessRequirements
    structural_impact: StructuralImpact
    is_protected: bool = True
    protection_reason: str = ""

    @property
    def id(self) -> str:
        return self.opening.id


class ClearanceZone(BaseModel):
    id: str
    opening_id: str
    kind: ClearanceKind
    bounds: ZoneBounds
    is_protected: bool = True
    restrictions: list[str] = []
    purpose: str


class AccessPath(BaseModel):
    id: str
    from_opening: str
    to_opening: str
    path_type: PathType
    minimum_width: float
    current_width: float
    is_blocked: bool
    restrictions: list[str] = []


class VentilationArea(BaseModel):
    id: str
    window_id: str
    airflow_zone: ZoneBounds
    natural_light: bool = True
    ventilation_capacity: float
    is_obstructed: bool = False
    restrictions: list[str] = []


class StructuralElement(BaseModel):
    id: str
    kind: ElementKind
    position: Point3D
    dimensions: Size3D
    is_load_bearing: bool = True
    can_modify: bool = False
    restrictions: list[str] = []


class LayoutConstraint(BaseModel):
    id: str
    kind: ConstraintKind
    description: str
    affected_area: ZoneBounds
    severity: Severity
    can_override: bool
    override_requirements: list[str] = []


class SpaceLayoutSnapshot(BaseModel):
    """Everything derived from one opening list + dimensions pair."""
    detected_openings: list[DetectedOpening] = []
    clearance_zones: list[ClearanceZone] = []
    access_paths: list[AccessPath] = []
    ventilation_areas: list[VentilationArea] = []
    structural_elements: list[StructuralElement] = []
    layout_constraints: list[LayoutConstraint] = []
    computed_at: datetime


class ModificationResult(BaseModel):
    can_modify: bool
    violations: list[str]
    suggestions: list[str]


class ProtectedSegment(BaseModel):
    """A stretch of wall locked by an opening (feet from the wall's left edge)."""
    segment_id: str
    start: float
    end: float
    locked_by: list[str]
    lock_reason: str
    can_modify: bool = False

    @property
    def length(self) -> float:
        return self.end - self.start


class WallProtection(BaseModel):
    wall: WallPosition
    protected_segments: list[ProtectedSegment] = []
    total_locked_length: float = 0.0
    available_length: float
    restrictions: list[str] = []


class PlacementCheck(BaseModel):
    valid: bool
    errors: list[str]
    impact_ratio: float
    structural_impact: str
