"""Building input models — dimensions and wall openings."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class WallPosition(str, Enum):
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_gable_end(self) -> bool:
        """Front and back walls span the building width."""
        return self in (WallPosition.FRONT, WallPosition.BACK)


class Alignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class OpeningKind(str, Enum):
    DOOR = "door"
    WALK_DOOR = "walkDoor"
    ROLLUP_DOOR = "rollupDoor"
    WINDOW = "window"
    OTHER = "other"

    @property
    def is_entry(self) -> bool:
        return self in ENTRY_KINDS

    @property
    def is_swing_door(self) -> bool:
        return self in (OpeningKind.DOOR, OpeningKind.WALK_DOOR)


ENTRY_KINDS = frozenset({OpeningKind.DOOR, OpeningKind.WALK_DOOR, OpeningKind.ROLLUP_DOOR})


class BuildingDimensions(BaseModel):
    """Overall building envelope (feet, roof pitch in degrees)."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    width: float = Field(gt=0)
    length: float = Field(gt=0)
    height: float = Field(gt=0)
    roof_pitch: float = Field(default=0.0, ge=0)


class DimensionChange(BaseModel):
    """A partial proposal against BuildingDimensions."""
    model_config = ConfigDict(allow_inf_nan=False)

    width: float | None = Field(default=None, gt=0)
    length: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    roof_pitch: float | None = Field(default=None, ge=0)

    def apply_to(self, dimensions: BuildingDimensions) -> BuildingDimensions:
        return dimensions.model_copy(update=self.model_dump(exclude_none=True))


class Opening(BaseModel):
    """A door, window or similar feature placed on one wall."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    kind: OpeningKind
    wall: WallPosition
    alignment: Alignment = Alignment.CENTER
    x_offset: float = 0.0   # From the aligned edge; from wall center for CENTER
    y_offset: float = 0.0   # From the bottom of the wall
    width: float = Field(gt=0)
    height: float = Field(gt=0)

    @property
    def area(self) -> float:
        return self.width * self.height
