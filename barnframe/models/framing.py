"""Structural beam output models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .building import WallPosition


class BeamOrientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class BeamSegment(BaseModel):
    """
    One contiguous piece of a beam after openings are cut out.

    `x` is the beam's center line and `width` its horizontal extent, so a
    horizontal segment spans x - width/2 .. x + width/2.
    """
    x: float
    bottom_y: float
    top_y: float
    width: float
    emergency: bool = False

    @property
    def length(self) -> float:
        return self.top_y - self.bottom_y

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2


class BeamPass(BaseModel):
    """Segments for one orientation on one wall."""
    orientation: BeamOrientation
    segments: list[BeamSegment]
    beam_count: int
    coverage: float


class WallBeamLayout(BaseModel):
    wall: WallPosition
    wall_width: float
    wall_height: float
    vertical: BeamPass
    horizontal: BeamPass

    @property
    def segments(self) -> list[BeamSegment]:
        return self.vertical.segments + self.horizontal.segments


class BeamLayout(BaseModel):
    """The complete beam layout for every wall of a building."""
    walls: dict[WallPosition, WallBeamLayout]
    stats: BeamStats | None = None

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = BeamStats.from_walls(list(self.walls.values()))


class BeamStats(BaseModel):
    """Summary statistics for a generated beam layout."""
    total_segments: int = 0
    vertical: int = 0
    horizontal: int = 0
    emergency: int = 0
    low_coverage_walls: list[WallPosition] = []

    @classmethod
    def from_walls(
        cls,
        walls: list[WallBeamLayout],
        vertical_threshold: float = 0.4,
        horizontal_threshold: float = 0.5,
    ) -> BeamStats:
        vertical = sum(len(w.vertical.segments) for w in walls)
        horizontal = sum(len(w.horizontal.segments) for w in walls)
        emergency = sum(1 for w in walls for s in w.segments if s.emergency)
        low = [
            w.wall for w in walls
            if w.vertical.coverage < vertical_threshold
            or w.horizontal.coverage < horizontal_threshold
        ]
        return cls(
            total_segments=vertical + horizontal,
            vertical=vertical,
            horizontal=horizontal,
            emergency=emergency,
            low_coverage_walls=low,
        )


BeamLayout.model_rebuild()
