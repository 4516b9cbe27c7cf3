"""Geometric primitives used throughout the layout engine."""

from __future__ import annotations
from pydantic import BaseModel


class Bounds(BaseModel):
    """Axis-aligned rectangle on a wall's local plane."""
    left: float
    right: float
    bottom: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def translated(self, dx: float, dy: float) -> Bounds:
        return Bounds(
            left=self.left + dx,
            right=self.right + dx,
            bottom=self.bottom + dy,
            top=self.top + dy,
        )


class ZoneBounds(Bounds):
    """
    A wall-plane rectangle projected into the room.

    Uses the edge-origin plane: 0 is the wall's left edge and the floor.
    `front` is how far the zone reaches into the building.
    """
    front: float = 0.0
    back: float = 0.0

    def with_front(self, front: float) -> ZoneBounds:
        return self.model_copy(update={"front": front})

    def widened(self, amount: float) -> ZoneBounds:
        return self.model_copy(update={
            "left": self.left - amount,
            "right": self.right + amount,
        })


class Point3D(BaseModel):
    """Point in building space (feet)."""
    x: float
    y: float
    z: float


class Size3D(BaseModel):
    width: float
    height: float
    depth: float
