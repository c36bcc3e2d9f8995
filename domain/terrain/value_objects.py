"""Terrain Bounded Context - Value Objects.

Immutable data structures describing the extent of a terrain surface.
All validation occurs at construction time via Pydantic.

Coordinates are in the host's local terrain space (metres, Z up).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Position(BaseModel):
    """Point in terrain space (Value Object)."""

    x: float
    y: float
    z: float

    model_config = ConfigDict(frozen=True)


class BoundingBox(BaseModel):
    """Axis-aligned extent of a terrain region (Value Object).

    Invariants:
        BB-1: min.x <= max.x
        BB-2: min.y <= max.y
        BB-3: min.z <= max.z

    Degenerate boxes (zero range on an axis) are allowed; an inverted box
    cannot be instantiated.
    """

    min: Position
    max: Position

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_ordering(self) -> "BoundingBox":
        for axis in ("x", "y", "z"):
            lo = getattr(self.min, axis)
            hi = getattr(self.max, axis)
            if lo > hi:
                raise ValueError(
                    f"Invalid {axis} ordering: min.{axis}={lo} > max.{axis}={hi}"
                )
        return self

    @property
    def x_range(self) -> float:
        return self.max.x - self.min.x

    @property
    def y_range(self) -> float:
        return self.max.y - self.min.y

    @property
    def z_range(self) -> float:
        return self.max.z - self.min.z
