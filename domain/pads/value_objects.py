"""Pads Bounded Context - Value Objects.

A Pad is a graded rectangular footprint placed on terrain. Pads are created
whole and handed to the terrain host, which owns their lifecycle from then on.

Wire format (host payload) uses camelCase keys:
    {"id", "coordinates": [{"x", "y"}, ...], "elevation",
     "slopePercentage", "applyGrade"}
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
ID_LENGTH = 13
ID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"

MIN_SLOPE_PERCENTAGE = 10
MAX_SLOPE_PERCENTAGE = 110  # exclusive


class Corner(IntEnum):
    """Index of each footprint vertex.

    Footprints are always listed bottom-left, bottom-right, top-right,
    top-left (counter-clockwise with Y up). Renderers rely on this order.
    """

    BOTTOM_LEFT = 0
    BOTTOM_RIGHT = 1
    TOP_RIGHT = 2
    TOP_LEFT = 3


class PlanarPoint(BaseModel):
    """Footprint vertex in the terrain XY plane (Value Object)."""

    x: float
    y: float

    model_config = ConfigDict(frozen=True)


class Pad(BaseModel):
    """Building pad (Value Object).

    Invariants:
        PD-1: id is 13 characters of [a-z0-9]
        PD-2: footprint has exactly 4 vertices in Corner order
        PD-3: footprint is an axis-aligned rectangle with positive extent
        PD-4: slope_percentage in [10, 110)
    """

    id: str = Field(pattern=rf"^[a-z0-9]{{{ID_LENGTH}}}$")
    footprint: tuple[PlanarPoint, PlanarPoint, PlanarPoint, PlanarPoint] = Field(
        alias="coordinates"
    )
    elevation: float
    slope_percentage: int = Field(
        ge=MIN_SLOPE_PERCENTAGE, lt=MAX_SLOPE_PERCENTAGE
    )
    apply_grade: bool = True

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    @model_validator(mode="after")
    def validate_footprint(self) -> "Pad":
        bl, br, tr, tl = self.footprint

        # PD-3: shared edges must be axis-aligned
        if bl.y != br.y or tl.y != tr.y:
            raise ValueError("Bottom and top edges must be horizontal")
        if bl.x != tl.x or br.x != tr.x:
            raise ValueError("Left and right edges must be vertical")

        # PD-2: winding order (also rules out zero-area footprints)
        if not bl.x < br.x:
            raise ValueError(
                f"Bottom-right x ({br.x}) must exceed bottom-left x ({bl.x})"
            )
        if not bl.y < tl.y:
            raise ValueError(f"Top-left y ({tl.y}) must exceed bottom-left y ({bl.y})")
        return self

    def corner(self, which: Corner) -> PlanarPoint:
        """Return the footprint vertex at the given corner."""
        return self.footprint[which]

    @property
    def width(self) -> float:
        """Extent along X."""
        return self.corner(Corner.BOTTOM_RIGHT).x - self.corner(Corner.BOTTOM_LEFT).x

    @property
    def depth(self) -> float:
        """Extent along Y."""
        return self.corner(Corner.TOP_LEFT).y - self.corner(Corner.BOTTOM_LEFT).y

    @property
    def center(self) -> PlanarPoint:
        bl = self.corner(Corner.BOTTOM_LEFT)
        tr = self.corner(Corner.TOP_RIGHT)
        return PlanarPoint(x=(bl.x + tr.x) / 2, y=(bl.y + tr.y) / 2)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the host's camelCase wire format."""
        return self.model_dump(mode="json", by_alias=True)
