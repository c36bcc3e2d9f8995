"""Pads Bounded Context - Domain Services.

Pure domain logic for generating random building pads inside a terrain
bounding box. NO I/O operations - pads are submitted to the terrain host by
the application layer via the TerrainHost port.

Generation works against the bounding box only, not the terrain mesh.
"""

from __future__ import annotations

import math

import numpy as np

from domain.pads.identifiers import generate_id
from domain.pads.value_objects import MIN_SLOPE_PERCENTAGE, Corner, Pad, PlanarPoint
from domain.terrain.value_objects import BoundingBox

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EDGE_MARGIN = 0.1  # Fraction of each XY range kept clear of pad centers
MAX_SIZE_FRACTION = 0.2  # Pad side ceiling as a fraction of the shorter XY range
MIN_SIZE_FACTOR = 0.2  # Lower bound of the random scale applied to the ceiling
MIN_PAD_SIZE_M = 10.0
MAX_PAD_SIZE_M = 50.0
SLOPE_SPAN = 100  # slope_percentage in [10, 10 + SLOPE_SPAN)


# ---------------------------------------------------------------------------
# Helper: Pad Size
# ---------------------------------------------------------------------------
def derive_pad_size(x_range: float, y_range: float, u: float) -> float:
    """Derive the pad side length from the terrain extent.

    The terrain-relative ceiling is scaled by a factor in [0.2, 1.0) and the
    result is clamped into [10, 50] metres. Clamping happens after scaling,
    so on small terrains the 10 m floor can exceed the ceiling (a zero-sized
    terrain still yields a 10 m pad).

    Args:
        x_range: Terrain extent along X
        y_range: Terrain extent along Y
        u: Uniform draw in [0, 1)

    Returns:
        Side length in metres, within [MIN_PAD_SIZE_M, MAX_PAD_SIZE_M]
    """
    max_size = min(x_range, y_range) * MAX_SIZE_FRACTION
    scaled = max_size * (MIN_SIZE_FACTOR + u * (1 - MIN_SIZE_FACTOR))
    return max(MIN_PAD_SIZE_M, min(MAX_PAD_SIZE_M, scaled))


# ---------------------------------------------------------------------------
# Helper: Footprint
# ---------------------------------------------------------------------------
def square_footprint(
    center_x: float, center_y: float, size: float
) -> tuple[PlanarPoint, PlanarPoint, PlanarPoint, PlanarPoint]:
    """Build a square footprint centered on (center_x, center_y).

    Vertices are placed explicitly by Corner so the winding order never
    depends on construction order.
    """
    half = size / 2
    vertices: dict[Corner, PlanarPoint] = {
        Corner.BOTTOM_LEFT: PlanarPoint(x=center_x - half, y=center_y - half),
        Corner.BOTTOM_RIGHT: PlanarPoint(x=center_x + half, y=center_y - half),
        Corner.TOP_RIGHT: PlanarPoint(x=center_x + half, y=center_y + half),
        Corner.TOP_LEFT: PlanarPoint(x=center_x - half, y=center_y + half),
    }
    return (
        vertices[Corner.BOTTOM_LEFT],
        vertices[Corner.BOTTOM_RIGHT],
        vertices[Corner.TOP_RIGHT],
        vertices[Corner.TOP_LEFT],
    )


# ---------------------------------------------------------------------------
# Main Service: generate_pad
# ---------------------------------------------------------------------------
def generate_pad(bounds: BoundingBox, rng: np.random.Generator | None = None) -> Pad:
    """Generate one random square pad inside the terrain bounds.

    Precondition: bounds has positive X and Y ranges. This is not checked;
    degenerate boxes produce a 10 m pad that may extend past the terrain.

    Args:
        bounds: Terrain bounding box
        rng: Random source; pass a seeded generator for reproducible pads

    Returns:
        Pad whose center lies in the 10%-inset XY rectangle, with elevation
        in [min.z, max.z), slope_percentage in [10, 110) and side in [10, 50]

    Example:
        >>> bounds = BoundingBox(
        ...     min=Position(x=0, y=0, z=0), max=Position(x=100, y=100, z=20)
        ... )
        >>> pad = generate_pad(bounds, np.random.default_rng(42))
        >>> 10 <= pad.width <= 20
        True
    """
    if rng is None:
        rng = np.random.default_rng()

    x_range = bounds.x_range
    y_range = bounds.y_range
    z_range = bounds.z_range

    # Center inside the inset rectangle, away from terrain edges
    inner = 1 - 2 * EDGE_MARGIN
    center_x = bounds.min.x + x_range * EDGE_MARGIN + rng.random() * x_range * inner
    center_y = bounds.min.y + y_range * EDGE_MARGIN + rng.random() * y_range * inner

    size = derive_pad_size(x_range, y_range, rng.random())

    # Elevation is not inset, unlike the XY center
    elevation = bounds.min.z + rng.random() * z_range

    slope_percentage = int(math.floor(MIN_SLOPE_PERCENTAGE + rng.random() * SLOPE_SPAN))

    return Pad(
        id=generate_id(rng),
        footprint=square_footprint(float(center_x), float(center_y), float(size)),
        elevation=float(elevation),
        slope_percentage=slope_percentage,
        apply_grade=True,
    )


def generate_pads(
    bounds: BoundingBox, count: int, rng: np.random.Generator | None = None
) -> tuple[Pad, ...]:
    """Generate `count` independent random pads from a single random source.

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if rng is None:
        rng = np.random.default_rng()
    return tuple(generate_pad(bounds, rng) for _ in range(count))
