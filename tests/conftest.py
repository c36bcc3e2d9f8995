"""Root pytest configuration for all tests.

Shared fixtures for building terrain bounds and seeded random sources.
Domain tests construct value objects directly; no host or raster I/O.
"""

import numpy as np
import pytest

from domain.terrain.value_objects import BoundingBox, Position


def make_bounds(
    min_xyz: tuple[float, float, float], max_xyz: tuple[float, float, float]
) -> BoundingBox:
    """Build a BoundingBox from two (x, y, z) tuples."""
    return BoundingBox(
        min=Position(x=min_xyz[0], y=min_xyz[1], z=min_xyz[2]),
        max=Position(x=max_xyz[0], y=max_xyz[1], z=max_xyz[2]),
    )


@pytest.fixture
def standard_bounds() -> BoundingBox:
    """100 x 100 m terrain, 20 m of relief."""
    return make_bounds((0.0, 0.0, 0.0), (100.0, 100.0, 20.0))


@pytest.fixture
def large_bounds() -> BoundingBox:
    """2 km x 1 km terrain offset from the origin."""
    return make_bounds((-1000.0, 500.0, 120.0), (1000.0, 1500.0, 480.0))


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
