"""Terrain Bounded Context - Error Hierarchy.

Custom exceptions for terrain and terrain-host operations.
"""

from __future__ import annotations


class TerrainError(Exception):
    """Base error for terrain operations."""


class InvalidRasterError(TerrainError):
    """File is not a valid raster, wrong format, or corrupted."""


class MissingCRSError(TerrainError):
    """Raster has no CRS defined."""


class InvalidGeotransformError(TerrainError):
    """Raster has invalid or missing geotransform."""


class AllNoDataError(TerrainError):
    """Raster contains 100% NoData pixels - unusable."""


class InvalidBoundsError(TerrainError):
    """Raster extent does not form a valid BoundingBox."""


# ---------------------------------------------------------------------------
# Host Errors
# ---------------------------------------------------------------------------
class TerrainHostError(TerrainError):
    """The terrain host could not serve a request.

    Attributes:
        operation: Name of the host operation that failed
    """

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {reason}")
