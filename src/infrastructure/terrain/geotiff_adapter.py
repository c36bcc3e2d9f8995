"""GeoTIFF-backed adapter for the TerrainHost port.

Reads the extent of a DEM raster with rasterio and serves it as the terrain
BoundingBox; pads are kept in memory (see InMemoryTerrainHost).

Lifecycle (to avoid resource leaks):
1) Open dataset with context manager (rasterio.open)
2) Enter rasterio.Env for GDAL/PROJ configuration
3) Read metadata and validate preconditions
4) Convert nodata -> np.nan; validate at least one valid pixel
5) Build BoundingBox from array bounds (XY) and valid elevations (Z)
6) Exit contexts to release GDAL handles
7) Return BoundingBox

Pads are sized in metres, so the raster must use a projected CRS; there is
no reprojection.
"""

from __future__ import annotations

import asyncio
import logging
import math
from pathlib import Path

import numpy as np
import rasterio
from affine import Affine
from rasterio.transform import array_bounds

from domain.terrain.errors import (
    AllNoDataError,
    InvalidBoundsError,
    InvalidGeotransformError,
    InvalidRasterError,
    MissingCRSError,
)
from domain.terrain.value_objects import BoundingBox, Position
from infrastructure.terrain.memory_host import InMemoryTerrainHost

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

NODATA_WARNING_PCT = 80.0


def _validate_transform(transform: object) -> Affine:
    if not isinstance(transform, Affine):
        raise InvalidGeotransformError("Missing affine transform")
    if any(
        math.isnan(v) or math.isinf(v)
        for v in (
            transform.a,
            transform.b,
            transform.c,
            transform.d,
            transform.e,
            transform.f,
        )
    ):
        raise InvalidGeotransformError("Invalid (NaN/Inf) transform values")
    if transform.a == 0 or transform.e == 0:
        raise InvalidGeotransformError("Invalid transform scale (zero)")
    return transform


def read_terrain_bounds(file_path: Path | str) -> BoundingBox:
    """Read the terrain extent of a single-band GeoTIFF DEM.

    Args:
        file_path: Path to a .tif/.tiff raster in a projected CRS

    Returns:
        BoundingBox with XY from the raster footprint and Z from the lowest
        and highest valid elevations

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidRasterError: Wrong extension, symlink, empty, multi-band,
            geographic CRS, or corrupted raster
        MissingCRSError: If the raster has no CRS
        InvalidGeotransformError: If the transform is missing or degenerate
        AllNoDataError: If every pixel is NoData
        InvalidBoundsError: If the extent does not form a valid BoundingBox
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(str(path))

    if path.suffix.lower() not in (".tif", ".tiff"):
        raise InvalidRasterError(f"Unsupported file extension: {path.suffix}")

    try:
        if path.is_symlink():
            raise InvalidRasterError("Symlinks are not permitted")
        if path.stat().st_size == 0:
            raise InvalidRasterError("Empty file")
    except OSError as e:
        # Log only filename, errno and strerror to avoid leaking absolute paths
        logger.error(
            "Failed to stat %s (errno=%s, strerror=%s)",
            path.name,
            getattr(e, "errno", "unknown"),
            getattr(e, "strerror", "unknown"),
        )
        raise

    try:
        with rasterio.Env():
            with rasterio.open(path) as src:
                if src.count == 0:
                    raise InvalidRasterError("Empty or bandless file")
                if src.count != 1:
                    raise InvalidRasterError(f"Expected 1 band, got {src.count}")
                if src.crs is None:
                    raise MissingCRSError("Raster has no CRS defined")
                if src.crs.is_geographic:
                    raise InvalidRasterError(
                        f"Geographic CRS {src.crs.to_string()} not supported; "
                        "pad sizes require a projected CRS in metres"
                    )

                transform = _validate_transform(src.transform)

                data = src.read(1, masked=True, out_dtype="float32")

                # Convert nodata -> NaN: handle both masked arrays and explicit nodata
                if hasattr(data, "mask") and np.any(data.mask):
                    data = np.where(data.mask, np.float32(np.nan), data.data)
                elif src.nodata is not None:
                    data = np.where(data == src.nodata, np.float32(np.nan), data)
                data = np.asarray(data, dtype=np.float32)

                if np.isnan(data).all():
                    raise AllNoDataError(
                        "Raster contains 100% NoData pixels - unusable"
                    )

                height, width = data.shape
                minx, miny, maxx, maxy = array_bounds(height, width, transform)
                try:
                    bounds = BoundingBox(
                        min=Position(x=minx, y=miny, z=float(np.nanmin(data))),
                        max=Position(x=maxx, y=maxy, z=float(np.nanmax(data))),
                    )
                except ValueError as e:
                    raise InvalidBoundsError(str(e)) from e

                nodata_pct = float(np.isnan(data).mean() * 100.0)
                if nodata_pct > NODATA_WARNING_PCT:
                    logger.warning(
                        "DEM %s: %.1f%% NoData pixels detected",
                        path.name,
                        nodata_pct,
                    )
                logger.debug(
                    "DEM %s: %dx%d grid, z range [%.2f, %.2f]",
                    path.name,
                    width,
                    height,
                    bounds.min.z,
                    bounds.max.z,
                )
                return bounds

    except PermissionError as e:
        # Re-raise with filename only to avoid leaking full path in logs
        raise PermissionError(path.name) from e
    except rasterio.errors.RasterioError as e:
        raise InvalidRasterError(f"Corrupted or invalid raster: {e}") from e


class GeoTiffTerrainHost(InMemoryTerrainHost):
    """TerrainHost whose terrain extent comes from a GeoTIFF DEM.

    The raster is read on first request, off the event loop, and the
    resulting bounds are cached.
    """

    def __init__(self, file_path: Path | str) -> None:
        super().__init__()
        self.file_path = Path(file_path)

    async def get_terrain_bounds(self) -> BoundingBox:
        if self.bounds is None:
            self.bounds = await asyncio.to_thread(read_terrain_bounds, self.file_path)
            logger.info("Loaded terrain bounds from %s", self.file_path.name)
        return self.bounds
