"""Infrastructure adapters for the terrain host port.

This module provides the infrastructure layer implementations of
TerrainHost: a plain in-memory host and a host whose terrain extent is read
from a GeoTIFF DEM.
"""

from .geotiff_adapter import GeoTiffTerrainHost, read_terrain_bounds
from .memory_host import InMemoryTerrainHost

__all__ = ["GeoTiffTerrainHost", "InMemoryTerrainHost", "read_terrain_bounds"]
