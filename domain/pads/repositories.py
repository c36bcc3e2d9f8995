"""Domain Port(s) for the Terrain Host.

Defines the interface (Protocol) that host adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from domain.pads.value_objects import Pad
from domain.terrain.value_objects import BoundingBox


class TerrainHost(Protocol):
    """Port for the platform that owns terrain state and persisted pads.

    Implementations live in infrastructure (e.g., in-memory or GeoTIFF-backed
    hosts). Failures surface as TerrainError subclasses, or OSError for
    file access.
    """

    async def get_terrain_bounds(self) -> BoundingBox:
        """Return the current extent of the active terrain."""
        ...

    async def list_pads(self) -> Sequence[Pad]:
        """Return the currently persisted pads."""
        ...

    async def add_pads(self, pads: Sequence[Pad]) -> None:
        """Append pads to the current set."""
        ...

    async def replace_all_pads(self, pads: Sequence[Pad]) -> None:
        """Replace the current set. An empty sequence clears all pads."""
        ...
