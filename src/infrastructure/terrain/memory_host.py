"""In-memory adapter for the TerrainHost port.

Holds the terrain extent and the persisted pads in process memory. Pads are
stored in the host wire format (camelCase payload dicts) and parsed back on
listing, matching what a remote host round-trip does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from domain.pads.value_objects import Pad
from domain.terrain.errors import TerrainHostError
from domain.terrain.value_objects import BoundingBox

logger = logging.getLogger(__name__)


class InMemoryTerrainHost:
    """TerrainHost backed by process memory.

    Parameters
    ----------
    bounds: BoundingBox | None
        Extent of the active terrain. ``get_terrain_bounds`` raises
        TerrainHostError while no terrain is loaded.
    pads: Iterable[Pad]
        Initially persisted pads.
    """

    def __init__(
        self, bounds: BoundingBox | None = None, pads: Iterable[Pad] = ()
    ) -> None:
        self.bounds = bounds
        self._payloads: list[dict[str, Any]] = [pad.to_payload() for pad in pads]

    async def get_terrain_bounds(self) -> BoundingBox:
        if self.bounds is None:
            raise TerrainHostError("get_terrain_bounds", "no terrain loaded")
        return self.bounds

    async def list_pads(self) -> tuple[Pad, ...]:
        return tuple(Pad.model_validate(payload) for payload in self._payloads)

    async def add_pads(self, pads: Sequence[Pad]) -> None:
        self._payloads.extend(pad.to_payload() for pad in pads)
        logger.info("Added %d pad(s); %d stored", len(pads), len(self._payloads))

    async def replace_all_pads(self, pads: Sequence[Pad]) -> None:
        self._payloads = [pad.to_payload() for pad in pads]
        logger.info("Replaced pads; %d stored", len(self._payloads))
