"""Terrain pad panel.

Headless application service behind the pad panel's four actions. Each
action runs one round trip against the TerrainHost (read bounds, generate,
submit) and reports progress through ``status``.

Host failures never escape an action: they are logged with traceback and
surfaced as a readable status, leaving the panel usable.
"""

from __future__ import annotations

import logging

import numpy as np

from application.config import PanelSettings
from domain.pads.repositories import TerrainHost
from domain.pads.services import generate_pad, generate_pads
from domain.pads.value_objects import Pad
from domain.terrain.errors import TerrainError

logger = logging.getLogger(__name__)

# Errors an action reports instead of raising
HOST_ERRORS = (TerrainError, OSError)


class TerrainPadPanel:
    """Create, replace, clear and inspect pads on the host terrain.

    Attributes:
        status: Last progress or result message
        pad_count: Number of pads on the host, None until first known
    """

    def __init__(
        self,
        host: TerrainHost,
        settings: PanelSettings | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or PanelSettings()
        self._rng = rng if rng is not None else np.random.default_rng()
        self.status = ""
        self.pad_count: int | None = None

    def _set_status(self, message: str) -> None:
        self.status = message
        logger.debug("Status: %s", message)

    def _report_error(self, action: str, error: Exception) -> None:
        self._set_status(f"Error {action}: {error}")
        logger.exception("Error %s", action)

    async def create_pad(self) -> Pad | None:
        """Generate one pad and add it to the existing pads."""
        try:
            self._set_status("Getting terrain bounds...")
            bounds = await self.host.get_terrain_bounds()

            self._set_status("Generating random pad...")
            pad = generate_pad(bounds, self._rng)

            self._set_status("Adding pad...")
            await self.host.add_pads([pad])

            pads = await self.host.list_pads()
            self.pad_count = len(pads)
        except HOST_ERRORS as e:
            self._report_error("creating pad", e)
            return None

        self._set_status(f'Created pad "{pad.id}" at elevation {pad.elevation:.1f}m')
        logger.info("Created pad %s", pad.id)
        return pad

    async def delete_all_pads(self) -> None:
        """Remove every pad from the host."""
        try:
            self._set_status("Deleting all pads...")
            await self.host.replace_all_pads([])
        except HOST_ERRORS as e:
            self._report_error("deleting pads", e)
            return

        self.pad_count = 0
        self._set_status("All pads deleted")
        logger.info("All pads deleted")

    async def set_random_pads(self) -> tuple[Pad, ...] | None:
        """Replace all pads with ``settings.random_pad_count`` new ones."""
        try:
            self._set_status("Getting terrain bounds...")
            bounds = await self.host.get_terrain_bounds()

            self._set_status("Generating random pads...")
            pads = generate_pads(bounds, self.settings.random_pad_count, self._rng)

            self._set_status("Setting pads...")
            await self.host.replace_all_pads(pads)
        except HOST_ERRORS as e:
            self._report_error("setting pads", e)
            return None

        self.pad_count = len(pads)
        self._set_status(f"Set {len(pads)} new pads")
        logger.info("Set pads: %s", ", ".join(pad.id for pad in pads))
        return pads

    async def get_pads(self) -> tuple[Pad, ...] | None:
        """Fetch the current pads and log a summary of each."""
        try:
            self._set_status("Getting pads...")
            pads = tuple(await self.host.list_pads())
        except HOST_ERRORS as e:
            self._report_error("getting pads", e)
            return None

        self.pad_count = len(pads)
        self._set_status(f"Found {len(pads)} pad(s)")
        for index, pad in enumerate(pads, start=1):
            logger.info(
                "Pad %d: id=%s elevation=%.2f slope=%d%% vertices=%d",
                index,
                pad.id,
                pad.elevation,
                pad.slope_percentage,
                len(pad.footprint),
            )
        return pads
