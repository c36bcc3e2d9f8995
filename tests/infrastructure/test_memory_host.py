"""Tests for the in-memory TerrainHost adapter."""

from __future__ import annotations

import asyncio

import pytest

from domain.pads.services import generate_pads
from domain.terrain.errors import TerrainHostError
from infrastructure.terrain.memory_host import InMemoryTerrainHost


def test_get_terrain_bounds(standard_bounds):
    host = InMemoryTerrainHost(standard_bounds)

    assert asyncio.run(host.get_terrain_bounds()) == standard_bounds


def test_get_terrain_bounds_without_terrain_raises():
    host = InMemoryTerrainHost()

    with pytest.raises(TerrainHostError, match="no terrain loaded") as exc_info:
        asyncio.run(host.get_terrain_bounds())

    assert exc_info.value.operation == "get_terrain_bounds"


def test_add_pads_appends(standard_bounds, rng):
    first, second, third = generate_pads(standard_bounds, 3, rng)
    host = InMemoryTerrainHost(standard_bounds, pads=[first])

    asyncio.run(host.add_pads([second, third]))

    assert asyncio.run(host.list_pads()) == (first, second, third)


def test_replace_all_pads(standard_bounds, rng):
    old = generate_pads(standard_bounds, 2, rng)
    new = generate_pads(standard_bounds, 3, rng)
    host = InMemoryTerrainHost(standard_bounds, pads=old)

    asyncio.run(host.replace_all_pads(new))

    assert asyncio.run(host.list_pads()) == new


def test_replace_all_pads_empty_clears(standard_bounds, rng):
    host = InMemoryTerrainHost(standard_bounds, pads=generate_pads(standard_bounds, 2, rng))

    asyncio.run(host.replace_all_pads([]))

    assert asyncio.run(host.list_pads()) == ()


def test_add_pads_logs(standard_bounds, rng, caplog):
    host = InMemoryTerrainHost(standard_bounds)

    with caplog.at_level("INFO"):
        asyncio.run(host.add_pads(generate_pads(standard_bounds, 2, rng)))

    assert "Added 2 pad(s); 2 stored" in caplog.text
