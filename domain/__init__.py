"""Terrain Pads Domain Layer.

This package contains the core business logic organized by bounded contexts:
- terrain: Terrain extent and the shared error hierarchy
- pads: Building pad footprints, identifier and geometry generation
"""

# Imports alphabetized per project style (isort)
from domain import pads, terrain

__all__ = ["pads", "terrain"]
