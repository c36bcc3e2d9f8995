"""Terrain Bounded Context.

Responsible for the physical extent of the active terrain:
- Value Objects: Position, BoundingBox
- Errors: TerrainError hierarchy shared by terrain adapters
"""
