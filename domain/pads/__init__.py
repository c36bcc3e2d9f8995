"""Pads Bounded Context.

Responsible for building pad footprints placed on terrain:
- Value Objects: PlanarPoint, Corner, Pad
- Services: generate_id, generate_pad, generate_pads
- Ports: TerrainHost
"""
