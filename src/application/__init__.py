"""Application Layer.

Services that orchestrate domain logic against the terrain host.
This layer coordinates host round trips; domain code stays free of I/O.
"""

from .config import PanelSettings
from .pad_panel import TerrainPadPanel

__all__ = ["PanelSettings", "TerrainPadPanel"]
