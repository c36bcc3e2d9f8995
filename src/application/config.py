"""Panel configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PanelSettings(BaseSettings):
    """Terrain pad panel settings.

    Read from environment variables prefixed with ``TERRAIN_PADS_``
    (e.g. ``TERRAIN_PADS_RANDOM_PAD_COUNT=5``).
    """

    random_pad_count: int = Field(
        default=3, ge=1, description="Number of pads created by 'set random pads'"
    )

    model_config = SettingsConfigDict(env_prefix="TERRAIN_PADS_")
