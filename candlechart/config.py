"""Chart configuration loaded from ``~/.config/candlechart/config.toml``.

Example::

    [chart]
    width = 1040
    height = 360
    candle_width = 20
    chrome_width = 80
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from candlechart.models import ViewportDimensions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "candlechart" / "config.toml"


class ChartConfig(BaseModel):
    """Initial chart dimensions."""

    width: float = Field(default=1040, gt=0, description="Content width in pixels")
    height: float = Field(default=360, gt=0, description="Plot height in pixels")
    candle_width: float = Field(default=20, gt=0, description="Candle body width in pixels")
    chrome_width: float = Field(
        default=80, ge=0, description="Container padding plus y-axis gutter"
    )

    model_config = {"frozen": True}

    def viewport(self) -> ViewportDimensions:
        """Build the starting viewport for a layout controller."""
        return ViewportDimensions(
            width=self.width,
            height=self.height,
            candle_width=self.candle_width,
        )


def load_config(config_path: Optional[Path] = None) -> ChartConfig:
    """Load chart settings, falling back to defaults.

    A missing or unreadable file, or an invalid ``[chart]`` section,
    yields the default configuration.
    """
    import toml

    config_path = config_path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return ChartConfig()

    try:
        raw = toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read %s: %s", config_path, e)
        return ChartConfig()

    try:
        return ChartConfig(**raw.get("chart", {}))
    except ValidationError as e:
        logger.warning("Invalid [chart] settings in %s: %s", config_path, e)
        return ChartConfig()
