"""
Timeline Configuration Module.
Defines layout and interaction settings for the timeline.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from timelane.app.constants import (
    CONTENT_PADDING,
    HANDLE_WIDTH,
    HEADER_HEIGHT,
    LANE_HEIGHT,
    LANE_SPACING,
    MIN_WIDTH_FRACTION,
    TRACK_MIN_WIDTH,
    ZOOM_MAX,
    ZOOM_MIN,
    ZOOM_STEP,
)

logger = logging.getLogger(__name__)


@dataclass
class TimelineConfig:
    """
    Configuration settings for timeline layout and interaction.

    Attributes:
        lane_height: Height of an item bar in pixels.
        lane_spacing: Distance between the tops of adjacent lanes in pixels.
        header_height: Height of the month header band in pixels.
        content_padding: Extra space below the last lane in pixels.
        min_width_fraction: Cosmetic minimum bar width as a fraction of the
            track. Never used for date math.
        zoom_min: Lowest zoom level.
        zoom_max: Highest zoom level.
        zoom_step: Zoom change per zoom-in/zoom-out action.
        handle_width: Width of the resize handle at each bar edge in pixels.
        track_min_width: Minimum unzoomed track width in pixels.
    """

    lane_height: int = LANE_HEIGHT
    lane_spacing: int = LANE_SPACING
    header_height: int = HEADER_HEIGHT
    content_padding: int = CONTENT_PADDING
    min_width_fraction: float = MIN_WIDTH_FRACTION
    zoom_min: float = ZOOM_MIN
    zoom_max: float = ZOOM_MAX
    zoom_step: float = ZOOM_STEP
    handle_width: int = HANDLE_WIDTH
    track_min_width: int = TRACK_MIN_WIDTH

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Checks value ranges.

        Raises:
            ValueError: If any setting is out of range.
        """
        if not 0 < self.zoom_min <= self.zoom_max:
            raise ValueError(
                f"zoom bounds must satisfy 0 < zoom_min <= zoom_max, "
                f"got {self.zoom_min}..{self.zoom_max}"
            )
        if self.zoom_step <= 0:
            raise ValueError(f"zoom_step must be positive, got {self.zoom_step}")
        if not 0 <= self.min_width_fraction <= 1:
            raise ValueError(
                f"min_width_fraction must be within [0, 1], "
                f"got {self.min_width_fraction}"
            )
        for name in (
            "lane_height",
            "lane_spacing",
            "header_height",
            "handle_width",
            "track_min_width",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        if self.content_padding < 0:
            raise ValueError("content_padding must not be negative")

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the config to a dictionary for JSON serialization.

        Returns:
            dict: Dictionary representation of the configuration.
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimelineConfig":
        """
        Creates a config from a dictionary, ignoring unknown keys.

        Args:
            data: Dictionary with configuration values.

        Returns:
            TimelineConfig: New configuration instance.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning(f"Ignoring unknown timeline config keys: {unknown}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_config(path: Optional[Union[str, Path]] = None) -> TimelineConfig:
    """
    Loads a TimelineConfig from a JSON file.

    Args:
        path: Path to a JSON object of settings. None returns the defaults.

    Returns:
        TimelineConfig: The loaded configuration.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object or holds invalid values.
    """
    if path is None:
        return TimelineConfig()

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Timeline config must be a JSON object: {path}")

    logger.info(f"Loaded timeline config from {path}")
    return TimelineConfig.from_dict(data)
