"""
Desktop configuration loaded from the environment.

Values come from ``VIEWSWITCHER_*`` environment variables; a ``.env`` file in
the working directory is read first through python-dotenv.
"""
import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from .base import BaseConfiguration, ConfigurationError, parse_value

logger = logging.getLogger(__name__)

ENV_PREFIX = "VIEWSWITCHER_"


class DesktopConfiguration(BaseConfiguration):
    """Settings for the Qt desktop host and its sample application."""

    def __init__(self) -> None:
        super().__init__()
        self.window_width: int = 480
        self.window_height: int = 800
        self.card_count: int = 5
        self.auto_switch_interval_ms: int = 1000
        # The sample app shows the stack slightly transparent
        self.layout_parameters.stack_alpha = 0.8

    @classmethod
    def load(cls, source: Optional[Mapping[str, str]] = None) -> "DesktopConfiguration":
        """
        Build the configuration from environment variables.

        Args:
            source: Mapping to read instead of ``os.environ`` (no .env loading)

        Returns:
            Validated DesktopConfiguration

        Raises:
            ConfigurationError: If a value is malformed or out of range
        """
        if source is None:
            load_dotenv()
            source = os.environ

        config = cls()
        params = config.layout_parameters

        def key(name: str) -> str:
            return ENV_PREFIX + name

        params.vertical_position_ratio = parse_value(
            source, key("VERTICAL_POSITION_RATIO"), params.vertical_position_ratio, float)
        params.horizontal_padding_ratio = parse_value(
            source, key("HORIZONTAL_PADDING_RATIO"), params.horizontal_padding_ratio, float)
        params.stack_placement_area_portion = parse_value(
            source, key("STACK_PLACEMENT_AREA_PORTION"), params.stack_placement_area_portion, float)
        params.stack_smallest_size_ratio = parse_value(
            source, key("STACK_SMALLEST_SIZE_RATIO"), params.stack_smallest_size_ratio, float)
        params.stack_alpha = parse_value(
            source, key("STACK_ALPHA"), params.stack_alpha, float)

        config.switch_duration_ms = parse_value(
            source, key("SWITCH_DURATION_MS"), config.switch_duration_ms, float)
        config.easing = parse_value(source, key("EASING"), config.easing, str)
        config.frame_interval_ms = parse_value(
            source, key("FRAME_INTERVAL_MS"), config.frame_interval_ms, int)
        config.log_level = parse_value(source, key("LOG_LEVEL"), config.log_level, str).upper()

        config.window_width = parse_value(source, key("WINDOW_WIDTH"), config.window_width, int)
        config.window_height = parse_value(source, key("WINDOW_HEIGHT"), config.window_height, int)
        config.card_count = parse_value(source, key("CARD_COUNT"), config.card_count, int)
        config.auto_switch_interval_ms = parse_value(
            source, key("AUTO_SWITCH_INTERVAL_MS"), config.auto_switch_interval_ms, int)

        config.validate()
        logger.debug("Loaded desktop configuration: %s", config.get_summary())
        return config

    def validate(self) -> None:
        super().validate()

        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigurationError(
                f"Window size must be positive, got {self.window_width}x{self.window_height}"
            )

        if self.card_count < 0:
            raise ConfigurationError(f"card_count must not be negative, got {self.card_count}")

        if self.auto_switch_interval_ms <= 0:
            raise ConfigurationError(
                f"auto_switch_interval_ms must be positive, got {self.auto_switch_interval_ms}"
            )

    def get_summary(self) -> dict[str, str | float | int]:
        summary = super().get_summary()
        summary.update({
            'window_width': self.window_width,
            'window_height': self.window_height,
            'card_count': self.card_count,
            'auto_switch_interval_ms': self.auto_switch_interval_ms,
        })
        return summary
