"""
Platform-independent configuration.

Defines the settings every switcher host needs and the error raised when a
setting is malformed. Platform modules subclass BaseConfiguration and decide
where the values come from.
"""
import logging
from abc import ABC, abstractmethod
from typing import Callable, Mapping, Optional, TypeVar

from switcher_core.data_models import LayoutParameters
from switcher_core.ui_logic.transition import (
    DEFAULT_EASING, DEFAULT_SWITCH_DURATION_MS, EASING_CURVES
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when a configuration value is missing, malformed or out of range."""


def parse_value(
    source: Mapping[str, str],
    key: str,
    default: T,
    parser: Callable[[str], T]
) -> T:
    """
    Read one typed value from a string mapping.

    Args:
        source: Mapping of raw string values (usually the environment)
        key: Key to look up
        default: Value used when the key is absent or empty
        parser: Callable converting the raw string

    Returns:
        Parsed value or the default

    Raises:
        ConfigurationError: If the raw value cannot be parsed
    """
    raw = source.get(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        return parser(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {key}: {raw!r} ({e})") from e


class BaseConfiguration(ABC):
    """
    Settings shared by every switcher host.

    Subclasses fill in the attributes from their own source and call
    ``validate()`` once loaded.
    """

    def __init__(self) -> None:
        self.layout_parameters = LayoutParameters()
        self.switch_duration_ms: float = DEFAULT_SWITCH_DURATION_MS
        self.easing: str = DEFAULT_EASING
        self.frame_interval_ms: int = 16
        self.log_level: str = "INFO"

    @classmethod
    @abstractmethod
    def load(cls, source: Optional[Mapping[str, str]] = None) -> "BaseConfiguration":
        """Build a configuration from the platform's settings source."""

    def validate(self) -> None:
        """
        Check every setting is usable.

        Raises:
            ConfigurationError: On the first invalid setting
        """
        params = self.layout_parameters
        ratios = {
            'vertical_position_ratio': params.vertical_position_ratio,
            'stack_placement_area_portion': params.stack_placement_area_portion,
            'stack_smallest_size_ratio': params.stack_smallest_size_ratio,
            'stack_alpha': params.stack_alpha,
        }
        for name, value in ratios.items():
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {value}")

        if not 0.0 <= params.horizontal_padding_ratio < 0.5:
            raise ConfigurationError(
                f"horizontal_padding_ratio must be within [0, 0.5), got {params.horizontal_padding_ratio}"
            )

        if self.switch_duration_ms < 0:
            raise ConfigurationError(f"switch_duration_ms must not be negative, got {self.switch_duration_ms}")

        if self.frame_interval_ms <= 0:
            raise ConfigurationError(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")

        if self.easing not in EASING_CURVES:
            raise ConfigurationError(
                f"Unknown easing '{self.easing}', expected one of {sorted(EASING_CURVES)}"
            )

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")

    def get_summary(self) -> dict[str, str | float | int]:
        """
        Get summary of the configuration for logging.

        Returns:
            Dictionary of setting names to values
        """
        params = self.layout_parameters
        return {
            'vertical_position_ratio': params.vertical_position_ratio,
            'horizontal_padding_ratio': params.horizontal_padding_ratio,
            'stack_placement_area_portion': params.stack_placement_area_portion,
            'stack_smallest_size_ratio': params.stack_smallest_size_ratio,
            'stack_alpha': params.stack_alpha,
            'switch_duration_ms': self.switch_duration_ms,
            'easing': self.easing,
            'frame_interval_ms': self.frame_interval_ms,
            'log_level': self.log_level,
        }
