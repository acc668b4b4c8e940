"""
Layout configuration management.

This module centralizes the numeric constants shared by the hierarchical
layout builder and the group boundary geometry.
"""

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfiguration:
    """
    Configuration settings for static layout and group annotation.

    All distances are in diagram units, the same units node positions use.
    """

    # Tree layout spacing
    horizontal_spacing: float = 120.0
    vertical_spacing: float = 160.0
    sibling_separation: float = 1.0
    cousin_separation: float = 2.0

    # Rendered node size
    icon_size: float = 40.0

    # Group boundary expansion; None means 1.5 * icon_size
    group_padding: Optional[float] = None
    label_clearance: float = 20.0

    # Synthetic node parenting multiple layout roots
    virtual_root_id: str = "__VIRTUAL_ROOT__"

    def __post_init__(self):
        """Post-initialization setup."""
        if self.group_padding is None:
            self.group_padding = self.icon_size * 1.5
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError for settings the algorithms cannot use."""
        if self.horizontal_spacing <= 0 or self.vertical_spacing <= 0:
            raise ConfigurationError(
                f"Layout spacing must be positive, got "
                f"({self.horizontal_spacing}, {self.vertical_spacing})"
            )
        if self.sibling_separation <= 0 or self.cousin_separation <= 0:
            raise ConfigurationError("Separation factors must be positive")
        if self.icon_size <= 0:
            raise ConfigurationError(f"Icon size must be positive, got {self.icon_size}")
        if self.group_padding <= self.icon_size / 2:
            raise ConfigurationError(
                f"Group padding {self.group_padding} must exceed half the icon size "
                f"({self.icon_size / 2}) to enclose node icons"
            )
        if self.label_clearance < 0:
            raise ConfigurationError("Label clearance cannot be negative")
        if not self.virtual_root_id:
            raise ConfigurationError("Virtual root id cannot be empty")

    @property
    def node_radius(self) -> float:
        return self.icon_size / 2

    def update_settings(self, **kwargs) -> None:
        """
        Update multiple layout settings.

        Args:
            **kwargs: Settings to update

        Raises:
            ConfigurationError: If a key is unknown or the result is invalid
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigurationError(f"Unknown layout setting(s): {unknown}")

        # replace() validates; a rejected update leaves this instance unchanged
        candidate = replace(self, **kwargs)
        for key in kwargs:
            setattr(self, key, getattr(candidate, key))
        logger.debug(f"Updated layout settings: {sorted(kwargs)}")

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'LayoutConfiguration':
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


# Global default configuration instance
DEFAULT_LAYOUT_CONFIG = LayoutConfiguration()


def get_default_config() -> LayoutConfiguration:
    """Get the default layout configuration."""
    return DEFAULT_LAYOUT_CONFIG
