"""
Configuration domain models.

Validated configuration object for the particle registry.
"""

import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class RegistryConfig:
    """
    Registry configuration.

    Immutable configuration object validated at creation.
    """

    # Table source; None means the data file bundled with the package
    data_path: Optional[str] = None

    # Behavior
    reject_collisions: bool = False

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate registry configuration."""
        if self.data_path is not None:
            if not isinstance(self.data_path, str):
                raise ValueError(f"data_path must be a string, got {self.data_path!r}")
            if not self.data_path:
                raise ValueError("data_path cannot be empty")
            if not os.path.isfile(self.data_path):
                raise ValueError(f"data_path does not exist: {self.data_path}")
        if not isinstance(self.reject_collisions, bool):
            raise ValueError(
                f"reject_collisions must be true or false, got {self.reject_collisions!r}"
            )
        if not isinstance(self.log_level, str):
            raise ValueError(f"log_level must be a string, got {self.log_level!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'RegistryConfig':
        """
        Create RegistryConfig from a dictionary (e.g., loaded from YAML).

        Args:
            config_dict: Dictionary with a ``registry`` section

        Returns:
            Validated RegistryConfig instance
        """
        registry_dict = (config_dict or {}).get("registry") or {}
        return cls(
            data_path=registry_dict.get("data_path"),
            reject_collisions=registry_dict.get("reject_collisions", False),
            log_level=registry_dict.get("log_level", "WARNING"),
        )
