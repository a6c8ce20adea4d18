"""
Configuration models and validation.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple
import os

from frosty_pine.domain.interfaces.base import ValueObject

SUPPORTED_STORAGE_BACKENDS = ("memory",)
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfiguration(ValueObject):
    """Configuration for the application."""

    # Logging configuration
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Storage configuration
    storage_backend: str = "memory"
    seed_brands: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate configuration after initialization."""
        object.__setattr__(self, 'seed_brands', tuple(self.seed_brands))
        self._validate_logging()
        self._validate_storage()

    def _validate_logging(self) -> None:
        """Validate logging configuration."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {list(VALID_LOG_LEVELS)}")

        if self.log_dir is not None and (not isinstance(self.log_dir, str) or not self.log_dir.strip()):
            raise ValueError("log_dir must be a non-empty string if provided")

    def _validate_storage(self) -> None:
        """Validate storage configuration."""
        if self.storage_backend not in SUPPORTED_STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported storage_backend: {self.storage_backend}. "
                f"Valid options: {list(SUPPORTED_STORAGE_BACKENDS)}"
            )

        for name in self.seed_brands:
            if not isinstance(name, str) or not name.strip():
                raise ValueError("seed_brands must contain non-blank names")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'AppConfiguration':
        """Create configuration from dictionary with environment variable support."""
        config_dict = dict(config_dict)

        # Support environment variable overrides
        env_overrides = {
            'log_level': os.getenv('FROSTY_PINE_LOG_LEVEL'),
            'log_dir': os.getenv('FROSTY_PINE_LOG_DIR'),
            'storage_backend': os.getenv('FROSTY_PINE_STORAGE_BACKEND'),
        }

        # Apply environment overrides
        for key, env_value in env_overrides.items():
            if env_value is not None:
                config_dict[key] = env_value

        if 'seed_brands' in config_dict:
            config_dict['seed_brands'] = tuple(config_dict['seed_brands'] or ())

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'log_level': self.log_level,
            'log_dir': self.log_dir,
            'storage_backend': self.storage_backend,
            'seed_brands': list(self.seed_brands),
        }
