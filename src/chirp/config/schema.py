"""Configuration schema module.

The schemas are deliberately small and allow extra keys through Pydantic so
applications can keep their own settings next to chirp's.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field, field_validator

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: str = "WARNING"

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            value = logging.getLevelName(value)
        level = str(value).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown logging level '{value}'")
        return level

    def level_value(self) -> int:
        """Return the numeric logging level."""
        return getattr(logging, self.level)


class RegistryConfig(BaseModel):
    """Configuration for the type registry.

    Attributes:
        auto_register: Register every model subclass under its class name
            when it is defined.
    """

    auto_register: bool = True

    # Allow arbitrary extension
    model_config = {"extra": "allow"}


class ChirpConfig(BaseModel):
    """Root configuration.

    Attributes:
        registry: Type registry configuration
        logging: Logging configuration
    """

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    source: Optional[str] = Field(default=None, exclude=True)

    # Allow arbitrary extension
    model_config = {"extra": "allow"}
