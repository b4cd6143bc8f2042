"""Pydantic configuration models for Organism.

Example::

    version: v1
    limbs:
      - http-server
      - grpc-server
    logging:
      level: info
      directory: logs
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

from organism.constants import DEFAULT_LOG_LEVEL, LOG_DIR, VALID_LOG_LEVELS


class LoggingConfig(BaseModel):
    """Log level and output directory for :func:`setup_logging`."""

    level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL (case-insensitive).",
    )
    directory: str = Field(default=LOG_DIR, description="Directory for log files.")

    @field_validator("level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{v}'")
        return upper


class OrganismConfig(BaseModel):
    """Top-level configuration file model."""

    version: Literal["v1"] = "v1"
    limbs: List[str] = Field(
        default_factory=list,
        description="Limbs grown after the core, in order. Names are not checked for uniqueness.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}
