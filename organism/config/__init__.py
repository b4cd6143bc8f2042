"""Configuration loading and validation for Organism."""

from organism.config.loader import load_organism_config
from organism.config.schema import LoggingConfig, OrganismConfig

__all__ = [
    "LoggingConfig",
    "OrganismConfig",
    "load_organism_config",
]
