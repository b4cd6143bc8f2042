"""Shared constants for Organism."""

PACKAGE_NAME = "organism"
PACKAGE_VERSION = "0.1.0"

# Name of the limb every organism grows at construction
CORE_LIMB_NAME = "core"

# Logging defaults
LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
