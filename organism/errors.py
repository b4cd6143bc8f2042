"""Custom exception classes for Organism.

Limb and organism state transitions never raise; these errors belong to
the configuration layer that builds an organism from a file.
"""


class OrganismError(Exception):
    """Base class for all custom exceptions in Organism."""

    pass


class ConfigurationError(OrganismError):
    """Raised when loading or validating the configuration file fails."""

    pass
