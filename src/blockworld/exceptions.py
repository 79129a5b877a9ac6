"""Custom exceptions for terrain generation."""


class TerrainError(Exception):
    """Base exception for terrain errors."""

    pass


class DuplicateCoordinateError(TerrainError):
    """Raised when a coordinate is generated a second time."""

    pass


class ConfigurationError(TerrainError):
    """Raised when configuration values make generation undefined."""

    pass
