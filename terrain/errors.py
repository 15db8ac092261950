class TerrainError(Exception):
    """Base error for terrain generation."""


class ConfigError(TerrainError):
    """Raised when a terrain configuration fails validation."""


class ThemeError(TerrainError):
    """Raised when a theme name cannot be resolved."""
