"""Custom exceptions for music catalog."""


class MusicCatalogError(Exception):
    """Base exception for music catalog errors."""
    pass


class ConfigurationError(MusicCatalogError):
    """Raised when there's an error in configuration."""
    pass


class SongSpecError(MusicCatalogError):
    """Raised when a song spec given on the command line can't be parsed."""
    pass
