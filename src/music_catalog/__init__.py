"""Music Catalog

Artists, songs and genres with their relationships kept consistent.
"""

__version__ = "0.1.0"

from .domain import Artist, Song, Genre, Registry
from .exceptions import MusicCatalogError, ConfigurationError, SongSpecError

__all__ = [
    # Entities
    "Artist",
    "Song",
    "Genre",
    "Registry",

    # Errors
    "MusicCatalogError",
    "ConfigurationError",
    "SongSpecError",
]
