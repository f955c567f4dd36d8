"""
Domain Layer - Music Catalog

Artists, songs and genres, the relationships kept between them, and the
registries that track every artist and genre created.
"""

from .registry import Registry
from .entities import Artist, Song, Genre, RegisteredEntity
from .services import CatalogBuilder, catalog_summary

__all__ = [
    # Registry
    "Registry",
    # Entities
    "Artist",
    "Song",
    "Genre",
    "RegisteredEntity",
    # Services
    "CatalogBuilder",
    "catalog_summary",
]
