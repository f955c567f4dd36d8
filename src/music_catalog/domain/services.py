"""Catalog Domain Services.

Building a catalog from flat song descriptions and summarising it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .entities import Artist, Genre, Song
from .registry import Registry

logger = logging.getLogger(__name__)


@dataclass
class CatalogBuilder:
    """
    Builds linked artists, songs and genres from names.

    Artists and genres are looked up by exact name, so repeating a name
    reuses the same entity. Entities are created in the builder's own
    registries unless shared ones are passed in.
    """

    artist_registry: Registry = field(default_factory=lambda: Registry("artists"))
    genre_registry: Registry = field(default_factory=lambda: Registry("genres"))

    @property
    def artists(self) -> List[Artist]:
        """Get artists in creation order."""
        return self.artist_registry.all()

    @property
    def genres(self) -> List[Genre]:
        """Get genres in creation order."""
        return self.genre_registry.all()

    def get_artist(self, name: str) -> Artist:
        """Get an artist by name, creating it if needed."""
        for artist in self.artists:
            if artist.name == name:
                return artist
        return Artist(name=name, registry=self.artist_registry)

    def get_genre(self, name: str) -> Genre:
        """Get a genre by name, creating it if needed."""
        for genre in self.genres:
            if genre.name == name:
                return genre
        return Genre(name=name, registry=self.genre_registry)

    def add_song(self, title: str, artist_name: str, genre_name: Optional[str] = None) -> Song:
        """Create a song and link it to its artist and genre."""
        song = Song(name=title)
        # Genre first, so add_song can propagate it to the artist
        if genre_name:
            song.genre = self.get_genre(genre_name)
        self.get_artist(artist_name).add_song(song)
        logger.debug("Built %r by %s (%s)", song, artist_name, genre_name or "no genre")
        return song


def catalog_summary(artists: List[Artist], genres: List[Genre]) -> Dict[str, Any]:
    """Get catalog statistics."""
    songs = []
    for artist in artists:
        for song in artist.songs:
            if song not in songs:
                songs.append(song)

    return {
        "total_songs": len(songs),
        "total_artists": len(artists),
        "total_genres": len(genres),
        "ungenred_songs": sum(1 for song in songs if song.genre is None),
    }
