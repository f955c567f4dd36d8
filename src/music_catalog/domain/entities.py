"""Catalog Entities.

This module defines the Artist, Song and Genre entities and keeps their
relationships consistent. Mutating one side of a relationship updates the
other side as a documented postcondition:

- ``song.genre = genre`` appends the song to ``genre.songs``.
- ``artist.add_song(song)`` appends the song to ``artist.songs``, appends the
  song's genre to ``artist.genres``, points ``song.artist`` back at the artist
  and, when the song has a genre, adds the artist to ``genre.artists``.

Only ``Genre.artists`` is deduplicated. Moving a song to another genre or
artist leaves it listed under the previous one.
"""

import logging
from dataclasses import InitVar, dataclass, field
from typing import ClassVar, List, Optional

from .registry import Registry

logger = logging.getLogger(__name__)


class RegisteredEntity:
    """
    Mixin giving an entity class a registry of its instances.

    Subclasses declare their own ``instances`` registry. Instances
    join it in ``_register``, unless another registry is passed in.
    """

    instances: ClassVar[Registry]

    def _register(self, registry: Optional[Registry]) -> None:
        (registry if registry is not None else type(self).instances).register(self)

    @classmethod
    def all(cls) -> list:
        """Get every registered instance, in creation order."""
        return cls.instances.all()

    @classmethod
    def count(cls) -> int:
        """Get number of registered instances."""
        return cls.instances.count()

    @classmethod
    def reset_registry(cls) -> None:
        """Empty the class registry without touching any instance."""
        cls.instances.reset()


@dataclass(eq=False)
class Artist(RegisteredEntity):
    """
    Represents a musical artist or group.

    An Artist collects the songs added to it and, through them, the
    genres it plays. ``genres`` mirrors ``songs`` one entry per song, so
    it may repeat a genre or hold ``None`` for songs without one.
    """

    instances: ClassVar[Registry] = Registry("artists")

    name: Optional[str] = None
    songs: List["Song"] = field(default_factory=list, repr=False)
    genres: List[Optional["Genre"]] = field(default_factory=list, repr=False)
    registry: InitVar[Optional[Registry]] = None

    def __post_init__(self, registry: Optional[Registry]) -> None:
        self._register(registry)

    def add_song(self, song: "Song") -> None:
        """Add a song to this artist and propagate its genre."""
        genre = song.genre
        self.songs.append(song)
        self.genres.append(genre)
        song.artist = self
        logger.debug("Added %r to %r", song, self)

        if genre is not None:
            genre.add_artist(self)

    @classmethod
    def reset_artists(cls) -> None:
        """Empty the artist registry."""
        cls.reset_registry()


class Song:
    """
    Represents a single song.

    A song isn't tracked by any registry. ``artist`` is set by
    Artist.add_song; assigning ``genre`` also lists the song under that
    genre.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self.artist: Optional[Artist] = None
        self._genre: Optional["Genre"] = None

    @property
    def genre(self) -> Optional["Genre"]:
        """Get the song's genre."""
        return self._genre

    @genre.setter
    def genre(self, genre: Optional["Genre"]) -> None:
        self._genre = genre
        if genre is not None:
            genre.songs.append(self)
            logger.debug("Listed %r under %r", self, genre)

    def __repr__(self) -> str:
        return f"Song(name={self.name!r})"


@dataclass(eq=False)
class Genre(RegisteredEntity):
    """
    Represents a musical genre.

    Songs are listed once per genre assignment. Artists are listed once
    each, in the order they first joined.
    """

    instances: ClassVar[Registry] = Registry("genres")

    name: Optional[str] = None
    songs: List[Song] = field(default_factory=list, repr=False)
    artists: List[Artist] = field(default_factory=list, repr=False)
    registry: InitVar[Optional[Registry]] = None

    def __post_init__(self, registry: Optional[Registry]) -> None:
        self._register(registry)

    def add_artist(self, artist: Artist) -> None:
        """Add an artist, keeping the list free of duplicates."""
        self.artists.append(artist)
        self.artists = _unique(self.artists)
        logger.debug("%r now has %d artist(s)", self, len(self.artists))

    @classmethod
    def reset_genres(cls) -> None:
        """Empty the genre registry."""
        cls.reset_registry()


def _unique(items: list) -> list:
    """Drop repeated items by identity, keeping first occurrences."""
    seen = set()
    unique = []
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            unique.append(item)
    return unique
