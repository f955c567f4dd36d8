"""Shared fixtures for music catalog tests."""

import pytest

from music_catalog.domain.entities import Artist, Genre


@pytest.fixture(autouse=True)
def reset_registries():
    """Give every test empty artist and genre registries."""
    Artist.reset_registry()
    Genre.reset_registry()
    yield
    Artist.reset_registry()
    Genre.reset_registry()
