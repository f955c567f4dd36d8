"""Command line interface for music catalog."""

import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .domain.services import CatalogBuilder, catalog_summary
from .exceptions import MusicCatalogError, SongSpecError
from .models.config import Config, LoggingConfig, create_default_config, load_config

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(config: LoggingConfig, verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=config.show_path)],
        force=True,
    )


def parse_song_spec(spec: str) -> Tuple[str, str, Optional[str]]:
    """Parse a ``TITLE=ARTIST:GENRE`` song spec; the genre part is optional."""
    title, sep, rest = spec.partition('=')
    if not sep or not title.strip():
        raise SongSpecError(f"Invalid song spec {spec!r}: expected TITLE=ARTIST[:GENRE]")

    artist, _, genre = rest.partition(':')
    if not artist.strip():
        raise SongSpecError(f"Invalid song spec {spec!r}: missing artist")

    return title.strip(), artist.strip(), genre.strip() or None


@click.group()
@click.version_option(version=__version__)
def cli():
    """Build and inspect a catalog of artists, songs and genres."""
    pass


@cli.command()
@click.option(
    '--song', 'songs',
    multiple=True,
    required=True,
    metavar='TITLE=ARTIST[:GENRE]',
    help='Song to add; repeat for more songs'
)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
def build(songs: Tuple[str, ...], config: Optional[Path], verbose: bool):
    """Build a catalog from songs and show how it links together."""

    try:
        cfg = load_config(config) if config else Config.default()
        setup_logging(cfg.logging, verbose)

        builder = CatalogBuilder()
        for spec in songs:
            builder.add_song(*parse_song_spec(spec))
        logger.debug("Built catalog from %d song spec(s)", len(songs))

        unknown = cfg.display.unknown_label

        artist_table = Table(title="Artists")
        artist_table.add_column("Artist", style="cyan")
        artist_table.add_column("Songs", style="green")
        artist_table.add_column("Genres", style="magenta")
        for artist in builder.artists:
            artist_table.add_row(
                artist.name,
                ", ".join(song.name for song in artist.songs),
                ", ".join(genre.name if genre else unknown for genre in artist.genres),
            )
        console.print(artist_table)

        if builder.genres:
            genre_table = Table(title="Genres")
            genre_table.add_column("Genre", style="magenta")
            genre_table.add_column("Songs", style="green")
            genre_table.add_column("Artists", style="cyan")
            for genre in builder.genres:
                genre_table.add_row(
                    genre.name,
                    ", ".join(song.name for song in genre.songs),
                    ", ".join(artist.name for artist in genre.artists),
                )
            console.print(genre_table)

        if cfg.display.show_summary:
            stats = catalog_summary(builder.artists, builder.genres)
            console.print(
                f"\n[bold]{stats['total_songs']}[/bold] songs, "
                f"[bold]{stats['total_artists']}[/bold] artists, "
                f"[bold]{stats['total_genres']}[/bold] genres "
                f"([yellow]{stats['ungenred_songs']}[/yellow] without genre)"
            )

    except MusicCatalogError as e:
        console.print(f"\n[red]Error: {e}[/red]")
        sys.exit(1)


@cli.command('init-config')
@click.argument('config_path', type=click.Path(dir_okay=False, path_type=Path))
def init_config(config_path: Path):
    """Write a default configuration file to CONFIG_PATH."""
    create_default_config(config_path)
    console.print(f"[green]Wrote default configuration to {config_path}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
