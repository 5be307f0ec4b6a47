"""CLI entry point for podcastdir."""

import asyncio
import json
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podcastdir.cache.file import FileCacheRepository
from podcastdir.config.logging import setup_logging
from podcastdir.config.manager import ConfigManager
from podcastdir.config.schema import GlobalConfig
from podcastdir.container import build_service, create_cache
from podcastdir.directory.service import PodcastService
from podcastdir.utils.errors import ConfigError, NotFoundError, PodcastDirError

T = TypeVar("T")

app = typer.Typer(
    name="podcastdir",
    help="Browse top podcasts, episode listings and episode audio links",
    no_args_is_help=True,
)
cache_app = typer.Typer(name="cache", help="Manage the local catalog cache", no_args_is_help=True)
config_app = typer.Typer(name="config", help="Show configuration", no_args_is_help=True)
app.add_typer(cache_app)
app.add_typer(config_app)

console = Console()

# Set by the app callback, reapplied once the config's log level is known
_log_options: dict[str, Any] = {"verbose": False, "log_file": None}

JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def _truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def _load_config() -> GlobalConfig:
    try:
        config = ConfigManager().load_config()
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        sys.exit(1)

    setup_logging(level=config.log_level, **_log_options)
    return config


def _run(action: Callable[[PodcastService], Awaitable[T]]) -> T:
    """Build the service, run one async action and map errors to exit codes."""
    config = _load_config()

    async def runner() -> T:
        async with build_service(config) as service:
            return await action(service)

    try:
        return asyncio.run(runner())
    except NotFoundError as e:
        console.print(f"[yellow]Not found:[/yellow] {escape(str(e))}")
        sys.exit(1)
    except PodcastDirError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podcastdir - a terminal client for the iTunes podcast directory."""
    _log_options.update(verbose=verbose, log_file=log_file)
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podcastdir import __version__

    console.print(f"[bold cyan]podcastdir[/bold cyan] v{__version__}")


@app.command("top")
def list_top(
    search: Annotated[
        str, typer.Option("--search", "-s", help="Filter by title or author")
    ] = "",
    json_output: JsonOption = False,
) -> None:
    """List the directory's top podcasts.

    Examples:
        podcastdir top

        podcastdir top --search history
    """

    async def action(service: PodcastService) -> list:
        podcasts = await service.get_top_podcasts()
        return service.filter_podcasts(podcasts, search)

    podcasts = _run(action)

    if json_output:
        _print_json([p.model_dump() for p in podcasts])
        return

    if not podcasts:
        console.print("[yellow]No podcasts match.[/yellow]")
        return

    table = Table(title="[bold]Top Podcasts[/bold]")
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan", max_width=50)
    table.add_column("Author", style="green", max_width=40)

    for i, podcast in enumerate(podcasts, 1):
        table.add_row(str(i), podcast.id, escape(podcast.title), escape(podcast.author))

    console.print(table)
    console.print(f"\n[dim]Total: {len(podcasts)} podcast(s)[/dim]")


@app.command("podcast")
def show_podcast(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    json_output: JsonOption = False,
) -> None:
    """Show a podcast and its episodes."""
    detail = _run(lambda service: service.get_podcast_details(podcast_id))

    if json_output:
        _print_json(detail.model_dump())
        return

    console.print(f"[bold]{escape(detail.title)}[/bold]")
    console.print(f"by {escape(detail.author)}")
    if detail.description:
        console.print(f"\n[dim]{escape(_truncate(detail.description, 300))}[/dim]")
    console.print(f"\nArtwork: [dim]{detail.image}[/dim]\n")

    table = Table(title=f"Episodes: {detail.episode_count}", show_lines=False)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="cyan", max_width=60)
    table.add_column("Date", style="green", width=10)
    table.add_column("Duration", style="yellow", width=8, justify="right")

    for episode in detail.episodes:
        table.add_row(
            episode.id,
            escape(episode.title),
            episode.published_at,
            episode.duration,
        )

    console.print(table)


@app.command("episode")
def show_episode(
    podcast_id: Annotated[str, typer.Argument(help="Podcast id")],
    episode_id: Annotated[str, typer.Argument(help="Episode id")],
    json_output: JsonOption = False,
) -> None:
    """Show an episode and its audio URL."""
    episode = _run(lambda service: service.get_episode_details(episode_id, podcast_id))

    if json_output:
        _print_json(episode.model_dump())
        return

    console.print(f"[bold]{escape(episode.title)}[/bold]")
    console.print(f"[green]{episode.published_at}[/green]  [yellow]{episode.duration}[/yellow]")
    if episode.description:
        console.print(f"\n{escape(episode.description)}")

    if episode.audio_url:
        console.print(f"\nAudio: {episode.audio_url}")
    else:
        console.print("\n[dim]No audio available[/dim]")


@cache_app.command("clear")
def clear_cache() -> None:
    """Remove every cached catalog response."""
    config = _load_config()
    cache = create_cache(config.cache)

    if not isinstance(cache, FileCacheRepository):
        console.print("[yellow]The configured cache backend is not persistent.[/yellow]")
        return

    count = asyncio.run(cache.clear_all())
    console.print(f"[green]✓[/green] Cleared {count} cache entr{'y' if count == 1 else 'ies'}")


@cache_app.command("stats")
def cache_stats(json_output: JsonOption = False) -> None:
    """Show cache statistics."""
    config = _load_config()
    cache = create_cache(config.cache)

    if not isinstance(cache, FileCacheRepository):
        console.print("[yellow]The configured cache backend is not persistent.[/yellow]")
        return

    stats = asyncio.run(cache.stats())

    if json_output:
        _print_json(stats)
        return

    table = Table(title="[bold]Cache[/bold]", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Entries", str(stats["total"]))
    table.add_row("Valid", str(stats["valid"]))
    table.add_row("Expired", str(stats["expired"]))
    table.add_row("Size", f"{stats['size_bytes']} bytes")
    table.add_row("Location", stats["cache_dir"])
    console.print(table)


@config_app.command("show")
def show_config() -> None:
    """Show the active configuration."""
    manager = ConfigManager()
    config = _load_config()

    console.print(f"[dim]{manager.config_file}[/dim]\n")
    _print_json(config.model_dump(mode="json"))


if __name__ == "__main__":
    app()
