"""CLI entry point for podcast-rss."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from podcast_rss.config.defaults import SAMPLE_FEED
from podcast_rss.config.logging import setup_logging
from podcast_rss.config.manager import ConfigManager
from podcast_rss.utils.errors import ConfigError, PodcastRSSError, ValidationError

app = typer.Typer(
    name="podcast-rss",
    help="Build Apple Podcasts compliant RSS feeds from YAML definitions",
    no_args_is_help=True,
)
console = Console()
error_console = Console(stderr=True, soft_wrap=True)


def _fail(message: str) -> None:
    error_console.print(f"[red]✗[/red] {message}")
    sys.exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podcast-rss - Build podcast RSS feeds."""
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podcast_rss import __version__

    console.print(f"[bold cyan]podcast-rss[/bold cyan] v{__version__}")


@app.command("init")
def init_feed(
    feed_file: Path = typer.Argument(..., help="Where to write the feed definition"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a sample feed definition to start from.

    Examples:
        podcast-rss init my-show.yaml
    """
    if feed_file.exists() and not force:
        _fail(f"{feed_file} already exists. Use --force to overwrite it.")

    feed_file.parent.mkdir(parents=True, exist_ok=True)
    feed_file.write_text(SAMPLE_FEED)
    console.print(f"[green]✓[/green] Sample feed definition written to [bold]{feed_file}[/bold]")


@app.command("render")
def render_feed(
    ctx: typer.Context,
    feed_file: Path = typer.Argument(..., help="YAML feed definition"),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the feed to this file instead of stdout"
    ),
    compact: bool = typer.Option(False, "--compact", help="Do not indent the XML"),
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Custom configuration directory"
    ),
) -> None:
    """Render a feed definition as RSS XML.

    Examples:
        podcast-rss render my-show.yaml -o feed.xml
    """
    try:
        manager = ConfigManager(config_dir=config_dir)
        config = manager.load_config()
        setup_logging(level=config.log_level, **(ctx.obj or {}))
        podcast = manager.build_podcast(feed_file)
        xml = podcast.render(pretty_print=config.pretty_print and not compact)
    except ConfigError as e:
        _fail(f"Configuration error: {e}")
    except ValidationError as e:
        _fail(f"Invalid feed: {e}")
    except PodcastRSSError as e:
        _fail(str(e))

    if output is None and config.default_output_dir is not None:
        output = config.default_output_dir.expanduser() / f"{feed_file.stem}.xml"

    if output is None:
        typer.echo(xml, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(xml, encoding="utf-8")
    console.print(
        f"[green]✓[/green] Feed with {len(podcast.episodes)} episode(s) written to [bold]{output}[/bold]"
    )


@app.command("validate")
def validate_feed(
    ctx: typer.Context,
    feed_file: Path = typer.Argument(..., help="YAML feed definition"),
    config_dir: Path | None = typer.Option(
        None, "--config-dir", help="Custom configuration directory"
    ),
) -> None:
    """Check a feed definition without rendering it.

    Examples:
        podcast-rss validate my-show.yaml
    """
    try:
        manager = ConfigManager(config_dir=config_dir)
        config = manager.load_config()
        setup_logging(level=config.log_level, **(ctx.obj or {}))
        podcast = manager.build_podcast(feed_file)
        podcast.validate_data_integrity()
        for episode in podcast.episodes:
            episode.validate_data_integrity()
    except ConfigError as e:
        _fail(f"Configuration error: {e}")
    except ValidationError as e:
        _fail(f"Invalid feed: {e}")

    table = Table(title=podcast.title)
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Type")
    table.add_column("Size", justify="right")
    table.add_column("URL", style="dim")

    for episode in podcast.episodes:
        table.add_row(
            str(episode.episode_number or ""),
            episode.title or "",
            episode.type or "",
            f"{episode.file_size:,}",
            episode.episode_url or "",
        )

    console.print(table)
    console.print(f"\n[green]✓[/green] Feed is valid ({len(podcast.episodes)} episode(s))")


if __name__ == "__main__":
    app()
