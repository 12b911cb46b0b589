"""CLI commands for learning tracks.

Commands:
- demo: Run the built-in Kotlin track scenario
- list: List available track files
- show: Show a track's catalog and derived metrics
- progress: Show a user's progress in a track
"""

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tracks.config.app_config import (
    configure_logging,
    get_tracks_dir,
    load_app_config,
)
from tracks.core.track import EmptyCatalogError, NotEnrolledError, Track
from tracks.core.track_loader import (
    DEMO_TRACK,
    TrackBundle,
    TrackLoadError,
    build_track,
    load_track_file,
)
from tracks.utils.validators import (
    AmbiguousUserError,
    TrackNotFoundError,
    UserNotFoundError,
    get_available_track_ids,
    resolve_user_name,
    track_path,
)

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="track",
    help="Learning tracks: content catalogs, enrollment and progress.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug log events"),
) -> None:
    """Learning tracks: content catalogs, enrollment and progress."""
    configure_logging(verbose)


def _format_progress(value: float) -> str:
    decimals = load_app_config().display.progress_decimals
    return f"{value:.{decimals}f}%"


def _format_duration(value: int) -> str:
    return f"{value} {escape(load_app_config().display.duration_unit)}"


def _print_progress(track: Track, user_name: str, value: float) -> None:
    console.print(
        f"Progreso de {escape(user_name)} en {escape(track.name)}: "
        f"{_format_progress(value)}",
        soft_wrap=True,
    )


def _load_bundle_or_exit(track_id: str) -> TrackBundle:
    """Load a track file by ID, or exit with helpful error."""
    tracks_dir = get_tracks_dir()
    try:
        return load_track_file(track_path(track_id, tracks_dir))
    except TrackNotFoundError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        if candidates := get_available_track_ids(tracks_dir):
            console.print("\nFormaciones disponibles:")
            for c in candidates:
                console.print(f"  - {escape(c)}")
        raise typer.Exit(code=1)
    except TrackLoadError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _catalog_table(track: Track) -> Table:
    unit = load_app_config().display.duration_unit
    table = Table(show_header=True, header_style="bold")
    table.add_column("Contenido")
    table.add_column("Nivel")
    table.add_column(f"Duración ({escape(unit)})", justify="right")
    for item in sorted(track.items, key=lambda i: i.name):
        table.add_row(escape(item.name), item.level.value, str(item.duration))
    return table


@app.command()
def demo() -> None:
    """Run the built-in Kotlin track scenario.

    Enrolls two users, marks one item as studied, prints progress, then
    shows how a late enrollment and an empty track behave.
    """
    bundle = build_track(DEMO_TRACK)
    track = bundle.track
    hebert = bundle.users["Hebert"]
    joao = bundle.users["Joao"]

    console.print(f"[bold]{escape(track.name)}[/bold]")
    names = ", ".join(u.name for u in track.enrolled)
    console.print(f"  [dim]inscritos:[/dim] {escape(names)}")
    console.print(_catalog_table(track))
    console.print(f"  [dim]duración:[/dim] {_format_duration(track.total_duration)}")
    console.print(f"  [dim]nivel:[/dim]    {track.dominant_level.value}")
    console.print()

    studied = ", ".join(sorted(i.name for i in hebert.studied_items))
    console.print(f"{escape(hebert.name)} estudió: {escape(studied)}")
    _print_progress(track, hebert.name, track.progress_for(hebert))

    track.enroll(joao)
    _print_progress(track, joao.name, track.progress_for(joao))
    console.print()

    empty = Track("f2")
    try:
        empty.progress_for(joao)
    except NotEnrolledError as e:
        console.print(f"[yellow]⚠ {escape(str(e))}[/yellow]")

    empty.enroll(joao)
    try:
        empty.progress_for(joao)
    except EmptyCatalogError as e:
        console.print(f"[yellow]⚠ {escape(str(e))}[/yellow]")


@app.command(name="list")
def list_tracks() -> None:
    """List available track files."""
    tracks_dir = get_tracks_dir()
    track_ids = get_available_track_ids(tracks_dir)

    if not track_ids:
        console.print(f"[yellow]No hay formaciones en {escape(str(tracks_dir))}[/yellow]")
        return

    for track_id in track_ids:
        console.print(f"  - {escape(track_id)}")


@app.command()
def show(
    track_id: str = typer.Argument(..., help="Track ID (YAML file name without extension)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Show a track's catalog, duration, dominant level and enrolled users."""
    track = _load_bundle_or_exit(track_id).track

    if as_json:
        console.print_json(data=track.to_dict())
        return

    console.print(f"[bold]{escape(track.name)}[/bold]")
    console.print(_catalog_table(track))

    try:
        console.print(f"  [dim]duración:[/dim]  {_format_duration(track.total_duration)}")
        console.print(f"  [dim]nivel:[/dim]     {track.dominant_level.value}")
    except EmptyCatalogError as e:
        console.print(f"  [yellow]⚠ {escape(str(e))}[/yellow]")

    names = ", ".join(u.name for u in track.enrolled) or "-"
    console.print(f"  [dim]inscritos:[/dim] {escape(names)}")


@app.command()
def progress(
    track_id: str = typer.Argument(..., help="Track ID (YAML file name without extension)"),
    user: str = typer.Argument(..., help="User name or unique prefix"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of text"),
) -> None:
    """Show how much of a track a user has studied."""
    bundle = _load_bundle_or_exit(track_id)
    track = bundle.track

    try:
        user_name = resolve_user_name(user, list(bundle.users))
        value = track.progress_for(bundle.users[user_name])
    except (
        UserNotFoundError,
        AmbiguousUserError,
        NotEnrolledError,
        EmptyCatalogError,
    ) as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    logger.debug("progress_computed", track=track.name, user=user_name, progress=value)

    if as_json:
        console.print_json(
            data={"track": track.name, "user": user_name, "progress": value}
        )
        return

    _print_progress(track, user_name, value)


if __name__ == "__main__":
    app()
