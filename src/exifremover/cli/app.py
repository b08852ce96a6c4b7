"""Main Typer CLI application for exifremover."""

from pathlib import Path
from typing import Optional

import typer

from exifremover import __app_name__, __version__
from exifremover.cli.dashboard import Dashboard
from exifremover.config.settings import Settings, get_settings
from exifremover.errors import ExifRemoverError
from exifremover.utils.logging import get_console, log_error, log_warning

# Initialize console and app
console = get_console()
app = typer.Typer(
    name=__app_name__,
    help="Remove EXIF data from a single image or every image in a folder.",
    add_completion=False,
)


@app.command(add_help_option=False)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version."),
    help_: bool = typer.Option(False, "--help", "-h", help="Print help message."),
    show_exif: Optional[Path] = typer.Option(
        None, "--show-exif", "-s", metavar="FILENAME", help="Show EXIF data of an image."
    ),
    delete_exif: Optional[Path] = typer.Option(
        None,
        "--delete-exif", "-d",
        metavar="FILENAME/FOLDER",
        help="Delete all EXIF data of an image, or of every image in a folder.",
    ),
    dest: Optional[Path] = typer.Option(
        None,
        "--dest",
        metavar="FILENAME/FOLDER",
        help="Save the stripped image(s) here. Defaults to overwriting a single file, "
        "or to a 'temp' subfolder when deleting from a folder.",
    ),
    apply_orientation: bool = typer.Option(
        False,
        "--apply-orientation",
        help="Rotate pixels according to the EXIF orientation before stripping it.",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Remove EXIF data from images.

    Examples:
        exifremover -s photo.jpg
        exifremover -d photo.jpg --dest clean.jpg
        exifremover -d ./photos/ --dest ./clean/
    """
    settings = get_settings()
    if apply_orientation:
        settings = settings.model_copy(update={"apply_orientation": True})

    dashboard = Dashboard(console)
    if banner and settings.show_banner:
        dashboard.show_banner()

    if version:
        console.print(f"[bold cyan]{__app_name__}[/] version [green]{__version__}[/]")
    if help_ or not (version or show_exif or delete_exif):
        # The Rich formatter prints the help itself and returns ""
        help_text = ctx.get_help()
        if help_text:
            typer.echo(help_text)
    if dest is not None and delete_exif is None:
        log_warning("--dest is only used together with --delete-exif")

    failed = False
    try:
        if show_exif is not None:
            _show_exif(show_exif, settings, dashboard)
        if delete_exif is not None:
            failed = _delete_exif(delete_exif, dest, settings, dashboard)
    except ExifRemoverError as e:
        log_error(str(e))
        raise typer.Exit(1)

    if failed:
        raise typer.Exit(1)


def _show_exif(path: Path, settings: Settings, dashboard: Dashboard) -> None:
    """Print every EXIF tag found in an image."""
    from exifremover.core.paths import classify
    from exifremover.core.stripper import MetadataStripper

    source = classify(path)
    report = MetadataStripper(settings).read_metadata(source.path)
    dashboard.show_metadata(report)


def _delete_exif(
    path: Path,
    dest: Path | None,
    settings: Settings,
    dashboard: Dashboard,
) -> bool:
    """Remove EXIF data from a single image or all images in a folder.

    A folder is written to ``dest``, or to a temp subfolder of itself when no
    distinct destination is given. A single image is written to ``dest`` or,
    without one, overwritten in place.

    Returns:
        True if any file in a folder could not be processed.
    """
    from exifremover.core.batch import BatchRunner
    from exifremover.core.paths import classify, resolve_destination
    from exifremover.core.stripper import MetadataStripper

    stripper = MetadataStripper(settings)
    source = classify(path)
    target = resolve_destination(source, dest, temp_dir_name=settings.temp_dir_name)

    if source.is_dir:
        runner = BatchRunner(console, stripper, error_console=dashboard.error_console)
        batch = runner.run(source.path, target.path)
        return bool(batch.failed)

    result = stripper.strip_and_save(source.path, target.path)
    dashboard.show_strip_result(result)
    return False


if __name__ == "__main__":
    app()
