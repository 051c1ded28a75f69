"""CLI commands for info and check."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from mtn_thumbnailer.probe.main import check_availability, get_version, get_video_metadata
from mtn_thumbnailer.utils.cli import EXIT_FAILURE, cli_error_handler, setup_logging
from mtn_thumbnailer.utils.dependencies import locate_mtn

console = Console()


@cli_error_handler
def info(
    video_file: str = typer.Argument(..., help="Path to the video file"),
    mtn_path: Optional[str] = typer.Option(None, "--mtn-path", envvar="MTN_PATH", help="Path to the mtn binary (default: auto-detect)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Print video metadata reported by mtn as JSON.

    Fields mtn doesn't report are left out.
    """
    setup_logging(verbose)

    if not Path(video_file).exists():
        raise FileNotFoundError(f"Input file does not exist: {video_file}")

    metadata = get_video_metadata(locate_mtn(mtn_path), video_file)
    console.print_json(metadata.model_dump_json(exclude_none=True))


@cli_error_handler
def check(
    mtn_path: Optional[str] = typer.Option(None, "--mtn-path", envvar="MTN_PATH", help="Path to the mtn binary (default: auto-detect)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Check that mtn can be run and show its version.
    """
    setup_logging(verbose)
    path = locate_mtn(mtn_path)

    if not check_availability(path):
        console.print(f"[bold red]mtn not available:[/bold red] {path}")
        raise typer.Exit(code=EXIT_FAILURE)

    console.print(f"[bold green]mtn available:[/bold green] {path} (version {get_version(path)})")
