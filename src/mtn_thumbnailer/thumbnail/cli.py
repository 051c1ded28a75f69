"""CLI command for generate."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from mtn_thumbnailer.models.options import ThumbnailOptions
from mtn_thumbnailer.models.results import ThumbnailProgress
from mtn_thumbnailer.thumbnail.main import MtnThumbnailer
from mtn_thumbnailer.utils.cli import EXIT_FAILURE, cli_error_handler, setup_logging, stderr_console

console = Console()


def load_options(options_file: Optional[str], overrides: dict) -> ThumbnailOptions:
    """Merge options from a JSON file with the ones given on the command line.

    Command-line values win. Overrides that are None were not given.
    """
    data = {}
    if options_file is not None:
        path = Path(options_file)
        if not path.exists():
            raise FileNotFoundError(f"Options file does not exist: {options_file}")
        data = ThumbnailOptions.model_validate_json(path.read_text()).model_dump(exclude_none=True)

    data.update({key: value for key, value in overrides.items() if value is not None})
    return ThumbnailOptions.model_validate(data)


@cli_error_handler
def generate(
    video_files: List[str] = typer.Argument(..., help="Video files to generate contact sheets for"),
    output_dir: Optional[str] = typer.Option(None, "--output-dir", "-O", help="Output directory (default: next to the video)"),
    output_suffix: Optional[str] = typer.Option(None, "--suffix", "-o", help="Output suffix including extension (default: _s.jpg)"),
    columns: Optional[int] = typer.Option(None, "--columns", "-c", help="Number of columns"),
    rows: Optional[int] = typer.Option(None, "--rows", "-r", help="Number of rows (0 = auto)"),
    step: Optional[int] = typer.Option(None, "--step", "-s", help="Seconds between shots"),
    min_height: Optional[int] = typer.Option(None, "--min-height", help="Minimum shot height in pixels"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Output image width (0 = columns * movie width)"),
    gap: Optional[int] = typer.Option(None, "--gap", "-g", help="Gap between shots in pixels"),
    jpeg_quality: Optional[int] = typer.Option(None, "--jpeg-quality", "-j", help="JPEG quality (1-100)"),
    skip_beginning: Optional[float] = typer.Option(None, "--skip-beginning", "-B", help="Seconds to skip at the beginning"),
    skip_end: Optional[float] = typer.Option(None, "--skip-end", "-E", help="Seconds to skip at the end"),
    info_suffix: Optional[str] = typer.Option(None, "--info-suffix", "-N", help="Write an info text file with this suffix"),
    no_info: bool = typer.Option(False, "--no-info", help="Don't print info text on the image"),
    no_timestamp: bool = typer.Option(False, "--no-timestamp", help="Don't print timestamps on the shots"),
    cover: bool = typer.Option(False, "--cover", help="Extract album art"),
    options_file: Optional[str] = typer.Option(None, "--options-file", help="JSON file with mtn options (command-line options win)"),
    mtn_path: Optional[str] = typer.Option(None, "--mtn-path", envvar="MTN_PATH", help="Path to the mtn binary (default: auto-detect)"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Kill mtn after this many seconds (default: no limit)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """
    Generate contact sheets for one or more videos with mtn.

    Videos are processed one after the other. A failing video doesn't stop
    the others; the command exits with 1 if any of them failed.
    """
    setup_logging(verbose)
    logger = logging.getLogger(__name__)

    options = load_options(options_file, {
        "output_dir": output_dir,
        "output_suffix": output_suffix,
        "columns": columns,
        "rows": rows,
        "step": step,
        "min_height": min_height,
        "width": width,
        "gap": gap,
        "jpeg_quality": jpeg_quality,
        "skip_beginning": skip_beginning,
        "skip_end": skip_end,
        "info_suffix": info_suffix,
        "show_info": False if no_info else None,
        "show_timestamp": False if no_timestamp else None,
        "extract_cover": True if cover else None,
    })

    thumbnailer = MtnThumbnailer(mtn_path, timeout=timeout)
    logger.debug(f"Using mtn at: {thumbnailer.mtn_path}")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=stderr_console,
        transient=True,
    ) as progress:
        task = progress.add_task("Starting...", total=None)

        def on_progress(video_file: str, event: ThumbnailProgress) -> None:
            name = Path(video_file).name
            if event.current_time is not None:
                description = f"[cyan]{name}[/cyan] [dim]{event.current_time:.1f}s[/dim]"
            else:
                description = f"[cyan]{name}[/cyan] shot [yellow]{event.current_shot}[/yellow]"
            progress.update(task, description=description)

        results = thumbnailer.generate_thumbnails(video_files, options, on_progress)

    failed = 0
    for video_file, result in zip(video_files, results):
        if result.success:
            console.print(
                f"[bold green]✓[/bold green] {escape(video_file)} → {escape(result.output_path)} [dim]({result.execution_time:.2f}s)[/dim]",
                soft_wrap=True,
            )
        else:
            failed += 1
            console.print(f"[bold red]✗[/bold red] {escape(video_file)}: {escape(result.error or '')}", soft_wrap=True)
            if verbose and result.output:
                console.print(escape(result.output.strip()), style="dim")

    if len(results) > 1:
        console.print(f"\nTotal: {len(results)}, succeeded: {len(results) - failed}, failed: {failed}")

    if failed:
        raise typer.Exit(code=EXIT_FAILURE)
