"""Shared CLI error handling and logging setup."""

import functools
import logging
from collections.abc import Callable

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

EXIT_FAILURE = 1
EXIT_USER_ERROR = 50
EXIT_INTERRUPT = 130

stderr_console = Console(stderr=True)


def setup_logging(verbose: bool = False):
    """Configure logging with Rich handler."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=stderr_console, rich_tracebacks=True, show_time=True)],
    )


def cli_error_handler(func: Callable) -> Callable:
    """Wrap a CLI command to catch common exceptions with consistent exit codes.

    Module-specific exceptions should be caught inside the wrapped function
    before they bubble up to this handler.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (typer.Exit, SystemExit):
            raise
        except KeyboardInterrupt:
            stderr_console.print("\n[bold yellow]Interrupted by user[/bold yellow]")
            raise typer.Exit(code=EXIT_INTERRUPT)
        except ValidationError as e:
            stderr_console.print(f"[bold red]Invalid options:[/bold red] {e}")
            raise typer.Exit(code=EXIT_USER_ERROR)
        except (FileNotFoundError, FileExistsError, ValueError, RuntimeError) as e:
            stderr_console.print(f"[bold red]Error:[/bold red] {e}")
            raise typer.Exit(code=EXIT_USER_ERROR)
        except Exception as e:
            stderr_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
            raise typer.Exit(code=EXIT_USER_ERROR)

    return wrapper
