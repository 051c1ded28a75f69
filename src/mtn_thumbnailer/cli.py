"""Console script for mtn_thumbnailer."""

import typer

from mtn_thumbnailer.probe.cli import check, info
from mtn_thumbnailer.thumbnail.cli import generate

app = typer.Typer()

app.command(name="generate")(generate)
app.command(name="info")(info)
app.command(name="check")(check)


@app.command()
def version():
    """Display version information."""
    typer.echo("mtn-thumbnailer v0.1.0")
    raise typer.Exit()


if __name__ == "__main__":
    app()
