import typer

from shot_runner.cli.capture import capture
from shot_runner.cli.common import verbose_callback
from shot_runner.cli.config import config_app
from shot_runner.cli.og import og

app = typer.Typer(
    name="shot-runner",
    help="Screenshot web pages with a headless browser.",
)
app.add_typer(config_app, name="config")
app.command()(capture)
app.command()(og)


def version_callback(value: bool) -> None:
    """Callback function to print the version of the shot-runner package.

    Args:
        value (bool): Boolean value to determine if the version should be printed.

    Raises:
        typer.Exit: If the value is True, the version will be printed and the program will exit.

    Example:
        version_callback(True)
    """
    if value:
        from shot_runner.__about__ import __version__

        typer.echo(f"{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
) -> None:
    return


if __name__ == "__main__":
    app()
