import typer

from shot_runner.cli.common import verbose_callback
from shot_runner.config import get_config

config_app = typer.Typer(help="inspect the resolved settings")


@config_app.callback()
def config(
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
):
    "configuration cli"


@config_app.command()
def show():
    "print the settings read from the environment and .env"
    config = get_config()
    console = config.console
    quiet, console.quiet = console.quiet, False
    try:
        console.print(config)
    finally:
        console.quiet = quiet
