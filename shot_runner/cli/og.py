from typing import Optional

import typer

from shot_runner.cli.common import verbose_callback
from shot_runner.config import get_config
from shot_runner.og_image import meta_tag, random_og_image


def og(
    title: str = typer.Argument(..., help="title rendered on the image"),
    theme: Optional[str] = typer.Option(None, help="light or dark, random if unset"),
    variant: Optional[str] = typer.Option(
        None, help="base image name, random if unset"
    ),
    meta: bool = typer.Option(False, "--meta", help="print an og:image meta tag"),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
):
    "print a social share image url for TITLE"
    image = random_og_image(title, get_config(), theme=theme, variant=variant)
    typer.echo(meta_tag(image.url) if meta else image.url)
