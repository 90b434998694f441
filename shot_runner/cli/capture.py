import asyncio
from pathlib import Path
from typing import Optional

import typer

from shot_runner.browser import get_launcher
from shot_runner.cli.common import verbose_callback
from shot_runner.config import get_config
from shot_runner.console import console
from shot_runner.runner import take_screenshots


def capture(
    urls: list[str] = typer.Argument(..., help="urls to screenshot"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="directory to write screenshots to"
    ),
    width: Optional[int] = typer.Option(None, min=1, help="viewport width"),
    height: Optional[int] = typer.Option(None, min=1, help="viewport height"),
    scale: Optional[float] = typer.Option(None, min=0.1, help="device scale factor"),
    full_page: Optional[bool] = typer.Option(
        None, "--full-page/--viewport-only", help="capture the whole page"
    ),
    concurrency: Optional[int] = typer.Option(
        None, min=1, help="number of browsers running at once"
    ),
    timeout: Optional[float] = typer.Option(
        None, min=0, help="seconds allowed per url, 0 waits forever"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--loose", help="parse urls instead of looking for https://"
    ),
    backend: Optional[str] = typer.Option(None, help="pyppeteer or playwright"),
    verbose: bool = typer.Option(
        False,
        callback=verbose_callback,
        help="show the log messages",
    ),
):
    """
    Takes a list of URLs and captures screenshots for each one.
    Screenshots are saved in the 'output' directory.
    """
    overrides = {
        "output_dir": output,
        "viewport_width": width,
        "viewport_height": height,
        "device_scale_factor": scale,
        "full_page": full_page,
        "concurrency": concurrency,
        "capture_timeout": timeout,
        "strict_urls": strict,
        "browser_backend": backend,
    }
    config = get_config().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    console.log(f"capturing {len(urls)} urls at {config.viewport}")

    try:
        launcher = get_launcher(config)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    results = asyncio.run(take_screenshots(urls, launcher=launcher, config=config))

    failed = [result for result in results if not result.ok]
    if failed:
        console.log(f"{len(failed)} of {len(results)} screenshots failed")
        raise typer.Exit(code=1)
