import asyncio
import time
from typing import Iterable, Optional

import typer

from shot_runner.browser import BrowserSession, Launcher, get_launcher
from shot_runner.config import Config, get_config
from shot_runner.console import console
from shot_runner.errors import (
    CaptureFailed,
    CaptureTimeout,
    InvalidUrl,
    NavigationFailed,
    SessionFailed,
    ShotError,
    WriteFailed,
)
from shot_runner.screenshot import CaptureResult, Screenshot, is_valid_url


async def _release(session: BrowserSession, url: str) -> None:
    try:
        await session.close()
    except Exception as e:
        console.log(f"Failed to close browser for {url}: {e}")


async def _capture(
    screenshot: Screenshot, launcher: Launcher, create_dirs: bool
) -> None:
    url = screenshot.url
    try:
        session = await launcher(screenshot.viewport)
    except Exception as e:
        raise SessionFailed(url, e) from e

    try:
        start_time = time.monotonic()
        try:
            await session.goto(url)
        except Exception as e:
            raise NavigationFailed(url, e) from e
        load_time = time.monotonic() - start_time

        try:
            if create_dirs:
                screenshot.output.parent.mkdir(parents=True, exist_ok=True)
            await session.screenshot(screenshot.output, full_page=screenshot.full_page)
        except OSError as e:
            raise WriteFailed(url, e) from e
        except Exception as e:
            raise CaptureFailed(url, e) from e
        screenshot_time = time.monotonic() - start_time - load_time

        console.log(
            f"Captured {url} -> {screenshot.output} "
            f"(Load time: {load_time:.2f}s, Screenshot time: {screenshot_time:.2f}s)"
        )
    finally:
        await _release(session, url)


async def take_screenshot(
    screenshot: Screenshot,
    launcher: Launcher,
    timeout: float = 0,
    strict: bool = False,
    create_dirs: bool = True,
) -> CaptureResult:
    """Validate, launch, navigate, capture and close for a single url.

    Never raises for a per-url problem, the failure is returned on the
    result instead so the caller can carry on with the next url.
    """
    url = screenshot.url
    try:
        if not is_valid_url(url, strict=strict):
            raise InvalidUrl(url)
        capture = _capture(screenshot, launcher, create_dirs)
        if timeout:
            try:
                await asyncio.wait_for(capture, timeout)
            except asyncio.TimeoutError as e:
                raise CaptureTimeout(url, e) from e
        else:
            await capture
    except ShotError as e:
        console.log(str(e))
        return CaptureResult(url=url, error=e)
    return CaptureResult(url=url, output=screenshot.output)


async def take_screenshots(
    urls: Iterable[str],
    launcher: Optional[Launcher] = None,
    config: Optional[Config] = None,
) -> list[CaptureResult]:
    """Screenshot every url, reporting one line per url in input order.

    At most config.concurrency browsers are alive at once. With the default
    of one, each url is finished and its browser closed before the next
    one starts.
    """
    config = config or get_config()
    launcher = launcher or get_launcher(config)
    screenshots = [Screenshot.from_url(url, config) for url in urls]
    semaphore = asyncio.Semaphore(config.concurrency)

    async def sem_task(screenshot: Screenshot) -> CaptureResult:
        async with semaphore:
            return await take_screenshot(
                screenshot,
                launcher,
                timeout=config.capture_timeout,
                strict=config.strict_urls,
                create_dirs=config.create_output_dir,
            )

    if config.concurrency == 1:
        results = []
        for screenshot in screenshots:
            result = await sem_task(screenshot)
            typer.echo(result.report())
            results.append(result)
        return results

    tasks = [asyncio.ensure_future(sem_task(screenshot)) for screenshot in screenshots]
    results = []
    for task in tasks:
        result = await task
        typer.echo(result.report())
        results.append(result)
    return results
