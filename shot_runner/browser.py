"""Headless browser sessions.

A launcher is an async callable taking a Viewport and returning a fresh
BrowserSession. Every call starts its own browser process, nothing is
pooled or reused between urls, and the caller owns closing it.
"""

from pathlib import Path
from typing import Awaitable, Callable, Optional, Protocol

from shot_runner.console import console
from shot_runner.screenshot import Viewport


class BrowserSession(Protocol):
    async def goto(self, url: str) -> None: ...

    async def screenshot(self, path: Path, full_page: bool = True) -> None: ...

    async def close(self) -> None: ...


Launcher = Callable[[Viewport], Awaitable[BrowserSession]]


class PyppeteerSession:
    def __init__(self, browser, page):
        self.browser = browser
        self.page = page

    async def goto(self, url: str) -> None:
        # pyppeteer decides when navigation is complete
        await self.page.goto(url)

    async def screenshot(self, path: Path, full_page: bool = True) -> None:
        await self.page.screenshot(
            {"path": str(path), "fullPage": full_page, "type": "png"}
        )

    async def close(self) -> None:
        await self.browser.close()


class PyppeteerLauncher:
    def __init__(self, headless: bool = True, args: Optional[list[str]] = None):
        self.headless = headless
        self.args = list(args) if args is not None else ["--no-sandbox"]

    async def __call__(self, viewport: Viewport) -> PyppeteerSession:
        from pyppeteer import launch

        browser = await launch(args=self.args, headless=self.headless)
        try:
            page = await browser.newPage()
            await page.setViewport(
                {
                    "width": viewport.width,
                    "height": viewport.height,
                    "deviceScaleFactor": viewport.device_scale_factor,
                }
            )
        except BaseException:
            await browser.close()
            raise
        console.log(f"launched pyppeteer browser at {viewport}")
        return PyppeteerSession(browser, page)


class PlaywrightSession:
    def __init__(self, playwright, browser, page):
        self.playwright = playwright
        self.browser = browser
        self.page = page

    async def goto(self, url: str) -> None:
        await self.page.goto(url)

    async def screenshot(self, path: Path, full_page: bool = True) -> None:
        await self.page.screenshot(path=str(path), full_page=full_page, type="png")

    async def close(self) -> None:
        try:
            await self.browser.close()
        finally:
            await self.playwright.stop()


class PlaywrightLauncher:
    def __init__(self, headless: bool = True, args: Optional[list[str]] = None):
        self.headless = headless
        self.args = list(args) if args is not None else ["--no-sandbox"]

    async def __call__(self, viewport: Viewport) -> PlaywrightSession:
        from playwright.async_api import async_playwright

        playwright = await async_playwright().start()
        try:
            browser = await playwright.chromium.launch(
                headless=self.headless, args=self.args
            )
        except BaseException:
            await playwright.stop()
            raise
        try:
            page = await browser.new_page(
                viewport={"width": viewport.width, "height": viewport.height},
                device_scale_factor=viewport.device_scale_factor,
            )
        except BaseException:
            try:
                await browser.close()
            finally:
                await playwright.stop()
            raise
        console.log(f"launched playwright browser at {viewport}")
        return PlaywrightSession(playwright, browser, page)


LAUNCHERS = {
    "pyppeteer": PyppeteerLauncher,
    "playwright": PlaywrightLauncher,
}


def get_launcher(config) -> Launcher:
    """Build the launcher named by config.browser_backend."""
    try:
        launcher_cls = LAUNCHERS[config.browser_backend]
    except KeyError:
        raise ValueError(
            f"unknown browser backend {config.browser_backend!r}, "
            f"expected one of {', '.join(LAUNCHERS)}"
        )
    return launcher_cls(headless=config.headless, args=config.browser_args)
