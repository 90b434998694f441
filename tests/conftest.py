import asyncio
from pathlib import Path

import pytest

from shot_runner.config import Config, get_config


class FakeSession:
    def __init__(self, launcher, viewport):
        self.launcher = launcher
        self.viewport = viewport
        self.visited = []
        self.closed = False

    async def goto(self, url):
        self.visited.append(url)
        await asyncio.sleep(0)
        if url in self.launcher.fail_goto:
            raise RuntimeError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        if url in self.launcher.hang:
            await self.launcher.forever()

    async def screenshot(self, path, full_page=True):
        if self.visited[-1] in self.launcher.fail_screenshot:
            raise RuntimeError("Protocol error (Page.captureScreenshot)")
        self.launcher.writes.append((Path(path), full_page))
        Path(path).write_bytes(f"png of {self.visited[-1]}".encode())

    async def close(self):
        self.closed = True
        self.launcher.open_sessions -= 1
        if self.launcher.fail_close:
            raise RuntimeError("browser already gone")


class FakeLauncher:
    """Stands in for pyppeteer, records every session it hands out."""

    def __init__(
        self,
        fail_launch=False,
        fail_goto=(),
        fail_screenshot=(),
        hang=(),
        fail_close=False,
    ):
        self.fail_launch = fail_launch
        self.fail_goto = set(fail_goto)
        self.fail_screenshot = set(fail_screenshot)
        self.hang = set(hang)
        self.fail_close = fail_close
        self.sessions = []
        self.writes = []
        self.open_sessions = 0
        self.max_open_sessions = 0

    async def forever(self):
        await asyncio.Event().wait()

    async def __call__(self, viewport):
        if self.fail_launch:
            raise OSError("Browser closed unexpectedly")
        session = FakeSession(self, viewport)
        self.sessions.append(session)
        self.open_sessions += 1
        self.max_open_sessions = max(self.max_open_sessions, self.open_sessions)
        return session


@pytest.fixture(autouse=True)
def clear_config_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(workdir):
    return Config(output_dir=Path("screenshots"), capture_timeout=0)


@pytest.fixture
def launcher():
    return FakeLauncher()
