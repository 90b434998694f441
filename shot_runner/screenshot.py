from pathlib import Path
from typing import TYPE_CHECKING, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from shot_runner.errors import ShotError

if TYPE_CHECKING:
    from shot_runner.config import Config

SCHEME_MARKER = "https://"


def is_valid_url(url: str, strict: bool = False) -> bool:
    """Check that url is something we should try to screenshot.

    The default check only looks for "https://" anywhere in the string, so
    "see https://x" passes and "http://example.com" does not. With strict
    the url is parsed and must have an https scheme and a host.
    """
    if not strict:
        return SCHEME_MARKER in url
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme == "https" and bool(parsed.hostname)


def output_path(url: str, output_dir: Path) -> Path:
    """Path the screenshot of url is written to.

    Only the first "https://" is stripped, anything else in the url
    (including "/") is kept, so paths on a site end up in subdirectories.
    """
    return Path(output_dir) / f"{url.replace(SCHEME_MARKER, '', 1)}.png"


class Viewport(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(1920, gt=0)
    height: int = Field(1080, gt=0)
    device_scale_factor: float = Field(1, gt=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}@{self.device_scale_factor:g}"


class Screenshot(BaseModel):
    """A single capture target."""

    model_config = ConfigDict(frozen=True)

    url: str
    output: Path
    viewport: Viewport = Field(default_factory=Viewport)
    full_page: bool = True

    @classmethod
    def from_url(cls, url: str, config: "Config") -> "Screenshot":
        return cls(
            url=url,
            output=output_path(url, config.output_dir),
            viewport=config.viewport,
            full_page=config.full_page,
        )


class CaptureResult(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str
    output: Optional[Path] = None
    error: Optional[ShotError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def report(self) -> str:
        if self.ok:
            return f"✅ {self.url}"
        return f"❌ {self.url}"
