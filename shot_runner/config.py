from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings
from rich.console import Console

from shot_runner.console import console
from shot_runner.screenshot import Viewport


class Config(BaseSettings):
    env: str = "dev"

    # Output
    output_dir: Path = Field(Path("screenshots"))
    create_output_dir: bool = True

    # Viewport, shared by every capture in a run
    viewport_width: int = Field(1920, gt=0)
    viewport_height: int = Field(1080, gt=0)
    device_scale_factor: float = Field(1, gt=0)
    full_page: bool = True

    # Browser
    browser_backend: Literal["pyppeteer", "playwright"] = "pyppeteer"
    headless: bool = True
    browser_args: list[str] = Field(default_factory=lambda: ["--no-sandbox"])
    concurrency: int = Field(1, ge=1)
    capture_timeout: float = Field(60.0, ge=0)
    strict_urls: bool = False

    # og:image service
    og_service_url: str = "https://og-image.vercel.app"
    og_base_image_dir: str = (
        "https://assets.vercel.com/image/upload/front/assets/design/"
    )
    og_themes: list[str] = Field(default_factory=lambda: ["light", "dark"])
    og_variants: list[str] = Field(
        default_factory=lambda: ["vercel-triangle-black", "vercel-triangle-white"]
    )
    og_font_size: str = "100px"
    og_markdown: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "allow"

    @property
    def viewport(self) -> Viewport:
        return Viewport(
            width=self.viewport_width,
            height=self.viewport_height,
            device_scale_factor=self.device_scale_factor,
        )

    @property
    def console(self) -> Console:
        return console


@lru_cache()
def get_config() -> Config:
    """Get cached config instance."""

    config = Config()
    config.console.log(config)
    return config
