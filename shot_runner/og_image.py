"""Open Graph image urls.

The image service renders an html template with the title and a base image
and serves a screenshot of it as png. We only build the request url, the
service is hosted elsewhere.
"""

import html
import random
from typing import Optional
from urllib.parse import quote, quote_plus

from pydantic import BaseModel

from shot_runner.config import Config


class OgImage(BaseModel):
    title: str
    theme: str = "light"
    variant: str = "vercel-triangle-black"
    service_url: str = "https://og-image.vercel.app"
    base_image_dir: str = "https://assets.vercel.com/image/upload/front/assets/design/"
    font_size: str = "100px"
    markdown: bool = True

    @property
    def url(self) -> str:
        title = quote(self.title, safe="")
        images = quote_plus(f"{self.base_image_dir}{self.variant}.svg")
        return (
            f"{self.service_url.rstrip('/')}/{title}.png"
            f"?theme={quote_plus(self.theme)}"
            f"&md={int(self.markdown)}"
            f"&fontSize={quote_plus(self.font_size)}"
            f"&images={images}"
        )


def random_og_image(
    title: str,
    config: Config,
    rng: Optional[random.Random] = None,
    theme: Optional[str] = None,
    variant: Optional[str] = None,
) -> OgImage:
    """Build an OgImage, picking theme and variant at random unless given."""
    rng = rng or random
    return OgImage(
        title=title,
        theme=theme or rng.choice(config.og_themes),
        variant=variant or rng.choice(config.og_variants),
        service_url=config.og_service_url,
        base_image_dir=config.og_base_image_dir,
        font_size=config.og_font_size,
        markdown=config.og_markdown,
    )


def meta_tag(url: str) -> str:
    return f'<meta property="og:image" content="{html.escape(url, quote=True)}">'
