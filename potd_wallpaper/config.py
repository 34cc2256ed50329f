"""Fixed settings for fetching and rendering the wallpaper."""

from dataclasses import dataclass
from pathlib import Path

POTD_URL = "https://en.wikipedia.org/wiki/Wikipedia:Picture_of_the_day"

PACKAGE_DIR = Path(__file__).resolve().parent
HTML_FILE = PACKAGE_DIR / "wallpaper.html"
IMG_FILE = PACKAGE_DIR / "potd.jpg"


@dataclass(frozen=True)
class RenderConfig:
    """Visual parameters of the wallpaper.

    ``width``/``height`` size the browser viewport that gets rasterized,
    while ``canvas_width``/``canvas_height`` size the page laid out by the
    stylesheet. The two are deliberately independent.
    """

    width: int = 2560
    height: int = 1440
    canvas_width: int = 1920
    canvas_height: int = 1080
    bg_color: str = "black"
    text_color: str = "#ffffffa8"
    title_font_size: int = 46
    desc_font_size: int = 18
    jpeg_quality: int = 95
    html_path: Path = HTML_FILE
    image_path: Path = IMG_FILE

    def css_params(self) -> dict:
        return {
            "canvas_width": self.canvas_width,
            "canvas_height": self.canvas_height,
            "bg_color": self.bg_color,
            "text_color": self.text_color,
            "title_font_size": self.title_font_size,
            "desc_font_size": self.desc_font_size,
        }
