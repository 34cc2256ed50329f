"""
Wikipedia Picture of the Day wallpaper

Fetches the Wikipedia Picture of the Day, renders the image together with
its title and caption into a wallpaper and sets it as the desktop background.
"""

from potd_wallpaper.config import POTD_URL, RenderConfig
from potd_wallpaper.extract import PictureRecord, fetch_featured_image
from potd_wallpaper.main import main, run
from potd_wallpaper.render import render_wallpaper

__version__ = "1.0.0"

__all__ = [
    "POTD_URL",
    "PictureRecord",
    "RenderConfig",
    "fetch_featured_image",
    "main",
    "render_wallpaper",
    "run",
]
