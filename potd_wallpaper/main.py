"""
Fetch the Picture of the Day, render it and set it as the desktop wallpaper.

Each step runs only after the previous one has succeeded; the first failure
is logged and the run stops without touching the desktop background.
"""

import logging

from potd_wallpaper import desktop, extract, render
from potd_wallpaper.config import RenderConfig
from potd_wallpaper.errors import PotdError

LOGGER = logging.getLogger(__name__)


def run(config=None, session=None):
    config = config or RenderConfig()

    LOGGER.info("Fetching Wikipedia Picture of the Day...")
    record = extract.fetch_featured_image(session=session)
    LOGGER.info("Image URL: %s", record.image_url)
    LOGGER.info("Title: %s", record.title)

    LOGGER.info("Creating wallpaper with description...")
    image_path = render.render_wallpaper(record, config)

    LOGGER.info("Setting as desktop wallpaper...")
    desktop.set_desktop_wallpaper(image_path)

    LOGGER.info("Wallpaper created and set: %s", image_path)
    LOGGER.info("HTML file (for reference): %s", config.html_path)
    return image_path


def main():
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        run()
    except PotdError as exc:
        LOGGER.error("%s failed: %s", exc.stage, exc)
        return 1
    except Exception:  # pylint: disable=broad-except
        LOGGER.exception("An error occurred")
        return 1
    return 0
