"""
Wallpaper rendering.

The picture, its title and its caption are substituted into an HTML page,
which a headless browser then rasterizes into the wallpaper image.
"""

import io
import logging
from pathlib import Path

import chevron
from chevron.tokenizer import ChevronError
from PIL import Image
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from potd_wallpaper.config import RenderConfig
from potd_wallpaper.errors import RenderError, TemplateError
from potd_wallpaper.extract import PictureRecord

LOGGER = logging.getLogger(__name__)

CSS_TEMPLATE = """
body {
    margin: 0;
    position: relative;
    width: {{canvas_width}}px;
    height: {{canvas_height}}px;
    background-color: {{bg_color}};
    color: {{text_color}};
    font-family: Helvetica;
}
.img {
    object-fit: contain;
    width: 100%;
    height: 100%;
}

.bg-img {
    position: absolute;
    height: {{canvas_height}}px;
    z-index: -1;
    filter: blur(300px);
    max-width: initial;
    max-height: initial;
    width: {{canvas_width}}px;
    opacity: 0.7;
}
.desc {
    position: absolute;
    bottom: 0;
    text-align: center;
    background-color: #000000a8;
    width: {{canvas_width}}px;
}
h1 {
    font-size: {{title_font_size}}px;
    margin: 0;
}
p {
    font-size: {{desc_font_size}}px;
    margin: 0;
}
"""

HTML_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Wikipedia Picture of the Day</title>
    <style>
        {{{css}}}
    </style>
</head>
<body class="container">
        <img class="bg-img" src="{{src}}" alt="Background Image">
        <img class="img" src="{{src}}" alt="{{title}}">
        <div class="desc">
            <h1>{{title}}</h1>
            <p>{{description}}</p>
        </div>
</body>
</html>
"""


def _compile(template: str, data: dict) -> str:
    try:
        return chevron.render(template, data)
    except ChevronError as exc:
        raise TemplateError(f"Could not compile template: {exc}") from exc


def build_css(config: RenderConfig) -> str:
    return _compile(CSS_TEMPLATE, config.css_params())


def build_html(record: PictureRecord, config: RenderConfig) -> str:
    """Returns the wallpaper page for the given picture."""
    css = build_css(config)
    return _compile(
        HTML_TEMPLATE,
        {
            "css": css,
            "src": record.image_url,
            "title": record.title,
            "description": record.description,
        },
    )


def rasterize(html: str, output_path: Path, width: int, height: int, quality: int = 95) -> Path:
    """
    Screenshot the HTML in headless Chromium at width x height and save it as JPEG.
    """
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(headless=True)
            try:
                page = browser.new_page(viewport={"width": width, "height": height})
                page.set_content(html, wait_until="networkidle")
                png = page.screenshot(type="png")
            finally:
                browser.close()
        image = Image.open(io.BytesIO(png)).convert("RGB")
        image.save(output_path, "JPEG", quality=quality)
    except (PlaywrightError, OSError) as exc:
        raise RenderError(f"Could not rasterize wallpaper to {output_path}: {exc}") from exc
    return output_path


def render_wallpaper(record: PictureRecord, config: RenderConfig) -> Path:
    """
    Write the wallpaper HTML and rasterize it, returning the image path.

    Both output files are overwritten on every run.
    """
    html = build_html(record, config)

    try:
        config.html_path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise RenderError(f"Could not write {config.html_path}: {exc}") from exc
    LOGGER.info("Wallpaper HTML file created: %s", config.html_path)

    return rasterize(html, config.image_path, config.width, config.height, config.jpeg_quality)
