"""
Source extraction for the Wikipedia Picture of the Day.

Downloads the Picture of the Day page and pulls the image URL, the image
title and the caption out of its markup.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, NamedTuple, Optional
from urllib.parse import urlsplit

import requests
from bs4 import BeautifulSoup

from potd_wallpaper.config import POTD_URL
from potd_wallpaper.errors import ExtractionError, FetchError

# Set up a session for page requests
SESSION = requests.Session()

IMAGE_SELECTOR = "#mp-tfp img"
TITLE_SELECTOR = "a.mw-file-description"
DESCRIPTION_SELECTOR = "#mp-tfp p"
NO_DESCRIPTION = "No description available."

SEPARATOR_RE = re.compile(r"[\s,]*")
URL_RE = re.compile(r"\S+")
DESCRIPTOR_RE = re.compile(r"[^,]*")

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PictureRecord:
    image_url: str
    title: str
    description: str


class ImageCandidate(NamedTuple):
    url: str
    descriptor: Optional[str] = None


CandidateImageSet = List[ImageCandidate]


def fetch_html(url=POTD_URL, session=None):
    """
    Returns the HTML of the given page
    """
    session = session or SESSION
    try:
        response = session.get(url)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Could not fetch {url}: {exc}") from exc
    return response.text


def parse_srcset(value: str) -> CandidateImageSet:
    """
    Split a srcset attribute into (url, descriptor) pairs, keeping source order.

    Commas inside a URL are kept: a URL runs to the next whitespace, and a
    comma only separates candidates when it ends a URL or follows the
    descriptor.
    """
    candidates = []
    pos = 0
    while True:
        pos = SEPARATOR_RE.match(value, pos).end()
        if pos >= len(value):
            break
        url = URL_RE.match(value, pos).group()
        pos += len(url)
        if url.endswith(","):
            candidates.append(ImageCandidate(url.rstrip(","), None))
            continue
        descriptor = DESCRIPTOR_RE.match(value, pos)
        pos = descriptor.end()
        candidates.append(ImageCandidate(url, descriptor.group().strip() or None))
    return candidates


def normalize_srcset(value: str) -> str:
    """
    Give the leading protocol-relative candidate an explicit https scheme.

    Only the first occurrence is rewritten; the remaining candidates stay
    protocol-relative.
    """
    if value.startswith("//"):
        return value.replace("//", "https://", 1)
    return value


def full_resolution_url(url: str) -> str:
    """
    Turn a protocol-relative thumbnail URL into the URL of the original file.

    //upload.wikimedia.org/wikipedia/commons/thumb/a/ab/Foo.jpg/640px-Foo.jpg
    becomes https://upload.wikimedia.org/wikipedia/commons/a/ab/Foo.jpg
    """
    if not url.startswith("//"):
        return url
    url = "https:" + url
    url = url.replace("/thumb", "", 1)
    return url[:url.rindex("/")]


def extract_picture(html: str) -> PictureRecord:
    """
    Returns the image url, title and description found in the page markup
    """
    soup = BeautifulSoup(html, "html.parser")

    img = soup.select_one(IMAGE_SELECTOR)
    if img is None or not img.get("srcset"):
        raise ExtractionError(f"No srcset found on {IMAGE_SELECTOR!r}, the page layout may have changed")

    candidates = parse_srcset(normalize_srcset(img["srcset"]))
    if not candidates:
        raise ExtractionError(f"Empty srcset on {IMAGE_SELECTOR!r}")

    # Candidates are listed smallest first, so the last one is the largest
    image_url = full_resolution_url(candidates[-1].url)
    parts = urlsplit(image_url)
    if not (parts.scheme and parts.netloc):
        raise ExtractionError(f"Image URL is not absolute: {image_url}")

    link = soup.select_one(TITLE_SELECTOR)
    title = link.get("title", "") if link is not None else ""

    paragraphs = soup.select(DESCRIPTION_SELECTOR)
    if paragraphs:
        description = "".join(p.get_text() for p in paragraphs)
    else:
        description = NO_DESCRIPTION

    return PictureRecord(image_url=image_url, title=title, description=description)


def fetch_featured_image(session=None) -> PictureRecord:
    """
    Returns the current Picture of the Day
    """
    html = fetch_html(POTD_URL, session=session)
    record = extract_picture(html)
    LOGGER.info("Successfully found POTD: %s", record.title or record.image_url)
    return record
