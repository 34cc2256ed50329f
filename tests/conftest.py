import pytest
import requests

from potd_wallpaper.config import RenderConfig

SUNSET_PAGE = """
<html>
  <body>
    <div id="mp-tfp">
      <a href="/wiki/File:Sunset.jpg" class="mw-file-description" title="Sunset over the bay">
        <img src="https://upload.example.org/a/320px-Sunset.jpg"
             srcset="https://upload.example.org/a/320px-Sunset.jpg 1x, https://upload.example.org/a/480px-Sunset.jpg 1.5x, https://upload.example.org/a/640px-Sunset.jpg 2x">
      </a>
      <p>A view of...</p>
    </div>
  </body>
</html>
"""


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class FakeSession:
    def __init__(self, text="", status_code=200, error=None):
        self.text = text
        self.status_code = status_code
        self.error = error
        self.urls = []

    def get(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.text, self.status_code)


@pytest.fixture
def sunset_page():
    return SUNSET_PAGE


@pytest.fixture
def config(tmp_path):
    return RenderConfig(html_path=tmp_path / "wallpaper.html", image_path=tmp_path / "potd.jpg")
