"""
Setting the desktop background on macOS, GNOME and Windows.
"""

import logging
import subprocess
import sys
from pathlib import Path

from potd_wallpaper.errors import DesktopError

LOGGER = logging.getLogger(__name__)

SPI_SETDESKWALLPAPER = 20
SPIF_UPDATEINIFILE = 0x01
SPIF_SENDCHANGE = 0x02


def _osascript(script):
    return subprocess.run(['osascript', '-e', script], capture_output=True, text=True, check=False)


def _applescript_string(value):
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def _set_macos(image_path):
    quoted = _applescript_string(image_path)
    # This script sets the wallpaper on all displays
    script = f'''
    tell application "System Events"
        set desktopCount to count of desktops
        repeat with desktopNumber from 1 to desktopCount
            tell desktop desktopNumber
                set picture to "{quoted}"
            end tell
        end repeat
    end tell
    '''
    result = _osascript(script)
    if result.returncode == 0:
        LOGGER.info("Wallpaper set on all displays: %s", image_path)
        return

    LOGGER.warning("System Events method failed: %s", result.stderr.strip())

    # The Finder only reaches the primary display
    finder_script = f'''
    tell application "Finder"
        set desktop picture to POSIX file "{quoted}"
    end tell
    '''
    finder_result = _osascript(finder_script)
    if finder_result.returncode != 0:
        raise DesktopError(f"Finder method also failed: {finder_result.stderr.strip()}")
    LOGGER.info("Wallpaper set using Finder method (primary display only): %s", image_path)


def _set_gnome(image_path):
    uri = Path(image_path).as_uri()
    for key in ("picture-uri", "picture-uri-dark"):
        try:
            subprocess.run(
                ["gsettings", "set", "org.gnome.desktop.background", key, uri],
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as exc:
            raise DesktopError("gsettings is not available") from exc
        except subprocess.CalledProcessError as exc:
            # Older GNOME releases have no dark variant
            if key == "picture-uri-dark":
                LOGGER.debug("Skipping %s: %s", key, exc.stderr)
                continue
            raise DesktopError(f"gsettings failed: {exc.stderr.strip()}") from exc


def _set_windows(image_path):
    import ctypes

    ok = ctypes.windll.user32.SystemParametersInfoW(
        SPI_SETDESKWALLPAPER, 0, str(image_path), SPIF_UPDATEINIFILE | SPIF_SENDCHANGE
    )
    if not ok:
        raise DesktopError("SystemParametersInfoW could not set the wallpaper")


def set_desktop_wallpaper(image_path, platform=None):
    """Set the image at image_path as the desktop background."""
    image_path = Path(image_path)
    if not image_path.is_absolute():
        raise DesktopError(f"Wallpaper path must be absolute: {image_path}")

    platform = platform or sys.platform
    if platform == "darwin":
        _set_macos(image_path)
    elif platform.startswith("linux"):
        _set_gnome(image_path)
    elif platform == "win32":
        _set_windows(image_path)
    else:
        raise DesktopError(f"Setting the wallpaper is not supported on {platform}")
