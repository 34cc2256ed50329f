#!/usr/bin/env python3
"""
Wikipedia Wallpaper of the Day

This script:
1. Downloads the Wikipedia Picture of the Day page
2. Extracts the image, its title and its description
3. Renders them into a wallpaper through a headless browser
4. Sets the new image as the desktop wallpaper
"""

import sys

from potd_wallpaper.main import main

if __name__ == "__main__":
    sys.exit(main())
