import sys

from potd_wallpaper.main import main

sys.exit(main())
