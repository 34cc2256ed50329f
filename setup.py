import sys

from setuptools import find_packages, setup

APP = ['wiki-wallpaper.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': True,
    'plist': {
        'LSUIElement': True,  # Makes the app run in background
        'CFBundleName': 'Wikipedia Wallpaper',
        'CFBundleDisplayName': 'Wikipedia Wallpaper',
        'CFBundleIdentifier': 'com.senthil.wikipediawallpaper',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0.0',
    },
    'packages': ['potd_wallpaper', 'PIL', 'requests', 'bs4', 'chevron', 'playwright'],
}

# The macOS app bundle is only built on request
app_kwargs = {}
if 'py2app' in sys.argv:
    app_kwargs = {
        'app': APP,
        'data_files': DATA_FILES,
        'options': {'py2app': OPTIONS},
        'setup_requires': ['py2app'],
    }

setup(
    name='wikipedia-potd-wallpaper',
    version='1.0.0',
    description='Sets the Wikipedia Picture of the Day, with its caption, as the desktop wallpaper',
    packages=find_packages(exclude=['tests']),
    python_requires='>=3.9',
    install_requires=[
        'requests',
        'beautifulsoup4',
        'chevron',
        'playwright',
        'Pillow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'wiki-wallpaper = potd_wallpaper.main:main',
        ],
    },
    **app_kwargs,
)
