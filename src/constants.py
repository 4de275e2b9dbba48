"""
Global constants for Pet Gallery application.
Contains path configuration, remote API, display settings and timing constants.
"""

import os

# **************************************************************** #
#                       Build Info                                     #
# **************************************************************** #
# These are overwritten at build time by the packaging targets.
APP_VERSION = "dev"
BUILD_TARGET = "source"  # source, pygame, android

# **************************************************************** #
#                       Environment Detection                        #
# **************************************************************** #
DEV_MODE = os.getenv("DEV_MODE", "false").lower() == "true"

# Detect if running from a zip bundle (e.g., .pygame file)
_raw_script_dir = os.path.dirname(os.path.abspath(__file__))
if ".pygame" in _raw_script_dir or ".zip" in _raw_script_dir:
    # Running from zip - use the directory containing the zip file
    SCRIPT_DIR = os.path.dirname(
        _raw_script_dir.split(".pygame")[0].split(".zip")[0] + ".pygame"
    )
else:
    SCRIPT_DIR = _raw_script_dir

# **************************************************************** #
#                       Path Configuration                           #
# **************************************************************** #
if DEV_MODE:
    TEMP_LOG_DIR = os.path.join(SCRIPT_DIR, "..", "workdir")
    CONFIG_FILE = os.path.join(SCRIPT_DIR, "..", "workdir", "config.json")
else:
    TEMP_LOG_DIR = os.getenv("ANDROID_STORAGE", SCRIPT_DIR)
    CONFIG_FILE = os.path.join(TEMP_LOG_DIR, "config.json")

LOG_FILE = os.path.join(TEMP_LOG_DIR, "error.log")

# **************************************************************** #
#                       Remote API                                   #
# **************************************************************** #
API_BASE_URL = "https://eulerity-hackathon.appspot.com"
PETS_ENDPOINT = "/pets"
REQUEST_TIMEOUT = 10  # seconds
IMAGE_FILENAME_PREFIX = "Image_"
JPEG_QUALITY = 100

# **************************************************************** #
#                       Display Settings                             #
# **************************************************************** #
FPS = 30
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
FONT_SIZE = 24

# **************************************************************** #
#                       UI Dimensions                                #
# **************************************************************** #
HEADER_HEIGHT = 96
THUMBNAIL_SIZE = (160, 160)
LIST_THUMBNAIL_SIZE = (64, 64)
GRID_COLUMNS = 3
LIST_ITEM_HEIGHT = 80
TOAST_DURATION = 2500  # ms a save outcome stays on screen

# **************************************************************** #
#                       Web Companion                                #
# **************************************************************** #
WEB_COMPANION_PORT = 7655  # Port for the web companion server
