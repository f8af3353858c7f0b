"""Process-wide constants for votter.

Exit codes, default paths and the fixed values of the VoTT 2.2.0 project schema.
"""
from __future__ import annotations

VERSION = "1.0.0"

DEFAULT_IMAGES_PATH = "."
DEFAULT_ANNOTATIONS_FILENAME = "vott-coco-annotations.json"

EXIT_SUCCESS = 0
EXIT_IMAGES_FOLDER_NOT_FOUND = 1
EXIT_IMAGES_FOLDER_EMPTY = 2
EXIT_ANNOTATIONS_FOLDER_NOT_FOUND = 3

IMAGE_EXTS = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}

# ---------------------------------------------------------------------------
#  VoTT schema constants
# ---------------------------------------------------------------------------
VOTT_VERSION = "2.2.0"
DEFAULT_TAG_COLOR = "#ff0000"  # red
REGION_TYPE = "RECTANGLE"
ASSET_STATE = 0
ASSET_TYPE = 0
FRAME_EXTRACTION_RATE = 0
AUTO_DETECT = False
PREDICT_TAG = True
MODEL_PATH_TYPE = "coco"
