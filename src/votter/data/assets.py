"""Build VoTT assets from labeled image files.

Only the image header is read: ``PIL.Image.open`` is lazy and reports the
size without decoding pixel data.
"""
from __future__ import annotations

import logging
import uuid
import warnings
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from PIL import Image, UnidentifiedImageError
from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from votter.data.schema import Asset, Size
from votter.errors import AssetBuildError

logger = logging.getLogger(__name__)


def read_image_size(path: Path) -> Tuple[int, int]:
    # header only, so the decompression bomb limit does not apply
    max_pixels = Image.MAX_IMAGE_PIXELS
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", Image.DecompressionBombWarning)
        Image.MAX_IMAGE_PIXELS = None
        try:
            with Image.open(path) as im:
                width, height = im.size
        finally:
            Image.MAX_IMAGE_PIXELS = max_pixels
    return int(width), int(height)


def file_uri(path: Path) -> str:
    """``file:`` URI of the absolute path, always with forward slashes."""
    return "file:" + Path(path).absolute().as_posix()


def build_asset(root: Path, label: str, relative_path: Path) -> Asset:
    image_path = Path(root).absolute() / relative_path
    try:
        width, height = read_image_size(image_path)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise AssetBuildError(f"Cannot read image size of '{image_path}': {exc}") from exc

    return Asset(
        format=image_path.suffix.lower().lstrip("."),
        id=str(uuid.uuid4()),
        name=image_path.name,
        path=file_uri(image_path),
        size=Size(width=width, height=height),
        label=label,
    )


def build_assets(root: Path, labels: Dict[str, Sequence[Path]], progress: bool = True) -> List[Asset]:
    """Build one asset per image, labels first then images in listed order.

    The first image that cannot be opened aborts the whole build.
    """
    pairs = [(label, rel) for label, images in labels.items() for rel in images]
    assets: List[Asset] = []
    with logging_redirect_tqdm():
        for label, rel in tqdm(pairs, desc="Reading images", unit="img", disable=not progress):
            asset = build_asset(root, label, rel)
            logger.debug("%s: %dx%d (%s)", asset.name, asset.size.width, asset.size.height, label)
            assets.append(asset)
    return assets
