"""Find labeled images: every directory holding images is a label."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List

from votter import config
from votter.errors import ImagesFolderEmptyError, ScanError

logger = logging.getLogger(__name__)


def is_image(filename: str) -> bool:
    return Path(filename).suffix.lower() in config.IMAGE_EXTS


def list_images(directory: Path) -> List[str]:
    """Sorted basenames of the image files directly inside ``directory``."""
    directory = Path(directory)
    return sorted(p.name for p in directory.iterdir() if p.is_file() and is_image(p.name))


def find_images(root: Path) -> Dict[str, List[Path]]:
    """Map each label (directory basename) to its image paths, relative to ``root``.

    The whole tree is walked. A directory at any depth becomes a label when it
    directly contains images; directories sharing a basename are merged.
    Raises ``ImagesFolderEmptyError`` when no label directory holds an image.
    """
    root = Path(root)
    labels: Dict[str, List[Path]] = {}

    def _on_error(exc: OSError) -> None:
        raise ScanError(f"Cannot read '{exc.filename}': {exc.strerror}") from exc

    for dirpath, dirnames, _ in os.walk(root, onerror=_on_error):
        dirnames.sort()
        current = Path(dirpath)
        if current == root:
            continue
        try:
            images = list_images(current)
        except OSError as exc:
            raise ScanError(f"Cannot list images in '{current}': {exc}") from exc
        if not images:
            logger.debug("No images in %s", current)
            continue
        rel_dir = current.relative_to(root)
        labels.setdefault(current.name, []).extend(rel_dir / name for name in images)

    if not labels:
        raise ImagesFolderEmptyError(f"No images found in subdirectories of '{root}'")

    logger.debug("Found %d labels under %s", len(labels), root)
    return labels
