"""Command-line interface for votter.

Turns a folder of images labeled by directory name into a VoTT project file:

    votter [pathToImages] [vott-coco-annotations.json]

Each step raises a ``VotterError``; ``main`` alone maps it to an exit code.
"""
from __future__ import annotations

import argparse
import logging
import pathlib
import re
import sys
from typing import Optional, Tuple

from votter import config
from votter.data.assets import build_assets
from votter.data.scan import find_images
from votter.errors import (
    AnnotationsFolderNotFoundError,
    ImagesFolderNotFoundError,
    VotterError,
)
from votter.export.vott import write_vott_json

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _color_type(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise argparse.ArgumentTypeError(f"invalid color '{value}', expected #rrggbb")
    return value.lower()


def setup_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, handlers=[handler], force=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="votter",
        description="Generate VoTT annotations from a folder of images labeled by directory name.",
    )
    parser.add_argument("-v", "--version", action="version", version=config.VERSION)
    parser.add_argument(
        "images",
        nargs="?",
        default=config.DEFAULT_IMAGES_PATH,
        help="Folder with one subfolder of images per label (default: current directory)",
    )
    parser.add_argument(
        "annotations",
        nargs="?",
        default=None,
        help=f"Output VoTT JSON file (default: ./{config.DEFAULT_ANNOTATIONS_FILENAME})",
    )
    parser.add_argument(
        "--color",
        type=_color_type,
        default=config.DEFAULT_TAG_COLOR,
        help=f"Tag color for every label (default: {config.DEFAULT_TAG_COLOR})",
    )
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_paths(images: str, annotations: Optional[str] = None) -> Tuple[pathlib.Path, pathlib.Path]:
    """Absolute (images, annotations) paths, validated before any image is read."""
    images_path = pathlib.Path(images).expanduser().absolute()
    if annotations is None:
        annotations_path = pathlib.Path.cwd() / config.DEFAULT_ANNOTATIONS_FILENAME
    else:
        annotations_path = pathlib.Path(annotations).expanduser().absolute()

    if not images_path.is_dir():
        raise ImagesFolderNotFoundError(f"'{images}' is not an existing directory")
    if not annotations_path.parent.is_dir():
        raise AnnotationsFolderNotFoundError(f"Cannot write annotations to directory '{annotations_path.parent}'")
    return images_path, annotations_path


def run(args: argparse.Namespace) -> int:
    images_path, annotations_path = resolve_paths(args.images, args.annotations)
    logger.info("Images      : %s", images_path)
    logger.info("Annotations : %s", annotations_path)

    labels = find_images(images_path)
    assets = build_assets(images_path, labels, progress=not args.no_progress)

    for label, images in labels.items():
        for image in images:
            logger.info("Label '%s' for image '%s'.", label, image.name)

    write_vott_json(annotations_path, assets, labels.keys(), color=args.color)
    logger.info("Wrote %d assets with %d tags to %s", len(assets), len(labels), annotations_path)
    return config.EXIT_SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return run(args)
    except VotterError as exc:
        logger.error("Error: %s", exc)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
