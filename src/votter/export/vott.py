"""Assemble and write the VoTT project JSON.

Every asset gets exactly one rectangle region covering the whole image,
tagged with the asset's label. The file is written to ``<path>.tmp`` first
and moved into place, so a failed run never leaves a partial project.
"""
from __future__ import annotations

import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from votter import config
from votter.data.schema import (
    Asset,
    AssetDetail,
    BoundingBox,
    Point,
    Region,
    Tag,
    VottProject,
)
from votter.errors import AnnotationsWriteError

logger = logging.getLogger(__name__)


def make_region(asset: Asset) -> Region:
    width, height = asset.size.width, asset.size.height
    return Region(
        id=str(uuid.uuid4()),
        tags=[asset.label],
        bounding_box=BoundingBox(height=height, width=width, left=0, top=0),
        points=[Point(x=0, y=0), Point(x=width, y=height)],
    )


def make_tags(labels: Iterable[str], color: str = config.DEFAULT_TAG_COLOR) -> List[Tag]:
    return [Tag(name=label, color=color) for label in labels]


def build_project(
    assets: Sequence[Asset],
    labels: Iterable[str],
    color: str = config.DEFAULT_TAG_COLOR,
) -> VottProject:
    project = VottProject(tags=make_tags(labels, color))
    for asset in assets:
        project.assets[asset.id] = AssetDetail(asset=asset, regions=[make_region(asset)])
    return project


def _asset_to_dict(asset: Asset) -> Dict[str, Any]:
    # label is carried by the region tags, VoTT has no asset-level field for it
    return {
        "format": asset.format,
        "id": asset.id,
        "name": asset.name,
        "path": asset.path,
        "size": {"width": asset.size.width, "height": asset.size.height},
        "state": asset.state,
        "type": asset.type,
    }


def _region_to_dict(region: Region) -> Dict[str, Any]:
    box = region.bounding_box
    return {
        "id": region.id,
        "type": region.type,
        "tags": list(region.tags),
        "boundingBox": {"height": box.height, "width": box.width, "left": box.left, "top": box.top},
        "points": [{"x": p.x, "y": p.y} for p in region.points],
    }


def project_to_dict(project: VottProject) -> Dict[str, Any]:
    """VoTT JSON structure, keys in the order VoTT itself writes them."""
    als = project.active_learning_settings
    return {
        "name": project.name,
        "securityToken": project.security_token,
        "videoSettings": {"frameExtractionRate": project.video_settings.frame_extraction_rate},
        "tags": [{"name": t.name, "color": t.color} for t in project.tags],
        "id": project.id,
        "activeLearningSettings": {
            "autoDetect": als.auto_detect,
            "predictTag": als.predict_tag,
            "modelPathType": als.model_path_type,
        },
        "version": project.version,
        "lastVisitedAssetId": project.last_visited_asset_id,
        "assets": {
            asset_id: {
                "asset": _asset_to_dict(detail.asset),
                "regions": [_region_to_dict(r) for r in detail.regions],
                "version": detail.version,
            }
            for asset_id, detail in project.assets.items()
        },
    }


def write_vott_json(
    path: Path,
    assets: Sequence[Asset],
    labels: Iterable[str],
    color: str = config.DEFAULT_TAG_COLOR,
) -> VottProject:
    path = Path(path)
    project = build_project(assets, labels, color)
    try:
        data = json.dumps(project_to_dict(project), indent=2)
    except (TypeError, ValueError) as exc:
        raise AnnotationsWriteError(f"Cannot serialize VoTT project: {exc}") from exc

    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except (OSError, ValueError) as exc:
        tmp.unlink(missing_ok=True)
        raise AnnotationsWriteError(f"Cannot write annotations to '{path}': {exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return project
