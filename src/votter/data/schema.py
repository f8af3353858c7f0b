"""Data schemas for the VoTT project document.

Field names follow the VoTT 2.2.0 JSON keys once serialized by
``votter.export.vott.project_to_dict``; here they use Python naming.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from votter import config


@dataclass(frozen=True)
class Size:
    width: int
    height: int


@dataclass(frozen=True)
class Asset:
    format: str
    id: str
    name: str
    path: str
    size: Size
    label: str
    state: int = config.ASSET_STATE
    type: int = config.ASSET_TYPE


@dataclass(frozen=True)
class BoundingBox:
    height: int
    width: int
    left: int = 0
    top: int = 0


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass
class Region:
    id: str
    tags: List[str]
    bounding_box: BoundingBox
    points: List[Point]
    type: str = config.REGION_TYPE


@dataclass
class Tag:
    name: str
    color: str = config.DEFAULT_TAG_COLOR


@dataclass
class AssetDetail:
    asset: Asset
    regions: List[Region]
    version: str = config.VOTT_VERSION


@dataclass
class VideoSettings:
    frame_extraction_rate: int = config.FRAME_EXTRACTION_RATE


@dataclass
class ActiveLearningSettings:
    auto_detect: bool = config.AUTO_DETECT
    predict_tag: bool = config.PREDICT_TAG
    model_path_type: str = config.MODEL_PATH_TYPE


@dataclass
class VottProject:
    name: str = ""
    security_token: str = ""
    video_settings: VideoSettings = field(default_factory=VideoSettings)
    tags: List[Tag] = field(default_factory=list)
    id: str = ""
    active_learning_settings: ActiveLearningSettings = field(default_factory=ActiveLearningSettings)
    version: str = config.VOTT_VERSION
    last_visited_asset_id: str = ""
    assets: Dict[str, AssetDetail] = field(default_factory=dict)
