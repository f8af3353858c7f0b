import contextlib
from pathlib import Path

import pytest

from votter import config
from votter.data.assets import build_asset, build_assets, file_uri, read_image_size
from votter.errors import AssetBuildError


@pytest.mark.parametrize("name", ["a.png", "b.jpg", "c.jpeg", "d.gif", "e.bmp"])
def test_read_image_size(tmp_path, make_image, name):
    fmt = "JPEG" if name.endswith((".jpg", ".jpeg")) else None
    path = make_image(tmp_path / name, (37, 21), fmt)
    assert read_image_size(path) == (37, 21)


def test_file_uri_uses_forward_slashes(tmp_path):
    uri = file_uri(tmp_path / "cat" / "a.jpg")
    assert uri.startswith("file:")
    assert "\\" not in uri
    assert uri.endswith("/cat/a.jpg")
    assert uri == "file:" + (tmp_path / "cat" / "a.jpg").absolute().as_posix()


def test_build_asset(dataset):
    asset = build_asset(dataset, "cat", Path("cat/b.png"))
    assert asset.name == "b.png"
    assert asset.label == "cat"
    assert asset.format == "png"
    assert (asset.size.width, asset.size.height) == (16, 12)
    assert asset.path == "file:" + (dataset / "cat" / "b.png").as_posix()
    assert asset.state == config.ASSET_STATE and asset.type == config.ASSET_TYPE


def test_build_asset_lowercases_format(tmp_path, make_image):
    make_image(tmp_path / "cat" / "A.PNG", fmt="PNG")
    asset = build_asset(tmp_path, "cat", Path("cat/A.PNG"))
    assert asset.format == "png"
    assert asset.name == "A.PNG"


def test_build_assets_order_and_unique_ids(dataset):
    labels = {
        "cat": [Path("cat/a.jpg"), Path("cat/b.png")],
        "dog": [Path("dog/c.jpg")],
    }
    assets = build_assets(dataset, labels, progress=False)
    assert [a.name for a in assets] == ["a.jpg", "b.png", "c.jpg"]
    assert [a.label for a in assets] == ["cat", "cat", "dog"]
    assert len({a.id for a in assets}) == 3


def test_build_assets_undecodable_image_aborts(dataset):
    (dataset / "dog" / "broken.jpg").write_bytes(b"not an image")
    labels = {"dog": [Path("dog/c.jpg"), Path("dog/broken.jpg")]}
    with pytest.raises(AssetBuildError, match="broken.jpg"):
        build_assets(dataset, labels, progress=False)


def test_build_assets_missing_file_aborts(tmp_path):
    with pytest.raises(AssetBuildError):
        build_assets(tmp_path, {"cat": [Path("cat/gone.png")]}, progress=False)


def test_build_assets_logs_through_progress_bar(dataset, monkeypatch):
    entered = []

    @contextlib.contextmanager
    def _redirect():
        entered.append(True)
        yield

    monkeypatch.setattr("votter.data.assets.logging_redirect_tqdm", _redirect)
    assets = build_assets(dataset, {"dog": [Path("dog/c.jpg")]}, progress=True)
    assert len(assets) == 1
    assert entered == [True]
