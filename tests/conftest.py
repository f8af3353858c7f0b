from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def make_image():
    def _make(path: Path, size=(8, 6), fmt=None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color=(128, 64, 32)).save(path, format=fmt)
        return path
    return _make


@pytest.fixture
def dataset(tmp_path, make_image):
    root = tmp_path / "dataset"
    make_image(root / "cat" / "a.jpg", (40, 30))
    make_image(root / "cat" / "b.png", (16, 12))
    make_image(root / "dog" / "c.jpg", (25, 50))
    return root
