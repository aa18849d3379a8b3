import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def write_png(tmp_path):
    """Save a solid-colour PNG under tmp_path and return its path."""

    def _write(name="image.png", size=(4, 4), colour=(255, 0, 0, 255)):
        path = tmp_path / name
        Image.new("RGBA", size, colour).save(path)
        return path

    return _write


@pytest.fixture
def noisy_png(tmp_path):
    rng = np.random.default_rng(42)
    path = tmp_path / "noise.png"
    Image.fromarray(rng.integers(0, 256, (64, 64, 3), dtype=np.uint8)).save(path)
    return path
