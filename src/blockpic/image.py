from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import numpy as np
from PIL import Image

from blockpic.errors import ImageDecodeError, ImageOpenError

if TYPE_CHECKING:
    from PIL._imaging import PixelAccess

RGBA = tuple[int, int, int, int]
TRANSPARENT_BLACK: RGBA = (0, 0, 0, 0)


class ImageHandle(Protocol):
    width: int
    height: int

    def get_pixel(self, x: int, y: int) -> RGBA:
        """Return the (r, g, b, a) value at column x, row y."""
        ...


def to_rgba(image: Image.Image) -> Image.Image:
    """Convert to a new 8-bit RGBA image.

    16 and 32-bit integer greyscale is scaled down to 8 bits by its top byte;
    Pillow's own conversion would clip it at 255.
    """
    if image.mode.startswith("I;16"):
        image = Image.fromarray((np.asarray(image) >> 8).astype(np.uint8))
    elif image.mode == "I":
        image = Image.fromarray((np.clip(np.asarray(image), 0, 0xFFFF) >> 8).astype(np.uint8))
    return image.convert("RGBA")


def _check_bounds(image: ImageHandle, x: int, y: int) -> None:
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise IndexError(f"Pixel ({x}, {y}) outside {image.width}x{image.height} image")


@dataclass
class PillowImage:
    """A decoded Pillow image, held in RGBA."""

    image: Image.Image
    _pixels: PixelAccess | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.image.mode != "RGBA":
            self.image = to_rgba(self.image)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def get_pixel(self, x: int, y: int) -> RGBA:
        _check_bounds(self, x, y)
        if self._pixels is None:
            self._pixels = self.image.load()
        return self._pixels[x, y]


@dataclass
class PixelBuffer:
    """An in-memory RGBA image backed by a (height, width, 4) uint8 array."""

    array: np.ndarray

    def __post_init__(self):
        self.array = np.asarray(self.array, dtype=np.uint8)
        if self.array.ndim != 3 or self.array.shape[2] != 4:
            raise ValueError(f"Expected (height, width, 4) array, got shape {self.array.shape}")

    @classmethod
    def filled(cls, width: int, height: int, colour: RGBA) -> "PixelBuffer":
        array = np.empty((height, width, 4), dtype=np.uint8)
        array[:, :] = colour
        return cls(array)

    @classmethod
    def from_rows(cls, rows: list[list[RGBA]]) -> "PixelBuffer":
        return cls(np.array(rows, dtype=np.uint8).reshape(len(rows), -1, 4))

    @property
    def width(self) -> int:
        return self.array.shape[1]

    @property
    def height(self) -> int:
        return self.array.shape[0]

    def get_pixel(self, x: int, y: int) -> RGBA:
        _check_bounds(self, x, y)
        r, g, b, a = self.array[y, x]
        return (int(r), int(g), int(b), int(a))


def to_pillow(image: ImageHandle) -> Image.Image:
    """Get an RGBA Pillow image holding the same pixels as any ImageHandle."""
    if isinstance(image, PillowImage):
        return image.image
    if isinstance(image, PixelBuffer):
        return Image.fromarray(image.array)
    array = np.zeros((image.height, image.width, 4), dtype=np.uint8)
    for y in range(image.height):
        for x in range(image.width):
            array[y, x] = image.get_pixel(x, y)
    return Image.fromarray(array)


def load_image(path: str | Path) -> PillowImage:
    """Open and fully decode the first frame of an image file.

    Raises ImageOpenError when the file can't be read, and ImageDecodeError
    when its contents aren't a usable image (unknown format, corrupt or
    truncated data, zero width or height).
    """
    try:
        fp = open(path, "rb")
    except OSError as e:
        raise ImageOpenError(path) from e

    with fp:
        try:
            with Image.open(fp) as image:
                image.load()
                rgba = to_rgba(image)
        except Exception as e:
            raise ImageDecodeError(path) from e

    if rgba.width == 0 or rgba.height == 0:
        raise ImageDecodeError(path)
    return PillowImage(rgba)
