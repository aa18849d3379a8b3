import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SizeSpec:
    width: int | None = None
    height: int | None = None
    real_size: bool = False


@dataclass(frozen=True)
class TerminalBounds:
    columns: int
    rows: int

    @property
    def pixel_rows(self) -> int:
        return self.rows * 2


@dataclass(frozen=True)
class TargetGrid:
    """Output size in character cells. Each row is two image pixel rows."""

    columns: int
    rows: int

    @property
    def pixel_rows(self) -> int:
        return self.rows * 2


def half(pixel_rows: int) -> int:
    """Character rows needed to hold pixel_rows, rounding up."""
    return pixel_rows // 2 + pixel_rows % 2


def resolve_size(image_width: int, image_height: int, spec: SizeSpec, terminal: TerminalBounds) -> TargetGrid:
    """Pick the output grid for an image.

    In order of precedence: real size, explicit width and height, explicit
    width (height follows the aspect ratio), explicit height (width follows
    the aspect ratio), and finally the largest aspect-correct fit inside
    both the terminal and the image itself. Images are never scaled up to
    fill the terminal.

    An explicit height on its own is used as the character row count as-is,
    while with an explicit width it counts pixel rows and gets halved.
    """
    if spec.real_size:
        return TargetGrid(image_width, half(image_height))

    if spec.width is not None and spec.height is not None:
        return TargetGrid(spec.width, half(spec.height))

    ratio = image_width / image_height

    if spec.width is not None:
        return TargetGrid(spec.width, half(math.floor(spec.width / ratio)))
    if spec.height is not None:
        return TargetGrid(math.floor(ratio * spec.height), spec.height)

    bounds_w = min(terminal.columns, image_width)
    bounds_h = min(terminal.pixel_rows, image_height)

    width_based_height = math.floor(bounds_w / ratio)
    height_based_width = math.floor(ratio * bounds_h)

    if width_based_height > bounds_h:
        return TargetGrid(height_based_width, half(bounds_h))
    return TargetGrid(bounds_w, half(width_based_height))
