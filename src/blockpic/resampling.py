from enum import Enum

from PIL import Image

from blockpic.image import ImageHandle, PillowImage, to_pillow
from blockpic.sizing import TargetGrid


class ResizeAlgorithm(Enum):
    SMOOTH = Image.Resampling.BILINEAR  # triangle filter
    NEAREST = Image.Resampling.NEAREST
    HIGH_QUALITY = Image.Resampling.LANCZOS


def select_algorithm(nearest: bool = False, high_quality: bool = False) -> ResizeAlgorithm:
    if nearest:
        return ResizeAlgorithm.NEAREST
    if high_quality:
        return ResizeAlgorithm.HIGH_QUALITY
    return ResizeAlgorithm.SMOOTH


def resample(
    image: ImageHandle,
    target: TargetGrid,
    algorithm: ResizeAlgorithm = ResizeAlgorithm.SMOOTH,
    real_size: bool = False,
) -> ImageHandle:
    """Scale an image to exactly target.columns x target.pixel_rows pixels.

    The input is returned untouched in real size mode or when it already has
    the target size.
    """
    if real_size:
        return image
    size = (target.columns, target.pixel_rows)
    if (image.width, image.height) == size:
        return image
    if 0 in size:
        return PillowImage(Image.new("RGBA", size))

    # Bands are scaled separately so RGB under transparent pixels isn't premultiplied away
    bands = to_pillow(image).split()
    return PillowImage(Image.merge("RGBA", [band.resize(size, algorithm.value) for band in bands]))
