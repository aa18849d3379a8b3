import sys
from pathlib import Path
from typing import TextIO

from PIL import Image

from blockpic.errors import ImageLoadError
from blockpic.image import ImageHandle, PillowImage, load_image
from blockpic.renderer import render
from blockpic.resampling import ResizeAlgorithm, resample
from blockpic.sizing import SizeSpec, TerminalBounds, resolve_size
from blockpic.terminal import get_terminal_bounds


def image_to_halfblocks(
    image: ImageHandle | Image.Image | str | Path,
    spec: SizeSpec = SizeSpec(),
    algorithm: ResizeAlgorithm = ResizeAlgorithm.SMOOTH,
    terminal: TerminalBounds | None = None,
) -> str:
    if isinstance(image, (str, Path)):
        image = load_image(image)
    elif isinstance(image, Image.Image):
        image = PillowImage(image)
    if terminal is None:
        terminal = get_terminal_bounds()

    target = resolve_size(image.width, image.height, spec, terminal)
    resized = resample(image, target, algorithm, real_size=spec.real_size)
    return render(resized, target)


def render_paths(
    paths: list[str],
    spec: SizeSpec = SizeSpec(),
    algorithm: ResizeAlgorithm = ResizeAlgorithm.SMOOTH,
    terminal: TerminalBounds | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Render each file to out in turn, returning how many could not be loaded.

    With more than one path, each image is preceded by a line holding its
    path. A file that fails to open or decode is reported on err and skipped.
    """
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr
    print_paths = len(paths) > 1
    failures = 0

    for path in paths:
        if print_paths:
            print(path, file=out)
        try:
            image = load_image(path)
        except ImageLoadError as e:
            print(e, file=err)
            failures += 1
            continue
        out.write(image_to_halfblocks(image, spec, algorithm, terminal))
        out.flush()

    return failures
