from blockpic.image import RGBA, TRANSPARENT_BLACK, ImageHandle
from blockpic.sizing import TargetGrid

LOWER_HALF_BLOCK = "▄"
RESET = "\033[0m"


def format_cell(upper: RGBA, lower: RGBA) -> str:
    """One half-block cell: upper pixel as background, lower pixel as foreground."""
    ur, ug, ub, _ = upper
    lr, lg, lb, _ = lower
    return f"\033[48;2;{ur};{ug};{ub};38;2;{lr};{lg};{lb}m{LOWER_HALF_BLOCK}{RESET}"


def render(image: ImageHandle, target: TargetGrid) -> str:
    """Render target.rows lines of target.columns cells, each line ending in a newline.

    Row r takes pixel rows 2r and 2r + 1. If the image has no row 2r + 1
    (odd height in real size mode) the lower half is transparent black.
    """
    out = []
    for row in range(target.rows):
        upper_y = row * 2
        lower_y = upper_y + 1
        has_lower = lower_y < image.height
        for col in range(target.columns):
            upper = image.get_pixel(col, upper_y)
            lower = image.get_pixel(col, lower_y) if has_lower else TRANSPARENT_BLACK
            out.append(format_cell(upper, lower))
        out.append("\n")
    return "".join(out)
