import argparse

from blockpic.converter import render_paths
from blockpic.resampling import select_algorithm
from blockpic.sizing import SizeSpec


def _size(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"Malformed size: {value}")
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    # -h is height, so help is on --help only
    parser = argparse.ArgumentParser(
        prog="blockpic", description="Render images in the terminal with half-block characters", add_help=False
    )
    parser.add_argument("files", nargs="*", help="Image files to process")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-w", "--width", type=_size, default=None, help="Output width in columns")
    parser.add_argument(
        "-h", "--height", type=_size, default=None, help="Output height in pixel rows (two per character row)"
    )
    parser.add_argument(
        "-r", "--real-size", action="store_true", default=False, help="Render at the image's own size"
    )
    parser.add_argument(
        "-t", "--triangle", action="store_true", default=False, help="Use triangle algorithm (default)"
    )
    parser.add_argument(
        "-n", "--nearest", action="store_true", default=False, help="Use nearest neighbor algorithm (faster, low quality)"
    )
    parser.add_argument(
        "-l", "--lanczos", action="store_true", default=False, help="Use lanczos3 algorithm (slower, high quality)"
    )
    return parser


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    spec = SizeSpec(width=args.width, height=args.height, real_size=args.real_size)
    algorithm = select_algorithm(nearest=args.nearest, high_quality=args.lanczos)
    render_paths(args.files, spec, algorithm)


if __name__ == "__main__":
    main()
