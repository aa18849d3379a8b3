from pathlib import Path


class BlockpicError(Exception):
    pass


class ImageLoadError(BlockpicError):
    """An input image could not be turned into pixels."""

    verb = "load"

    def __init__(self, path: str | Path):
        self.path = path
        super().__init__(f"Could not {self.verb} {path}")


class ImageOpenError(ImageLoadError):
    verb = "open"


class ImageDecodeError(ImageLoadError):
    verb = "decode"
