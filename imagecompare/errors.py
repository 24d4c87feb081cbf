"""Exceptions raised while loading, normalizing and comparing images."""

from pathlib import Path
from typing import Union


class ImageCompareError(Exception):
    """Base class for all image comparison errors."""


class ArgumentError(ImageCompareError):
    """Wrong number of image paths supplied to the comparer."""


class ImageLoadError(ImageCompareError):
    """Image file is missing, unreadable, or cannot be decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


# Kept for callers that think of this as an "open" failure
ImageOpenError = ImageLoadError


class DecodeError(ImageLoadError):
    """File exists but its container format is corrupt or unsupported."""


class UnsupportedPixelEncodingError(ImageCompareError):
    """
    Decoded image uses a pixel layout outside RGB, RGBA, L and LA.

    This aborts the whole comparison. There is no fallback image.
    """

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Unsupported pixel encoding: {mode!r}")
