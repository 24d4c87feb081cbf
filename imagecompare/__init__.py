"""Two-image similarity from 16x16 delta-encoded color fingerprints."""

from .comparer import ComparisonResult, ImagesComparer
from .errors import (
    ArgumentError,
    DecodeError,
    ImageCompareError,
    ImageLoadError,
    ImageOpenError,
    UnsupportedPixelEncodingError,
)
from .fingerprint import Delta, Fingerprint, extract, fingerprint_image
from .normalize import normalize
from .utils.imaging import gaussian_resize, load_image

__all__ = [
    "ArgumentError",
    "ComparisonResult",
    "DecodeError",
    "Delta",
    "Fingerprint",
    "ImageCompareError",
    "ImageLoadError",
    "ImageOpenError",
    "ImagesComparer",
    "UnsupportedPixelEncodingError",
    "extract",
    "fingerprint_image",
    "gaussian_resize",
    "load_image",
    "normalize",
]
