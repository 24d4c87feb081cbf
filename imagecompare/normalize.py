"""Color normalization - bring any supported image to 8-bit RGBA."""

from PIL import Image

from .config import SUPPORTED_MODES
from .errors import UnsupportedPixelEncodingError


def normalize(image: Image.Image) -> Image.Image:
    """
    Convert an image to 4-channel 8-bit RGBA.

    RGB gains an opaque alpha channel, L and LA replicate the intensity into
    R, G and B (LA keeps its alpha), and RGBA is copied unchanged. Any other
    mode raises UnsupportedPixelEncodingError; there is no fallback image.
    """
    if image.mode not in SUPPORTED_MODES:
        raise UnsupportedPixelEncodingError(image.mode)
    if image.mode == "RGBA":
        return image.copy()
    return image.convert("RGBA")
