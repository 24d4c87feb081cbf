"""Image decoding and Gaussian resampling utilities."""

import math
import struct
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config import (
    BILEVEL_MODE,
    CMYK_MODE,
    GAUSSIAN_SIGMA,
    GAUSSIAN_SUPPORT,
    PALETTE_MODE,
    WIDE_SAMPLE_MARKER,
)
from ..errors import DecodeError, ImageLoadError, UnsupportedPixelEncodingError


def _raw_modes(img: Image.Image) -> list[str]:
    """Raw modes of the pending decoder tiles (empty once the image is loaded)."""
    modes = []
    for tile in img.tile:
        args = tile[3]
        if isinstance(args, str):
            modes.append(args)
        elif args and isinstance(args[0], str):
            modes.append(args[0])
    return modes


def _reject_wide_samples(img: Image.Image) -> None:
    """
    Raise for files stored with 16-bit samples.

    Pillow narrows 16-bit RGB, RGBA and LA PNGs to 8-bit modes while decoding,
    so the mode alone can't tell them apart; the raw tile mode still can.
    """
    for raw_mode in _raw_modes(img):
        if WIDE_SAMPLE_MARKER in raw_mode:
            raise UnsupportedPixelEncodingError(raw_mode)


def _expand_decoded(img: Image.Image) -> Image.Image:
    """Expand palette, bilevel and CMYK JPEG images; the result is detached from the file."""
    if img.mode == PALETTE_MODE:
        return img.convert("RGBA" if "transparency" in img.info else "RGB")
    if img.mode == BILEVEL_MODE:
        return img.convert("L")
    if img.mode == CMYK_MODE and img.format == "JPEG":
        return img.convert("RGB")
    return img.copy()


def load_image(file_path: Union[str, Path]) -> Image.Image:
    """
    Decode an image file fully into memory.

    The file handle is closed before returning. Palette images come back as
    RGB (RGBA when the palette has transparency), bilevel images as L and
    CMYK JPEGs as RGB; every other mode is returned as decoded and left for
    the normalizer to accept or reject.

    Raises ImageLoadError if the file can't be read, DecodeError if Pillow
    can't identify or decode it, and UnsupportedPixelEncodingError for
    16-bit samples.
    """
    path = Path(file_path)
    try:
        with Image.open(path) as img:
            _reject_wide_samples(img)
            img.load()
            return _expand_decoded(img)
    except (FileNotFoundError, IsADirectoryError, PermissionError) as e:
        raise ImageLoadError(path, e.strerror or str(e)) from e
    except UnidentifiedImageError as e:
        raise DecodeError(path, "unrecognized image format") from e
    except (
        OSError,
        SyntaxError,
        ValueError,
        EOFError,
        IndexError,
        struct.error,
        Image.DecompressionBombError,
    ) as e:
        raise DecodeError(path, str(e)) from e


def gaussian_weights(src_size: int, dst_size: int) -> np.ndarray:
    """
    Build the (dst_size, src_size) matrix of Gaussian resampling weights.

    Row i holds the normalized contribution of each source pixel to output
    pixel i. When shrinking, the kernel is stretched by the downscale ratio
    so that every source pixel contributes; when enlarging it keeps unit width.
    """
    ratio = src_size / dst_size
    sratio = max(ratio, 1.0)
    src_support = GAUSSIAN_SUPPORT * sratio

    weights = np.zeros((dst_size, src_size), dtype=np.float64)
    for out in range(dst_size):
        center = (out + 0.5) * ratio
        left = min(max(math.floor(center - src_support), 0), src_size - 1)
        right = min(max(math.ceil(center + src_support), left + 1), src_size)

        # Kernel treats a pixel's centre as 0, so compare against center - 0.5
        taps = (np.arange(left, right, dtype=np.float64) - (center - 0.5)) / sratio
        row = np.exp(-(taps ** 2) / (2 * GAUSSIAN_SIGMA ** 2))
        weights[out, left:right] = row / row.sum()
    return weights


def gaussian_resize(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Resize to exactly (width, height) with a separable Gaussian filter.

    Aspect ratio is not preserved. Channels are filtered independently (no
    alpha premultiplication): vertical pass, then horizontal pass, then round
    to nearest and clamp to 0-255. A same-size image is returned as a copy.
    """
    if image.size == (width, height):
        return image.copy()

    pixels = np.asarray(image, dtype=np.float64)
    single_band = pixels.ndim == 2
    if single_band:
        pixels = pixels[:, :, np.newaxis]

    rows = gaussian_weights(image.height, height)
    cols = gaussian_weights(image.width, width)
    resized = np.einsum("yh,hwc->ywc", rows, pixels)
    resized = np.einsum("xw,ywc->yxc", cols, resized)
    resized = np.clip(np.floor(resized + 0.5), 0, 255).astype(np.uint8)

    if single_band:
        resized = resized[:, :, 0]
    return Image.fromarray(resized)
