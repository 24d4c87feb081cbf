"""
Fingerprint extraction.

An image is normalized to RGBA, resampled to a 16x16 grid, and walked in
row-major order. Each time a cell's squared color differs from the cell
before it, the change in squared (R, G, B) is recorded. Cell (0, 0) only
seeds the walk and is never recorded, so a fingerprint holds 0 to 255 deltas.
"""

from pathlib import Path
from typing import Iterable, NamedTuple, Sequence, Union

import numpy as np
from PIL import Image

from .config import GRID_SIZE, OUT_OF_BOUNDS_PIXEL
from .normalize import normalize
from .utils.imaging import gaussian_resize, load_image


class Delta(NamedTuple):
    """Change in squared channel values between two consecutive grid cells."""

    r: int
    g: int
    b: int


class Fingerprint(tuple):
    """Immutable ordered sequence of Delta vectors."""

    def __new__(cls, deltas: Iterable[Sequence[int]] = ()):
        return super().__new__(cls, (Delta(*(int(c) for c in d)) for d in deltas))

    def __repr__(self) -> str:
        return f"Fingerprint({list(self)!r})"


def _read_cell(pixels: np.ndarray, index: int) -> tuple[int, int, int, int]:
    """RGBA pixel at a flat grid index, opaque black past the end of the buffer."""
    if index >= len(pixels):
        return OUT_OF_BOUNDS_PIXEL
    r, g, b, a = pixels[index]
    return int(r), int(g), int(b), int(a)


def fingerprint_image(image: Image.Image) -> Fingerprint:
    """Compute the fingerprint of an already decoded image."""
    grid = gaussian_resize(normalize(image), GRID_SIZE, GRID_SIZE)
    pixels = np.asarray(grid).reshape(-1, 4)

    deltas = []
    prev_color = None
    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            r, g, b, _ = _read_cell(pixels, y * GRID_SIZE + x)
            color = (r * r, g * g, b * b)
            if prev_color is not None and color != prev_color:
                deltas.append((
                    color[0] - prev_color[0],
                    color[1] - prev_color[1],
                    color[2] - prev_color[2],
                ))
            # Always the immediately preceding cell, even when nothing changed
            prev_color = color

    return Fingerprint(deltas)


def extract(image_path: Union[str, Path]) -> Fingerprint:
    """
    Load an image file and compute its fingerprint.

    Raises ImageLoadError (DecodeError for undecodable files) or
    UnsupportedPixelEncodingError.
    """
    return fingerprint_image(load_image(image_path))
