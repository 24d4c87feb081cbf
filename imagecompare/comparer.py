"""Pairwise similarity between two image fingerprints."""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from tqdm import tqdm

from .config import DIAGNOSTIC_KEY, MAX_TOTAL_DIFFERENCE
from .errors import ArgumentError
from .fingerprint import Fingerprint, extract


@dataclass(frozen=True)
class ComparisonResult:
    """Aggregate difference and the similarity percentage derived from it."""

    difference: float
    percentage: float


def _difference_to_percentage(difference: float) -> float:
    percentage = 100.0 - (difference / MAX_TOTAL_DIFFERENCE) * 100.0
    return min(max(percentage, 0.0), 100.0)


class ImagesComparer:
    """
    Holds the fingerprints of exactly two images, in argument order.

    Each image also carries a metadata dict. compare() records the truncated
    aggregate difference in image 0's dict under key 1; nothing reads it back.
    """

    def __init__(self, first: Fingerprint, second: Fingerprint):
        self.fingerprints = (first, second)
        self.metadata = [{}, {}]

    @classmethod
    def from_paths(cls, paths: Sequence[Union[str, Path]]) -> "ImagesComparer":
        """
        Fingerprint two image files, first to second.

        Any load or encoding error propagates; no partial comparer is built.
        """
        if len(paths) != 2:
            raise ArgumentError(f"Expected exactly 2 image paths, got {len(paths)}")

        fingerprints = [
            extract(path)
            for path in tqdm(paths, desc="Fingerprinting", unit="image", leave=False, disable=None)
        ]
        return cls(*fingerprints)

    def aggregate_difference(self) -> float:
        """
        Sum of sqrt(|d0 - d1|) over every channel of positionally matched deltas.

        Only the first min(len0, len1) deltas are compared; the tail of the
        longer fingerprint is ignored.
        """
        first, second = self.fingerprints
        diff = 0.0
        for delta0, delta1 in zip(first, second):
            for c0, c1 in zip(delta0, delta1):
                diff += math.sqrt(abs(c0 - c1))
        return diff

    def similarity_percentage(self) -> float:
        """Similarity in [0, 100]; 100 means no measurable difference."""
        return _difference_to_percentage(self.aggregate_difference())

    def compare(self) -> ComparisonResult:
        """Record the difference in image 0's metadata and return both scores."""
        diff = self.aggregate_difference()
        self.metadata[0][DIAGNOSTIC_KEY] = int(diff)
        return ComparisonResult(difference=diff, percentage=_difference_to_percentage(diff))
