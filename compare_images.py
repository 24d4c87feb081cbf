#!/usr/bin/env -S uv run --script
# /// script
# requires-python = '>=3.11'
# dependencies = [
#   "pillow",
#   "numpy",
#   "tqdm"
# ]
# ///
"""
Image Similarity - Main Entry Point

Fingerprint two images and print how similar they are.

Usage:
    ./compare_images.py first.png second.jpg

Output:
    Results:
    Image 0: {1: <aggregate difference>}
    Image 1: {}
    Similarity percentage: 97.42%
"""

import argparse
import sys

from imagecompare import ImageLoadError, ImagesComparer, UnsupportedPixelEncodingError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare two images by their 16x16 color fingerprints",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("first", help="Path to the first image")
    parser.add_argument("second", help="Path to the second image")
    return parser


def main(argv=None) -> int:
    # argparse exits with status 2 and a usage line on a wrong argument count
    args = build_parser().parse_args(argv)

    try:
        comparer = ImagesComparer.from_paths([args.first, args.second])
    except ImageLoadError as e:
        print(f"Error creating comparer: {e}", file=sys.stderr)
        return 0
    except UnsupportedPixelEncodingError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 1

    comparer.compare()

    print("Results:")
    for idx, data in enumerate(comparer.metadata):
        print(f"Image {idx}: {data}")

    print(f"Similarity percentage: {comparer.similarity_percentage():.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())
