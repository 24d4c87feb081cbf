"""Pillow and numpy helpers shared by the fingerprint extractor."""
