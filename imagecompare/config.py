"""Fingerprint configuration - grid, resampling kernel, and scoring constants."""

# Side length of the downsampled grid (16x16 cells)
GRID_SIZE = 16

# Gaussian resampling kernel
#   weight(x) = exp(-x^2 / (2 * sigma^2)), x in output-pixel units
#   support is the kernel half-width before scaling by the downscale ratio
GAUSSIAN_SIGMA = 0.5
GAUSSIAN_SUPPORT = 3.0

# Pixel read for a grid cell outside the pixel buffer (opaque black)
OUT_OF_BOUNDS_PIXEL = (0, 0, 0, 255)

# Similarity scoring
#   max total difference = cells * channels * per-channel maximum
MAX_DIFFERENCE_PER_CHANNEL = 100.0
CHANNEL_COUNT = 3
MAX_TOTAL_DIFFERENCE = GRID_SIZE * GRID_SIZE * CHANNEL_COUNT * MAX_DIFFERENCE_PER_CHANNEL

# Key under which compare() records the difference in image 0's metadata
DIAGNOSTIC_KEY = 1

# Pillow modes accepted by the normalizer, with how each reaches RGBA
#   RGB:  alpha = 255
#   RGBA: unchanged
#   L:    intensity replicated to R, G, B; alpha = 255
#   LA:   intensity replicated to R, G, B; alpha preserved
SUPPORTED_MODES = {"RGB", "RGBA", "L", "LA"}

# Modes the decoder expands before the normalizer sees them
#   P (palette) -> RGBA if the palette has transparency, else RGB
#   1 (bilevel) -> L
#   CMYK JPEG -> RGB
PALETTE_MODE = "P"
BILEVEL_MODE = "1"
CMYK_MODE = "CMYK"

# Raw decoder modes containing this marker carry 16-bit samples (RGB;16B, LA;16B, ...)
WIDE_SAMPLE_MARKER = ";16"
