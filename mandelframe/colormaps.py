"""
Palette definition and gradient color mapping.

Iteration counts are mapped to colors by piecewise-linear interpolation
across a fixed multi-stop palette. The iteration range [0, max_iterations)
is split into len(palette) - 1 equal bands; the last band absorbs any
remainder when the budget does not divide evenly. Points that never
escaped are painted black regardless of the palette.

Blending is done in float32 and truncated, which is what reference
images were produced with. Do not switch to float64 or rounding.
"""

from collections import namedtuple

import numpy as np
from numba import jit, prange

from .errors import InvalidFrameError


Color = namedtuple('Color', ['r', 'g', 'b'])

INSIDE_COLOR = Color(0, 0, 0)


def create_palette(stops):
    """
    Build a read-only palette array from a sequence of (r, g, b) stops.

    Args:
        stops: At least two (r, g, b) triples with channels in [0, 255]

    Returns:
        (len(stops), 3) uint8 array with the write flag cleared
    """
    colors = np.array(stops, dtype=np.int64)
    if colors.ndim != 2 or colors.shape[1] != 3 or colors.shape[0] < 2:
        raise ValueError("A palette needs at least two (r, g, b) stops")
    if colors.min() < 0 or colors.max() > 255:
        raise ValueError("Palette channels must lie in [0, 255]")
    palette = colors.astype(np.uint8)
    palette.setflags(write=False)
    return palette


PALETTE = create_palette([
    (0, 0, 255),      # Blue
    (255, 0, 255),    # Pink
    (255, 0, 0),      # Red
    (255, 255, 0),    # Yellow
    (0, 255, 0),      # Green
    (255, 255, 255),  # White
    (0, 0, 0),        # Black
])


def check_iteration_budget(max_iterations, palette=PALETTE):
    """Raise InvalidFrameError if every band would be empty."""
    segments = palette.shape[0] - 1
    if max_iterations < segments:
        raise InvalidFrameError(
            f"max_iterations={max_iterations} is smaller than the "
            f"{segments} palette segments")


@jit(nopython=True, cache=True)
def _channel(start, end, t):
    s = np.float32(start)
    return int(s + t * (np.float32(end) - s))


@jit(nopython=True, cache=True)
def blend(palette, max_iterations, iterations):
    """
    Interpolate the palette at an iteration count.

    Args:
        palette: (N, 3) uint8 array of stops, N >= 2
        max_iterations: Iteration budget; must be >= N - 1
        iterations: Count in [0, max_iterations]

    Returns:
        (r, g, b) tuple of ints. Black for iterations == max_iterations.
    """
    if iterations == max_iterations:
        return 0, 0, 0

    segments = palette.shape[0] - 1
    steps_per_segment = max_iterations // segments
    # Clamp so the remainder past the last full band stays in the last band
    segment = min(iterations // steps_per_segment, segments - 1)
    t = np.float32(iterations % steps_per_segment) / np.float32(steps_per_segment)

    r = _channel(palette[segment, 0], palette[segment + 1, 0], t)
    g = _channel(palette[segment, 1], palette[segment + 1, 1], t)
    b = _channel(palette[segment, 2], palette[segment + 1, 2], t)
    return r, g, b


def color_from_iterations(max_iterations, iterations, palette=PALETTE):
    """
    Map an iteration count to a Color.

    Args:
        max_iterations: Iteration budget the count was produced with
        iterations: Count in [0, max_iterations]
        palette: Palette array (default: the 7-stop PALETTE)

    Returns:
        Color named tuple

    Raises:
        InvalidFrameError: if the count is out of range or the budget is
            smaller than the number of palette segments
    """
    check_iteration_budget(max_iterations, palette)
    if not 0 <= iterations <= max_iterations:
        raise InvalidFrameError(
            f"iterations={iterations} outside [0, {max_iterations}]")
    return Color(*blend(palette, max_iterations, iterations))


@jit(nopython=True, parallel=True, cache=True)
def apply_palette(iterations, max_iterations, palette, out):
    """
    Colorize a grid of iteration counts into an RGBA image.

    Args:
        iterations: 2D array of counts from compute_iterations
        max_iterations: Iteration budget the counts were produced with
        palette: (N, 3) uint8 palette array
        out: (height, width, 4) uint8 output array (modified in place)
    """
    height, width = iterations.shape

    for py in prange(height):
        for px in range(width):
            r, g, b = blend(palette, max_iterations, iterations[py, px])
            out[py, px, 0] = r
            out[py, px, 1] = g
            out[py, px, 2] = b
            out[py, px, 3] = 255
