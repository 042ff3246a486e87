"""
Escape-time computation using Numba JIT compilation.

This module contains the performance-critical functions:
- escape_time: iterate z ← z² + c for a single point
- compute_iterations: iteration counts for every pixel of a window,
  rows computed in parallel

The kernels are compiled without fastmath so frames are reproducible
bit for bit across runs and machines.
"""

import numpy as np
from numba import jit, prange

from .complex_math import Complex, add, square, squared_norm


MAX_ITERATIONS = 200
ESCAPE_RADIUS_SQUARED = 4.0  # escape radius 2


@jit(nopython=True, cache=True)
def escape_time(c, z0, max_iterations):
    """
    Count iterations of z ← z² + c until z escapes or the budget runs out.

    Args:
        c: Per-pixel parameter (Complex)
        z0: Starting value of z (Complex); the origin for the Mandelbrot set
        max_iterations: Iteration budget

    Returns:
        Iteration count in [0, max_iterations]. max_iterations means the
        point did not escape and is treated as inside the set.
    """
    i = 0
    z = Complex(float(z0.re), float(z0.im))
    while i < max_iterations and squared_norm(z) < ESCAPE_RADIUS_SQUARED:
        z = add(square(z), c)
        i += 1
    return i


@jit(nopython=True, parallel=True, cache=True)
def compute_iterations(x_start, x_end, y_start, y_end, width, height, max_iterations):
    """
    Compute escape-time counts for every pixel of a window.

    Row i and column j map to
    (x_start + j * (x_end - x_start) / width,
     y_start + i * (y_end - y_start) / height),
    the same expressions viewport.pixel_to_complex uses.

    Args:
        x_start, x_end: Real axis bounds of the window
        y_start, y_end: Imaginary axis bounds of the window
        width, height: Output dimensions in pixels
        max_iterations: Iteration budget per pixel

    Returns:
        2D int32 array of shape (height, width), row-major.
    """
    result = np.empty((height, width), dtype=np.int32)
    origin = Complex(0.0, 0.0)

    for i in prange(height):
        y = y_start + i * (y_end - y_start) / height
        for j in range(width):
            x = x_start + j * (x_end - x_start) / width
            result[i, j] = escape_time(Complex(x, y), origin, max_iterations)

    return result


def warmup_jit(palette):
    """
    Warm up JIT compilation with a tiny frame.

    Call this once at startup so the first real render does not pay
    the compile cost.

    Args:
        palette: Palette array passed through to apply_palette
    """
    from .colormaps import apply_palette

    counts = compute_iterations(-2.0, 2.5, -1.0, 1.0, 8, 8, MAX_ITERATIONS)
    out = np.empty((8, 8, 4), dtype=np.uint8)
    apply_palette(counts, MAX_ITERATIONS, palette, out)
