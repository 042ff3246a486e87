"""
Pixel to complex-plane mapping under pan and zoom.

The pan point arrives in pixel coordinates (typically the mouse
position) and is mapped through the default, unzoomed viewport. The
zoomed window is then centred on it, shrunk by the scale factor, and
every pixel maps linearly into that window.
"""

import math
import numbers
from collections import namedtuple

from .complex_math import Complex
from .errors import InvalidFrameError


class Viewport(namedtuple('Viewport', ['x_start', 'x_end', 'y_start', 'y_end'])):
    """Rectangle in the complex plane mapped onto the pixel raster."""

    __slots__ = ()

    @property
    def width(self):
        return self.x_end - self.x_start

    @property
    def height(self):
        return self.y_end - self.y_start


# Classic overview of the set
DEFAULT_VIEWPORT = Viewport(-2.0, 2.5, -1.0, 1.0)


def validate_frame(width, height, mouse_x, mouse_y, scale_factor):
    """
    Reject frame parameters the mapping is undefined for.

    Raises:
        InvalidFrameError: for non-integer, zero or negative dimensions, a pan point
            outside [0, width) x [0, height), or a scale factor that is
            not a positive finite number.
    """
    if not (isinstance(width, numbers.Integral) and isinstance(height, numbers.Integral)):
        raise InvalidFrameError(
            f"Canvas dimensions must be integers, got {width!r}x{height!r}")
    if width <= 0 or height <= 0:
        raise InvalidFrameError(
            f"Canvas dimensions must be positive, got {width}x{height}")
    if not (0 <= mouse_x < width and 0 <= mouse_y < height):
        raise InvalidFrameError(
            f"Pan point ({mouse_x}, {mouse_y}) lies outside the "
            f"{width}x{height} canvas")
    if not (scale_factor > 0 and math.isfinite(scale_factor)):
        raise InvalidFrameError(
            f"Scale factor must be positive and finite, got {scale_factor}")


def pan_point(width, height, mouse_x, mouse_y, viewport=DEFAULT_VIEWPORT):
    """Map the pan pixel to plane coordinates using the unzoomed viewport."""
    x = viewport.x_start + mouse_x * (viewport.x_end - viewport.x_start) / width
    y = viewport.y_start + mouse_y * (viewport.y_end - viewport.y_start) / height
    return Complex(x, y)


def zoomed_viewport(width, height, mouse_x, mouse_y, scale_factor,
                    viewport=DEFAULT_VIEWPORT):
    """
    Compute the window rendered for a given pan point and zoom.

    Args:
        width, height: Canvas dimensions in pixels
        mouse_x, mouse_y: Pan point in pixels
        scale_factor: Zoom; values above 1 narrow the window
        viewport: Unzoomed viewport the pan point is measured against

    Returns:
        Viewport of size viewport.width / scale_factor by
        viewport.height / scale_factor centred on the pan point.

    Raises:
        InvalidFrameError: if the parameters fail validate_frame
    """
    validate_frame(width, height, mouse_x, mouse_y, scale_factor)

    center = pan_point(width, height, mouse_x, mouse_y, viewport)
    new_width = viewport.width / scale_factor
    new_height = viewport.height / scale_factor

    return Viewport(
        center.re - new_width / 2.0,
        center.re + new_width / 2.0,
        center.im - new_height / 2.0,
        center.im + new_height / 2.0,
    )


def pixel_to_complex(window, px, py, width, height):
    """
    Map pixel column px and row py into the given window.

    Uses the same evaluation order as the frame kernel in compute.py so
    both produce identical coordinates.
    """
    x = window.x_start + px * (window.x_end - window.x_start) / width
    y = window.y_start + py * (window.y_end - window.y_start) / height
    return Complex(x, y)
