"""
mandelframe

Renders false-color frames of the Mandelbrot set for any pan point and
zoom level, using Numba JIT-compiled kernels for the escape-time
iteration and Pygame to display or save the result.

Quick Start:
    from mandelframe import render_frame
    screen = render_frame(900, 400, 450, 200, 1.0)
    screen.pixels  # 900 * 400 * 4 RGBA bytes

Or from command line:
    python -m mandelframe                      # interactive viewer
    python -m mandelframe --output frame.png   # one frame, headless

Package Structure:
    - complex_math.py: Complex value type and arithmetic
    - viewport.py: Pixel to complex-plane mapping under pan/zoom
    - compute.py: JIT-compiled escape-time kernels
    - colormaps.py: Palette and gradient color mapping
    - renderer.py: Frame building and async rendering
    - canvas.py: Pygame surface binding
    - config.py: Viewer settings
    - app.py: Interactive viewer

Controls (viewer):
    - Click: Pan to the clicked point
    - Scroll: Zoom in/out at mouse position
    - R: Reset to default view
    - S: Save the current frame as PNG
    - ESC: Quit
"""

from .colormaps import PALETTE, Color, color_from_iterations
from .complex_math import Complex, add, square, squared_norm
from .compute import ESCAPE_RADIUS_SQUARED, MAX_ITERATIONS, escape_time
from .errors import InvalidFrameError, RenderError, SurfaceError
from .renderer import FrameRenderer, Screen, get_pixels, render_frame
from .viewport import DEFAULT_VIEWPORT, Viewport, pixel_to_complex, zoomed_viewport

__version__ = "1.0.0"
__all__ = [
    "Color",
    "Complex",
    "DEFAULT_VIEWPORT",
    "ESCAPE_RADIUS_SQUARED",
    "FrameRenderer",
    "InvalidFrameError",
    "MAX_ITERATIONS",
    "PALETTE",
    "RenderError",
    "Screen",
    "SurfaceError",
    "Viewport",
    "add",
    "color_from_iterations",
    "escape_time",
    "get_pixels",
    "pixel_to_complex",
    "render_frame",
    "square",
    "squared_norm",
    "zoomed_viewport",
]
