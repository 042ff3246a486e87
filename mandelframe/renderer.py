"""
Frame building and asynchronous rendering.

render_frame / get_pixels run the whole pipeline for one frame:
viewport mapping, escape-time counts, palette lookup, RGBA packing.
Each call recomputes the full frame from scratch.

FrameRenderer wraps that in a background thread so an interactive host
stays responsive while a frame is computed.
"""

import logging
import threading
import time

import numpy as np

from .colormaps import PALETTE, apply_palette, check_iteration_budget
from .compute import MAX_ITERATIONS, compute_iterations
from .errors import RenderError
from .viewport import DEFAULT_VIEWPORT, zoomed_viewport

logger = logging.getLogger(__name__)


class Screen:
    """
    A rendered frame: dimensions plus row-major RGBA8 bytes.

    Pixel (row i, column j) occupies bytes [4 * (i * width + j), +4).
    """

    def __init__(self, width, height, pixels):
        if len(pixels) != width * height * 4:
            raise RenderError(
                f"Frame buffer holds {len(pixels)} bytes, expected "
                f"{width * height * 4} for {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = bytes(pixels)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def pixels(self):
        """Raw RGBA bytes, ready for an image API taking width/height."""
        return self._pixels

    def as_array(self):
        """Read-only (height, width, 4) uint8 view of the pixels."""
        return np.frombuffer(self._pixels, dtype=np.uint8).reshape(
            self._height, self._width, 4)

    def __len__(self):
        return len(self._pixels)

    def __repr__(self):
        return f"Screen({self._width}x{self._height})"


def render_rgba(width, height, mouse_x, mouse_y, scale_factor,
                max_iterations=MAX_ITERATIONS, palette=PALETTE):
    """
    Render a frame into a (height, width, 4) uint8 array.

    Args:
        width, height: Canvas dimensions in pixels
        mouse_x, mouse_y: Pan point in pixels
        scale_factor: Zoom level, > 0
        max_iterations: Iteration budget per pixel (default 200)
        palette: Palette array (default: the 7-stop PALETTE)

    Raises:
        InvalidFrameError: for parameters outside the renderable domain
    """
    window = zoomed_viewport(width, height, mouse_x, mouse_y, scale_factor,
                             DEFAULT_VIEWPORT)
    check_iteration_budget(max_iterations, palette)

    start = time.perf_counter()
    counts = compute_iterations(
        window.x_start, window.x_end, window.y_start, window.y_end,
        width, height, max_iterations
    )
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    apply_palette(counts, max_iterations, palette, rgba)

    logger.debug(
        "Rendered %dx%d frame at pan (%d, %d) scale %g in %.3fs",
        width, height, mouse_x, mouse_y, scale_factor,
        time.perf_counter() - start,
    )
    return rgba


def get_pixels(width, height, mouse_x, mouse_y, scale_factor,
               max_iterations=MAX_ITERATIONS):
    """Render a frame and return its width * height * 4 RGBA bytes."""
    rgba = render_rgba(width, height, mouse_x, mouse_y, scale_factor,
                       max_iterations)
    return rgba.tobytes()


def render_frame(width, height, mouse_x, mouse_y, scale_factor,
                 max_iterations=MAX_ITERATIONS):
    """Render a frame and wrap it in a Screen."""
    pixels = get_pixels(width, height, mouse_x, mouse_y, scale_factor,
                        max_iterations)
    return Screen(width, height, pixels)


class FrameRenderer:
    """
    Renders frames on a background thread.

    Usage:
        renderer = FrameRenderer(800, 600)
        renderer.compute_async(mouse_x, mouse_y, scale_factor)

        # In your game loop:
        screen = renderer.get_result()
        if screen is not None:
            display(screen)

    Requests made while a frame is being computed are coalesced: only
    the most recent one is rendered next.
    """

    def __init__(self, width, height, max_iterations=MAX_ITERATIONS):
        self.width = width
        self.height = height
        self.max_iterations = max_iterations

        self.computing = False
        self.result_ready = False
        self.pending_request = None
        self.result = None
        self.last_error = None
        self.lock = threading.Lock()
        self._thread = None

    def compute_async(self, mouse_x, mouse_y, scale_factor):
        """
        Queue a frame for the given pan point and zoom.

        Raises:
            InvalidFrameError: immediately, if the request is not renderable
        """
        zoomed_viewport(self.width, self.height, mouse_x, mouse_y, scale_factor)

        with self.lock:
            self.pending_request = (mouse_x, mouse_y, scale_factor)
            if not self.computing:
                self.computing = True
                self._thread = threading.Thread(target=self._compute_thread)
                self._thread.daemon = True
                self._thread.start()

    def _compute_thread(self):
        """Background thread draining pending requests."""
        while True:
            with self.lock:
                request = self.pending_request
                self.pending_request = None
                if request is None:
                    self.computing = False
                    break

            try:
                screen = render_frame(self.width, self.height, *request,
                                      max_iterations=self.max_iterations)
            except RenderError as e:
                logger.warning("Render of %r failed: %s", request, e)
                with self.lock:
                    self.last_error = e
                continue
            except Exception as e:
                logger.exception("Unexpected error rendering %r", request)
                with self.lock:
                    self.last_error = e
                continue

            with self.lock:
                self.result = screen
                self.result_ready = True
                self.last_error = None

    def get_result(self):
        """
        Get the latest frame if a new one is ready.

        Returns:
            Screen if a frame finished since the last call, None otherwise.
        """
        with self.lock:
            if self.result_ready:
                self.result_ready = False
                return self.result
        return None

    def wait(self, timeout=None):
        """Block until the background thread has drained all requests."""
        thread = self._thread
        if thread is not None:
            thread.join(timeout)
        with self.lock:
            return not self.computing
