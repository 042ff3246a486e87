"""
Interactive viewer for mandelframe.

Contains the FrameViewerApp class which handles:
- Window setup and main loop
- User input (pan point, zoom, keyboard)
- Asynchronous rendering and display

The pan point is always measured against the default viewport, so
clicking the same pixel always targets the same point of the plane
whatever the current zoom.
"""

import logging
import os
from datetime import datetime

import pygame

from .canvas import save_image, to_surface
from .colormaps import PALETTE
from .compute import warmup_jit
from .config import load_settings
from .errors import RenderError
from .renderer import FrameRenderer

logger = logging.getLogger(__name__)


class FrameViewerApp:
    """
    Main application class for the viewer.

    Handles the pygame window, event loop, and hands pan/zoom requests
    to a FrameRenderer.
    """

    CAPTION = "mandelframe - click to pan, scroll to zoom, R to reset, S to save"

    def __init__(self, settings=None):
        """
        Initialize the application.

        Args:
            settings: dict as returned by config.load_settings (default: loaded
                from settings.json)
        """
        self.settings = settings or load_settings()
        self.width = self.settings['window_width']
        self.height = self.settings['window_height']

        self.mouse_x, self.mouse_y = self.width // 2, self.height // 2
        self.scale_factor = self.settings['initial_scale']

        # Pygame state (initialized in run())
        self.display = None
        self.clock = None

        self.renderer = FrameRenderer(self.width, self.height)
        self.current_screen = None
        self.current_surface = None

        self.last_action_time = 0
        self.pending_render = True
        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._warmup()

        self.running = True
        while self.running:
            current_time = pygame.time.get_ticks()

            self._handle_events(current_time)
            self._check_render_result()
            self._maybe_start_render(current_time)
            self._draw()

            self.clock.tick(60)

        pygame.quit()

    def _init_pygame(self):
        pygame.init()
        self.display = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.CAPTION)
        self.clock = pygame.time.Clock()

    def _warmup(self):
        """Compile the kernels before the first frame."""
        pygame.display.set_caption("Compiling (first run only)...")
        warmup_jit(PALETTE)
        pygame.display.set_caption(self.CAPTION)

    def _handle_events(self, current_time):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.MOUSEWHEEL:
                self.handle_zoom(event.y, pygame.mouse.get_pos(), current_time)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_pan(event.pos, current_time)
            elif event.type == pygame.KEYDOWN:
                self._handle_key(event, current_time)

    def handle_pan(self, pos, current_time):
        """Move the pan point to a pixel position."""
        x, y = pos
        self.mouse_x = min(max(int(x), 0), self.width - 1)
        self.mouse_y = min(max(int(y), 0), self.height - 1)
        self._request_render(current_time)

    def handle_zoom(self, direction, pos, current_time):
        """Zoom in (direction > 0) or out, centred on pos."""
        if direction > 0:
            self.scale_factor *= self.settings['zoom_in_factor']
        else:
            self.scale_factor *= self.settings['zoom_out_factor']
        self.handle_pan(pos, current_time)

    def reset(self, current_time=0):
        """Return to the default view."""
        self.mouse_x, self.mouse_y = self.width // 2, self.height // 2
        self.scale_factor = self.settings['initial_scale']
        self._request_render(current_time)

    def _request_render(self, current_time):
        self.last_action_time = current_time
        self.pending_render = True

    def _handle_key(self, event, current_time):
        if event.key == pygame.K_r:
            self.reset(current_time)
        elif event.key == pygame.K_s:
            self._save_image()
        elif event.key == pygame.K_ESCAPE:
            self.running = False

    def _save_image(self):
        """Save the current frame as a timestamped PNG in the working directory."""
        if self.current_screen is None:
            return
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = os.path.abspath(f"mandelframe_{timestamp}.png")
        try:
            save_image(self.current_screen, filename)
        except RenderError as e:
            logger.warning("Saving failed: %s", e)
            return
        pygame.display.set_caption(f"Saved: {os.path.basename(filename)}")

    def _check_render_result(self):
        """Pick up a finished frame from the renderer."""
        screen = self.renderer.get_result()
        if screen is None:
            return
        try:
            self.current_surface = to_surface(screen)
        except RenderError as e:
            logger.warning("Dropping frame: %s", e)
            return
        self.current_screen = screen
        pygame.display.set_caption(f"{self.CAPTION} (x{self.scale_factor:g})")

    def _maybe_start_render(self, current_time):
        """Start a new render once input has settled."""
        delay = self.settings['render_delay_ms']
        if self.pending_render and current_time - self.last_action_time > delay:
            self.pending_render = False
            try:
                self.renderer.compute_async(self.mouse_x, self.mouse_y, self.scale_factor)
            except RenderError as e:
                logger.warning("Render request rejected: %s", e)
                return
            pygame.display.set_caption("Computing...")

    def _draw(self):
        self.display.fill((0, 0, 0))
        if self.current_surface is not None:
            self.display.blit(self.current_surface, (0, 0))
        pygame.display.flip()


def run(settings=None):
    """
    Run the viewer.

    Args:
        settings: Optional settings dict (see config.load_settings)
    """
    app = FrameViewerApp(settings)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
