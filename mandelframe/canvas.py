"""
Pygame drawing-surface binding.

Turns a rendered Screen into a pygame Surface and blits it, the way a
browser canvas would take raw RGBA image data. Failures building or
saving the image are raised as SurfaceError rather than as pygame or
ValueError exceptions.
"""

import logging

import pygame

from .errors import SurfaceError
from .renderer import render_frame

logger = logging.getLogger(__name__)


def to_surface(screen):
    """
    Build a pygame Surface from a Screen's RGBA bytes.

    The returned surface owns a copy of the pixels, so it stays valid
    after the Screen is discarded.

    Raises:
        SurfaceError: if pygame rejects the buffer for the given size
    """
    return surface_from_buffer(screen.pixels, screen.width, screen.height)


def surface_from_buffer(pixels, width, height):
    """
    Build a pygame Surface from raw row-major RGBA8 bytes.

    Raises:
        SurfaceError: if the buffer length does not match width * height * 4
            or pygame otherwise refuses the data
    """
    try:
        surface = pygame.image.frombuffer(pixels, (width, height), 'RGBA')
    except (ValueError, pygame.error) as e:
        raise SurfaceError(
            f"Cannot build a {width}x{height} RGBA surface from "
            f"{len(pixels)} bytes: {e}") from e
    return surface.copy()


def draw(target, width, height, mouse_x, mouse_y, scale_factor):
    """
    Render a frame and blit it onto target at (0, 0).

    Args:
        target: pygame Surface to draw on
        width, height: Frame dimensions in pixels
        mouse_x, mouse_y: Pan point in pixels
        scale_factor: Zoom level, > 0

    Returns:
        The rendered Screen

    Raises:
        InvalidFrameError: for parameters outside the renderable domain
        SurfaceError: if the frame cannot be turned into a surface
    """
    logger.debug("Drawing %dx%d frame", width, height)
    screen = render_frame(width, height, mouse_x, mouse_y, scale_factor)
    target.blit(to_surface(screen), (0, 0))
    return screen


def save_image(screen, path):
    """
    Write a Screen to an image file (format chosen by extension).

    Raises:
        SurfaceError: if pygame cannot encode or write the file
    """
    surface = to_surface(screen)
    try:
        pygame.image.save(surface, str(path))
    except (pygame.error, OSError) as e:
        raise SurfaceError(f"Could not save image to {path}: {e}") from e
    logger.info("Saved %dx%d frame to %s", screen.width, screen.height, path)
