"""
Exceptions raised by the frame pipeline.
"""


class RenderError(Exception):
    """Base class for all mandelframe errors."""


class InvalidFrameError(RenderError, ValueError):
    """
    Frame parameters outside the renderable domain.

    Raised for zero or negative dimensions, a non-positive scale factor,
    a pan point outside the canvas, or an iteration budget too small
    for the palette.
    """


class SurfaceError(RenderError):
    """The host drawing surface rejected the frame's pixel data."""
