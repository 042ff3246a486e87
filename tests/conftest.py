import os

import numpy as np
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


STOPS = [
    (0, 0, 255),
    (255, 0, 255),
    (255, 0, 0),
    (255, 255, 0),
    (0, 255, 0),
    (255, 255, 255),
    (0, 0, 0),
]


def slow_frame(width, height, mouse_x, mouse_y, scale_factor, max_iterations=200):
    """Plain-Python rendering of a frame, one pixel at a time."""
    x_start, x_end, y_start, y_end = -2.0, 2.5, -1.0, 1.0

    pan_x = x_start + mouse_x * (x_end - x_start) / width
    pan_y = y_start + mouse_y * (y_end - y_start) / height
    new_width = (x_end - x_start) / scale_factor
    new_height = (y_end - y_start) / scale_factor
    nx0, nx1 = pan_x - new_width / 2.0, pan_x + new_width / 2.0
    ny0, ny1 = pan_y - new_height / 2.0, pan_y + new_height / 2.0

    segments = len(STOPS) - 1
    steps = max_iterations // segments
    out = bytearray()
    for i in range(height):
        for j in range(width):
            cr = nx0 + j * (nx1 - nx0) / width
            ci = ny0 + i * (ny1 - ny0) / height
            zr, zi, n = 0.0, 0.0, 0
            while n < max_iterations and zi * zi + zr * zr < 4.0:
                zr, zi = zr * zr - zi * zi + cr, 2.0 * (zr * zi) + ci
                n += 1
            if n == max_iterations:
                rgb = (0, 0, 0)
            else:
                seg = min(n // steps, segments - 1)
                t = np.float32(n % steps) / np.float32(steps)
                rgb = tuple(
                    int(np.float32(a) + t * (np.float32(b) - np.float32(a)))
                    for a, b in zip(STOPS[seg], STOPS[seg + 1])
                )
            out.extend(rgb)
            out.append(255)
    return bytes(out)


@pytest.fixture
def reference_frame():
    return slow_frame
