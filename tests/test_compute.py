import numpy as np
import pytest

from mandelframe.complex_math import Complex
from mandelframe.compute import (
    ESCAPE_RADIUS_SQUARED,
    MAX_ITERATIONS,
    compute_iterations,
    escape_time,
)

ORIGIN = Complex(0.0, 0.0)


def test_constants():
    assert MAX_ITERATIONS == 200
    assert ESCAPE_RADIUS_SQUARED == 4.0


@pytest.mark.parametrize("c", [
    Complex(0.0, 0.0),
    Complex(-1.0, 0.0),
    Complex(0.25, 0.0),
    Complex(-0.875, 0.0),
    Complex(-0.1, 0.1),
])
def test_points_inside_the_set_exhaust_the_budget(c):
    assert escape_time(c, ORIGIN, MAX_ITERATIONS) == MAX_ITERATIONS


@pytest.mark.parametrize("c", [
    Complex(2.5, 0.0),
    Complex(-2.0, -1.0),
    Complex(0.0, 2.01),
    Complex(-3.0, 3.0),
    Complex(1e6, -1e6),
])
def test_points_outside_radius_escape_after_first_step(c):
    # The origin never meets the escape test; z = c after one step does
    assert escape_time(c, ORIGIN, MAX_ITERATIONS) == 1


def test_starting_value_outside_radius_returns_zero():
    assert escape_time(Complex(0.0, 0.0), Complex(3.0, 0.0), MAX_ITERATIONS) == 0


def test_escape_on_exact_radius():
    # squared norm exactly 4 counts as escaped
    assert escape_time(Complex(-2.0, 0.0), ORIGIN, MAX_ITERATIONS) == 1


@pytest.mark.parametrize("c, expected", [
    (Complex(1.375, 0.0), 2),
    (Complex(1.375, -0.5), 2),
    (Complex(-0.875, -1.0), 3),
    (Complex(0.25, -1.0), 4),
])
def test_escape_counts(c, expected):
    assert escape_time(c, ORIGIN, MAX_ITERATIONS) == expected


def test_zero_budget_returns_zero():
    assert escape_time(Complex(5.0, 5.0), ORIGIN, 0) == 0


def test_count_never_exceeds_budget():
    assert escape_time(ORIGIN, ORIGIN, 7) == 7


def test_z0_is_honoured():
    # z0 = -1 with c = 0 stays on the unit circle forever
    assert escape_time(Complex(0.0, 0.0), Complex(-1.0, 0.0), 50) == 50
    # z0 = 1.5 with c = 0: 1.5 -> 2.25 (escaped)
    assert escape_time(Complex(0.0, 0.0), Complex(1.5, 0.0), 50) == 1


def test_compute_iterations_shape_and_dtype():
    counts = compute_iterations(-2.0, 2.5, -1.0, 1.0, 7, 3, MAX_ITERATIONS)
    assert counts.shape == (3, 7)
    assert counts.dtype == np.int32
    assert counts.min() >= 0
    assert counts.max() <= MAX_ITERATIONS


def test_compute_iterations_matches_per_point_evaluation():
    width, height = 12, 9
    x0, x1, y0, y1 = -1.7, 0.6, -1.1, 1.05
    counts = compute_iterations(x0, x1, y0, y1, width, height, MAX_ITERATIONS)
    for i in range(height):
        for j in range(width):
            c = Complex(x0 + j * (x1 - x0) / width, y0 + i * (y1 - y0) / height)
            assert counts[i, j] == escape_time(c, ORIGIN, MAX_ITERATIONS)


def test_compute_iterations_known_grid():
    counts = compute_iterations(-2.0, 2.5, -1.0, 1.0, 4, 4, MAX_ITERATIONS)
    assert list(counts[0]) == [1, 3, 4, 2]
    assert list(counts[2]) == [1, 200, 200, 2]
    # conjugate rows escape at the same time
    assert list(counts[1]) == list(counts[3])
