"""
Minimal complex arithmetic for the escape-time kernels.

Complex values are named tuples of two float64 components so that
Numba can build and unpack them inside nopython code. Every operation
returns a fresh value.
"""

from collections import namedtuple

from numba import jit


Complex = namedtuple('Complex', ['re', 'im'])


@jit(nopython=True, cache=True)
def add(a, b):
    """Component-wise sum of two complex values."""
    return Complex(a.re + b.re, a.im + b.im)


@jit(nopython=True, cache=True)
def square(a):
    """Compute a² = (re² - im², 2·re·im)."""
    return Complex(a.re * a.re - a.im * a.im, 2.0 * (a.re * a.im))


@jit(nopython=True, cache=True)
def squared_norm(a):
    """
    Squared magnitude re² + im².

    Avoids the square root in the hot loop; compare the result against
    the square of the escape radius.
    """
    return a.im * a.im + a.re * a.re
