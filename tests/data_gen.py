# tests/data_gen.py
"""
Tiny synthetic-image generators reused across the colorquant test suite.

All images are (H, W, 3) uint8 numpy arrays in row-major order.

    >>> img = make_two_color_image()
    >>> img.shape
    (1, 2, 3)
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import numpy as np

NDArray = np.ndarray

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def make_two_color_image() -> NDArray:
    """The 2x1 image with a pure red and a pure blue pixel."""
    return np.array([[RED, BLUE]], dtype=np.uint8)


def make_solid_image(width: int = 8, height: int = 6,
                     color: Tuple[int, int, int] = (12, 200, 77)) -> NDArray:
    """Every pixel the same color."""
    img = np.empty((height, width, 3), dtype=np.uint8)
    img[:, :] = color
    return img


def make_stripes_image(colors: Sequence[Tuple[int, int, int]],
                       stripe_height: int = 4,
                       width: int = 10) -> NDArray:
    """Horizontal stripes, one per color, each stripe_height rows tall."""
    rows = []
    for color in colors:
        stripe = np.empty((stripe_height, width, 3), dtype=np.uint8)
        stripe[:, :] = color
        rows.append(stripe)
    return np.concatenate(rows, axis=0)


def make_noisy_palette_image(
    palette: Sequence[Tuple[int, int, int]],
    width: int = 40,
    height: int = 30,
    noise: float = 4.0,
    seed: Optional[int] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Pixels drawn from a small palette plus Gaussian noise.

    Returns
    -------
    img : (height, width, 3) uint8
    y : (height*width,) index of the palette color each pixel came from
    """
    rng = np.random.default_rng(seed)
    palette_np = np.asarray(palette, dtype=np.float64)
    y = rng.integers(0, len(palette_np), size=height * width)
    pixels = palette_np[y] + rng.normal(scale=noise, size=(height * width, 3))
    pixels = np.clip(np.rint(pixels), 0, 255).astype(np.uint8)
    return pixels.reshape(height, width, 3), y


def make_random_image(width: int = 32, height: int = 24,
                      seed: Optional[int] = None) -> NDArray:
    """Uniform random colors."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)
