"""Debug rendering of hash bits as black and white images."""

from __future__ import annotations

import io
import math
from pathlib import Path

import numpy as np
from PIL import Image

from .fs_utils import atomic_write_bytes
from .logging_utils import get_logger

_log = get_logger("rendering")

BLACK = 0
WHITE = 255


def hash_bit_grid(value: int) -> np.ndarray:
    """Return the square boolean grid encoded in a guarded hash value.

    Data bits are consumed from the most significant downward and laid out row
    by row; bits beyond the largest square are dropped. The guard bit is never
    drawn, so the first cell holds the first data bit, one bit later than in
    earlier debug images.
    """

    data_width = max(value.bit_length() - 1, 0)
    side = math.isqrt(data_width)
    grid = np.zeros((side, side), dtype=bool)
    bit_index = data_width - 1
    for row in range(side):
        for col in range(side):
            grid[row, col] = bool((value >> bit_index) & 1)
            bit_index -= 1
    return grid


def render_hash_image(value: int, block_size: int = 1) -> Image.Image:
    if block_size < 1:
        raise ValueError(f"block_size must be a positive integer, got {block_size}")
    grid = hash_bit_grid(value)
    pixels = np.where(grid, BLACK, WHITE).astype(np.uint8)
    if block_size > 1:
        pixels = np.kron(pixels, np.ones((block_size, block_size), dtype=np.uint8))
    _log.debug(
        "Rendered {}x{} hash grid at block size {}", grid.shape[0], grid.shape[1], block_size
    )
    return Image.fromarray(pixels)


def save_hash_image(image: Image.Image, destination: Path | str) -> Path:
    """Write a rendered hash image as PNG without exposing partial files."""

    path = Path(destination)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    atomic_write_bytes(path, buffer.getvalue())
    _log.debug("Saved hash image to {}", path)
    return path
