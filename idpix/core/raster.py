"""Rasterize colour grids into RGBA images and write scaled PNGs.

One pixel per cell. None -> fully transparent, '#rrggbb' -> opaque.
Unparseable colours render as opaque black. Image width comes from the
first row: short rows are padded with transparency, long rows are cut.
"""

import os

import numpy as np
from PIL import Image

from idpix.core.palette import hex_to_rgb
from idpix.core.types import DEFAULT_SCALE, Grid


def rasterize(grid: Grid) -> Image.Image:
    if not grid or not grid[0]:
        raise ValueError('cannot create image from empty pixel data')

    height = len(grid)
    width = len(grid[0])
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row[:width]):
            if cell is None:
                continue
            r, g, b = hex_to_rgb(cell)
            arr[y, x] = [r, g, b, 255]
    return Image.fromarray(arr)


def upscale(image: Image.Image, factor: int) -> Image.Image:
    """Nearest-neighbour upscale by an integer factor."""
    if factor < 1:
        raise ValueError(f'scale factor must be >= 1, got {factor}')
    if factor == 1:
        return image.copy()
    return image.resize((image.width * factor, image.height * factor), Image.Resampling.NEAREST)


def render_png(grid: Grid, path: str, scale: int = DEFAULT_SCALE) -> str:
    """Rasterize, upscale and save the grid as PNG. Returns the path written."""
    image = upscale(rasterize(grid), scale)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image.save(path, format='PNG')
    return path
