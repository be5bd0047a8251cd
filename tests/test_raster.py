"""Tests for idpix.core.raster — grid rasterization and PNG output."""

from pathlib import Path

import numpy as np
import pytest
from idpix.core.raster import rasterize, render_png, upscale
from PIL import Image


class TestRasterize:
    def test_transparent_and_opaque(self):
        img = rasterize([[None, '#330000'], ['#00ff00', None]])
        assert img.mode == 'RGBA'
        assert img.size == (2, 2)
        assert img.getpixel((0, 0)) == (0, 0, 0, 0)
        assert img.getpixel((1, 0)) == (0x33, 0, 0, 255)
        assert img.getpixel((0, 1)) == (0, 255, 0, 255)

    def test_invalid_colour_is_opaque_black(self):
        img = rasterize([['not-a-colour']])
        assert img.getpixel((0, 0)) == (0, 0, 0, 255)

    def test_width_from_first_row(self):
        img = rasterize([['#ffffff', '#ffffff'], ['#ffffff'], ['#ffffff'] * 4])
        assert img.size == (2, 3)
        # short row padded with transparency
        assert img.getpixel((1, 1))[3] == 0
        # long row cut at the first row's width
        assert img.getpixel((1, 2)) == (255, 255, 255, 255)

    def test_empty_grid(self):
        with pytest.raises(ValueError, match='empty pixel data'):
            rasterize([])

    def test_empty_first_row(self):
        with pytest.raises(ValueError):
            rasterize([[]])


class TestUpscale:
    def test_nearest_keeps_hard_edges(self):
        img = upscale(rasterize([[None, '#ff0000']]), 4)
        assert img.size == (8, 4)
        arr = np.array(img)
        assert set(arr[:, :4, 3].flatten()) == {0}
        assert (arr[:, 4:] == [255, 0, 0, 255]).all()

    def test_factor_one_copies(self):
        src = rasterize([['#123456']])
        out = upscale(src, 1)
        assert out is not src
        assert out.getpixel((0, 0)) == (0x12, 0x34, 0x56, 255)

    def test_zero_factor(self):
        with pytest.raises(ValueError, match='>= 1'):
            upscale(rasterize([['#123456']]), 0)


class TestRenderPng:
    def test_writes_scaled_png(self, tmp_path: Path) -> None:
        out = tmp_path / 'nested' / 'cat.png'
        path = render_png([[None, '#330000'], ['#330000', None]], str(out), scale=3)
        assert path == str(out)
        img = Image.open(out)
        assert img.format == 'PNG'
        assert img.size == (6, 6)
        assert img.convert('RGBA').getpixel((4, 1)) == (0x33, 0, 0, 255)
