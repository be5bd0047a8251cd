"""Colour conversions and palette selection.

Palettes always have 6 slots. Slot 0 is None (transparent); slots 1-5 are
lowercase '#rrggbb' strings. Genesis identifiers pick one of two fixed grey
palettes; every other identifier derives its palette from the RGB seed by
walking lightness presets at the seed's hue (and one shifted hue) in HSL.
"""

import math

from idpix.core.types import BASE, SHIFTED, Fields, Palette, Variant


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Parse '#rrggbb', 'rrggbb' or '#rgb'. Invalid input returns black."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        return (0, 0, 0)
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return (0, 0, 0)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 0-255 RGB to HSL. H is in [0, 360), S and L in [0, 1]."""
    r_n, g_n, b_n = r / 255.0, g / 255.0, b / 255.0
    c_max = max(r_n, g_n, b_n)
    c_min = min(r_n, g_n, b_n)
    delta = c_max - c_min

    if delta == 0:
        h = 0.0
    elif c_max == r_n:
        h = 60.0 * math.fmod((g_n - b_n) / delta, 6.0)
    elif c_max == g_n:
        h = 60.0 * ((b_n - r_n) / delta + 2.0)
    else:
        h = 60.0 * ((r_n - g_n) / delta + 4.0)
    if h < 0:
        h += 360.0

    lightness = (c_max + c_min) / 2.0
    s = 0.0 if delta == 0 else delta / (1.0 - abs(2.0 * lightness - 1.0))
    return (h, s, lightness)


def _channel(v: float) -> int:
    # round half up, then clamp into a byte
    return max(0, min(255, math.floor(v * 255.0 + 0.5)))


def hsl_to_rgb(h: float, s: float, lightness: float) -> tuple[int, int, int]:
    """Convert HSL to 0-255 RGB using the six 60-degree sector formula."""
    c = (1.0 - abs(2.0 * lightness - 1.0)) * s
    x = c * (1.0 - abs(math.fmod(h / 60.0, 2.0) - 1.0))
    m = lightness - c / 2.0

    if h < 60:
        rp, gp, bp = c, x, 0.0
    elif h < 120:
        rp, gp, bp = x, c, 0.0
    elif h < 180:
        rp, gp, bp = 0.0, c, x
    elif h < 240:
        rp, gp, bp = 0.0, x, c
    elif h < 300:
        rp, gp, bp = x, 0.0, c
    else:
        rp, gp, bp = c, 0.0, x

    return (_channel(rp + m), _channel(gp + m), _channel(bp + m))


def hsl_to_hex(h: float, s: float, lightness: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, lightness))


def fixed_palette(selector: int, invert: bool, variant: Variant) -> Palette:
    """Pick the light or dark grey palette from selector parity and invert."""
    if (selector % 2 == 1) != invert:
        return variant.light_palette
    return variant.dark_palette


def derive_palette(r: int, g: int, b: int, invert: bool, variant: Variant) -> Palette:
    """Build slots 1-5 from the seed's hue and the variant's lightness presets."""
    base_hue, _s, _l = rgb_to_hsl(r, g, b)
    hues = {BASE: base_hue, SHIFTED: math.fmod(base_hue + variant.hue_shift, 360.0)}
    slots = variant.inverted_slots if invert else variant.forward_slots
    return (None,) + tuple(hsl_to_hex(hues[source], variant.saturation, lightness) for source, lightness in slots)


def select_palette(fields: Fields, variant: Variant) -> Palette:
    if fields.flag:
        return fixed_palette(fields.selector, fields.invert, variant)
    return derive_palette(fields.r, fields.g, fields.b, fields.invert, variant)
