"""MoonCat-style pixel cats from a 5-byte identifier.

Byte layout:
  0      genesis flag (non-zero = genesis)
  1      selector: design index = selector % 128, invert = selector >= 128
  2..4   RGB seed for the derived palette

Genesis cats use one of two fixed grey palettes, chosen by selector parity
XOR invert. Other cats derive five colours from the seed's hue at fixed
lightness presets, plus one accent at the hue rotated by 320 degrees.

No designs are built in: pass a catalog with --designs or IDPIX_DESIGNS.

Example:
    idpix mooncat 0x00800000ff --designs cats.txt -o cat.png
"""

from idpix.core.types import Variant

variant = Variant(
    name='mooncat',
    help='Decode a MoonCat-style identifier (genesis flag, selector, RGB seed).',
)
