"""Design catalogs: loading, validation, lookup and grid mapping.

A design template is a string of rows joined by the variant's row delimiter
('.' by default). Each character names a palette slot through the variant's
alphabet. Catalog files hold one template per line; blank lines and lines
starting with '#' are ignored.
"""

from collections.abc import Sequence

from idpix.core.errors import DesignIndexOutOfBounds, MalformedTemplate
from idpix.core.types import Grid, Palette, Variant


def parse_catalog_file(path: str, variant: Variant) -> tuple[str, ...]:
    """Load and validate a catalog file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    return parse_catalog_string(text, variant)


def parse_catalog_string(text: str, variant: Variant) -> tuple[str, ...]:
    """Parse a catalog from a string, validating every template."""
    designs = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        designs.append(line)
    for index, template in enumerate(designs):
        validate_template(template, variant, index=index)
    return tuple(designs)


def validate_template(template: str, variant: Variant, index: int = 0) -> None:
    """Raise MalformedTemplate unless the template is a non-empty rectangle."""
    rows = template.split(variant.row_delimiter)
    if not template or any(not row for row in rows):
        raise MalformedTemplate(index, 'empty row')
    width = len(rows[0])
    for row_no, row in enumerate(rows[1:], start=1):
        if len(row) != width:
            raise MalformedTemplate(index, f'row {row_no} has {len(row)} cells, expected {width}')


def select_design(index: int, designs: Sequence[str]) -> str:
    if index < 0 or index >= len(designs):
        raise DesignIndexOutOfBounds(index, len(designs))
    return designs[index]


def _slot_index(char: str, alphabet: str) -> int:
    # Unknown characters fall back to slot 0 (transparent)
    pos = alphabet.find(char)
    return pos if pos >= 0 else 0


def map_grid(template: str, palette: Palette, variant: Variant) -> Grid:
    """Map every template character to its palette colour, or None.

    Rows are not checked for equal length here; catalogs loaded through
    parse_catalog_* are validated up front.
    """
    grid: Grid = []
    for row in template.split(variant.row_delimiter):
        cells: list[str | None] = []
        for char in row:
            slot = _slot_index(char, variant.alphabet)
            # slot 0 is transparent whatever the palette holds there
            cells.append(palette[slot] if 0 < slot < len(palette) else None)
        grid.append(cells)
    return grid
