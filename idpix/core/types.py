"""Shared types for idpix: Variant, Fields, Decoded, Palette, Grid."""

from __future__ import annotations

from dataclasses import dataclass, field

Palette = tuple[str | None, ...]
Grid = list[list[str | None]]

# (hue source, lightness) for palette slots 1..5
SlotSpec = tuple[str, float]

BASE = 'base'
SHIFTED = 'shifted'

DEFAULT_SCALE = 12

LIGHT_GREYS: Palette = (None, '#555555', '#d3d3d3', '#ffffff', '#aaaaaa', '#ff9999')
DARK_GREYS: Palette = (None, '#555555', '#222222', '#111111', '#bbbbbb', '#ff9999')

FORWARD_SLOTS: tuple[SlotSpec, ...] = (
    (BASE, 0.10),
    (BASE, 0.20),
    (BASE, 0.45),
    (BASE, 0.70),
    (SHIFTED, 0.80),
)

# Not a reversal of FORWARD_SLOTS: slots 3-5 are reordered as well.
INVERTED_SLOTS: tuple[SlotSpec, ...] = (
    (BASE, 0.10),
    (BASE, 0.70),
    (SHIFTED, 0.80),
    (BASE, 0.20),
    (BASE, 0.45),
)


@dataclass(frozen=True)
class Variant:
    """Byte layout, palette rules and template alphabet for one collection.

    Usage in a variant module:

        variant = Variant(name='mooncat', help='MoonCat pixel cats')
    """

    name: str
    help: str = ''
    min_bytes: int = 5
    flag_offset: int = 0
    selector_offset: int = 1
    seed_offset: int = 2  # r, g, b follow consecutively
    invert_threshold: int = 128
    light_palette: Palette = LIGHT_GREYS
    dark_palette: Palette = DARK_GREYS
    forward_slots: tuple[SlotSpec, ...] = FORWARD_SLOTS
    inverted_slots: tuple[SlotSpec, ...] = INVERTED_SLOTS
    hue_shift: float = 320.0
    saturation: float = 1.0
    row_delimiter: str = '.'
    alphabet: str = '0123456789'
    designs: tuple[str, ...] = ()

    def __post_init__(self):
        for label, palette in (('light_palette', self.light_palette), ('dark_palette', self.dark_palette)):
            if len(palette) != 6 or palette[0] is not None:
                raise ValueError(f'{self.name}: {label} needs 6 slots with None at slot 0')
        for label, slots in (('forward_slots', self.forward_slots), ('inverted_slots', self.inverted_slots)):
            if len(slots) != 5:
                raise ValueError(f'{self.name}: {label} needs 5 entries, got {len(slots)}')
            if any(source not in (BASE, SHIFTED) for source, _lightness in slots):
                raise ValueError(f'{self.name}: {label} hue source must be {BASE!r} or {SHIFTED!r}')


@dataclass(frozen=True)
class Fields:
    """Semantic fields extracted from an identifier's bytes."""

    flag: bool  # genesis / special variant
    selector: int
    invert: bool  # high bit of the selector
    selector_normalized: int  # design index with the invert bit removed
    r: int
    g: int
    b: int


@dataclass
class Decoded:
    """Everything the pipeline produced for one identifier."""

    identifier: str
    variant: str
    fields: Fields
    palette: Palette
    design_index: int
    grid: Grid = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0
