"""Identifier decoder — runs the full pipeline for one variant.

    identifier -> fields -> palette -> design -> colour grid

Both entry points are pure. Errors are raised, never partially returned.
"""

from collections.abc import Sequence

from idpix.core.designs import map_grid, select_design
from idpix.core.identifier import extract_fields
from idpix.core.palette import select_palette
from idpix.core.types import Decoded, Grid, Variant


def inspect(identifier: str, designs: Sequence[str], variant: Variant) -> Decoded:
    """Decode an identifier and keep every intermediate result."""
    fields = extract_fields(identifier, variant)
    palette = select_palette(fields, variant)
    template = select_design(fields.selector_normalized, designs)
    return Decoded(
        identifier=identifier,
        variant=variant.name,
        fields=fields,
        palette=palette,
        design_index=fields.selector_normalized,
        grid=map_grid(template, palette, variant),
    )


def decode(identifier: str, designs: Sequence[str], variant: Variant) -> Grid:
    """Decode an identifier into rows of '#rrggbb' colours or None."""
    return inspect(identifier, designs, variant).grid
