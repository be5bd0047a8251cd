"""Report builder — text and JSON output for idpix results."""

import json
import os
from typing import Any

from idpix.core.types import Decoded


def _preview_char(cell: str | None, decoded: Decoded) -> str:
    if cell is None:
        return '.'
    return str(decoded.palette.index(cell))


def format_text(decoded: Decoded, image_path: str | None = None) -> str:
    """Format a decode result as human-readable text."""
    f = decoded.fields
    lines = []
    header = f'idpix: {decoded.variant} {decoded.identifier} ({decoded.width}×{decoded.height})'
    if image_path:
        header += f' — {os.path.basename(image_path)}'
    lines.append(header)
    lines.append('')

    inverted = ', inverted' if f.invert else ''
    lines.append(f'  genesis: {"yes" if f.flag else "no"}')
    lines.append(f'  selector: {f.selector} (design {decoded.design_index}{inverted})')
    lines.append(f'  seed: rgb({f.r}, {f.g}, {f.b})')
    slots = [f'{i}={colour}' for i, colour in enumerate(decoded.palette) if colour is not None]
    lines.append(f'  palette: {" ".join(slots)}')
    lines.append('')

    for row in decoded.grid:
        lines.append('  ' + ''.join(_preview_char(cell, decoded) for cell in row))
    return '\n'.join(lines)


def format_json(decoded: Decoded, image_path: str | None = None) -> str:
    """Format a decode result as JSON."""
    f = decoded.fields
    obj: dict[str, Any] = {
        'identifier': decoded.identifier,
        'variant': decoded.variant,
        'fields': {
            'genesis': f.flag,
            'selector': f.selector,
            'invert': f.invert,
            'design': f.selector_normalized,
            'rgb': [f.r, f.g, f.b],
        },
        'palette': list(decoded.palette),
        'dimensions': {'width': decoded.width, 'height': decoded.height},
        'grid': decoded.grid,
    }
    if image_path:
        obj['image'] = image_path
    return json.dumps(obj, indent=2)
