"""Identifier parsing: hex text to bytes to semantic fields."""

import binascii

from idpix.core.errors import MalformedIdentifier
from idpix.core.types import Fields, Variant

_PREFIXES = ('0x', '0X', '#')


def normalize_identifier(text: str) -> str:
    """Strip surrounding whitespace and one 0x/# prefix."""
    text = text.strip()
    for prefix in _PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix) :]
    return text


def decode_identifier(text: str, min_bytes: int = 5) -> bytes:
    """Hex-decode an identifier, requiring at least `min_bytes` bytes."""
    hex_str = normalize_identifier(text)
    try:
        raw = binascii.unhexlify(hex_str)
    except ValueError as e:
        raise MalformedIdentifier(f'Invalid hex in identifier {text!r}: {e}') from e
    if len(raw) < min_bytes:
        raise MalformedIdentifier(
            f'Identifier must be at least {min_bytes} bytes ({min_bytes * 2} hex chars) long, got {len(raw)}.'
        )
    return raw


def extract_fields(text: str, variant: Variant) -> Fields:
    raw = decode_identifier(text, variant.min_bytes)
    selector = raw[variant.selector_offset]
    seed = variant.seed_offset
    return Fields(
        flag=raw[variant.flag_offset] != 0,
        selector=selector,
        invert=selector >= variant.invert_threshold,
        selector_normalized=selector % variant.invert_threshold,
        r=raw[seed],
        g=raw[seed + 1],
        b=raw[seed + 2],
    )
