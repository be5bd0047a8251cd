"""Variant registry.

Maps each variant name to the module that defines it. A variant module holds
a module-level `variant` object and documents the collection in its
docstring, which `idpix help <variant>` prints.
"""

from types import ModuleType

from idpix.core.types import Variant
from idpix.variants import labubu, mooncat

_MODULES: dict[str, ModuleType] = {module.variant.name: module for module in (labubu, mooncat)}


def get(name: str) -> Variant:
    """Get a variant by name."""
    if name not in _MODULES:
        raise KeyError(f'Unknown variant: {name}. Available: {", ".join(sorted(_MODULES))}')
    return _MODULES[name].variant


def all_variants() -> dict[str, Variant]:
    """Return every variant keyed by name."""
    return {name: module.variant for name, module in _MODULES.items()}


def docs(name: str) -> str:
    """Full documentation for a variant: its module docstring."""
    get(name)
    return (_MODULES[name].__doc__ or '').strip()
