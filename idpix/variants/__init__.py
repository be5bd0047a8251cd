"""Variant modules. Each defines a module-level `variant`; idpix.registry lists them."""
