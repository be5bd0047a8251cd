"""idpix.core — Foundation layer.

Contains the colour maths, type definitions, identifier and design parsing,
the decoder, rasterizer and report builder.
This module has NO dependencies on idpix.variants or idpix.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
