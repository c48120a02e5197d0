"""Core rendering pipeline for torusascii.

Modules:
- torus: parameters + surface sampling
- projection: rotation, perspective projection, lighting, culling
- raster: depth-buffered glyph grid
- render: per-frame entry point + text serialization
"""
