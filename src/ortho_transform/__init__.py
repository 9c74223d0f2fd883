"""Ortho Transform: manual orthographic projection and space mapping.

Builds projection, view and rotation matrices from first principles
and converts points between world, clip, NDC, viewport and screen
space in both directions.
"""

__version__ = "0.1.0"
