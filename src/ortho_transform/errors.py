"""Exceptions raised at the boundaries of the transform pipeline.

The matrix builders themselves never raise: degenerate inputs there
propagate ``inf``/``nan``. These errors are raised where a silent
non-finite result would be handed on to the caller.
"""

from __future__ import annotations


class TransformError(ValueError):
    """Base class for invalid geometric or numeric input."""


class DegenerateCameraError(TransformError):
    """Camera parameters that cannot produce a finite view/projection."""


class SingularMatrixError(TransformError):
    """A matrix that had to be inverted is singular or non-finite."""


class ZeroScreenExtentError(TransformError):
    """A screen size with zero or negative width or height."""
