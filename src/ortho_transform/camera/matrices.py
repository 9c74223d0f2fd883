"""Projection and view matrices derived from ``CameraParams``."""

from __future__ import annotations

import logging

import numpy as np

from ortho_transform.camera.params import CameraParams
from ortho_transform.math_utils.transforms import look_at_lh, orthographic

logger = logging.getLogger(__name__)


def projection_matrix(camera: CameraParams) -> np.ndarray:
    """Build the orthographic projection for *camera*.

    The frustum is centred on the view axis: ``top`` is the ortho
    half-height and ``right`` is ``top * aspect``.

    Args:
        camera: Camera parameters.

    Returns:
        A 4x4 float32 projection matrix.
    """
    top = camera.ortho_half_height
    bottom = -top
    right = top * camera.aspect
    left = -right
    return orthographic(left, right, bottom, top, camera.near, camera.far)


def view_matrix(camera: CameraParams) -> np.ndarray:
    """Build the left-handed view matrix for *camera*.

    Looks from ``eye`` toward ``eye + forward``.

    Args:
        camera: Camera parameters.

    Returns:
        A 4x4 float32 view matrix.
    """
    eye = camera.eye_array
    target = eye + camera.forward_array
    return look_at_lh(eye, target, camera.up_array)


def view_projection_matrix(camera: CameraParams) -> np.ndarray:
    """Return ``projection @ view`` for *camera*."""
    vp = projection_matrix(camera) @ view_matrix(camera)
    logger.debug("View-projection matrix:\n%s", vp)
    return vp
