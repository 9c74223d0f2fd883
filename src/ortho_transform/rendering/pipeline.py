"""Model-view-projection composition and the forward projection chain.

Takes a model (local-to-world) matrix and a camera snapshot through
view and projection into clip space, then divides by ``w`` to reach
normalized device coordinates.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ortho_transform.camera.matrices import projection_matrix, view_matrix
from ortho_transform.camera.params import CameraParams

logger = logging.getLogger(__name__)


def model_view_projection(
    model: np.ndarray,
    camera: CameraParams,
) -> np.ndarray:
    """Compose ``projection @ view @ model``.

    Args:
        model: 4x4 local-to-world matrix.
        camera: Camera parameters.

    Returns:
        A 4x4 float32 MVP matrix.
    """
    model = np.asarray(model, dtype=np.float32)
    return projection_matrix(camera) @ view_matrix(camera) @ model


def to_clip_space(
    model: np.ndarray,
    camera: CameraParams,
    local_point: Sequence[float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Project a model-space point into homogeneous clip space.

    The point's z is negated before the MVP is applied, matching the
    ``-forward`` row of the left-handed view matrix. The default point
    is the model origin.

    Args:
        model: 4x4 local-to-world matrix.
        camera: Camera parameters.
        local_point: Model-space point ``(x, y, z)``.

    Returns:
        A float32 ``(x, y, z, w)`` clip-space vector.
    """
    x, y, z = local_point
    point = np.array([x, y, -z, 1.0], dtype=np.float32)
    return model_view_projection(model, camera) @ point


def to_ndc(
    model: np.ndarray,
    camera: CameraParams,
    local_point: Sequence[float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Project a model-space point into normalized device coordinates.

    A clip-space ``w`` of zero yields ``inf``/``nan`` components; callers
    should treat that as a degenerate camera.

    Args:
        model: 4x4 local-to-world matrix.
        camera: Camera parameters.
        local_point: Model-space point ``(x, y, z)``.

    Returns:
        A float32 ``(x, y, z)`` NDC vector.
    """
    clip = to_clip_space(model, camera, local_point)
    if clip[3] == 0.0:
        logger.warning("Clip-space w is zero for %s", clip)
    with np.errstate(divide="ignore", invalid="ignore"):
        return clip[:3] / clip[3]
