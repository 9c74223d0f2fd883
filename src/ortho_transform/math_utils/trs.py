"""Translation-rotation-scale composition and decomposition.

``compose_trs`` builds ``T @ (Rz @ Ry @ Rx) @ S``. ``decompose_trs``
reads it back as a ``TransformState`` for writing onto a scene object.

Decomposition assumes the upper 3x3 block is a rotation times a
diagonal scale. A mirrored block (negative determinant) comes back
with a negative X scale. Matrices with shear (for example a
non-uniform scale nested under a rotated parent) come back only
approximately: the scale is the column lengths and the rotation is
the nearest quaternion of the normalised columns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ortho_transform.config.schema import TransformConfig
from ortho_transform.math_utils.transforms import (
    mat4_rotate_xyz,
    mat4_scale,
    mat4_to_quat,
    mat4_translate,
    quat_to_mat4,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TransformState:
    """Position, rotation and scale of an object.

    Attributes:
        position: World position ``(x, y, z)``.
        rotation: Unit quaternion ``(x, y, z, w)`` with ``w >= 0``.
        scale: Per-axis scale ``(x, y, z)``.
    """

    position: np.ndarray
    rotation: np.ndarray
    scale: np.ndarray

    def rotation_matrix(self) -> np.ndarray:
        """Return the 4x4 rotation matrix of :attr:`rotation`."""
        return quat_to_mat4(self.rotation)

    def to_matrix(self) -> np.ndarray:
        """Rebuild ``T @ R @ S`` from this state."""
        return (
            mat4_translate(*self.position)
            @ self.rotation_matrix()
            @ mat4_scale(*self.scale)
        )


def compose_trs(
    translation: Sequence[float],
    rotation_deg: Sequence[float],
    scale: Sequence[float],
) -> np.ndarray:
    """Build ``T @ (Rz @ Ry @ Rx) @ S``.

    Args:
        translation: Translation ``(x, y, z)``.
        rotation_deg: Rotation about X, Y and Z in degrees.
        scale: Per-axis scale ``(x, y, z)``.

    Returns:
        A 4x4 float32 affine matrix.
    """
    tx, ty, tz = translation
    ax, ay, az = rotation_deg
    sx, sy, sz = scale
    return (
        mat4_translate(tx, ty, tz)
        @ mat4_rotate_xyz(ax, ay, az)
        @ mat4_scale(sx, sy, sz)
    )


def decompose_trs(matrix: np.ndarray) -> TransformState:
    """Split an affine matrix into position, rotation and scale.

    Args:
        matrix: A 4x4 affine matrix.

    Returns:
        The decomposed ``TransformState``.
    """
    m = np.asarray(matrix, dtype=np.float32)
    position = m[0:3, 3].copy()
    basis = m[0:3, 0:3]
    scale = np.linalg.norm(basis, axis=0).astype(np.float32)
    # A mirrored basis is carried as a negative X scale.
    if np.linalg.det(basis) < 0.0:
        scale[0] = -scale[0]

    safe = np.where(scale != 0.0, scale, 1.0)
    if np.any(scale == 0.0):
        logger.warning("Zero scale axis in %s; rotation is unreliable", scale)
    rotation = mat4_to_quat(basis / safe)

    return TransformState(position=position, rotation=rotation, scale=scale)


def transform_state_from_config(cfg: TransformConfig) -> TransformState:
    """Compose the configured TRS and decompose it into a state.

    Args:
        cfg: The transform section of the configuration.

    Returns:
        The ``TransformState`` to write back onto the scene object.
    """
    trs = compose_trs(cfg.translation, cfg.rotation_deg, cfg.scale)
    state = decompose_trs(trs)
    logger.debug(
        "Transform position=%s rotation=%s scale=%s",
        state.position, state.rotation, state.scale,
    )
    return state
