"""Conversions between NDC, viewport, screen and world space.

Conventions:

* NDC spans ``[-1, 1]`` on every axis.
* Viewport spans ``[0, 1]`` with the origin at the bottom-left.
* Screen is viewport scaled by the pixel size, so its origin is also
  bottom-left.

Two simplifications are kept on purpose for the orthographic,
camera-along-z use case:

* ``viewport_to_ndc`` passes the screen z straight through instead of
  remapping it.
* ``screen_to_world`` replaces the unprojected world z with the camera
  eye z. The result is only meaningful for a camera looking along the
  world z axis.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ortho_transform.camera.matrices import view_projection_matrix
from ortho_transform.camera.params import CameraParams, ScreenSize
from ortho_transform.errors import SingularMatrixError
from ortho_transform.rendering.pipeline import to_ndc

logger = logging.getLogger(__name__)


def ndc_to_viewport(ndc: Sequence[float]) -> np.ndarray:
    """Map NDC ``[-1, 1]`` to viewport ``[0, 1]`` on all three axes."""
    return np.asarray(ndc, dtype=np.float32)[:3] * 0.5 + 0.5


def viewport_to_screen(
    viewport: Sequence[float],
    size: ScreenSize,
) -> np.ndarray:
    """Scale viewport x/y by the screen size in pixels.

    Args:
        viewport: Viewport point; only x and y are used.
        size: Screen size in pixels.

    Returns:
        A float32 ``(x, y)`` pixel position.
    """
    vp = np.asarray(viewport, dtype=np.float32)
    return np.array(
        [vp[0] * size.width, vp[1] * size.height], dtype=np.float32,
    )


def ndc_to_screen(ndc: Sequence[float], size: ScreenSize) -> np.ndarray:
    """Map an NDC point to screen pixels through viewport space."""
    return viewport_to_screen(ndc_to_viewport(ndc), size)


def screen_to_viewport(
    screen: Sequence[float],
    size: ScreenSize,
) -> np.ndarray:
    """Divide screen x/y by the screen size.

    Args:
        screen: Screen point ``(x, y)`` or ``(x, y, z)``.
        size: Screen size in pixels.

    Returns:
        A float32 ``(x, y)`` viewport position.

    Raises:
        ZeroScreenExtentError: If width or height is not positive.
    """
    size.validate()
    sp = np.asarray(screen, dtype=np.float32)
    return np.array(
        [sp[0] / size.width, sp[1] / size.height], dtype=np.float32,
    )


def viewport_to_ndc(
    viewport: Sequence[float],
    screen_z: float,
) -> np.ndarray:
    """Map viewport x/y to NDC; *screen_z* is passed through unmapped.

    Args:
        viewport: Viewport point; only x and y are used.
        screen_z: Depth copied into the NDC z component as-is.

    Returns:
        A float32 ``(x, y, z)`` NDC vector.
    """
    vp = np.asarray(viewport, dtype=np.float32)
    return np.array(
        [vp[0] / 0.5 - 1.0, vp[1] / 0.5 - 1.0, screen_z],
        dtype=np.float32,
    )


def screen_to_ndc(
    screen: Sequence[float],
    size: ScreenSize,
) -> np.ndarray:
    """Map a screen point ``(x, y, z)`` to NDC through viewport space.

    Raises:
        ZeroScreenExtentError: If width or height is not positive.
    """
    return viewport_to_ndc(screen_to_viewport(screen, size), screen[2])


def screen_to_world(
    screen: Sequence[float],
    camera: CameraParams,
    size: ScreenSize,
) -> np.ndarray:
    """Unproject a screen point ``(x, y, z)`` back to world space.

    The homogeneous NDC point ``(x / w * 2 - 1, y / h * 2 - 1, z, 1)``
    is built directly from the pixel coordinates and multiplied by the
    inverse of ``projection @ view``. The resulting world z is then
    replaced by the camera eye z before dividing by ``w``.

    Args:
        screen: Screen point in pixels; z is used as NDC depth.
        camera: Camera parameters.
        size: Screen size in pixels.

    Returns:
        A float32 ``(x, y, z)`` world position.

    Raises:
        ZeroScreenExtentError: If width or height is not positive.
        SingularMatrixError: If ``projection @ view`` cannot be
            inverted.
    """
    size.validate()
    sx, sy, sz = (float(c) for c in screen[:3])
    ndc = np.array([
        (sx / size.width) * 2.0 - 1.0,
        (sy / size.height) * 2.0 - 1.0,
        sz,
        1.0,
    ], dtype=np.float64)

    vp = view_projection_matrix(camera).astype(np.float64)
    if not np.all(np.isfinite(vp)):
        raise SingularMatrixError(
            "View-projection matrix has non-finite entries"
        )
    try:
        inv_vp = np.linalg.inv(vp)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(
            "View-projection matrix is singular"
        ) from exc
    if not np.all(np.isfinite(inv_vp)):
        raise SingularMatrixError(
            "Inverse view-projection matrix has non-finite entries"
        )

    world = inv_vp @ ndc
    world[2] = camera.eye[2]
    world /= world[3]
    logger.debug("Screen %s -> world %s", (sx, sy, sz), world[:3])
    return world[:3].astype(np.float32)


def world_to_viewport(
    model: np.ndarray,
    camera: CameraParams,
) -> np.ndarray:
    """Project the model origin into viewport space ``(x, y, z)``."""
    return ndc_to_viewport(to_ndc(model, camera))


def world_to_screen(
    model: np.ndarray,
    camera: CameraParams,
    size: ScreenSize,
) -> np.ndarray:
    """Project the model origin into screen pixels ``(x, y)``."""
    return viewport_to_screen(world_to_viewport(model, camera), size)
