"""Immutable camera and screen parameter snapshots.

Every projection and unprojection call takes its camera and screen
state explicitly through these structs; nothing looks up a global
"current camera".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ortho_transform.config.schema import CameraConfig, ScreenConfig
from ortho_transform.errors import DegenerateCameraError, ZeroScreenExtentError

_PARALLEL_EPS = 1e-6


def _vec3(name: str, values: Iterable[float]) -> tuple[float, float, float]:
    vec = tuple(float(v) for v in values)
    if len(vec) != 3:
        raise DegenerateCameraError(
            f"{name} must have 3 components, got {len(vec)}: {vec}"
        )
    x, y, z = vec
    return x, y, z


@dataclass(frozen=True)
class CameraParams:
    """Orthographic camera state.

    Attributes:
        ortho_half_height: Half of the visible height in world units.
        aspect: Width / height aspect ratio.
        near: Near clipping plane distance.
        far: Far clipping plane distance.
        eye: Camera position in world space.
        forward: Camera viewing direction in world space.
        up: Camera up direction in world space.
    """

    ortho_half_height: float
    aspect: float
    near: float
    far: float
    eye: tuple[float, float, float] = (0.0, 0.0, 0.0)
    forward: tuple[float, float, float] = (0.0, 0.0, 1.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)

    def __post_init__(self) -> None:
        # Vectors are stored as plain float tuples.
        object.__setattr__(self, "eye", _vec3("eye", self.eye))
        object.__setattr__(self, "forward", _vec3("forward", self.forward))
        object.__setattr__(self, "up", _vec3("up", self.up))

    @property
    def eye_array(self) -> np.ndarray:
        return np.array(self.eye, dtype=np.float32)

    @property
    def forward_array(self) -> np.ndarray:
        return np.array(self.forward, dtype=np.float32)

    @property
    def up_array(self) -> np.ndarray:
        return np.array(self.up, dtype=np.float32)

    def validate(self) -> CameraParams:
        """Check the camera invariants.

        Returns:
            ``self``, so the call can be chained.

        Raises:
            DegenerateCameraError: If any extent is non-positive,
                ``far <= near``, or *forward* is zero or parallel to
                *up*.
        """
        if not self.ortho_half_height > 0:
            raise DegenerateCameraError(
                f"ortho_half_height must be > 0, got {self.ortho_half_height}"
            )
        if not self.aspect > 0:
            raise DegenerateCameraError(
                f"aspect must be > 0, got {self.aspect}"
            )
        if not 0 < self.near < self.far:
            raise DegenerateCameraError(
                f"Expected 0 < near < far, got near={self.near}, "
                f"far={self.far}"
            )

        forward = np.asarray(self.forward, dtype=np.float64)
        up = np.asarray(self.up, dtype=np.float64)
        f_len = np.linalg.norm(forward)
        u_len = np.linalg.norm(up)
        if f_len < _PARALLEL_EPS or u_len < _PARALLEL_EPS:
            raise DegenerateCameraError(
                f"forward and up must be non-zero, got "
                f"forward={self.forward}, up={self.up}"
            )
        cross = np.cross(forward / f_len, up / u_len)
        if np.linalg.norm(cross) < _PARALLEL_EPS:
            raise DegenerateCameraError(
                f"forward {self.forward} is parallel to up {self.up}"
            )
        return self


@dataclass(frozen=True)
class ScreenSize:
    """Viewport size in pixels.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: float
    height: float

    def validate(self) -> ScreenSize:
        """Check that both extents are positive.

        Raises:
            ZeroScreenExtentError: If width or height is not > 0.
        """
        if not (self.width > 0 and self.height > 0):
            raise ZeroScreenExtentError(
                f"Screen size must be positive, got "
                f"{self.width} x {self.height}"
            )
        return self


def camera_params_from_config(cfg: CameraConfig) -> CameraParams:
    """Build validated ``CameraParams`` from a ``CameraConfig``.

    Args:
        cfg: The camera section of the configuration.

    Returns:
        A validated ``CameraParams``.

    Raises:
        DegenerateCameraError: If the configured camera is invalid,
            including vectors without exactly three components.
    """
    return CameraParams(
        ortho_half_height=cfg.ortho_half_height,
        aspect=cfg.aspect,
        near=cfg.near,
        far=cfg.far,
        eye=cfg.eye,
        forward=cfg.forward,
        up=cfg.up,
    ).validate()


def screen_size_from_config(cfg: ScreenConfig) -> ScreenSize:
    """Build a validated ``ScreenSize`` from a ``ScreenConfig``."""
    return ScreenSize(
        width=cfg.width,
        height=cfg.height,
    ).validate()
