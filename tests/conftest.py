"""Shared test fixtures for the ortho_transform test suite."""

from __future__ import annotations

import numpy as np
import pytest

from ortho_transform.camera.params import CameraParams, ScreenSize
from ortho_transform.config.schema import OrthoTransformConfig


@pytest.fixture
def default_config() -> OrthoTransformConfig:
    """Return an OrthoTransformConfig with default values."""
    return OrthoTransformConfig()


@pytest.fixture
def camera() -> CameraParams:
    """Orthographic camera at ``(0, 0, -10)`` looking down +Z."""
    return CameraParams(
        ortho_half_height=5.0,
        aspect=1.7777,
        near=0.3,
        far=1000.0,
        eye=(0.0, 0.0, -10.0),
        forward=(0.0, 0.0, 1.0),
        up=(0.0, 1.0, 0.0),
    )


@pytest.fixture
def screen() -> ScreenSize:
    """A 1920x1080 screen."""
    return ScreenSize(width=1920, height=1080)


@pytest.fixture
def identity() -> np.ndarray:
    """Return a float32 4x4 identity model matrix."""
    return np.eye(4, dtype=np.float32)
