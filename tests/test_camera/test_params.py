"""Tests for ortho_transform.camera.params."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from ortho_transform.camera.params import (
    CameraParams,
    ScreenSize,
    camera_params_from_config,
    screen_size_from_config,
)
from ortho_transform.config.schema import CameraConfig, ScreenConfig
from ortho_transform.errors import (
    DegenerateCameraError,
    TransformError,
    ZeroScreenExtentError,
)


class TestCameraParams:
    """Tests for CameraParams."""

    def test_vectors_stored_as_tuples(self) -> None:
        cam = CameraParams(5.0, 1.0, 0.3, 100.0, eye=np.array([1, 2, 3]))
        assert cam.eye == (1.0, 2.0, 3.0)
        assert isinstance(cam.eye, tuple)

    def test_array_properties(self) -> None:
        cam = CameraParams(5.0, 1.0, 0.3, 100.0, forward=[0, 0, -1])
        assert cam.forward_array.dtype == np.float32
        np.testing.assert_array_equal(cam.forward_array, [0, 0, -1])

    def test_is_frozen(self, camera: CameraParams) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            camera.near = 1.0  # type: ignore[misc]

    def test_valid_camera_passes(self, camera: CameraParams) -> None:
        assert camera.validate() is camera

    @pytest.mark.parametrize("changes", [
        {"ortho_half_height": 0.0},
        {"aspect": -1.0},
        {"near": 0.0},
        {"near": 10.0, "far": 10.0},
        {"near": 20.0, "far": 10.0},
    ])
    def test_invalid_extents_raise(
        self, camera: CameraParams, changes: dict,
    ) -> None:
        with pytest.raises(DegenerateCameraError):
            dataclasses.replace(camera, **changes).validate()

    def test_parallel_up_raises(self, camera: CameraParams) -> None:
        bad = dataclasses.replace(camera, forward=(0, 2, 0))
        with pytest.raises(DegenerateCameraError, match="parallel"):
            bad.validate()

    def test_zero_forward_raises(self, camera: CameraParams) -> None:
        bad = dataclasses.replace(camera, forward=(0, 0, 0))
        with pytest.raises(DegenerateCameraError, match="non-zero"):
            bad.validate()

    def test_errors_are_value_errors(self, camera: CameraParams) -> None:
        with pytest.raises(ValueError):
            dataclasses.replace(camera, aspect=0.0).validate()
        assert issubclass(DegenerateCameraError, TransformError)


class TestScreenSize:
    """Tests for ScreenSize."""

    def test_valid(self, screen: ScreenSize) -> None:
        assert screen.validate() is screen

    @pytest.mark.parametrize("width, height", [(0, 1080), (1920, 0), (-1, 5)])
    def test_non_positive_raises(self, width: float, height: float) -> None:
        with pytest.raises(ZeroScreenExtentError):
            ScreenSize(width, height).validate()


class TestFromConfig:
    """Tests for camera_params_from_config and screen_size_from_config."""

    def test_default_camera(self) -> None:
        cam = camera_params_from_config(CameraConfig())
        assert cam.ortho_half_height == 5.0
        assert cam.aspect == pytest.approx(1.7777)
        assert cam.eye == (0.0, 0.0, -10.0)

    @pytest.mark.parametrize("changes, name", [
        ({"eye": (0.0, 0.0)}, "eye"),
        ({"forward": (0.0, 0.0, 1.0, 0.0)}, "forward"),
        ({"up": ()}, "up"),
    ])
    def test_wrong_vector_length_raises(
        self, changes: dict, name: str,
    ) -> None:
        with pytest.raises(DegenerateCameraError, match=f"{name} must have 3"):
            camera_params_from_config(CameraConfig(**changes))

    def test_invalid_camera_config_raises(self) -> None:
        with pytest.raises(DegenerateCameraError):
            camera_params_from_config(CameraConfig(near=5.0, far=1.0))

    def test_default_screen(self) -> None:
        size = screen_size_from_config(ScreenConfig())
        assert (size.width, size.height) == (1920, 1080)

    def test_invalid_screen_config_raises(self) -> None:
        with pytest.raises(ZeroScreenExtentError):
            screen_size_from_config(ScreenConfig(width=0))
