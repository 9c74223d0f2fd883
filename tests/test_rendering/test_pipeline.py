"""Tests for ortho_transform.rendering.pipeline."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from ortho_transform.camera.matrices import projection_matrix, view_matrix
from ortho_transform.camera.params import CameraParams
from ortho_transform.math_utils.transforms import mat4_rotate_y, mat4_translate
from ortho_transform.rendering.pipeline import (
    model_view_projection,
    to_clip_space,
    to_ndc,
)

# View z of the world origin is -10, pushed through the depth terms.
ORIGIN_NDC_Z = (20.0 - 1000.3) / 999.7


class TestModelViewProjection:
    """Tests for model_view_projection."""

    def test_order_is_projection_view_model(
        self, camera: CameraParams,
    ) -> None:
        model = mat4_translate(1, 2, 3) @ mat4_rotate_y(30)
        expected = projection_matrix(camera) @ view_matrix(camera) @ model
        np.testing.assert_array_almost_equal(
            model_view_projection(model, camera), expected
        )

    def test_not_commutative(self, camera: CameraParams) -> None:
        model = mat4_translate(1, 2, 3)
        wrong = model @ view_matrix(camera) @ projection_matrix(camera)
        assert not np.allclose(model_view_projection(model, camera), wrong)

    def test_dtype_is_float32(
        self, camera: CameraParams, identity: np.ndarray,
    ) -> None:
        assert model_view_projection(identity, camera).dtype == np.float32


class TestToClipSpace:
    """Tests for to_clip_space."""

    def test_origin(self, camera: CameraParams, identity: np.ndarray) -> None:
        clip = to_clip_space(identity, camera)
        np.testing.assert_allclose(
            clip, [0, 0, ORIGIN_NDC_Z, 1], atol=1e-5,
        )

    def test_local_z_is_negated(
        self, camera: CameraParams, identity: np.ndarray,
    ) -> None:
        mvp = model_view_projection(identity, camera)
        expected = mvp @ np.array([1, 2, -5, 1], dtype=np.float32)
        np.testing.assert_array_almost_equal(
            to_clip_space(identity, camera, (1, 2, 5)), expected,
        )

    def test_translated_model(self, camera: CameraParams) -> None:
        clip = to_clip_space(mat4_translate(2, 3, 0), camera)
        assert clip[0] == pytest.approx(2.0 / (5.0 * 1.7777), abs=1e-6)
        assert clip[1] == pytest.approx(0.6, abs=1e-6)


class TestToNDC:
    """Tests for to_ndc."""

    def test_scenario_origin(
        self, camera: CameraParams, identity: np.ndarray,
    ) -> None:
        ndc = to_ndc(identity, camera)
        assert ndc.shape == (3,)
        np.testing.assert_allclose(ndc, [0, 0, ORIGIN_NDC_Z], atol=1e-5)

    def test_inside_unit_cube(self, camera: CameraParams) -> None:
        ndc = to_ndc(mat4_translate(-4, 2, 100), camera)
        assert np.all(np.abs(ndc) <= 1.0)

    def test_zero_w_is_non_finite(
        self, camera: CameraParams, caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING):
            ndc = to_ndc(np.zeros((4, 4), dtype=np.float32), camera)
        assert not np.any(np.isfinite(ndc))
        assert "w is zero" in caplog.text
