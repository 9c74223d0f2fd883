"""4x4 matrix builders for manual coordinate transforms.

All functions return ``numpy.float32`` 4x4 matrices in row-major
storage that act on column vectors (``m @ p``). Translation lives in
the last column, ``m[0:3, 3]``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def mat4_translate(x: float, y: float, z: float) -> np.ndarray:
    """Build a 4x4 translation matrix.

    Args:
        x: Translation along the X axis.
        y: Translation along the Y axis.
        z: Translation along the Z axis.

    Returns:
        A 4x4 float32 translation matrix.
    """
    m = np.eye(4, dtype=np.float32)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def mat4_scale(
    sx: float,
    sy: float | None = None,
    sz: float | None = None,
) -> np.ndarray:
    """Build a 4x4 scale matrix.

    Passing only *sx* gives a uniform scale.

    Args:
        sx: Scale factor along X.
        sy: Scale factor along Y. Defaults to *sx*.
        sz: Scale factor along Z. Defaults to *sx*.

    Returns:
        A 4x4 float32 scale matrix.
    """
    m = np.eye(4, dtype=np.float32)
    m[0, 0] = sx
    m[1, 1] = sx if sy is None else sy
    m[2, 2] = sx if sz is None else sz
    return m


def mat4_rotate_x(angle_deg: float) -> np.ndarray:
    """Build a 4x4 rotation matrix about the X axis.

    Args:
        angle_deg: Rotation angle in degrees.

    Returns:
        A 4x4 float32 rotation matrix.
    """
    rad = math.radians(angle_deg)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, c, -s, 0.0],
        [0.0, s, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)


def mat4_rotate_y(angle_deg: float) -> np.ndarray:
    """Build a 4x4 rotation matrix about the Y axis.

    Args:
        angle_deg: Rotation angle in degrees.

    Returns:
        A 4x4 float32 rotation matrix.
    """
    rad = math.radians(angle_deg)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [c, 0.0, s, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-s, 0.0, c, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)


def mat4_rotate_z(angle_deg: float) -> np.ndarray:
    """Build a 4x4 rotation matrix about the Z axis.

    Args:
        angle_deg: Rotation angle in degrees.

    Returns:
        A 4x4 float32 rotation matrix.
    """
    rad = math.radians(angle_deg)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [c, -s, 0.0, 0.0],
        [s, c, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)


def mat4_rotate_xyz(
    angle_x_deg: float,
    angle_y_deg: float,
    angle_z_deg: float,
) -> np.ndarray:
    """Build the combined rotation ``Rz @ Ry @ Rx``.

    X is applied first, then Y, then Z.

    Args:
        angle_x_deg: Rotation about X in degrees.
        angle_y_deg: Rotation about Y in degrees.
        angle_z_deg: Rotation about Z in degrees.

    Returns:
        A 4x4 float32 rotation matrix.
    """
    return (
        mat4_rotate_z(angle_z_deg)
        @ mat4_rotate_y(angle_y_deg)
        @ mat4_rotate_x(angle_x_deg)
    )


def quat_to_mat4(q: np.ndarray) -> np.ndarray:
    """Convert a quaternion ``(x, y, z, w)`` to a 4x4 rotation matrix.

    Args:
        q: A length-4 array or sequence ``[x, y, z, w]``.

    Returns:
        A 4x4 float32 rotation matrix.
    """
    x, y, z, w = q
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z
    return np.array([
        [1 - 2 * (yy + zz), 2 * (xy - wz),
         2 * (xz + wy), 0.0],
        [2 * (xy + wz), 1 - 2 * (xx + zz),
         2 * (yz - wx), 0.0],
        [2 * (xz - wy), 2 * (yz + wx),
         1 - 2 * (xx + yy), 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ], dtype=np.float32)


def mat4_to_quat(m: np.ndarray) -> np.ndarray:
    """Extract a unit quaternion ``(x, y, z, w)`` from a rotation block.

    Uses the branch on the largest diagonal term to stay numerically
    stable near 180 degree rotations. Only the upper-left 3x3 block is
    read; it should be orthonormal. The sign is chosen so that
    ``w >= 0``.

    Args:
        m: A 3x3 or 4x4 matrix.

    Returns:
        A float32 array ``[x, y, z, w]``.
    """
    r = np.asarray(m, dtype=np.float64)[:3, :3]
    trace = r[0, 0] + r[1, 1] + r[2, 2]

    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        w = 0.25 * s
        x = (r[2, 1] - r[1, 2]) / s
        y = (r[0, 2] - r[2, 0]) / s
        z = (r[1, 0] - r[0, 1]) / s
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        w = (r[2, 1] - r[1, 2]) / s
        x = 0.25 * s
        y = (r[0, 1] + r[1, 0]) / s
        z = (r[0, 2] + r[2, 0]) / s
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        w = (r[0, 2] - r[2, 0]) / s
        x = (r[0, 1] + r[1, 0]) / s
        y = 0.25 * s
        z = (r[1, 2] + r[2, 1]) / s
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        w = (r[1, 0] - r[0, 1]) / s
        x = (r[0, 2] + r[2, 0]) / s
        y = (r[1, 2] + r[2, 1]) / s
        z = 0.25 * s

    q = np.array([x, y, z, w], dtype=np.float64)
    q /= np.linalg.norm(q)
    if q[3] < 0.0:
        q = -q
    return q.astype(np.float32)


def orthographic(
    left: float,
    right: float,
    bottom: float,
    top: float,
    z_near: float,
    z_far: float,
) -> np.ndarray:
    """Build an OpenGL-style orthographic projection matrix.

    Maps ``x`` in ``[left, right]`` and ``y`` in ``[bottom, top]`` to
    ``[-1, 1]``. View-space depth runs along ``-z``: ``z = -z_near``
    maps to ``-1`` and ``z = -z_far`` maps to ``+1``.

    Equal bounds on any axis divide by zero. The result then holds
    ``inf``/``nan`` instead of raising; check it with
    ``numpy.isfinite``.

    Args:
        left: Left clipping plane.
        right: Right clipping plane.
        bottom: Bottom clipping plane.
        top: Top clipping plane.
        z_near: Near clipping plane distance.
        z_far: Far clipping plane distance.

    Returns:
        A 4x4 float32 orthographic matrix.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        rl = np.float32(right - left)
        tb = np.float32(top - bottom)
        fn = np.float32(z_far - z_near)
        m = np.zeros((4, 4), dtype=np.float32)
        m[0, 0] = np.float32(2.0) / rl
        m[0, 3] = -np.float32(right + left) / rl
        m[1, 1] = np.float32(2.0) / tb
        m[1, 3] = -np.float32(top + bottom) / tb
        m[2, 2] = np.float32(-2.0) / fn
        m[2, 3] = -np.float32(z_far + z_near) / fn
        m[3, 3] = 1.0

    if not np.all(np.isfinite(m)):
        logger.warning(
            "Degenerate orthographic bounds l=%g r=%g b=%g t=%g n=%g f=%g",
            left, right, bottom, top, z_near, z_far,
        )
    return m


def look_at_lh(
    eye: np.ndarray,
    target: np.ndarray,
    up: np.ndarray,
) -> np.ndarray:
    """Build a left-handed view matrix looking from *eye* toward *target*.

    The camera basis is ``e = normalize(target - eye)``,
    ``v = normalize(cross(up, e))`` and ``u = cross(e, v)``. The rows of
    the rotation block are ``[v, u, -e]`` and the translation column is
    ``(-eye.v, -eye.u, eye.e)``, so *eye* lands at the view-space
    origin and points in front of the camera get negative view z.

    If *up* is parallel to the viewing direction the right axis has
    zero length and the matrix fills with ``nan``.

    Args:
        eye: Camera position as a 3-element array.
        target: Look-at target position as a 3-element array.
        up: World up direction as a 3-element array.

    Returns:
        A 4x4 float32 view matrix.
    """
    eye = np.asarray(eye, dtype=np.float32)
    target = np.asarray(target, dtype=np.float32)
    up = np.asarray(up, dtype=np.float32)

    with np.errstate(divide="ignore", invalid="ignore"):
        e = target - eye
        e = e / np.linalg.norm(e)
        v = np.cross(up, e)
        v = v / np.linalg.norm(v)
        u = np.cross(e, v)

    m = np.eye(4, dtype=np.float32)
    m[0, 0:3] = v
    m[1, 0:3] = u
    m[2, 0:3] = -e
    m[0, 3] = -np.dot(eye, v)
    m[1, 3] = -np.dot(eye, u)
    m[2, 3] = np.dot(eye, e)

    if not np.all(np.isfinite(m)):
        logger.warning(
            "Degenerate look-at basis: eye=%s target=%s up=%s",
            eye, target, up,
        )
    return m
