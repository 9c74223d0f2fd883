"""Dataclass configuration schemas for the transform library.

Each parameter source has its own configuration dataclass. The
top-level ``OrthoTransformConfig`` composes them all into a single
tree that can be serialized to / deserialized from YAML.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CameraConfig:
    """Orthographic camera projection and pose.

    Attributes:
        ortho_half_height: Half of the visible height in world units.
        aspect: Width / height aspect ratio.
        near: Near clipping plane distance.
        far: Far clipping plane distance.
        eye: Camera world position ``(x, y, z)``.
        forward: Camera viewing direction ``(x, y, z)``.
        up: Camera up direction ``(x, y, z)``.
    """

    ortho_half_height: float = 5.0
    aspect: float = 1.7777
    near: float = 0.3
    far: float = 1000.0
    eye: tuple[float, ...] = (0.0, 0.0, -10.0)
    forward: tuple[float, ...] = (0.0, 0.0, 1.0)
    up: tuple[float, ...] = (0.0, 1.0, 0.0)


@dataclass
class ScreenConfig:
    """Viewport size.

    Attributes:
        width: Width in pixels.
        height: Height in pixels.
    """

    width: int = 1920
    height: int = 1080


@dataclass
class TransformConfig:
    """Object transform entered as translation, rotation and scale.

    Attributes:
        translation: World translation ``(x, y, z)``.
        rotation_deg: Rotation about X, Y and Z in degrees, applied
            in X, Y, Z order.
        scale: Per-axis scale ``(x, y, z)``.
    """

    translation: tuple[float, ...] = (0.0, 0.0, 0.0)
    rotation_deg: tuple[float, ...] = (0.0, 0.0, 0.0)
    scale: tuple[float, ...] = (1.0, 1.0, 1.0)


@dataclass
class LoggingConfig:
    """Package logger settings.

    Attributes:
        level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_file: Optional path of a log file. ``None`` logs to stdout
            only.
    """

    level: str = "INFO"
    log_file: str | None = None


@dataclass
class OrthoTransformConfig:
    """Top-level configuration composing all section configs.

    Attributes:
        camera: Orthographic camera projection and pose.
        screen: Viewport size.
        transform: Object transform.
        logging: Package logger settings.
    """

    camera: CameraConfig = field(default_factory=CameraConfig)
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    transform: TransformConfig = field(default_factory=TransformConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
