"""YAML-based configuration loading and saving.

Values from a file are layered over the ``OrthoTransformConfig``
defaults section by section. Unknown keys are skipped; a section that
is not a mapping is rejected.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Any

import yaml

from ortho_transform.config.schema import OrthoTransformConfig

logger = logging.getLogger(__name__)


def _dataclass_to_dict(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: _dataclass_to_dict(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, (list, tuple)):
        return [_dataclass_to_dict(v) for v in obj]
    return obj


def _apply_dict_to_dataclass(obj: Any, data: dict[str, Any]) -> None:
    """Update *obj* in place from *data*, recursing into sections.

    Raises:
        ValueError: If a nested section is given a non-mapping value.
    """
    field_info = {f.name: f for f in dataclasses.fields(obj)}
    for key, value in data.items():
        if key not in field_info:
            logger.debug(
                "Ignoring unknown config key %r on %s",
                key, type(obj).__name__,
            )
            continue
        current = getattr(obj, key)
        if dataclasses.is_dataclass(current):
            if not isinstance(value, dict):
                raise ValueError(
                    f"Config section {key!r} must be a mapping, "
                    f"got {type(value).__name__}"
                )
            _apply_dict_to_dataclass(current, value)
            continue
        if isinstance(value, list) and "tuple" in str(field_info[key].type):
            value = tuple(value)
        setattr(obj, key, value)


def load_config(
    path: str | Path | None = None,
) -> OrthoTransformConfig:
    """Load a configuration, or the defaults when *path* is ``None``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file or one of its sections is not a
            mapping.
    """
    config = OrthoTransformConfig()
    if path is None:
        return config

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    _apply_dict_to_dataclass(config, data)
    logger.info("Loaded config from %s", path)
    return config


def save_config(
    config: OrthoTransformConfig,
    path: str | Path,
) -> None:
    """Write *config* as YAML, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = _dataclass_to_dict(config)
    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
