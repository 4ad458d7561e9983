"""Serialization utilities for storage configuration (load and save)."""

from __future__ import annotations

from dataclasses import asdict, fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

import yaml

from transcription.types.parameters import StorageConfig


def _convert_values(value: Any) -> Any:
    """
    Recursively convert dataclasses/dicts/lists/enums into plain YAML values.
    """
    if is_dataclass(value):
        return _convert_values(asdict(value))
    if isinstance(value, dict):
        return {key: _convert_values(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_convert_values(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def config_to_dict(config: StorageConfig) -> Dict[str, Any]:
    """
    Convert a StorageConfig into a plain dictionary suitable for YAML.
    """
    return _convert_values(config)


def config_from_dict(payload: Dict[str, Any]) -> StorageConfig:
    """Build a StorageConfig from a plain mapping, optionally nested under 'storage'."""
    if not isinstance(payload, dict):
        raise ValueError(f"storage config must be a mapping, got {type(payload).__name__}")
    params = payload.get("storage", payload)
    if not isinstance(params, dict):
        raise ValueError(f"storage config must be a mapping, got {type(params).__name__}")
    expected = [field.name for field in fields(StorageConfig)]
    unexpected = [key for key in params if key not in expected]
    if unexpected:
        raise ValueError(f"storage config has unexpected keys: {unexpected}")
    return StorageConfig(**params)


def load_storage_config(yaml_path: Path) -> StorageConfig:
    """Load a StorageConfig from a YAML file. Missing keys take their defaults."""
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)
    return config_from_dict(payload or {})


def save_storage_config(config: StorageConfig, yaml_path: Path) -> None:
    """Write a StorageConfig to a YAML file, nested under a 'storage' key."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump({"storage": config_to_dict(config)}, handle, sort_keys=False)


__all__ = [
    "config_to_dict",
    "config_from_dict",
    "load_storage_config",
    "save_storage_config",
]
