# config_manager.py - JSON config manager

import json
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

DEFAULT_CONFIG_PATH = "logos.json"


class ConfigError(ValueError):
    """Raised for unknown options or values of the wrong type."""


@dataclass(frozen=True)
class LogosConfig:
    """
    Knobs for an analysis run.
    """
    ngram_size: int = 1
    long_word_threshold: int = 6
    top_transitions: int = 5
    log_level: str = "WARNING"
    log_path: Optional[str] = None
    use_color: bool = True


def _defaults() -> Dict[str, Any]:
    base = LogosConfig()
    return {f.name: getattr(base, f.name) for f in fields(LogosConfig)}


def _coerce(key: str, default: Any, val: Any) -> Any:
    if default is None:
        # optional string options (log_path)
        return None if val is None else str(val)
    target = type(default)
    if val is None:
        raise ConfigError(f"{key}: null is not allowed, expected {target.__name__}")
    try:
        if target is bool:
            if isinstance(val, bool):
                return val
            low = str(val).strip().lower()
            if low in ("1", "true", "yes", "on"):
                return True
            if low in ("0", "false", "no", "off"):
                return False
            raise ValueError(val)
        if target is int:
            if isinstance(val, bool):
                raise ValueError(val)
            if isinstance(val, float):
                # no silent truncation: 2.0 is fine, 2.7 is not
                if not val.is_integer():
                    raise ValueError(val)
                return int(val)
            return int(val)
        return target(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: cannot use {val!r} as {target.__name__}") from e


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH):
        self.path = path
        self.data = _defaults()
        self._load()

    def _load(self):
        # missing file means defaults
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for k, v in loaded.items():
            self.set(k, v, save=False)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        return self.data[key]

    def set(self, key, val, save=True):
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        self.data[key] = _coerce(key, _defaults()[key], val)
        if save:
            self.save()

    def show(self):
        return "\n".join(f"{k:20} = {v}" for k, v in self.data.items())

    def as_logos_config(self, **overrides) -> LogosConfig:
        """Frozen snapshot; keyword overrides set to None are ignored."""
        merged = dict(self.data)
        for k, v in overrides.items():
            if v is None:
                continue
            if k not in merged:
                raise ConfigError(f"No such option: {k}")
            merged[k] = _coerce(k, _defaults()[k], v)
        return LogosConfig(**merged)
