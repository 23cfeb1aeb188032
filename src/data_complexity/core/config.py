"""YAML configuration for extraction defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import InvalidInputError

__all__ = ["CONFIG_DIR", "DEFAULT_CONFIG", "ExtractionConfig", "load_yaml_config"]

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"
DEFAULT_CONFIG = "complexity.yaml"


def load_yaml_config(filename: str | Path) -> dict[str, Any]:
    """Load a YAML configuration, relative to the configs directory unless absolute."""
    path = Path(filename)
    if not path.is_absolute() and not path.exists():
        path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise InvalidInputError(f"Configuration file {path} must contain a mapping")
    return data


def _as_names(value: Any, key: str) -> str | tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value)
    raise InvalidInputError(f"'{key}' must be a string or a list of strings, got {value!r}")


@dataclass
class ExtractionConfig:
    groups: str | tuple[str, ...] = "all"
    summary: str | tuple[str, ...] = ("mean", "sd")
    options: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: Optional[str | Path] = None) -> "ExtractionConfig":
        cfg = load_yaml_config(path if path is not None else DEFAULT_CONFIG)
        options = cfg.get("options") or {}
        if not isinstance(options, dict):
            raise InvalidInputError(f"'options' must be a mapping, got {options!r}")
        return cls(
            groups=_as_names(cfg.get("groups", "all"), "groups"),
            summary=_as_names(cfg.get("summary", ["mean", "sd"]), "summary"),
            options=dict(options),
        )

    def override(self, **values: Any) -> "ExtractionConfig":
        """Return a copy with every non-None value replacing the configured one."""
        options = dict(self.options)
        options.update(values.pop("options", None) or {})
        groups = values.get("groups")
        summary = values.get("summary")
        return ExtractionConfig(
            groups=self.groups if groups is None else groups,
            summary=self.summary if summary is None else summary,
            options=options,
        )
