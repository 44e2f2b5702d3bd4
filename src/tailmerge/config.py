"""Project configuration stored as ``tailmerge.json``."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = "tailmerge.json"

MERGE_STRATEGIES = ("merge", "replace")

_STRING_FIELDS = ("stylesheet", "vendor_css", "import_path", "base_package")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read as a config object."""


@dataclass(frozen=True)
class CSSConfig:
    stylesheet: str = "assets/css/app.css"
    vendor_css: str = "assets/vendor/tailmerge.css"
    import_path: str = "../vendor/tailmerge.css"
    base_package: str = "tailwindcss"
    css_merge_strategy: str = "merge"  # "merge" or "replace"
    custom_css_path: str | None = None
    css_overrides: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CSSConfig:
        """Build a config from decoded JSON, ignoring unknown keys.

        Raises:
            ConfigError: if a known key holds a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        for key in _STRING_FIELDS:
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"'{key}' must be a string, got: {values[key]!r}")
        custom = values.get("custom_css_path")
        if custom is not None and not isinstance(custom, str):
            raise ConfigError(f"'custom_css_path' must be a string, got: {custom!r}")
        if "css_overrides" in values and not isinstance(values["css_overrides"], dict):
            raise ConfigError(
                f"'css_overrides' must be an object, got: {values['css_overrides']!r}"
            )
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def load_config(path: str | os.PathLike[str] = DEFAULT_CONFIG_PATH) -> CSSConfig:
    """Load *path*, falling back to defaults when the file does not exist."""
    config_path = Path(path)
    if not config_path.exists():
        return CSSConfig()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{config_path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")
    return CSSConfig.from_dict(data)


def sample_config() -> str:
    """Starter configuration written by ``tailmerge config init``."""
    sample = CSSConfig(
        css_overrides={
            "--color-primary": "#3490dc",
            "--radius-base": "0.375rem",
        }
    )
    return json.dumps(sample.to_dict(), indent=2) + "\n"


def validate_config(config: CSSConfig) -> list[str]:
    """Return a list of problems with *config*; empty means valid."""
    issues: list[str] = []

    if config.css_merge_strategy not in MERGE_STRATEGIES:
        issues.append(
            f"Invalid css_merge_strategy: {config.css_merge_strategy!r}. "
            "Must be 'merge' or 'replace'"
        )

    if config.css_merge_strategy == "replace" and not config.custom_css_path:
        issues.append("When using 'replace' strategy, custom_css_path must be provided")

    if config.custom_css_path and not Path(config.custom_css_path).exists():
        issues.append(f"Custom CSS file not found: {config.custom_css_path}")

    for key, value in config.css_overrides.items():
        if not isinstance(value, str):
            issues.append(f"CSS override '{key}' must be a string, got: {value!r}")

    return issues
