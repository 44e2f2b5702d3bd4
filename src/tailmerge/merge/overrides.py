"""Applying CSS custom-property overrides from the project configuration."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from tailmerge.config import ConfigError, CSSConfig

__all__ = ["apply_overrides", "generate_css"]

logger = logging.getLogger(__name__)


def _variable_name(key: str) -> str:
    key = key.strip()
    return key if key.startswith("--") else f"--{key}"


def _declaration_re(name: str) -> re.Pattern[str]:
    # --name: value   (value runs up to ';' or the end of the block)
    return re.compile(rf"(?<![\w-])({re.escape(name)}\s*:\s*)[^;}}]*")


def apply_overrides(css: str, overrides: dict[str, Any]) -> str:
    """Rewrite the value of each declared custom property named in *overrides*.

    Keys may be given with or without the leading ``--``. Every declaration
    of a variable is rewritten; variables the stylesheet never declares are
    skipped.
    """
    for key, value in overrides.items():
        if not isinstance(value, str):
            logger.warning("Skipping override %r: value is not a string", key)
            continue
        name = _variable_name(key)
        css, count = _declaration_re(name).subn(
            lambda match: match.group(1) + value, css
        )
        if count == 0:
            logger.warning("Override %s does not match any declared variable", name)
        else:
            logger.debug("Override %s applied to %d declaration(s)", name, count)
    return css


def generate_css(base_css: str, config: CSSConfig) -> str:
    """Produce the vendor stylesheet content for *config*.

    The ``merge`` strategy applies the overrides to *base_css*; ``replace``
    starts from the file at ``custom_css_path`` instead.

    Raises:
        ConfigError: if the strategy is unknown or ``replace`` has no path.
    """
    if config.css_merge_strategy == "merge":
        source = base_css
    elif config.css_merge_strategy == "replace":
        if not config.custom_css_path:
            raise ConfigError("custom_css_path is required for the 'replace' strategy")
        source = Path(config.custom_css_path).read_text(encoding="utf-8")
    else:
        raise ConfigError(f"Unknown css_merge_strategy: {config.css_merge_strategy!r}")
    return apply_overrides(source, config.css_overrides)
