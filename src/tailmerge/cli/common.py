"""Helpers shared by the CLI commands: configuration and stylesheet file access.

Every failure here ends the command with a message on stderr and exit code 1.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailmerge.config import ConfigError, CSSConfig, load_config


def load_cli_config(ctx: click.Context) -> CSSConfig:
    """Load the configuration named by the group's ``--config`` option."""
    config_path = ctx.find_root().obj["config_path"]
    try:
        return load_config(config_path)
    except (ConfigError, OSError) as exc:
        click.echo(f"Cannot load configuration: {exc}", err=True)
        sys.exit(1)


def read_text(path: Path, what: str = "stylesheet") -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read {what}: {exc}", err=True)
        sys.exit(1)


def write_text(path: Path, text: str, what: str = "stylesheet") -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        click.echo(f"Cannot write {what}: {exc}", err=True)
        sys.exit(1)
