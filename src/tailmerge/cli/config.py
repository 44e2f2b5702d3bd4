"""CLI commands: tailmerge config -- manage tailmerge.json and the vendor stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailmerge.cli.common import load_cli_config, read_text, write_text
from tailmerge.config import ConfigError, sample_config, validate_config
from tailmerge.merge import generate_css


@click.group()
def config() -> None:
    """Manage tailmerge.json and CSS variable overrides for the vendor stylesheet."""


@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Create a sample configuration file."""
    path = Path(ctx.find_root().obj["config_path"])
    if path.exists() and not force:
        click.echo(f"Configuration file already exists at: {path}")
        click.echo("To overwrite it with a fresh sample, use: tailmerge config init --force")
        return

    existed = path.exists()
    write_text(path, sample_config(), what="configuration")
    verb = "Overwrote" if existed else "Created"
    click.echo(f"{verb} configuration file at: {path}")
    click.echo("Run `tailmerge config regenerate` after making changes.")


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Display the current configuration."""
    path = Path(ctx.find_root().obj["config_path"])
    cfg = load_cli_config(ctx)

    click.echo(f"Configuration file: {path if path.exists() else '(not created)'}")
    click.echo(f"Stylesheet: {cfg.stylesheet}")
    click.echo(f"Import path: {cfg.import_path}")
    click.echo(f"Base package: {cfg.base_package}")
    click.echo(f"Vendor CSS: {cfg.vendor_css}")
    click.echo(f"Strategy: {cfg.css_merge_strategy}")
    click.echo(f"Custom CSS path: {cfg.custom_css_path or '(not set)'}")
    click.echo("CSS variable overrides:")
    if not cfg.css_overrides:
        click.echo("    (none)")
    for key, value in cfg.css_overrides.items():
        click.echo(f"    {key}: {value!r}")


@config.command("validate")
@click.pass_context
def validate_command(ctx: click.Context) -> None:
    """Check the configuration for invalid values."""
    cfg = load_cli_config(ctx)
    issues = validate_config(cfg)
    if issues:
        click.echo("Configuration validation failed:", err=True)
        for issue in issues:
            click.echo(f"  - {issue}", err=True)
        sys.exit(1)
    click.echo(
        f"Configuration is valid (strategy: {cfg.css_merge_strategy}, "
        f"{len(cfg.css_overrides)} override(s))"
    )


@config.command()
@click.pass_context
def regenerate(ctx: click.Context) -> None:
    """Rewrite the vendor stylesheet with the configured overrides applied."""
    cfg = load_cli_config(ctx)
    issues = validate_config(cfg)
    if issues:
        for issue in issues:
            click.echo(f"  - {issue}", err=True)
        sys.exit(1)

    vendor_path = Path(cfg.vendor_css)
    base_css = read_text(vendor_path, what="vendor CSS") if vendor_path.exists() else ""
    try:
        css = generate_css(base_css, cfg)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot regenerate CSS: {exc}", err=True)
        sys.exit(1)

    write_text(vendor_path, css, what="vendor CSS")
    click.echo(f"Regenerated {vendor_path}")
