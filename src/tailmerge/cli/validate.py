"""CLI command: tailmerge validate -- check directive ordering in a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailmerge.cli.common import load_cli_config, read_text
from tailmerge.model.diagnostic import Severity
from tailmerge.validation import validate as run_validate


@click.command()
@click.argument("stylesheet", required=False)
@click.option(
    "--base-package",
    help="Package whose import must come first. Defaults to 'base_package' "
    "from the configuration.",
)
@click.pass_context
def validate(ctx: click.Context, stylesheet: str | None, base_package: str | None) -> None:
    """Validate import ordering and @theme usage in STYLESHEET.

    STYLESHEET defaults to 'stylesheet' from the configuration. Prints
    diagnostics and exits with code 0 if no errors are found, or code 1 if
    there are errors.
    """
    cfg = load_cli_config(ctx)
    css_path = Path(stylesheet or cfg.stylesheet)
    diagnostics = run_validate(
        read_text(css_path), base_package=base_package or cfg.base_package
    )

    if not diagnostics:
        click.echo(f"OK: {css_path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
