"""CLI commands: tailmerge add-import / add-theme -- edit a stylesheet in place."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from tailmerge.cli.common import load_cli_config, read_text, write_text
from tailmerge.merge import add_import, add_import_and_theme, read_theme_content
from tailmerge.model.result import ImportStatus
from tailmerge.parser import ParseError

_STYLESHEET_OPTION = click.option(
    "-s",
    "--stylesheet",
    help="Stylesheet to edit. Defaults to 'stylesheet' from the configuration.",
)
_DRY_RUN_OPTION = click.option(
    "--dry-run", is_flag=True, help="Print the result instead of writing it."
)


def _emit(path: Path, text: str, dry_run: bool) -> None:
    if dry_run:
        click.echo(text, nl=False)
    else:
        write_text(path, text)


@click.command("add-import")
@click.argument("import_path", required=False)
@_STYLESHEET_OPTION
@_DRY_RUN_OPTION
@click.pass_context
def add_import_command(
    ctx: click.Context, import_path: str | None, stylesheet: str | None, dry_run: bool
) -> None:
    """Add @import "IMPORT_PATH"; to the stylesheet unless it is already imported.

    IMPORT_PATH defaults to 'import_path' from the configuration.
    """
    cfg = load_cli_config(ctx)
    import_path = import_path or cfg.import_path
    path = Path(stylesheet or cfg.stylesheet)

    try:
        result = add_import(read_text(path), import_path)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if result.status is ImportStatus.EXISTS:
        click.echo(f"Already present: {import_path} in {path.name}")
        return

    _emit(path, result.text, dry_run)
    if not dry_run:
        click.echo(f"Added: {import_path} to {path.name}")


@click.command("add-theme")
@click.argument("theme_file")
@_STYLESHEET_OPTION
@click.option(
    "-i",
    "--import-path",
    help="Import to ensure. Defaults to 'import_path' from the configuration.",
)
@_DRY_RUN_OPTION
@click.pass_context
def add_theme_command(
    ctx: click.Context,
    theme_file: str,
    stylesheet: str | None,
    import_path: str | None,
    dry_run: bool,
) -> None:
    """Merge the @theme block from THEME_FILE into the stylesheet.

    The configured import is ensured first. An existing @theme block is
    replaced; otherwise the theme is appended.
    """
    cfg = load_cli_config(ctx)
    import_path = import_path or cfg.import_path
    path = Path(stylesheet or cfg.stylesheet)

    try:
        theme = read_theme_content(theme_file)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Cannot read theme file: {exc}", err=True)
        sys.exit(1)

    try:
        text = add_import_and_theme(read_text(path), import_path, theme)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    _emit(path, text, dry_run)
    if not dry_run:
        click.echo(f"Updated: {path.name} (import {import_path}, theme from {theme_file})")
