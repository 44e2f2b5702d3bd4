"""tailmerge CLI entry point: Click group with subcommands."""

import logging

import click

from tailmerge import __version__
from tailmerge.config import DEFAULT_CONFIG_PATH


@click.group()
@click.version_option(version=__version__, prog_name="tailmerge")
@click.option("-v", "--verbose", is_flag=True, help="Log merge decisions to stderr.")
@click.option(
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Configuration file supplying default paths.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str) -> None:
    """tailmerge - merge imports and themes into Tailwind stylesheets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Import and register subcommands
from tailmerge.cli.merge import add_import_command, add_theme_command  # noqa: E402
from tailmerge.cli.validate import validate  # noqa: E402
from tailmerge.cli.config import config  # noqa: E402

cli.add_command(add_import_command)
cli.add_command(add_theme_command)
cli.add_command(validate)
cli.add_command(config)
