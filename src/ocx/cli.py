"""Command-line entry point for ocx."""

import logging
import os
from dataclasses import replace

import click

from ocx.commands.add import add
from ocx.commands.list import list_items
from ocx.constants import DEBUG_ENV_VAR
from ocx.context import OcxContext, create_context
from ocx.error_boundary import cli_error_boundary
from ocx.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool) -> None:
    """Install opencode registry items (tools, agents, commands, themes)."""
    debug = debug or bool(os.environ.get(DEBUG_ENV_VAR))
    _configure_logging(debug)

    # Tests inject a prepared context through obj
    if isinstance(ctx.obj, OcxContext):
        if debug and not ctx.obj.debug:
            ctx.obj = replace(ctx.obj, debug=True)
    else:
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(add)
cli.add_command(list_items)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
