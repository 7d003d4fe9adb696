"""List command for showing embedded items."""

import click

from ocx.sources.embedded import list_embedded_items


@click.command(name="list")
def list_items() -> None:
    """List embedded registry items."""
    click.echo("Embedded items:")
    for name in list_embedded_items():
        click.echo(f"- {name}")
