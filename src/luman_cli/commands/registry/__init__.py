"""Registry maintenance commands."""

import click

from luman_cli.commands.registry.bump import bump


@click.group(name="registry")
def registry_group() -> None:
    """Maintain a local component registry."""


registry_group.add_command(bump)
