"""Output helpers with clear intent.

user_output goes to stderr and is meant for people; machine_output goes to
stdout and is meant for pipes and scripts.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True, color: bool | None = None) -> None:
    click.echo(message, err=True, nl=nl, color=color)


def machine_output(message: Any = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)
