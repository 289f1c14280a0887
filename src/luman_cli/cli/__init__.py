import logging

import click

from luman_cli.cli.output import user_output
from luman_cli.context import create_context
from luman_cli.error_boundary import cli_error_boundary
from luman_cli.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Track whether commands are registered
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that lazily loads commands."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, registering if needed."""
        if not _commands_registered:
            _register_commands()
        return super().get_command(ctx, cmd_name)


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--registry",
    "registry_location",
    default=None,
    help="Registry URL or local registry directory (overrides luman.toml)",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, registry_location: str | None) -> None:
    """Add UI components to your project and keep track of them."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug, registry_location=registry_location)

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from luman_cli.commands.add import add
    from luman_cli.commands.diff import diff
    from luman_cli.commands.init import init
    from luman_cli.commands.list import list_components
    from luman_cli.commands.registry import registry_group
    from luman_cli.commands.remove import remove
    from luman_cli.commands.status import status
    from luman_cli.commands.update import update

    cli.add_command(add)
    cli.add_command(diff)
    cli.add_command(init)
    cli.add_command(list_components)
    cli.add_command(remove)
    cli.add_command(status)
    cli.add_command(update)

    # Register command groups
    cli.add_command(registry_group)

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
