"""Turn expected failures of luman commands into one-line errors.

Registry outages, malformed manifests and uninstalled components are part of
normal use; users get `Error: ...` on stderr and exit code 1 instead of a
traceback.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from luman_cli.exceptions import LumanError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])

_REPORTED_ERRORS = (
    LumanError,
    FileExistsError,
    FileNotFoundError,
    PermissionError,
    ValueError,
)


def cli_error_boundary(func: T) -> T:
    """Report expected failures of a command and exit with status 1.

    Reported:
        - LumanError: bad manifest or luman.toml, unreachable registry,
          unknown or uninstalled component
        - FileExistsError, FileNotFoundError, PermissionError: filesystem trouble
        - ValueError: invalid arguments (e.g. empty changelog on bump)

    Run with --debug to see the traceback in the log. Anything else propagates.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def status(ctx: LumanContext) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except _REPORTED_ERRORS as e:
            logger.debug("%s failed", getattr(func, "__name__", "command"), exc_info=True)
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
