"""Error boundary handling for the CLI.

Catches well-known exceptions at the entry point and displays clean error
messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any

import click

from ocx.context import OcxContext
from ocx.exceptions import OcxError


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that turns expected failures into "Error: ..." and exit status 1.

    Catches:
        - OcxError: Resolve, plan, and install failures
        - OSError: Filesystem failures (permissions, missing directories)
        - ValueError: Invalid input or configuration

    With debug enabled (--debug or OCX_DEBUG), the exception is re-raised so
    the full stack trace is shown. All other exceptions bubble up normally.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: OcxContext):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (OcxError, OSError, ValueError) as e:
            ctx = click.get_current_context(silent=True)
            if ctx is not None and isinstance(ctx.obj, OcxContext) and ctx.obj.debug:
                raise
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
