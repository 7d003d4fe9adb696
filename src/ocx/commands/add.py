"""Add command for installing registry items."""

import os
from pathlib import Path

import click

from ocx.context import OcxContext
from ocx.error_boundary import cli_error_boundary
from ocx.models.plan import InstallPlan
from ocx.operations import (
    apply_install_plans,
    plan_installs,
    resolve_config_root,
    resolve_registry_tree,
)


def _print_postinstall_preview(plans: list[InstallPlan]) -> None:
    with_hooks: list[tuple[str, tuple[str, ...]]] = [
        (p.item.key, p.postinstall.commands)
        for p in plans
        if p.postinstall is not None and p.postinstall.commands
    ]
    if not with_hooks:
        return

    click.echo("\nPostinstall hooks detected (skipped unless --allow-postinstall):")
    for key, commands in with_hooks:
        click.echo(f"- {key}")
        for command in commands:
            click.echo(f"  - {command}")


@click.command()
@click.argument("specs", nargs=-1, required=True)
@click.option(
    "--cwd",
    "cwd_option",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to install from (defaults to the current directory)",
)
@click.option("--overwrite", is_flag=True, help="Replace items that are already installed")
@click.option(
    "--allow-postinstall",
    is_flag=True,
    help="Run postinstall commands declared by installed items",
)
@click.pass_obj
@cli_error_boundary
def add(
    ctx: OcxContext,
    specs: tuple[str, ...],
    cwd_option: Path | None,
    overwrite: bool,
    allow_postinstall: bool,
) -> None:
    """Install registry items and their dependencies.

    SPECS can be embedded item names (e.g. "hello"), URLs, or paths to .json
    manifests. Installs go to the nearest .opencode/ directory, or to the
    global config dir when run inside one.

    Examples:

        # Install an embedded item into the current project
        ocx add hello

        # Install from a manifest file, replacing an existing install
        ocx add ./my-tool.json --overwrite
    """
    cwd = ctx.cwd if cwd_option is None else Path(os.path.abspath(ctx.cwd / cwd_option))

    config_root = resolve_config_root(cwd, ctx.home_dir)
    resolved = resolve_registry_tree(list(specs), ctx.manifest_resolver(), cwd)
    plans = plan_installs(resolved, config_root)

    file_count = sum(len(p.writes) for p in plans)
    has_hooks = any(p.postinstall is not None and p.postinstall.commands for p in plans)

    click.echo(f"Config: {config_root.config_path}")
    click.echo(f"Install root: {config_root.config_dir} ({config_root.kind})")
    click.echo(
        f"Files: {file_count}  Overwrite: {'yes' if overwrite else 'no'}  "
        f"Postinstall: {'run' if allow_postinstall else 'skip'}"
    )

    click.echo("Items:")
    for plan in plans:
        click.echo(f"- {plan.item.key} ({plan.item.source})")

    _print_postinstall_preview(plans)
    if has_hooks and not allow_postinstall:
        click.echo("\nRe-run with --allow-postinstall to execute hooks.")

    result = apply_install_plans(
        plans,
        overwrite=overwrite,
        allow_postinstall=allow_postinstall,
        shell=ctx.shell,
    )

    click.echo(f"\nWrote {len(result.wrote_dirs)} item(s).")
    click.echo(f"Updated config: {result.edited_config_path}")
    click.echo(f"Postinstall: {'ran' if result.ran_postinstall else 'skipped'}")
