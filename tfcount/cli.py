"""Command line interface."""

from __future__ import annotations

import click

from tfcount.runner import PlanError, run_plan

VERSION = "dev"
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _show_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"{ctx.info_name} version {VERSION}")
        ctx.exit(0)


@click.group(invoke_without_command=True, context_settings=_CONTEXT_SETTINGS)
@click.option("-v", "--version", is_flag=True, help="Show version information")
def cli(version: bool) -> None:
    """A simple CLI to summarize terraform/terragrunt plan outputs by resource type and action."""
    ctx = click.get_current_context()
    if version:
        click.echo(f"{ctx.info_name} version {VERSION}")
        ctx.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(context_settings=_CONTEXT_SETTINGS)
@click.option("-g", "--terragrunt", is_flag=True, help="To use terragrunt")
@click.option(
    "-o",
    "--output",
    default="table",
    show_default=True,
    help="Output format: 'table' (tabular view) or 'tree' (hierarchical view)",
)
@click.option(
    "-v",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_version,
    help="Show version information",
)
@click.argument("tool_args", nargs=-1, type=click.UNPROCESSED)
def plan(terragrunt: bool, output: str, tool_args: tuple[str, ...]) -> None:
    """Run plan and summarize the changes by resource type and action.

    \b
    Use -- to pass native terraform/terragrunt arguments:
      tfcount plan -- -var="environment=prod"
      tfcount plan --terragrunt -- -var-file="vars/prod.tfvars"
    """
    try:
        run_plan(list(tool_args), terragrunt, output)
    except PlanError as exc:
        raise click.ClickException(str(exc)) from exc


def main(argv: list[str] | None = None) -> None:
    """Run the command line interface."""
    cli.main(args=argv, prog_name="tfcount")