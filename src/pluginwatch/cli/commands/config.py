"""Config commands - inspect and persist registry settings."""

import click

from pluginwatch.cli.output import machine_output, user_output
from pluginwatch.core.config import read_pyproject_table, write_config_to_pyproject
from pluginwatch.core.context import PluginWatchContext


@click.group("config")
def config_group() -> None:
    """Manage pluginwatch configuration."""


@config_group.command("show")
@click.pass_obj
def config_show(ctx: PluginWatchContext) -> None:
    """Print the effective configuration."""
    for key, value in ctx.config.to_dict().items():
        machine_output(f"{key} = {value}")


@config_group.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing [tool.pluginwatch] table")
@click.pass_obj
def config_init(ctx: PluginWatchContext, force: bool) -> None:
    """Write the effective configuration to pyproject.toml."""
    if read_pyproject_table(ctx.cwd) and not force:
        user_output("Error: [tool.pluginwatch] already exists in pyproject.toml")
        user_output("Use --force to overwrite it.")
        raise SystemExit(1)

    path = write_config_to_pyproject(ctx.cwd, ctx.config)
    user_output(click.style(f"✓ Wrote [tool.pluginwatch] to {path}", fg="green"))
