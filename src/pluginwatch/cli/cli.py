import logging
import os

import click

from pluginwatch.cli.commands.changelog import changelog_cmd
from pluginwatch.cli.commands.check import check_cmd
from pluginwatch.cli.commands.config import config_group
from pluginwatch.cli.commands.hook import hook_cmd, hooks_cmd
from pluginwatch.cli.commands.scan import scan_cmd
from pluginwatch.cli.output import user_output
from pluginwatch.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV_VAR = "PLUGINWATCH_DEBUG"


def configure_logging(debug: bool) -> None:
    """Enable debug logging when requested by flag or environment."""
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pluginwatch")
@click.option("--debug", is_flag=True, help="Log registry requests and verdicts")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Warn about WordPress plugins that are gone, stale, or untested."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(f"Error: Invalid pluginwatch configuration: {e}")
            raise SystemExit(1) from None


cli.add_command(changelog_cmd)
cli.add_command(check_cmd)
cli.add_command(config_group)
cli.add_command(hook_cmd)
cli.add_command(hooks_cmd)
cli.add_command(scan_cmd)


def main() -> None:
    """CLI entry point used by the `pluginwatch` console script."""
    cli()
