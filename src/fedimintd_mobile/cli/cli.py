import logging

import click

from fedimintd_mobile.cli.commands.launch import launch_cmd
from fedimintd_mobile.cli.commands.networks import networks_cmd
from fedimintd_mobile.cli.commands.verify import verify_cmd
from fedimintd_mobile.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="fedimintd-mobile")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Verify Bitcoin backends and launch fedimintd."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(launch_cmd)
cli.add_command(networks_cmd)
cli.add_command(verify_cmd)


def main() -> None:
    """CLI entry point used by the `fedimintd-mobile` console script."""
    cli()
