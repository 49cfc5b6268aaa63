"""Launch command - prepares the working directory and runs fedimintd."""

import asyncio
from pathlib import Path

import click

from fedimintd_mobile.cli.ensure import Ensure
from fedimintd_mobile.cli.json_output import error_boundary
from fedimintd_mobile.cli.options import backend_options, network_option
from fedimintd_mobile.cli.output import user_output
from fedimintd_mobile.core.backend import backend_from_fields
from fedimintd_mobile.core.bootstrap import LaunchParams, launch
from fedimintd_mobile.core.context import MintContext
from fedimintd_mobile.core.network import parse_network


@click.command("launch")
@click.argument("data_dir")
@network_option
@backend_options
@click.option("--bind-p2p", default=None, help="Bind address for the peer API (iroh)")
@click.option("--bind-ui", default=None, help="Bind address for the admin UI")
@click.option(
    "--iroh/--no-iroh",
    "enable_iroh",
    default=True,
    help="Force the iroh peer-discovery transport (default: on)",
)
@click.option(
    "--skip-verify",
    is_flag=True,
    help="Start without checking the backend's genesis block first",
)
@click.pass_obj
@error_boundary
def launch_cmd(
    ctx: MintContext,
    data_dir: str,
    network: str,
    esplora_url: str | None,
    bitcoind_url: str | None,
    bitcoind_username: str | None,
    bitcoind_password: str | None,
    bind_p2p: str | None,
    bind_ui: str | None,
    enable_iroh: bool,
    skip_verify: bool,
) -> None:
    """Run fedimintd with its data under DATA_DIR.

    Blocks until fedimintd exits. All output from this point on is written
    to DATA_DIR/fedimintd/fedimintd.log.
    """
    Ensure.not_empty(data_dir, "DATA_DIR must not be empty")
    backend = backend_from_fields(
        esplora_url=esplora_url,
        bitcoind_url=bitcoind_url,
        bitcoind_username=bitcoind_username,
        bitcoind_password=bitcoind_password,
    )
    params = LaunchParams(
        data_dir=Path(data_dir),
        network=parse_network(network),
        backend=backend,
        bind_p2p=bind_p2p,
        bind_ui=bind_ui,
        enable_iroh=enable_iroh,
        verify_backend=not skip_verify,
    )

    user_output(f"Launching fedimintd on {params.network.display_name} in {data_dir}")
    outcome = asyncio.run(launch(ctx, params))
    user_output(f"fedimintd in {outcome.config.data_dir} terminated")
