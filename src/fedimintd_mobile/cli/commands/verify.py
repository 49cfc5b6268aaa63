"""Verify command - checks that a backend serves the selected network."""

import asyncio

import click

from fedimintd_mobile.cli.json_output import emit_json, error_boundary
from fedimintd_mobile.cli.json_schemas import VerifyCommandResponse
from fedimintd_mobile.cli.options import backend_options, network_option
from fedimintd_mobile.cli.output import user_output
from fedimintd_mobile.core.backend import backend_from_fields
from fedimintd_mobile.core.context import MintContext
from fedimintd_mobile.core.network import parse_network
from fedimintd_mobile.core.verifier import verify_backend_network


@click.command("verify")
@network_option
@backend_options
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
@error_boundary
def verify_cmd(
    ctx: MintContext,
    network: str,
    esplora_url: str | None,
    bitcoind_url: str | None,
    bitcoind_username: str | None,
    bitcoind_password: str | None,
    output_json: bool,
) -> None:
    """Check a backend's genesis block against the selected network."""
    backend = backend_from_fields(
        esplora_url=esplora_url,
        bitcoind_url=bitcoind_url,
        bitcoind_username=bitcoind_username,
        bitcoind_password=bitcoind_password,
    )
    claimed = parse_network(network)

    verified = asyncio.run(verify_backend_network(ctx.chain_source, backend, claimed))

    if output_json:
        response = VerifyCommandResponse(
            network=verified.display_name,
            backend_kind=backend.rpc_kind,
            backend_url=backend.base_url,
            genesis_hash=verified.genesis_hash,
        )
        emit_json(response.model_dump(mode="json"))
    else:
        user_output(
            click.style("✓ ", fg="green") + f"{backend.base_url} serves {verified.display_name}"
        )
