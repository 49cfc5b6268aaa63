"""Networks command - lists known networks and their genesis hashes."""

import click
from rich.console import Console
from rich.table import Table

from fedimintd_mobile.cli.json_output import emit_json
from fedimintd_mobile.cli.json_schemas import NetworkInfo, NetworksCommandResponse
from fedimintd_mobile.core.network import NetworkKind


@click.command("networks")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
def networks_cmd(output_json: bool) -> None:
    """List supported networks and their genesis block hashes."""
    if output_json:
        response = NetworksCommandResponse(
            networks=[
                NetworkInfo(
                    name=network.display_name,
                    selector=network.value,
                    genesis_hash=network.genesis_hash,
                )
                for network in NetworkKind
            ]
        )
        emit_json(response.model_dump(mode="json"))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("network", style="cyan", no_wrap=True)
    table.add_column("selector", no_wrap=True)
    table.add_column("genesis hash", no_wrap=True)
    for network in NetworkKind:
        table.add_row(network.display_name, network.value, network.genesis_hash)

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
