"""Shared click options for selecting a network and a backend."""

from collections.abc import Callable
from typing import Any

import click

from fedimintd_mobile.core.network import network_choices

network_option = click.option(
    "--network",
    "network",
    type=click.Choice(network_choices(), case_sensitive=False),
    required=True,
    help="Bitcoin network the backend is expected to serve",
)


def backend_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the mutually exclusive Esplora / bitcoind backend options.

    Exclusivity is checked by backend_from_fields(), so the error message is
    the same for CLI and host callers.
    """
    options = [
        click.option("--esplora-url", default=None, help="Esplora indexer base URL"),
        click.option("--bitcoind-url", default=None, help="bitcoind JSON-RPC URL"),
        click.option("--bitcoind-username", default=None, help="bitcoind RPC username"),
        click.option(
            "--bitcoind-password",
            default=None,
            envvar="FEDIMINTD_MOBILE_BITCOIND_PASSWORD",
            help="bitcoind RPC password (or set FEDIMINTD_MOBILE_BITCOIND_PASSWORD)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
