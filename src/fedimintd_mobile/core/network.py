"""Bitcoin network kinds and their genesis block fingerprints.

The genesis block hash is a fixed, network-specific constant, which makes it a
cheap way to tell which chain a backend serves. Every signet (including
Mutinynet) shares one genesis block, and regtest's genesis is fixed under the
default chain parameters.
"""

from enum import Enum
from typing import assert_never


class NetworkKind(Enum):
    """Bitcoin network a node can be bound to.

    Values are the selectors understood by fedimintd's FM_BITCOIN_NETWORK.
    """

    MAINNET = "bitcoin"
    TESTNET = "testnet"
    SIGNET = "signet"
    REGTEST = "regtest"

    @property
    def genesis_hash(self) -> str:
        """Lowercase hex hash of block zero on this network."""
        return genesis_hash_for(self)

    @property
    def display_name(self) -> str:
        return self.name.lower()


MAINNET_GENESIS_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
TESTNET_GENESIS_HASH = "000000000933ea01ad0ee984209779baaec3ced90fa3f408719526f8d77f4943"
SIGNET_GENESIS_HASH = "00000008819873e925422c1ff0f99f7cc9bbb232af63a077a480a3633bee1ef6"
REGTEST_GENESIS_HASH = "0f9188f13cb7b2c71f2a335e3a4fc328bf5beb436012afca590b1a11466e2206"

_NETWORK_ALIASES: dict[str, NetworkKind] = {
    "bitcoin": NetworkKind.MAINNET,
    "mainnet": NetworkKind.MAINNET,
    "main": NetworkKind.MAINNET,
    "testnet": NetworkKind.TESTNET,
    "testnet3": NetworkKind.TESTNET,
    "signet": NetworkKind.SIGNET,
    "mutinynet": NetworkKind.SIGNET,
    "regtest": NetworkKind.REGTEST,
}


def genesis_hash_for(network: NetworkKind) -> str:
    """Return the genesis block hash for a network.

    Every NetworkKind member must have a case here.
    """
    match network:
        case NetworkKind.MAINNET:
            return MAINNET_GENESIS_HASH
        case NetworkKind.TESTNET:
            return TESTNET_GENESIS_HASH
        case NetworkKind.SIGNET:
            return SIGNET_GENESIS_HASH
        case NetworkKind.REGTEST:
            return REGTEST_GENESIS_HASH
        case _:
            assert_never(network)


def network_for_genesis_hash(genesis_hash: str) -> NetworkKind | None:
    """Classify a genesis block hash.

    Args:
        genesis_hash: Hex-encoded block hash (any case)

    Returns:
        The matching NetworkKind, or None if the hash is not a known genesis
    """
    normalized = genesis_hash.strip().lower()
    for network in NetworkKind:
        if genesis_hash_for(network) == normalized:
            return network
    return None


def parse_network(value: str) -> NetworkKind:
    """Parse a user-supplied network name.

    Accepts fedimintd selectors and common aliases, case-insensitively.

    Raises:
        ValueError: If the name is not a known network
    """
    network = _NETWORK_ALIASES.get(value.strip().lower())
    if network is None:
        known = ", ".join(sorted(_NETWORK_ALIASES))
        raise ValueError(f"Unknown network '{value}' (expected one of: {known})")
    return network


def network_choices() -> list[str]:
    """All accepted network names, for CLI choice lists."""
    return sorted(_NETWORK_ALIASES)
