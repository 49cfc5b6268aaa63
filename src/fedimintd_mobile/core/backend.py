"""Backend descriptors: how to reach chain data for a node."""

from dataclasses import dataclass, field
from urllib.parse import quote, urlsplit, urlunsplit

from fedimintd_mobile.core.errors import BackendSelectionError


@dataclass(frozen=True)
class IndexerBackend:
    """Esplora-style HTTP indexer (e.g. mempool.space, mutinynet.com/api)."""

    base_url: str

    @property
    def rpc_kind(self) -> str:
        return "esplora"

    def node_url(self) -> str:
        return self.base_url


@dataclass(frozen=True)
class RpcBackend:
    """bitcoind full node reached over authenticated JSON-RPC."""

    base_url: str
    username: str
    password: str = field(repr=False)

    @property
    def rpc_kind(self) -> str:
        return "bitcoind"

    def node_url(self) -> str:
        """RPC URL with the credentials embedded as userinfo.

        fedimintd reads bitcoind credentials from the URL it is given.
        """
        parts = urlsplit(self.base_url)
        # host and port as written, keeping IPv6 brackets
        host = parts.netloc.rpartition("@")[2]
        userinfo = f"{quote(self.username, safe='')}:{quote(self.password, safe='')}"
        return urlunsplit(
            (parts.scheme, f"{userinfo}@{host}", parts.path, parts.query, parts.fragment)
        )


BackendDescriptor = IndexerBackend | RpcBackend


def _normalize_url(url: str, option_name: str) -> str:
    stripped = url.strip().rstrip("/")
    if not stripped:
        raise BackendSelectionError(f"{option_name} must not be empty")
    parts = urlsplit(stripped)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise BackendSelectionError(f"{option_name} must be an http(s) URL, got '{url}'")
    return stripped


def backend_from_fields(
    *,
    esplora_url: str | None,
    bitcoind_url: str | None,
    bitcoind_username: str | None,
    bitcoind_password: str | None,
) -> BackendDescriptor:
    """Build a backend descriptor from loose host or CLI fields.

    Exactly one of esplora_url or bitcoind_url must be set. The bitcoind
    credentials are required with bitcoind_url and rejected without it.

    Raises:
        BackendSelectionError: If the fields describe zero or two backends,
            or a URL or credential is missing or malformed
    """
    has_credentials = bitcoind_username is not None or bitcoind_password is not None

    if esplora_url is not None and bitcoind_url is not None:
        raise BackendSelectionError("Specify either an Esplora URL or a bitcoind URL, not both")

    if esplora_url is not None:
        if has_credentials:
            raise BackendSelectionError("bitcoind credentials require a bitcoind URL")
        return IndexerBackend(base_url=_normalize_url(esplora_url, "Esplora URL"))

    if bitcoind_url is not None:
        if bitcoind_username is None or bitcoind_password is None:
            raise BackendSelectionError("bitcoind URL requires both a username and a password")
        return RpcBackend(
            base_url=_normalize_url(bitcoind_url, "bitcoind URL"),
            username=bitcoind_username,
            password=bitcoind_password,
        )

    raise BackendSelectionError("No backend specified: provide an Esplora URL or a bitcoind URL")
