"""In-memory fake implementation of ChainSource for testing."""

from fedimintd_mobile.core.backend import BackendDescriptor
from fedimintd_mobile.core.errors import BackendConnectionError
from fedimintd_mobile.integrations.chain_source.abc import ChainSource


class FakeChainSource(ChainSource):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        genesis_hashes: dict[str, str] | None = None,
        default_genesis_hash: str | None = None,
        unreachable_urls: set[str] | None = None,
    ) -> None:
        """Create FakeChainSource with pre-configured answers.

        Args:
            genesis_hashes: Mapping of backend base_url -> genesis hash
            default_genesis_hash: Hash for URLs not in genesis_hashes.
                If None, unknown URLs are treated as unreachable.
            unreachable_urls: URLs that raise BackendConnectionError
        """
        self._genesis_hashes = genesis_hashes or {}
        self._default_genesis_hash = default_genesis_hash
        self._unreachable_urls = unreachable_urls or set()
        self._queried_backends: list[BackendDescriptor] = []

    @property
    def queried_backends(self) -> list[BackendDescriptor]:
        """Read-only access to queried backends for test assertions."""
        return self._queried_backends.copy()

    async def get_genesis_block_hash(self, backend: BackendDescriptor) -> str:
        """Return the pre-configured hash for the backend URL."""
        self._queried_backends.append(backend)

        if backend.base_url in self._unreachable_urls:
            raise BackendConnectionError(backend.base_url, "connection refused")

        genesis_hash = self._genesis_hashes.get(backend.base_url, self._default_genesis_hash)
        if genesis_hash is None:
            raise BackendConnectionError(backend.base_url, "connection refused")
        return genesis_hash.lower()
