"""Abstract interface for reading chain data from a backend."""

from abc import ABC, abstractmethod

from fedimintd_mobile.core.backend import BackendDescriptor


class ChainSource(ABC):
    """Abstract interface for querying a Bitcoin data backend.

    Implementations include:
    - FakeChainSource: In-memory for testing
    - RealChainSource: HTTP client for Esplora and bitcoind JSON-RPC
    """

    @abstractmethod
    async def get_genesis_block_hash(self, backend: BackendDescriptor) -> str:
        """Fetch the hash of the block at height zero.

        Makes a single attempt; transient failures are reported, not retried.

        Args:
            backend: Backend to query

        Returns:
            Lowercase hex-encoded block hash

        Raises:
            BackendConnectionError: If the backend is unreachable, times out,
                or returns a malformed response
        """
        ...
