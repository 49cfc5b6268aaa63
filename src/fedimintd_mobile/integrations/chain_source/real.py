"""Real chain source using httpx against Esplora and bitcoind JSON-RPC."""

import logging
import re
import uuid
from typing import Any, assert_never

import httpx

from fedimintd_mobile.core.backend import BackendDescriptor, IndexerBackend, RpcBackend
from fedimintd_mobile.core.errors import BackendConnectionError
from fedimintd_mobile.integrations.chain_source.abc import ChainSource

logger = logging.getLogger(__name__)

_BLOCK_HASH_PATTERN = re.compile(r"^[0-9a-f]{64}$")


class RealChainSource(ChainSource):
    """Production implementation over HTTP.

    Each call opens its own client and closes it before returning, so
    nothing is shared between concurrent verifications. httpx does not retry
    by default, which keeps every call to a single attempt.
    """

    def __init__(
        self,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create RealChainSource.

        Args:
            timeout_seconds: Bound on connect, read, write and pool waits
            transport: Optional transport override (e.g. httpx.MockTransport)
        """
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def get_genesis_block_hash(self, backend: BackendDescriptor) -> str:
        """Fetch the genesis block hash with a single request."""
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout_seconds),
            transport=self._transport,
        ) as client:
            try:
                match backend:
                    case IndexerBackend():
                        raw_hash = await self._fetch_from_esplora(client, backend)
                    case RpcBackend():
                        raw_hash = await self._fetch_from_bitcoind(client, backend)
                    case _:
                        assert_never(backend)
            except httpx.TimeoutException as err:
                raise BackendConnectionError(
                    backend.base_url, f"timed out after {self._timeout_seconds:g}s"
                ) from err
            except httpx.HTTPError as err:
                reason = str(err) or type(err).__name__
                raise BackendConnectionError(backend.base_url, reason) from err

        genesis_hash = raw_hash.strip().lower()
        if _BLOCK_HASH_PATTERN.match(genesis_hash) is None:
            raise BackendConnectionError(
                backend.base_url, f"response is not a block hash: {raw_hash[:80]!r}"
            )
        logger.debug("Backend %s reports genesis block %s", backend.base_url, genesis_hash)
        return genesis_hash

    async def _fetch_from_esplora(self, client: httpx.AsyncClient, backend: IndexerBackend) -> str:
        """GET /block-height/0, which answers with the hash as plain text."""
        response = await client.get(f"{backend.base_url}/block-height/0")
        response.raise_for_status()
        return response.text

    async def _fetch_from_bitcoind(self, client: httpx.AsyncClient, backend: RpcBackend) -> str:
        """Call getblockhash(0) over JSON-RPC 1.0 with basic auth."""
        payload = {
            "jsonrpc": "1.0",
            "id": str(uuid.uuid4()),
            "method": "getblockhash",
            "params": [0],
        }
        response = await client.post(
            backend.base_url,
            json=payload,
            auth=httpx.BasicAuth(backend.username, backend.password),
        )
        if response.status_code in (401, 403):
            raise BackendConnectionError(backend.base_url, "RPC authentication failed")

        # bitcoind reports RPC errors with a 500 status and a JSON body
        body = _parse_json_object(response)
        if body is None:
            response.raise_for_status()
            raise BackendConnectionError(backend.base_url, "RPC response is not a JSON object")

        error = body.get("error")
        if error is not None:
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise BackendConnectionError(backend.base_url, f"RPC error: {message}")
        response.raise_for_status()

        result = body.get("result")
        if not isinstance(result, str):
            raise BackendConnectionError(backend.base_url, "RPC response has no block hash")
        return result


def _parse_json_object(response: httpx.Response) -> dict[str, Any] | None:
    """Decode a response body as a JSON object, or None if it is not one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return data
