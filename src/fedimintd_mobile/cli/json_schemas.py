"""Pydantic models for JSON output schemas.

These models define the validated JSON output of commands that support
--json.
"""

from pydantic import BaseModel, ConfigDict, Field


class VerifyCommandResponse(BaseModel):
    """JSON response schema for the `fedimintd-mobile verify` command.

    Attributes:
        network: Verified network name
        backend_kind: "esplora" or "bitcoind"
        backend_url: Backend base URL (never includes credentials)
        genesis_hash: Genesis block hash the backend is expected to serve
        status: Always "verified"; failures use the error schema
    """

    model_config = ConfigDict(strict=True)

    network: str
    backend_kind: str = Field(..., pattern="^(esplora|bitcoind)$")
    backend_url: str
    genesis_hash: str = Field(..., pattern="^[0-9a-f]{64}$")
    status: str = Field(default="verified", pattern="^verified$")


class NetworkInfo(BaseModel):
    """One known network for `fedimintd-mobile networks --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    selector: str
    genesis_hash: str


class NetworksCommandResponse(BaseModel):
    """JSON response schema for the `fedimintd-mobile networks` command."""

    model_config = ConfigDict(strict=True)

    networks: list[NetworkInfo]
