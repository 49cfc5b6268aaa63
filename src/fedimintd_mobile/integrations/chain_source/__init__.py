"""Chain data source integration."""

from fedimintd_mobile.integrations.chain_source.abc import ChainSource
from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource

__all__ = ["ChainSource", "FakeChainSource"]
