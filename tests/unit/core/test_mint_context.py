"""Tests for MintContext wiring."""

import pytest

from fedimintd_mobile.core.config import LauncherConfig
from fedimintd_mobile.core.context import MintContext, create_context
from fedimintd_mobile.integrations.chain_source.fake import FakeChainSource
from fedimintd_mobile.integrations.chain_source.real import RealChainSource
from fedimintd_mobile.integrations.node_runtime.fake import FakeNodeRuntime
from fedimintd_mobile.integrations.node_runtime.real import RealNodeRuntime
from fedimintd_mobile.integrations.output_redirect.fake import FakeOutputRedirect
from fedimintd_mobile.integrations.output_redirect.real import RealOutputRedirect


def test_for_test_uses_fakes_and_default_config() -> None:
    ctx = MintContext.for_test()

    assert isinstance(ctx.chain_source, FakeChainSource)
    assert isinstance(ctx.output_redirect, FakeOutputRedirect)
    assert isinstance(ctx.node_runtime, FakeNodeRuntime)
    assert ctx.config.bind_p2p == "0.0.0.0:8174"
    assert ctx.config.verify_timeout_seconds == 20.0


def test_for_test_keeps_provided_dependencies() -> None:
    chain_source = FakeChainSource(default_genesis_hash="00" * 32)

    ctx = MintContext.for_test(chain_source=chain_source)

    assert ctx.chain_source is chain_source


def test_create_context_uses_real_implementations(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FEDIMINTD_MOBILE_BINARY", raising=False)
    config = LauncherConfig(
        fedimintd_binary="/opt/fedimintd",
        verify_timeout_seconds=5.0,
        bind_p2p="127.0.0.1:8174",
        bind_ui="127.0.0.1:8175",
    )

    ctx = create_context(config)

    assert isinstance(ctx.chain_source, RealChainSource)
    assert isinstance(ctx.output_redirect, RealOutputRedirect)
    assert isinstance(ctx.node_runtime, RealNodeRuntime)
    assert ctx.config is config
